"""Empty-state templates for the list screens.

A grid with no rows shows one of these instead of its table: a title, an
optional description and icon, and an optional call-to-action label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

__all__ = [
    "EmptyStateTemplate",
    "EmptyStateRegistry",
    "empty_state_registry",
    "get_empty_state_template",
]


@dataclass(frozen=True)
class EmptyStateTemplate:
    """Template definition for a reusable empty/error state."""

    key: str
    title: str
    description: Optional[str] = None
    icon: Optional[str] = None  # icon name understood by the renderer
    action_label: Optional[str] = None


class EmptyStateRegistry:
    """Registry holding templates for empty and error states."""

    def __init__(self) -> None:
        self._templates: Dict[str, EmptyStateTemplate] = {}
        self._bootstrap_defaults()

    def _bootstrap_defaults(self) -> None:
        defaults = [
            EmptyStateTemplate(
                key="no_data",
                title="No data available",
                description="There are no items to display at the moment.",
                icon="inbox",
            ),
            EmptyStateTemplate(
                key="no_users",
                title="No users yet",
                description="Users will appear here once they join the platform.",
                icon="users",
                action_label="Add User",
            ),
            EmptyStateTemplate(
                key="no_groups",
                title="No groups yet",
                description="Create a group to organize learners.",
                icon="users",
                action_label="Create Group",
            ),
            EmptyStateTemplate(
                key="no_questions",
                title="No questions yet",
                description="Add questions to start building quiz banks.",
                icon="help-circle",
                action_label="Add Question",
            ),
            EmptyStateTemplate(
                key="no_exams",
                title="No exams yet",
                description="Scheduled exams will appear here.",
                icon="clipboard",
                action_label="Create Exam",
            ),
            EmptyStateTemplate(
                key="no_quiz_banks",
                title="No quiz banks yet",
                description="Group questions into a quiz bank to reuse them.",
                icon="library",
                action_label="Create Quiz Bank",
            ),
            EmptyStateTemplate(
                key="no_matches",
                title="No matching results",
                description="Try adjusting your filters to find what you're looking for.",
                icon="search",
                action_label="Clear Filters",
            ),
            EmptyStateTemplate(
                key="load_error",
                title="Error loading data",
                description="Failed to load data. Please try again.",
                icon="alert",
                action_label="Retry",
            ),
        ]
        for template in defaults:
            self.register(template)

    # CRUD -------------------------------------------------------------
    def register(self, template: EmptyStateTemplate) -> None:
        self._templates[template.key] = template

    def get(self, key: str) -> Optional[EmptyStateTemplate]:
        return self._templates.get(key)

    def all_keys(self) -> list[str]:
        return list(self._templates.keys())


def get_empty_state_template(key: str) -> Optional[EmptyStateTemplate]:
    return empty_state_registry.get(key)


empty_state_registry = EmptyStateRegistry()
