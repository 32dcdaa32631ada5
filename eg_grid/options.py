"""Grid options with defensive normalization.

Malformed option values are replaced by their defaults rather than rejected:
a grid always renders.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from eg_grid.pagination import DEFAULT_PAGE_SIZE

DEFAULT_PAGE_SIZE_OPTIONS = (10, 25, 50, 100)
SKELETON_ROWS = 5


def normalize_page_size(value: Any, default: int = DEFAULT_PAGE_SIZE) -> int:
    if isinstance(value, bool):
        return default
    try:
        size = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if size != value and not isinstance(value, str):
        return default
    return size if size > 0 else default


class GridOptions(BaseModel):
    """Presentation switches shared by every list screen."""

    loading: bool = False
    sortable: bool = True
    paginated: bool = True
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    selectable: bool = False
    row_key: str = "id"
    empty_message: str = "No data available"
    empty_description: str | None = "There are no items to display at the moment."
    empty_icon: str | None = "inbox"
    empty_action_label: str | None = None
    page_size_options: tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("loading", "sortable", "paginated", "selectable", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("page_size", mode="before")
    @classmethod
    def _page_size(cls, value: Any) -> int:
        return normalize_page_size(value)

    @field_validator("row_key", mode="before")
    @classmethod
    def _row_key(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            return "id"
        return value

    @field_validator("empty_message", mode="before")
    @classmethod
    def _empty_message(cls, value: Any) -> str:
        if value is None:
            return "No data available"
        return str(value)

    @field_validator("page_size_options", mode="before")
    @classmethod
    def _page_size_options(cls, value: Any) -> tuple[int, ...]:
        if value is None or isinstance(value, (str, bytes)):
            return DEFAULT_PAGE_SIZE_OPTIONS
        try:
            items = list(value)
        except TypeError:
            return DEFAULT_PAGE_SIZE_OPTIONS
        sizes = {normalize_page_size(item, default=0) for item in items}
        sizes.discard(0)
        return tuple(sorted(sizes)) or DEFAULT_PAGE_SIZE_OPTIONS

    def with_changes(self, **changes: Any) -> "GridOptions":
        data = self.model_dump()
        data.update(changes)
        return GridOptions.model_validate(data)
