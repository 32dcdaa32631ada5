from __future__ import annotations

from typing import Mapping

from rich.markup import escape

RICH_ACCENT = "magenta"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = "grey50"
RICH_MUTED = "dim"

SORT_ICONS: dict[str, str] = {
    "asc": "▲",
    "desc": "▼",
    "none": "↕",
}

CHECKBOX_MARKS: dict[str, str] = {
    "all": "[x]",
    "some": "[-]",
    "none": "[ ]",
}

EMPTY_STATE_ICONS: dict[str, str] = {
    "inbox": "📥",
    "users": "👥",
    "help-circle": "❔",
    "clipboard": "📋",
    "library": "📚",
    "search": "🔍",
    "alert": "⚠",
}

SKELETON_CELL = "░░░░░░"

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=escape(message))


def sort_icon(indicator: str) -> str:
    return SORT_ICONS.get(indicator, "")


def checkbox(state: str | bool) -> str:
    if isinstance(state, bool):
        state = "all" if state else "none"
    return CHECKBOX_MARKS.get(state, CHECKBOX_MARKS["none"])


def empty_icon(name: str | None) -> str:
    if not name:
        return ""
    return EMPTY_STATE_ICONS.get(name, "")


def prompt_toolkit_browser_style() -> Mapping[str, str]:
    return {
        "footer": "fg:#888888",
        "separator": "fg:#5f005f",
        "frame.border": "fg:#5f005f",
        "frame.label": "fg:#5f005f bold",
        "search": "bg:#eeeeee fg:#000000",
    }
