from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]
    footer: list[str] = field(default_factory=list)
    justify: list[str] = field(default_factory=list)  # rich justify per column
    widths: list[int | None] = field(default_factory=list)


@dataclass
class EmptyPanelModel:
    title: str
    description: str = ""
    icon: str = ""
    action_label: str = ""
