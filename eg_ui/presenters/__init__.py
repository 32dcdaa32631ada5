"""Presenters mapping grid views onto UI table/panel models."""

from __future__ import annotations

from eg_grid.api import GridMode, GridView
from eg_ui.presenters.grid import (
    empty_panel_model,
    grid_to_table_model,
    page_footer,
)
from eg_ui.protocols import UI


def present_grid(ui: UI, view: GridView, *, title: str = "") -> None:
    """Show a derived grid: the table, or only the empty-state panel."""
    if view.mode is GridMode.EMPTY:
        panel = empty_panel_model(view)
        if panel is not None:
            ui.tables.show_empty(panel)
        return
    table = grid_to_table_model(view, title=title)
    if table is not None:
        ui.tables.show(table)


__all__ = ["empty_panel_model", "grid_to_table_model", "page_footer", "present_grid"]
