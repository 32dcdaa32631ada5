"""Unit tests for the rich table layout helpers."""

from __future__ import annotations

import pytest
from rich.console import Console

from eg_ui.facade import TUI
from eg_ui.models import EmptyPanelModel, TableModel
from eg_ui.table_layout import MIN_COL_WIDTH, build_rich_table, fit_column_widths

pytestmark = pytest.mark.unit_ui


def test_fit_column_widths_uses_content_width() -> None:
    model = TableModel(title="t", columns=["ID", "Name"], rows=[["1", "Alexandra"]])
    assert fit_column_widths(model, 100) == [MIN_COL_WIDTH, 9]


def test_fit_column_widths_shrinks_widest_but_keeps_fixed() -> None:
    model = TableModel(
        title="t",
        columns=["[ ]", "Description"],
        rows=[["[x]", "x" * 80]],
        widths=[3, None],
    )
    widths = fit_column_widths(model, 40)
    assert widths[0] == 3
    assert sum(widths) + 4 + 3 <= 40


def test_checkbox_cells_are_not_markup() -> None:
    console = Console(width=60, color_system=None)
    model = TableModel(
        title="Users",
        columns=["[-]", "Name"],
        rows=[["[x]", "Ada"], ["[ ]", "Bob"]],
        footer=["Showing 1 to 2 of 2 results"],
    )
    with console.capture() as cap:
        console.print(build_rich_table(model, console=console))
    output = cap.get()
    assert "[x]" in output
    assert "[-]" in output


def test_tui_renders_empty_panel() -> None:
    console = Console(width=60, color_system=None)
    ui = TUI(console)
    with console.capture() as cap:
        ui.tables.show_empty(
            EmptyPanelModel(title="No users yet", description="Add one.", action_label="Add User")
        )
    output = cap.get()
    assert "No users yet" in output
    assert "Add one." in output
    assert "Add User" in output
