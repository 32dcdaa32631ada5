"""ViewModel for a grid-backed list screen."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from PySide6.QtCore import QObject, Signal

from eg_grid.api import Column, DataGrid, GridView
from eg_gui.models.grid_table_model import GridTableModel


class GridViewModel(QObject):
    """ViewModel for a sortable, paginated, selectable table.

    Owns the DataGrid and its Qt table model; grid callbacks are re-emitted
    as Qt signals so views only connect to signals.
    """

    # Signals
    view_changed = Signal(object)  # GridView
    selection_changed = Signal(list)  # selected row keys
    page_changed = Signal(int)  # current page
    row_activated = Signal(object)  # clicked row
    empty_action_triggered = Signal()

    def __init__(
        self,
        columns: Sequence[Column],
        rows: Iterable[Any] | None = None,
        parent: QObject | None = None,
        **props: Any,
    ) -> None:
        """Build the grid; ``on_*`` callbacks in ``props`` are connected to
        the matching signal instead of replacing it."""
        super().__init__(parent)
        owned = {
            "on_selection_change": self.selection_changed,
            "on_page_change": self.page_changed,
            "on_row_click": self.row_activated,
            "on_empty_action": self.empty_action_triggered,
        }
        for name, signal in owned.items():
            callback = props.pop(name, None)
            if callable(callback):
                signal.connect(callback)
        self._grid: DataGrid = DataGrid(
            columns=columns,
            rows=rows,
            **props,
            **{name: signal.emit for name, signal in owned.items()},
        )
        self._model = GridTableModel(self._grid)
        self._model.view_changed.connect(self.view_changed.emit)

    @property
    def grid(self) -> DataGrid:
        return self._grid

    @property
    def model(self) -> GridTableModel:
        """Qt table model for a QTableView."""
        return self._model

    @property
    def view(self) -> GridView:
        """Last derived grid view."""
        return self._model.view

    @property
    def selected_keys(self) -> list[Any]:
        return self._grid.selected_keys

    def _reload(self, **props: Any) -> None:
        # A shrinking row list re-clamps the page silently inside the grid;
        # announce the page the view now shows.
        before = self._grid.current_page
        self._grid.update(**props)
        self._model.refresh()
        after = self._grid.current_page
        if after != before:
            self.page_changed.emit(after)

    def set_rows(self, rows: Iterable[Any] | None) -> None:
        """Replace the row list (e.g. after a fetch completes)."""
        self._reload(rows=rows, loading=False)

    def set_loading(self, loading: bool) -> None:
        self._reload(loading=loading)

    def update(self, **props: Any) -> None:
        self._reload(**props)

    def click_header(self, section: int) -> bool:
        return self._model.click_header(section)

    def go_to_page(self, page: int) -> int:
        current = self._grid.go_to_page(page)
        self._model.refresh()
        return current

    def next_page(self) -> int:
        return self.go_to_page(self._grid.current_page + 1)

    def previous_page(self) -> int:
        return self.go_to_page(self._grid.current_page - 1)

    def set_page_size(self, size: int) -> int:
        resolved = self._grid.set_page_size(size)
        self._model.refresh()
        return resolved

    def toggle_all(self) -> list[Any]:
        return self._model.toggle_all()

    def clear_selection(self) -> None:
        self._grid.clear_selection()
        self._model.refresh()

    def activate_row(self, index: int) -> None:
        """Row click on the ``index``-th row of the shown page."""
        rows = self._model.view.rows
        if 0 <= index < len(rows):
            self._grid.click_row(rows[index].row)

    def trigger_empty_action(self) -> bool:
        return self._grid.trigger_empty_action()
