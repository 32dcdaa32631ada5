"""
Grid Table Model - Qt Model/View adapter over the grid engine.

Exposes the current page window of a DataGrid to a QTableView:
- an optional leading checkbox column bound to row selection
- header labels carrying the sort arrow
- Qt's sort requests mapped onto header clicks

Usage:
    from eg_gui.models import GridTableModel

    model = GridTableModel(grid)
    table_view.setModel(model)
    model.refresh()  # after pushing new rows or props into the grid
"""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QAbstractTableModel, QModelIndex, QPersistentModelIndex, Qt, Signal

from eg_grid.api import Alignment, DataGrid, GridMode, GridView, HeaderCheckState, SortDirection

_ALIGN = {
    Alignment.START: Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
    Alignment.CENTER: Qt.AlignmentFlag.AlignCenter,
    Alignment.END: Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
}

_SORT_ARROWS = {"asc": " ▲", "desc": " ▼", "none": ""}

_CHECK = {
    HeaderCheckState.ALL: Qt.CheckState.Checked,
    HeaderCheckState.SOME: Qt.CheckState.PartiallyChecked,
    HeaderCheckState.NONE: Qt.CheckState.Unchecked,
}

AnyIndex = QModelIndex | QPersistentModelIndex


class GridTableModel(QAbstractTableModel):
    """Table model showing one page window of a DataGrid."""

    view_changed = Signal(object)  # GridView

    def __init__(self, grid: DataGrid, parent: Any = None) -> None:
        super().__init__(parent)
        self._grid = grid
        self._view: GridView = grid.derive()

    @property
    def grid(self) -> DataGrid:
        return self._grid

    @property
    def view(self) -> GridView:
        return self._view

    def refresh(self) -> None:
        """Re-derive from the grid and reset attached views."""
        self.beginResetModel()
        self._view = self._grid.derive()
        self.endResetModel()
        self.view_changed.emit(self._view)

    # Geometry --------------------------------------------------------
    def _offset(self) -> int:
        return 1 if self._view.selectable else 0

    def rowCount(self, parent: AnyIndex = QModelIndex()) -> int:
        if parent.isValid() or self._view.mode is not GridMode.TABLE:
            return 0
        return len(self._view.rows)

    def columnCount(self, parent: AnyIndex = QModelIndex()) -> int:
        if parent.isValid() or self._view.mode is not GridMode.TABLE:
            return 0
        return len(self._view.headers) + self._offset()

    def is_checkbox_column(self, column: int) -> bool:
        return self._view.selectable and column == 0

    # Data ------------------------------------------------------------
    def data(self, index: AnyIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return None
        row_view = self._view.rows[index.row()]
        if self.is_checkbox_column(index.column()):
            if role == Qt.ItemDataRole.CheckStateRole and row_view.selectable:
                return Qt.CheckState.Checked if row_view.selected else Qt.CheckState.Unchecked
            return None
        cell = row_view.cells[index.column() - self._offset()]
        if role == Qt.ItemDataRole.DisplayRole:
            return str(cell.rendered)
        if role == Qt.ItemDataRole.TextAlignmentRole:
            return _ALIGN[cell.align]
        if role == Qt.ItemDataRole.UserRole:
            return cell.value
        return None

    def setData(self, index: AnyIndex, value: Any, role: int = Qt.ItemDataRole.EditRole) -> bool:
        if not index.isValid() or role != Qt.ItemDataRole.CheckStateRole:
            return False
        if not self.is_checkbox_column(index.column()):
            return False
        row_view = self._view.rows[index.row()]
        if not row_view.selectable:
            return False
        self._grid.toggle_row(row_view.row)
        self._view = self._grid.derive()
        self.dataChanged.emit(index, index, [Qt.ItemDataRole.CheckStateRole])
        self.headerDataChanged.emit(Qt.Orientation.Horizontal, 0, 0)
        self.view_changed.emit(self._view)
        return True

    def flags(self, index: AnyIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        base = Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        if self.is_checkbox_column(index.column()) and self._view.rows[index.row()].selectable:
            return base | Qt.ItemFlag.ItemIsUserCheckable
        return base

    def headerData(
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if orientation != Qt.Orientation.Horizontal:
            return None
        if self.is_checkbox_column(section):
            if role == Qt.ItemDataRole.CheckStateRole:
                return _CHECK[self._view.header_check]
            return None
        index = section - self._offset()
        if index < 0 or index >= len(self._view.headers):
            return None
        header = self._view.headers[index]
        if role == Qt.ItemDataRole.DisplayRole:
            arrow = _SORT_ARROWS.get(header.sort_indicator, "") if header.sortable else ""
            return f"{header.label}{arrow}"
        if role == Qt.ItemDataRole.TextAlignmentRole:
            return _ALIGN[header.align]
        return None

    # Interactions ----------------------------------------------------
    def column_key(self, section: int) -> str | None:
        index = section - self._offset()
        if index < 0 or index >= len(self._view.headers):
            return None
        return self._view.headers[index].key

    def toggle_all(self) -> list[Any]:
        """Header checkbox over the shown page."""
        keys = self._grid.toggle_all()
        self.refresh()
        return keys

    def click_header(self, section: int) -> bool:
        """Header section click: checkbox toggles the page, others sort."""
        if self.is_checkbox_column(section):
            self.toggle_all()
            return True
        key = self.column_key(section)
        if key is None or not self._grid.click_header(key):
            return False
        self.refresh()
        return True

    def sort(self, column: int, order: Qt.SortOrder = Qt.SortOrder.AscendingOrder) -> None:
        """Qt sort request: click the header until the direction matches."""
        key = self.column_key(column)
        if key is None or not self._grid.click_header(key):
            return
        wanted = SortDirection.DESC if order == Qt.SortOrder.DescendingOrder else SortDirection.ASC
        if self._grid.sort_state.direction is not wanted:
            self._grid.click_header(key)
        self.refresh()
