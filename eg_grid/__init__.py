"""Tabular data-grid engine: sorting, pagination and row selection."""

from eg_grid.api import (
    Alignment,
    Column,
    DataGrid,
    GridMode,
    GridOptions,
    GridView,
    HeaderCheckState,
    SortDirection,
    SortState,
)

__all__ = [
    "Alignment",
    "Column",
    "DataGrid",
    "GridMode",
    "GridOptions",
    "GridView",
    "HeaderCheckState",
    "SortDirection",
    "SortState",
]
