"""Public API surface for the grid engine."""

from eg_grid.comparators import casefold_compare, default_compare, reverse
from eg_grid.empty_state import (
    EmptyStateRegistry,
    EmptyStateTemplate,
    empty_state_registry,
    get_empty_state_template,
)
from eg_grid.engine import DataGrid, coerce_sort, normalize_rows
from eg_grid.models import (
    Alignment,
    CellView,
    Column,
    EmptyStateView,
    GridMode,
    GridView,
    HeaderCheckState,
    HeaderView,
    PageInfo,
    RowView,
    SkeletonView,
    SortDirection,
    SortState,
)
from eg_grid.options import DEFAULT_PAGE_SIZE_OPTIONS, SKELETON_ROWS, GridOptions
from eg_grid.pagination import ELLIPSIS_END, ELLIPSIS_START

__all__ = [
    "Alignment",
    "CellView",
    "Column",
    "DataGrid",
    "DEFAULT_PAGE_SIZE_OPTIONS",
    "ELLIPSIS_END",
    "ELLIPSIS_START",
    "EmptyStateRegistry",
    "EmptyStateTemplate",
    "EmptyStateView",
    "GridMode",
    "GridOptions",
    "GridView",
    "HeaderCheckState",
    "HeaderView",
    "PageInfo",
    "RowView",
    "SKELETON_ROWS",
    "SkeletonView",
    "SortDirection",
    "SortState",
    "casefold_compare",
    "coerce_sort",
    "default_compare",
    "empty_state_registry",
    "get_empty_state_template",
    "normalize_rows",
    "reverse",
]
