"""Sort pipeline and the header-click sort machine."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from eg_grid.comparators import default_compare, key_for, reverse
from eg_grid.models import Column, SortDirection, SortState, read_field

logger = logging.getLogger(__name__)


def _find_column(columns: Sequence[Column], key: str) -> Column | None:
    found = None
    for column in columns:
        if column.key == key:
            found = column
    return found


def sort_rows(
    rows: Sequence[Any],
    columns: Sequence[Column],
    state: SortState,
    *,
    sortable: bool = True,
) -> list[Any]:
    """Return ``rows`` ordered by the active sort column.

    The input order is kept when sorting is disabled, no column is active,
    or the active column is declared non-sortable. Python's sort is stable, so
    rows with equal keys keep their relative order in both directions.
    """
    if not sortable or state.column is None:
        return list(rows)
    column = _find_column(columns, state.column)
    if column is not None and not column.sortable:
        return list(rows)

    cmp = column.comparator if column is not None and column.comparator else default_compare
    if state.direction is SortDirection.DESC:
        cmp = reverse(cmp)
    field = state.column
    return sorted(rows, key=key_for(cmp, lambda row: read_field(row, field)))


def toggle_sort(state: SortState, column_key: str) -> SortState:
    """Header click: flip direction on the active column, else start ascending."""
    if state.column == column_key:
        return SortState(column=column_key, direction=state.direction.flipped())
    return SortState(column=column_key, direction=SortDirection.ASC)


def sort_indicator(state: SortState, column_key: str) -> str:
    if state.column != column_key:
        return "none"
    return state.direction.value


def can_sort(columns: Sequence[Column], column_key: str, *, sortable: bool) -> bool:
    if not sortable:
        return False
    column = _find_column(columns, column_key)
    return column is not None and column.sortable
