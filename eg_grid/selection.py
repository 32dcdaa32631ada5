"""Selection machine: row keys, the tri-state header and toggles.

Selections are ordered lists of key values compared with ``==``, so keys do
not need to be hashable. Every function returns a new list; the caller's
selection is never modified in place.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from eg_grid.models import HeaderCheckState, has_field, read_field


def row_key(row: Any, field: str) -> Any:
    """Return the identity of ``row``, or None when it cannot be selected."""
    if row is None or not has_field(row, field):
        return None
    return read_field(row, field)


def page_keys(rows: Iterable[Any], field: str) -> list[Any]:
    keys = []
    for row in rows:
        key = row_key(row, field)
        if key is not None:
            keys.append(key)
    return keys


def normalize_selection(selected: Iterable[Any] | None) -> list[Any]:
    """Copy ``selected`` into a duplicate-free list."""
    if selected is None or isinstance(selected, (str, bytes)):
        return []
    try:
        items = list(selected)
    except TypeError:
        return []
    result: list[Any] = []
    for key in items:
        if key not in result:
            result.append(key)
    return result


def header_state(keys: Sequence[Any], selected: Sequence[Any]) -> HeaderCheckState:
    if not keys:
        return HeaderCheckState.NONE
    hits = sum(1 for key in keys if key in selected)
    if hits == len(keys):
        return HeaderCheckState.ALL
    if hits:
        return HeaderCheckState.SOME
    return HeaderCheckState.NONE


def toggle_page(keys: Sequence[Any], selected: Sequence[Any]) -> list[Any]:
    """Header checkbox click over one page window.

    From ALL, exactly the page keys are removed and selections made on other
    pages survive. Otherwise the page keys are added to the selection.
    """
    if header_state(keys, selected) is HeaderCheckState.ALL:
        return [key for key in selected if key not in keys]
    result = list(selected)
    for key in keys:
        if key not in result:
            result.append(key)
    return result


def toggle_key(key: Any, selected: Sequence[Any]) -> list[Any]:
    if key is None:
        return list(selected)
    if key in selected:
        return [item for item in selected if item != key]
    return [*selected, key]
