"""Column descriptors, state records and derived view types for the grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT")

Comparator = Callable[[Any, Any], int]
CellRenderer = Callable[[Any, Any], Any]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class Alignment(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"


class HeaderCheckState(str, Enum):
    """Tri-state of the header checkbox over the current page window."""

    NONE = "none"
    SOME = "some"
    ALL = "all"


class GridMode(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    TABLE = "table"


@dataclass(frozen=True)
class Column(Generic[RowT]):
    """Declares how one field of a row is shown and ordered.

    ``header`` may be a plain label or a zero-argument callable computing it.
    ``render`` receives ``(value, row)`` and may return anything the
    presentation layer understands; the engine never inspects the result.
    """

    key: str
    header: str | Callable[[], str] | None = None
    render: CellRenderer | None = None
    width: int | None = None
    align: Alignment = Alignment.START
    sortable: bool = True
    comparator: Comparator | None = None

    @property
    def label(self) -> str:
        if self.header is None:
            return self.key
        if callable(self.header):
            return str(self.header())
        return self.header


@dataclass(frozen=True)
class SortState:
    column: str | None = None
    direction: SortDirection = SortDirection.ASC

    @property
    def active(self) -> bool:
        return self.column is not None


@dataclass(frozen=True)
class HeaderView:
    key: str
    label: str
    sortable: bool
    sort_indicator: str  # "asc", "desc" or "none"
    width: int | None
    align: Alignment


@dataclass(frozen=True)
class CellView:
    key: str
    value: Any
    rendered: Any
    align: Alignment


@dataclass(frozen=True)
class RowView:
    row: Any
    key: Any
    cells: tuple[CellView, ...]
    selected: bool
    selectable: bool


@dataclass(frozen=True)
class PageInfo:
    current_page: int
    total_pages: int
    page_size: int
    total_rows: int
    start: int
    end: int
    page_numbers: tuple[int | str, ...]
    paginated: bool

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def show_controls(self) -> bool:
        return self.paginated and self.total_pages > 1

    @property
    def summary(self) -> str:
        if self.total_rows == 0:
            return "No results"
        return f"Showing {self.start} to {self.end} of {self.total_rows} results"


@dataclass(frozen=True)
class SkeletonView:
    columns: int
    rows: int
    labels: tuple[str, ...] = ()


@dataclass(frozen=True)
class EmptyStateView:
    title: str
    description: str | None
    icon: str | None
    action_label: str | None


@dataclass(frozen=True)
class GridView:
    """Result of one derivation pass; everything a renderer needs."""

    mode: GridMode
    selectable: bool = False
    headers: tuple[HeaderView, ...] = ()
    rows: tuple[RowView, ...] = ()
    header_check: HeaderCheckState = HeaderCheckState.NONE
    sort: SortState = field(default_factory=SortState)
    page: PageInfo | None = None
    skeleton: SkeletonView | None = None
    empty: EmptyStateView | None = None

    @property
    def window(self) -> list[Any]:
        """Raw rows of the current page window."""
        return [row_view.row for row_view in self.rows]


def normalize_columns(columns: Sequence[Column] | None) -> list[Column]:
    """Drop duplicate keys; the later descriptor wins at the first position."""
    if not columns:
        return []
    by_key: dict[str, Column] = {}
    for column in columns:
        if not isinstance(column, Column):
            logger.warning("Ignoring column descriptor %r; expected Column", column)
            continue
        by_key[column.key] = column
    return list(by_key.values())


def read_field(row: Any, key: str) -> Any:
    """Read one field from a mapping row or an attribute-style row."""
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


def has_field(row: Any, key: str) -> bool:
    if isinstance(row, Mapping):
        return key in row
    return hasattr(row, key)
