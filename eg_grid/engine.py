"""The data-grid engine behind every list screen.

``DataGrid`` owns sort, page and selection state (or mirrors a caller's
controllers) and derives the visible page window from the caller's rows on
every ``derive()`` call. It performs no I/O and raises no domain errors:
malformed props are normalized, missing callbacks are no-ops, and anything a
caller-supplied renderer or callback raises propagates unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Mapping, Sequence

from eg_grid.empty_state import EmptyStateTemplate, empty_state_registry
from eg_grid.models import (
    CellView,
    Column,
    EmptyStateView,
    GridMode,
    GridView,
    HeaderCheckState,
    HeaderView,
    PageInfo,
    RowT,
    RowView,
    SkeletonView,
    SortDirection,
    SortState,
    normalize_columns,
    read_field,
)
from eg_grid.options import SKELETON_ROWS, GridOptions, normalize_page_size
from eg_grid.pagination import (
    clamp_page,
    page_numbers,
    page_range,
    page_window,
    total_pages,
)
from eg_grid.selection import (
    header_state,
    normalize_selection,
    page_keys,
    row_key,
    toggle_key,
    toggle_page,
)
from eg_grid.sorting import can_sort, sort_indicator, sort_rows, toggle_sort
from eg_grid.state import GridStateStore

logger = logging.getLogger(__name__)

_OPTION_FIELDS = frozenset(GridOptions.model_fields)


def normalize_rows(rows: Any) -> list[Any]:
    """Coerce the caller's row collection into a list; junk becomes ``[]``."""
    if rows is None or isinstance(rows, (str, bytes, Mapping)):
        return []
    if isinstance(rows, list):
        return rows
    try:
        return list(rows)
    except TypeError:
        return []


def coerce_sort(value: Any) -> SortState | None:
    """Accept a SortState, a ``(column, direction)`` pair or a mapping."""
    if value is None or isinstance(value, SortState):
        return value
    column: Any = None
    direction: Any = SortDirection.ASC
    if isinstance(value, Mapping):
        column = value.get("column")
        direction = value.get("direction", SortDirection.ASC)
    elif isinstance(value, (tuple, list)) and value:
        column = value[0]
        direction = value[1] if len(value) > 1 else SortDirection.ASC
    elif isinstance(value, str):
        column = value
    if column is not None and not isinstance(column, str):
        column = str(column)
    try:
        resolved = SortDirection(direction)
    except ValueError:
        resolved = SortDirection.ASC
    return SortState(column=column or None, direction=resolved)


def _callable_or_none(value: Any) -> Callable[..., Any] | None:
    return value if callable(value) else None


def _default_cell(value: Any) -> str:
    return "" if value is None else str(value)


class DataGrid(Generic[RowT]):
    """Sortable, paginated, selectable view over a caller-owned row list.

    Props mirror the list screens of the admin console::

        grid = DataGrid(
            columns=[Column("name", "Name"), Column("score", "Score")],
            rows=users,
            selectable=True,
            row_key="user_id",
            selected_rows=store.selected,
            on_selection_change=store.set_selected,
        )
        view = grid.derive()

    Passing ``selected_rows``, ``current_page`` or ``sort`` puts that piece of
    state under the caller's control; the matching ``on_*_change`` callback
    receives every write.
    """

    def __init__(
        self,
        columns: Sequence[Column[RowT]] | None = None,
        rows: Iterable[RowT] | None = None,
        **props: Any,
    ) -> None:
        self._columns: list[Column[RowT]] = []
        self._rows: Any = []
        self._options = GridOptions()
        self._state = GridStateStore()
        self._on_row_click: Callable[[Any], Any] | None = None
        self._on_empty_action: Callable[[], Any] | None = None
        self._empty_template: EmptyStateTemplate | None = None
        self.update(columns=columns, rows=rows, **props)

    # Props -----------------------------------------------------------
    def update(self, **props: Any) -> None:
        """Push new props, as a re-render with changed inputs would."""
        if "options" in props:
            options = props.pop("options")
            if isinstance(options, GridOptions):
                self._options = options
            elif isinstance(options, Mapping):
                self._options = GridOptions.model_validate(dict(options))

        option_changes: dict[str, Any] = {}
        for name, value in props.items():
            if name in _OPTION_FIELDS:
                option_changes[name] = value
            elif name == "columns":
                self._columns = normalize_columns(value)
            elif name == "rows":
                self._rows = value if isinstance(value, (list, tuple)) else normalize_rows(value)
            elif name == "selected_rows":
                self._state.selection.push(None if value is None else normalize_selection(value))
            elif name == "on_selection_change":
                self._state.selection.push(on_change=self._copying(_callable_or_none(value)))
            elif name == "current_page":
                if value is None or (isinstance(value, int) and not isinstance(value, bool)):
                    self._state.page.push(value)
            elif name == "on_page_change":
                self._state.page.push(on_change=_callable_or_none(value))
            elif name == "sort":
                self._state.sort.push(coerce_sort(value))
            elif name == "on_sort_change":
                self._state.sort.push(on_change=_callable_or_none(value))
            elif name == "on_row_click":
                self._on_row_click = _callable_or_none(value)
            elif name == "on_empty_action":
                self._on_empty_action = _callable_or_none(value)
            elif name == "empty_template":
                self._empty_template = self._resolve_template(value)
            else:
                logger.warning("Ignoring unknown grid prop %r", name)
        if option_changes:
            self._options = self._options.with_changes(**option_changes)

    @staticmethod
    def _copying(callback: Callable[[list], Any] | None) -> Callable[[list], Any] | None:
        if callback is None:
            return None
        return lambda keys: callback(list(keys))

    @staticmethod
    def _resolve_template(value: Any) -> EmptyStateTemplate | None:
        if isinstance(value, EmptyStateTemplate):
            return value
        if isinstance(value, str):
            template = empty_state_registry.get(value)
            if template is None:
                logger.warning("Unknown empty-state template %r", value)
            return template
        return None

    # Queries ---------------------------------------------------------
    @property
    def options(self) -> GridOptions:
        return self._options

    @property
    def columns(self) -> list[Column[RowT]]:
        return list(self._columns)

    @property
    def rows(self) -> list[RowT]:
        return normalize_rows(self._rows)

    @property
    def sort_state(self) -> SortState:
        return self._state.sort.get()

    @property
    def total_pages(self) -> int:
        if not self._options.paginated:
            return 1
        return total_pages(len(self.rows), self._options.page_size)

    @property
    def current_page(self) -> int:
        if not self._options.paginated:
            return 1
        return clamp_page(self._state.page.get(), self.total_pages)

    @property
    def selected_keys(self) -> list[Any]:
        return list(self._state.selection.get())

    @property
    def header_check_state(self) -> HeaderCheckState:
        if not self._options.selectable:
            return HeaderCheckState.NONE
        keys = page_keys(self._window(), self._options.row_key)
        return header_state(keys, self._state.selection.get())

    def is_selected(self, row: Any) -> bool:
        key = row_key(row, self._options.row_key)
        return key is not None and key in self._state.selection.get()

    # Derivation ------------------------------------------------------
    def _sorted(self, rows: list[Any]) -> list[Any]:
        return sort_rows(rows, self._columns, self._state.sort.get(), sortable=self._options.sortable)

    def _paginate(self, sorted_rows: list[Any]) -> tuple[list[Any], PageInfo]:
        options = self._options
        count = len(sorted_rows)
        if not options.paginated:
            start, end = page_range(1, max(count, 1), count)
            info = PageInfo(1, 1, options.page_size, count, start, end, (1,), False)
            return list(sorted_rows), info

        pages = total_pages(count, options.page_size)
        current = clamp_page(self._state.page.get(), pages)
        # Commit the clamp so navigation continues from a page that exists.
        self._state.page.set(current, notify=False)
        start, end = page_range(current, options.page_size, count)
        info = PageInfo(
            current_page=current,
            total_pages=pages,
            page_size=options.page_size,
            total_rows=count,
            start=start,
            end=end,
            page_numbers=tuple(page_numbers(current, pages)),
            paginated=True,
        )
        return page_window(sorted_rows, current, options.page_size), info

    def _window(self) -> list[Any]:
        rows = self.rows
        if not rows:
            return []
        window, _ = self._paginate(self._sorted(rows))
        return window

    def _empty_view(self) -> EmptyStateView:
        template = self._empty_template
        if template is not None:
            return EmptyStateView(
                title=template.title,
                description=template.description,
                icon=template.icon,
                action_label=template.action_label,
            )
        options = self._options
        return EmptyStateView(
            title=options.empty_message,
            description=options.empty_description,
            icon=options.empty_icon,
            action_label=options.empty_action_label,
        )

    def derive(self) -> GridView:
        """Recompute the full view from the current props and state."""
        options = self._options
        columns = self._columns

        if options.loading:
            width = len(columns) + (1 if options.selectable else 0)
            skeleton = SkeletonView(
                columns=width,
                rows=SKELETON_ROWS,
                labels=tuple(column.label for column in columns),
            )
            return GridView(mode=GridMode.LOADING, selectable=options.selectable, skeleton=skeleton)

        rows = self.rows
        if not rows:
            return GridView(mode=GridMode.EMPTY, empty=self._empty_view())

        sort_state = self._state.sort.get()
        window, page = self._paginate(self._sorted(rows))
        selected = self._state.selection.get()

        headers = tuple(
            HeaderView(
                key=column.key,
                label=column.label,
                sortable=can_sort(columns, column.key, sortable=options.sortable),
                sort_indicator=sort_indicator(sort_state, column.key) if options.sortable else "none",
                width=column.width,
                align=column.align,
            )
            for column in columns
        )

        row_views = []
        for row in window:
            key = row_key(row, options.row_key)
            cells = []
            for column in columns:
                value = read_field(row, column.key)
                rendered = column.render(value, row) if column.render else _default_cell(value)
                cells.append(CellView(column.key, value, rendered, column.align))
            row_views.append(
                RowView(
                    row=row,
                    key=key,
                    cells=tuple(cells),
                    selected=key is not None and key in selected,
                    selectable=options.selectable and key is not None,
                )
            )

        check = HeaderCheckState.NONE
        if options.selectable:
            check = header_state(page_keys(window, options.row_key), selected)

        return GridView(
            mode=GridMode.TABLE,
            selectable=options.selectable,
            headers=headers,
            rows=tuple(row_views),
            header_check=check,
            sort=sort_state,
            page=page,
        )

    # Interactions ----------------------------------------------------
    def click_header(self, column_key: str) -> bool:
        """Sort by ``column_key``; returns False when the click is a no-op."""
        if not can_sort(self._columns, column_key, sortable=self._options.sortable):
            logger.debug("Header click on %r ignored", column_key)
            return False
        self._state.sort.set(toggle_sort(self._state.sort.get(), column_key))
        return True

    def go_to_page(self, page: Any) -> int:
        try:
            requested = int(page)
        except (TypeError, ValueError, OverflowError):
            return self.current_page
        target = clamp_page(requested, self.total_pages)
        self._state.page.set(target)
        return target

    def next_page(self) -> int:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> int:
        return self.go_to_page(self.current_page - 1)

    def first_page(self) -> int:
        return self.go_to_page(1)

    def last_page(self) -> int:
        return self.go_to_page(self.total_pages)

    def set_page_size(self, size: Any) -> int:
        """Rows-per-page selector: apply the size and return to page 1."""
        resolved = normalize_page_size(size, default=self._options.page_size)
        self._options = self._options.with_changes(page_size=resolved)
        self._state.page.set(1)
        return resolved

    def toggle_all(self) -> list[Any]:
        """Header checkbox over the current page window."""
        if not self._options.selectable:
            return self.selected_keys
        keys = page_keys(self._window(), self._options.row_key)
        self._state.selection.set(toggle_page(keys, self._state.selection.get()))
        return self.selected_keys

    def toggle_row(self, row: Any) -> list[Any]:
        """Row checkbox; never reaches ``on_row_click``."""
        return self.toggle_key(row_key(row, self._options.row_key))

    def toggle_key(self, key: Any) -> list[Any]:
        if not self._options.selectable or key is None:
            return self.selected_keys
        self._state.selection.set(toggle_key(key, self._state.selection.get()))
        return self.selected_keys

    def clear_selection(self) -> None:
        self._state.selection.set([])

    def click_row(self, row: Any) -> None:
        if self._on_row_click is not None:
            self._on_row_click(row)

    def trigger_empty_action(self) -> bool:
        if self._on_empty_action is None or self._options.loading or self.rows:
            return False
        self._on_empty_action()
        return True
