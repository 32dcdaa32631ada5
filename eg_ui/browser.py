"""Full-screen prompt_toolkit browser over a DataGrid.

Keys: up/down move the cursor, left/right change page, space toggles the
row, ``a`` toggles the page, digits sort by column, enter activates the row,
``/`` focuses the search field, ``q`` or escape leaves returning the
selection, ctrl-c cancels.
"""

from __future__ import annotations

import shutil
from typing import Any, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.filters import has_focus
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea
from rich.console import Console
from rich.pretty import Pretty

from eg_grid.api import DataGrid, GridMode, GridView
from eg_ui import theme
from eg_ui.facade import TUI
from eg_ui.models import TableModel
from eg_ui.presenters.grid import empty_panel_model, grid_to_table_model
from eg_ui.search import SearchConfig, filter_rows

CURSOR_MARK = "›"
HELP_LINE = "↑↓ move  ←→ page  space select  a page-select  1-9 sort  / search  enter open  q done"


class GridBrowser:
    """Interactive state around a grid; owns the cursor and the search text.

    The Application is only built by ``run()``, so every action can be
    driven directly.
    """

    def __init__(
        self,
        grid: DataGrid,
        *,
        title: str = "",
        search_fields: Sequence[str] = (),
        search_config: SearchConfig | None = None,
    ) -> None:
        self.grid = grid
        self.title = title
        self.cursor = 0
        self.query = ""
        self._all_rows = list(grid.rows)
        self._search_fields = list(search_fields) or [column.key for column in grid.columns]
        self._search_config = search_config or SearchConfig()
        self.search = TextArea(height=1, prompt="Search: ", style="class:search", multiline=False)
        self.app: Application | None = None

    # Actions ---------------------------------------------------------
    @property
    def view(self) -> GridView:
        return self.grid.derive()

    @property
    def cursor_row(self) -> Any | None:
        rows = self.view.rows
        if not rows:
            return None
        return rows[min(self.cursor, len(rows) - 1)].row

    def _clamp_cursor(self) -> None:
        count = len(self.view.rows)
        self.cursor = max(0, min(self.cursor, count - 1)) if count else 0

    def move(self, delta: int) -> None:
        self.cursor += delta
        self._clamp_cursor()

    def next_page(self) -> None:
        self.grid.next_page()
        self._clamp_cursor()

    def previous_page(self) -> None:
        self.grid.previous_page()
        self._clamp_cursor()

    def toggle_current(self) -> None:
        row = self.cursor_row
        if row is not None:
            self.grid.toggle_row(row)

    def toggle_page(self) -> None:
        self.grid.toggle_all()

    def sort_by_index(self, index: int) -> bool:
        """Sort by the 1-based column ``index`` as a header click would."""
        columns = self.grid.columns
        if index < 1 or index > len(columns):
            return False
        return self.grid.click_header(columns[index - 1].key)

    def activate(self) -> None:
        row = self.cursor_row
        if row is not None:
            self.grid.click_row(row)

    def apply_search(self, query: str) -> None:
        self.query = query.strip()
        rows = filter_rows(self._all_rows, self.query, self._search_fields, self._search_config)
        self.grid.update(rows=rows)
        self.cursor = 0

    def result(self) -> list[Any]:
        return self.grid.selected_keys

    # Rendering -------------------------------------------------------
    def render_text(self, *, width: int | None = None, ansi: bool = False) -> str:
        console = Console(
            width=width or shutil.get_terminal_size(fallback=(100, 24)).columns,
            force_terminal=ansi,
            color_system="standard" if ansi else None,
        )
        ui = TUI(console)
        view = self.view
        with console.capture() as cap:
            if view.mode is GridMode.EMPTY:
                panel = empty_panel_model(view)
                if panel is not None:
                    ui.tables.show_empty(panel)
            else:
                table = grid_to_table_model(view, title=self.title)
                if table is not None:
                    if view.mode is GridMode.TABLE:
                        self._mark_cursor(table)
                    ui.tables.show(table)
        return cap.get()

    def _mark_cursor(self, table: TableModel) -> None:
        table.columns.insert(0, "")
        table.justify.insert(0, "center")
        table.widths.insert(0, 1)
        for idx, row in enumerate(table.rows):
            row.insert(0, CURSOR_MARK if idx == self.cursor else "")

    def _render_detail(self) -> ANSI:
        row = self.cursor_row
        if row is None:
            return ANSI("")
        console = Console(force_terminal=True, width=40)
        with console.capture() as cap:
            console.print(Pretty(row, expand_all=True))
        return ANSI(cap.get())

    # Application -----------------------------------------------------
    def _keybindings(self) -> KeyBindings:
        kb = KeyBindings()
        in_list = ~has_focus(self.search)
        in_search = has_focus(self.search)

        @kb.add("down", filter=in_list)
        def _(e: Any) -> None:
            self.move(1)

        @kb.add("up", filter=in_list)
        def _(e: Any) -> None:
            self.move(-1)

        @kb.add("right", filter=in_list)
        def _(e: Any) -> None:
            self.next_page()

        @kb.add("left", filter=in_list)
        def _(e: Any) -> None:
            self.previous_page()

        @kb.add("space", filter=in_list)
        def _(e: Any) -> None:
            self.toggle_current()

        @kb.add("a", filter=in_list)
        def _(e: Any) -> None:
            self.toggle_page()

        for digit in "123456789":

            @kb.add(digit, filter=in_list)
            def _(e: Any, _digit: str = digit) -> None:
                self.sort_by_index(int(_digit))

        @kb.add("enter", filter=in_list)
        def _(e: Any) -> None:
            self.activate()

        @kb.add("/", filter=in_list)
        def _(e: Any) -> None:
            e.app.layout.focus(self.search)

        @kb.add("enter", filter=in_search)
        def _(e: Any) -> None:
            self.apply_search(self.search.text)
            e.app.layout.focus(self._table_window)

        @kb.add("escape", filter=in_search)
        def _(e: Any) -> None:
            e.app.layout.focus(self._table_window)

        @kb.add("q", filter=in_list)
        @kb.add("escape", filter=in_list)
        def _(e: Any) -> None:
            e.app.exit(result=self.result())

        @kb.add("c-c")
        def _(e: Any) -> None:
            e.app.exit(result=None)

        return kb

    def _build_application(self) -> Application:
        table_control = FormattedTextControl(
            lambda: ANSI(self.render_text(ansi=True)), focusable=True, show_cursor=False
        )
        self._table_window = Window(table_control, width=Dimension(weight=3))
        body = HSplit(
            [
                self.search,
                Window(height=1, char="-", style="class:separator"),
                VSplit(
                    [
                        self._table_window,
                        Window(width=1, char="|", style="class:separator"),
                        Window(
                            FormattedTextControl(self._render_detail),
                            width=Dimension(weight=1),
                        ),
                    ],
                    padding=1,
                ),
                Window(
                    FormattedTextControl([("class:footer", HELP_LINE)]),
                    height=1,
                ),
            ]
        )
        return Application(
            layout=Layout(Frame(body, title=self.title or "Grid"), focused_element=self._table_window),
            key_bindings=self._keybindings(),
            style=Style.from_dict(dict(theme.prompt_toolkit_browser_style())),
            full_screen=True,
        )

    def run(self) -> list[Any] | None:
        self.app = self._build_application()
        return self.app.run()

