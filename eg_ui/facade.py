"""Rich-backed UI used by the CLI when attached to a terminal."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from eg_ui import theme
from eg_ui.models import EmptyPanelModel, TableModel
from eg_ui.protocols import Presenter, PresenterSink, TablePresenter, UI
from eg_ui.table_layout import build_rich_table


class RichTablePresenter(TablePresenter):
    def __init__(self, console: Console):
        self._console = console

    def show(self, table: TableModel) -> None:
        rich_table = build_rich_table(
            table,
            console=self._console,
            border_style=theme.RICH_BORDER_STYLE,
            header_style=theme.RICH_ACCENT_BOLD,
            title_style=theme.RICH_ACCENT_BOLD,
        )
        self._console.print(rich_table)

    def show_empty(self, panel: EmptyPanelModel) -> None:
        parts: list[Text] = []
        if panel.icon:
            parts.append(Text(panel.icon, justify="center"))
        parts.append(Text(panel.title, style="bold", justify="center"))
        if panel.description:
            parts.append(Text(panel.description, style=theme.RICH_MUTED, justify="center"))
        if panel.action_label:
            parts.append(Text(f"→ {panel.action_label}", style=theme.RICH_ACCENT, justify="center"))
        self._console.print(Panel(Group(*parts), border_style=theme.RICH_BORDER_STYLE, padding=(1, 4)))


class _RichPresenterSink(PresenterSink):
    def __init__(self, console: Console) -> None:
        self._console = console

    def emit(self, level: str, message: str) -> None:
        if level == "raw":
            self._console.print(message, markup=False, highlight=False, soft_wrap=True)
            return
        self._console.print(theme.presenter_message(level, message))


class TUI(UI):
    def __init__(self, console: Console | None = None):
        self._console = console or Console()
        self.tables: TablePresenter = RichTablePresenter(self._console)
        self.present: Presenter = Presenter(_RichPresenterSink(self._console))

    @property
    def console(self) -> Console:
        return self._console
