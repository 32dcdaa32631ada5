from __future__ import annotations

from dataclasses import dataclass, field

from eg_ui.models import EmptyPanelModel, TableModel
from eg_ui.protocols import Presenter, PresenterSink, TablePresenter, UI


@dataclass
class RecordedTable:
    model: TableModel


@dataclass
class HeadlessUI(UI):
    """UI that records everything it is asked to show (CI and tests)."""

    recorded_tables: list[RecordedTable] = field(default_factory=list)
    recorded_panels: list[EmptyPanelModel] = field(default_factory=list)
    recorded_messages: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.tables = _HeadlessTablePresenter(self)
        self.present = Presenter(_HeadlessPresenterSink(self))

    @property
    def last_table(self) -> TableModel | None:
        if not self.recorded_tables:
            return None
        return self.recorded_tables[-1].model


class _HeadlessTablePresenter(TablePresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, table: TableModel) -> None:
        self._ui.recorded_tables.append(RecordedTable(table))

    def show_empty(self, panel: EmptyPanelModel) -> None:
        self._ui.recorded_panels.append(panel)


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def emit(self, level: str, message: str) -> None:
        if level == "raw":
            self._ui.recorded_messages.append(message)
            return
        self._ui.recorded_messages.append(f"{level.upper()}: {message}")
