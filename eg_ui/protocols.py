from __future__ import annotations

from typing import Protocol

from eg_ui.models import EmptyPanelModel, TableModel


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...

    def show_empty(self, panel: EmptyPanelModel) -> None: ...


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...


class Presenter:
    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def info(self, message: str) -> None:
        self._sink.emit("info", message)

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)

    def success(self, message: str) -> None:
        self._sink.emit("success", message)

    def raw(self, text: str) -> None:
        self._sink.emit("raw", text)


class UI(Protocol):
    tables: TablePresenter
    present: Presenter
