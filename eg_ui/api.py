"""Stable UI API surface."""

from __future__ import annotations

from eg_ui.browser import GridBrowser
from eg_ui.cli import app, ctx_store, main
from eg_ui.datasets import infer_columns, load_rows
from eg_ui.facade import TUI
from eg_ui.headless import HeadlessUI
from eg_ui.models import EmptyPanelModel, TableModel
from eg_ui.presenters import grid_to_table_model, present_grid
from eg_ui.search import SearchConfig, filter_rows

__all__ = [
    "app",
    "main",
    "ctx_store",
    "EmptyPanelModel",
    "GridBrowser",
    "HeadlessUI",
    "SearchConfig",
    "TUI",
    "TableModel",
    "filter_rows",
    "grid_to_table_model",
    "infer_columns",
    "load_rows",
    "present_grid",
]
