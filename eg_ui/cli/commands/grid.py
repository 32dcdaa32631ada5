from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer

from eg_common.api import EGError, error_to_payload
from eg_grid.api import Column, DataGrid, GridMode, GridView
from eg_ui.browser import GridBrowser
from eg_ui.datasets import coerce_scalar, infer_columns, load_rows
from eg_ui.presenters import present_grid
from eg_ui.search import SearchConfig, filter_rows
from eg_ui.wiring.dependencies import UIContext, options_from_settings


def _split(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _fail(ctx: UIContext, error: EGError, as_json: bool) -> None:
    if as_json:
        ctx.ui.present.raw(json.dumps(error_to_payload(error)))
    else:
        ctx.ui.present.error(str(error))
    raise typer.Exit(1)


def build_grid(
    ctx: UIContext,
    dataset: Path,
    *,
    columns: Optional[str],
    search: Optional[str],
    exact: bool,
    row_key: Optional[str],
    page_size: Optional[int],
    paginate: Optional[bool],
    selectable: Optional[bool],
    loading: bool = False,
    empty_template: Optional[str] = None,
    on_row_click: Any = None,
) -> tuple[DataGrid, list[dict[str, Any]], list[str]]:
    """Load the dataset and configure a grid the way a list screen would."""
    rows = load_rows(dataset)
    keys = _split(columns) or infer_columns(rows)
    options = options_from_settings(
        ctx.settings,
        row_key=row_key,
        page_size=page_size,
        paginated=paginate,
        selectable=selectable,
        loading=loading,
    )
    shown = filter_rows(rows, search or "", keys, SearchConfig(fuzzy=not exact))
    grid: DataGrid = DataGrid(
        columns=[Column(key, key.replace("_", " ").title()) for key in keys],
        rows=shown,
        options=options,
        empty_template="no_matches" if search and rows else empty_template,
        on_row_click=on_row_click,
    )
    return grid, rows, keys


def apply_sort(ctx: UIContext, grid: DataGrid, sort: Optional[str], desc: bool) -> None:
    if not sort:
        return
    if not grid.click_header(sort):
        ctx.ui.present.warning(f"Column '{sort}' is not sortable; keeping row order.")
        return
    if desc:
        grid.click_header(sort)


def view_payload(grid: DataGrid, view: GridView) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "mode": view.mode.value,
        "selected": grid.selected_keys,
        "header_check": view.header_check.value,
        "sort": {"column": view.sort.column, "direction": view.sort.direction.value},
    }
    if view.page is not None:
        payload["page"] = {
            "current": view.page.current_page,
            "total": view.page.total_pages,
            "size": view.page.page_size,
            "rows": view.page.total_rows,
            "summary": view.page.summary,
        }
    if view.mode is GridMode.TABLE:
        payload["rows"] = view.window
    if view.empty is not None:
        payload["empty"] = {"title": view.empty.title, "description": view.empty.description}
    return payload


def register_show_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register the show command on the given Typer app."""

    @app.command("show")
    def show(
        dataset: Path = typer.Argument(..., help="JSON, YAML or CSV file with rows."),
        columns: Optional[str] = typer.Option(
            None, "--columns", "-C", help="Comma-separated fields to show (default: all)."
        ),
        sort: Optional[str] = typer.Option(None, "--sort", "-s", help="Column to sort by."),
        desc: bool = typer.Option(False, "--desc", help="Sort descending."),
        page: int = typer.Option(1, "--page", "-p", help="Page to show (clamped)."),
        page_size: Optional[int] = typer.Option(None, "--page-size", "-n", help="Rows per page."),
        paginate: Optional[bool] = typer.Option(
            None, "--paginate/--no-paginate", help="Split rows into pages."
        ),
        row_key: Optional[str] = typer.Option(None, "--row-key", "-k", help="Row identity field."),
        select: Optional[str] = typer.Option(
            None, "--select", help="Comma-separated row keys to mark as selected."
        ),
        select_page: bool = typer.Option(
            False, "--select-page", help="Toggle the header checkbox on the shown page."
        ),
        search: Optional[str] = typer.Option(None, "--search", "-q", help="Filter rows first."),
        exact: bool = typer.Option(False, "--exact", help="Substring search instead of fuzzy."),
        loading: bool = typer.Option(False, "--loading", help="Preview the loading skeleton."),
        empty_template: Optional[str] = typer.Option(
            None, "--empty-template", help="Empty-state template for an empty dataset."
        ),
        title: str = typer.Option("", "--title", "-t", help="Table title."),
        as_json: bool = typer.Option(False, "--json", help="Print the derived page as JSON."),
    ) -> None:
        """Render one page of a dataset the way the admin list screens do."""
        keys = _split(select)
        try:
            grid, _, _ = build_grid(
                ctx,
                dataset,
                columns=columns,
                search=search,
                exact=exact,
                row_key=row_key,
                page_size=page_size,
                paginate=paginate,
                selectable=True if (keys or select_page) else None,
                loading=loading,
                empty_template=empty_template,
            )
        except EGError as exc:
            _fail(ctx, exc, as_json)
            return

        apply_sort(ctx, grid, sort, desc)
        grid.go_to_page(page)
        for key in keys:
            grid.toggle_key(coerce_scalar(key))
        if select_page:
            grid.toggle_all()

        view = grid.derive()
        if as_json:
            ctx.ui.present.raw(json.dumps(view_payload(grid, view), default=str))
            return
        present_grid(ctx.ui, view, title=title or dataset.stem)


def register_browse_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register the interactive browse command on the given Typer app."""

    @app.command("browse")
    def browse(
        dataset: Path = typer.Argument(..., help="JSON, YAML or CSV file with rows."),
        columns: Optional[str] = typer.Option(
            None, "--columns", "-C", help="Comma-separated fields to show (default: all)."
        ),
        page_size: Optional[int] = typer.Option(None, "--page-size", "-n", help="Rows per page."),
        row_key: Optional[str] = typer.Option(None, "--row-key", "-k", help="Row identity field."),
        title: str = typer.Option("", "--title", "-t", help="Frame title."),
    ) -> None:
        """Browse a dataset interactively and print the selected row keys."""
        if not sys.stdin.isatty() or not sys.stdout.isatty():
            ctx.ui.present.error("Interactive browsing requires a TTY.")
            raise typer.Exit(1)
        opened: List[Any] = []
        try:
            grid, _, keys = build_grid(
                ctx,
                dataset,
                columns=columns,
                search=None,
                exact=False,
                row_key=row_key,
                page_size=page_size,
                paginate=True,
                selectable=True,
                on_row_click=opened.append,
            )
        except EGError as exc:
            _fail(ctx, exc, False)
            return

        browser = GridBrowser(grid, title=title or dataset.stem, search_fields=keys)
        selection = browser.run()
        if selection is None:
            ctx.ui.present.warning("Browsing cancelled.")
            raise typer.Exit(1)
        if opened:
            ctx.ui.present.info(f"Opened {len(opened)} row(s).")
        if not selection:
            ctx.ui.present.warning("No rows selected.")
            return
        ctx.ui.present.success(f"Selected {len(selection)} row(s).")
        ctx.ui.present.raw(json.dumps(selection, default=str))
