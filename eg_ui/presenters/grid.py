"""Turn a derived GridView into terminal table models."""

from __future__ import annotations

from eg_grid.api import (
    Alignment,
    ELLIPSIS_END,
    ELLIPSIS_START,
    GridMode,
    GridView,
    PageInfo,
    SkeletonView,
)
from eg_ui import theme
from eg_ui.models import EmptyPanelModel, TableModel

_JUSTIFY = {
    Alignment.START: "left",
    Alignment.CENTER: "center",
    Alignment.END: "right",
}


def page_footer(page: PageInfo) -> list[str]:
    """Summary line plus, when there is more than one page, the page buttons."""
    lines = [page.summary]
    if not page.show_controls:
        return lines
    buttons: list[str] = ["‹" if page.has_previous else " "]
    for number in page.page_numbers:
        if number in (ELLIPSIS_START, ELLIPSIS_END):
            buttons.append("…")
        elif number == page.current_page:
            buttons.append(f"[{number}]")
        else:
            buttons.append(str(number))
    buttons.append("›" if page.has_next else " ")
    lines.append(" ".join(buttons).strip())
    lines.append(f"Page {page.current_page} of {page.total_pages}")
    return lines


def _skeleton_model(view: GridView, skeleton: SkeletonView, title: str) -> TableModel:
    labels = list(skeleton.labels)
    if view.selectable:
        labels.insert(0, theme.checkbox("none"))
    labels += [""] * (skeleton.columns - len(labels))
    rows = [[theme.SKELETON_CELL] * skeleton.columns for _ in range(skeleton.rows)]
    return TableModel(title=title, columns=labels, rows=rows, footer=["Loading..."])


def grid_to_table_model(view: GridView, *, title: str = "") -> TableModel | None:
    """Build the table for LOADING and TABLE modes; EMPTY yields None."""
    if view.mode is GridMode.LOADING and view.skeleton is not None:
        return _skeleton_model(view, view.skeleton, title)
    if view.mode is GridMode.EMPTY:
        return None

    columns: list[str] = []
    justify: list[str] = []
    widths: list[int | None] = []
    if view.selectable:
        columns.append(theme.checkbox(view.header_check.value))
        justify.append("center")
        widths.append(3)
    for header in view.headers:
        label = header.label
        if header.sortable:
            label = f"{label} {theme.sort_icon(header.sort_indicator)}"
        columns.append(label)
        justify.append(_JUSTIFY.get(header.align, "left"))
        widths.append(header.width)

    rows: list[list[str]] = []
    for row_view in view.rows:
        cells: list[str] = []
        if view.selectable:
            cells.append(theme.checkbox(row_view.selected) if row_view.selectable else "")
        cells.extend(str(cell.rendered) for cell in row_view.cells)
        rows.append(cells)

    footer = page_footer(view.page) if view.page is not None else []
    return TableModel(
        title=title,
        columns=columns,
        rows=rows,
        footer=footer,
        justify=justify,
        widths=widths,
    )


def empty_panel_model(view: GridView) -> EmptyPanelModel | None:
    if view.mode is not GridMode.EMPTY or view.empty is None:
        return None
    empty = view.empty
    return EmptyPanelModel(
        title=empty.title,
        description=empty.description or "",
        icon=theme.empty_icon(empty.icon),
        action_label=empty.action_label or "",
    )
