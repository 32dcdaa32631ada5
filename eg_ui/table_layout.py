from __future__ import annotations

import shutil

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from eg_ui.models import TableModel

MIN_COL_WIDTH = 3


def _console_width(console: Console) -> int | None:
    try:
        width = int(getattr(console.size, "width"))
        if width > 0:
            return width
    except (AttributeError, TypeError, ValueError):
        pass
    width = int(shutil.get_terminal_size(fallback=(100, 24)).columns)
    return width if width > 0 else None


def _cell_width(value: str) -> int:
    # Use the longest line width for multi-line cells.
    return max((len(line) for line in str(value).splitlines()), default=0)


def fit_column_widths(model: TableModel, max_table_width: int) -> list[int]:
    """Desired width per column, shrinking the widest until the table fits.

    Columns with an explicit width keep it and are never shrunk.
    """
    column_count = max(1, len(model.columns))
    # Rough overhead for borders + separators + padding.
    overhead = 4 + (column_count - 1) * 3

    desired: list[int] = []
    fixed: set[int] = set()
    for idx, col in enumerate(model.columns):
        explicit = model.widths[idx] if idx < len(model.widths) else None
        if explicit:
            desired.append(max(MIN_COL_WIDTH, explicit))
            fixed.add(idx)
            continue
        max_len = _cell_width(col)
        for row in model.rows:
            if idx < len(row):
                max_len = max(max_len, _cell_width(row[idx]))
        desired.append(max(MIN_COL_WIDTH, min(max_len, max_table_width)))

    shrinkable = [idx for idx in range(len(desired)) if idx not in fixed]
    while shrinkable and sum(desired) + overhead > max_table_width:
        widest = max(shrinkable, key=lambda i: desired[i])
        if desired[widest] <= MIN_COL_WIDTH:
            break
        desired[widest] -= 1
    return desired


def build_rich_table(
    model: TableModel,
    *,
    console: Console,
    show_lines: bool = False,
    border_style: str = "grey50",
    header_style: str = "bold magenta",
    title_style: str = "bold magenta",
    box_style: box.Box = box.ROUNDED,
) -> Table:
    """
    Build a Rich Table from a TableModel that fits the current terminal width.

    Columns are rendered as single-line and truncated with ellipsis when needed.
    Footer lines become the table caption.
    """
    term_width = _console_width(console)
    max_table_width = max(40, (term_width - 2) if term_width else 100)

    title_text = Text(str(model.title))
    title_text.no_wrap = True
    title_text.overflow = "ellipsis"
    title_max = max(10, max_table_width - 6)
    if len(title_text) > title_max:
        title_text.truncate(title_max, overflow="ellipsis")

    rich_table = Table(
        title=title_text,
        caption=Text("\n".join(model.footer)) if model.footer else None,
        show_lines=show_lines,
        expand=False,
        box=box_style,
        border_style=border_style,
        header_style=header_style,
        title_style=title_style,
    )

    desired = fit_column_widths(model, max_table_width)
    for idx, col in enumerate(model.columns):
        justify = model.justify[idx] if idx < len(model.justify) else "left"
        rich_table.add_column(
            Text(str(col)),
            justify=justify,  # type: ignore[arg-type]
            overflow="ellipsis",
            no_wrap=True,
            min_width=MIN_COL_WIDTH,
            max_width=desired[idx] if idx < len(desired) else None,
        )
    for row in model.rows:
        # Cells are plain text; checkbox marks like "[x]" must not parse as markup.
        rich_table.add_row(*(Text(str(cell)) for cell in row))
    return rich_table
