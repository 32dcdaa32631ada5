"""Pagination pipeline: page counts, clamping, windows and page buttons."""

from __future__ import annotations

import math
from typing import Any, Sequence

DEFAULT_PAGE_SIZE = 10
ELLIPSIS_START = "ellipsis-start"
ELLIPSIS_END = "ellipsis-end"
MAX_VISIBLE_PAGES = 5


def total_pages(row_count: int, page_size: int) -> int:
    """Number of pages; there is always at least one, even with no rows."""
    if page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE
    return max(1, math.ceil(row_count / page_size))


def clamp_page(page: int, total: int) -> int:
    return max(1, min(page, max(1, total)))


def page_window(rows: Sequence[Any], page: int, page_size: int) -> list[Any]:
    start = (page - 1) * page_size
    return list(rows[start : start + page_size])


def page_range(page: int, page_size: int, total_rows: int) -> tuple[int, int]:
    """1-based bounds of the rows shown on ``page``; ``(0, 0)`` without rows."""
    if total_rows == 0:
        return 0, 0
    start = (page - 1) * page_size + 1
    end = min(page * page_size, total_rows)
    return start, end


def page_numbers(current: int, total: int) -> list[int | str]:
    """Page buttons to render, with ellipsis markers for skipped runs.

    The first and last pages are always present; the middle shows the current
    page and its neighbours, shifted so the window stays full near either end.
    """
    if total <= MAX_VISIBLE_PAGES:
        return list(range(1, total + 1))

    pages: list[int | str] = [1]
    start = max(2, current - 1)
    end = min(total - 1, current + 1)
    if current <= 3:
        end = 4
    if current >= total - 2:
        start = total - 3

    if start > 2:
        pages.append(ELLIPSIS_START)
    pages.extend(range(start, end + 1))
    if end < total - 1:
        pages.append(ELLIPSIS_END)
    pages.append(total)
    return pages
