"""Caller-side search filter applied to rows before they reach the grid.

The grid never filters: list screens narrow their rows first and hand the
result over, and selections made before a search survive it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from rapidfuzz import fuzz, process, utils

from eg_grid.models import read_field


@dataclass(frozen=True)
class SearchConfig:
    fuzzy: bool = True
    limit: int | None = None
    score_cutoff: int = 60


def _search_blob(row: Any, fields: Sequence[str]) -> str:
    parts = []
    for field in fields:
        value = read_field(row, field)
        if value is not None:
            parts.append(str(value))
    return " ".join(parts)


def filter_rows(
    rows: Sequence[Any],
    query: str,
    fields: Sequence[str],
    config: SearchConfig | None = None,
) -> list[Any]:
    """Return the rows matching ``query`` across ``fields``, in input order."""
    config = config or SearchConfig()
    query = (query or "").strip()
    if not query or not fields:
        return list(rows)

    blobs = [_search_blob(row, fields) for row in rows]
    if not config.fuzzy:
        needle = query.lower()
        return [row for row, blob in zip(rows, blobs) if needle in blob.lower()]

    matches = process.extract(
        query,
        blobs,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=config.limit,
        score_cutoff=config.score_cutoff,
    )
    # matches is list of (match_string, score, index); keep the caller's order
    keep = sorted(match[2] for match in matches)
    return [rows[idx] for idx in keep]
