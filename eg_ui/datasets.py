"""Load row datasets (JSON, YAML or CSV exports of list screens) for the CLI."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from eg_common.errors import DatasetError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def coerce_scalar(value: str) -> Any:
    """CSV cells arrive as text; recover ints and floats so sorting is numeric."""
    text = value.strip()
    if text == "":
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


def _extract_rows(data: Any, path: Path) -> list[dict[str, Any]]:
    if isinstance(data, dict):
        data = data.get("rows", data.get("data"))
    if not isinstance(data, list):
        raise DatasetError(
            "Dataset must be a list of rows or a mapping with a 'rows' list.",
            context={"path": path},
        )
    rows = [row for row in data if isinstance(row, dict)]
    skipped = len(data) - len(rows)
    if skipped:
        logger.warning("Skipped %d non-mapping entries in %s", skipped, path)
    return rows


def load_rows(path: Path) -> list[dict[str, Any]]:
    """Read rows from ``path``; the format follows the file suffix."""
    if not path.exists():
        raise DatasetError(f"Dataset not found: {path}", context={"path": path})
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            with path.open(newline="") as handle:
                return [
                    {key: coerce_scalar(val or "") for key, val in record.items() if key}
                    for record in csv.DictReader(handle)
                ]
        text = path.read_text()
        if suffix in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError, csv.Error) as exc:
        raise DatasetError(
            f"Failed to read dataset {path}: {exc}", context={"path": path}, cause=exc
        ) from exc
    return _extract_rows(data, path)


def infer_columns(rows: list[dict[str, Any]]) -> list[str]:
    """Field names in first-seen order across all rows."""
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)
