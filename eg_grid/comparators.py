"""Type-aware comparators used by the sort pipeline.

Values of different kinds never reach Python's ``<`` directly: each value is
first assigned a kind rank, and only values of the same kind are compared.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from decimal import Decimal
from functools import cmp_to_key
from typing import Any, Callable

from eg_grid.models import Comparator

_NUMBER = 0
_STRING = 1
_TEMPORAL = 2
_OTHER = 3
_MISSING = 4


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, Decimal) and value.is_nan():
        return True
    return False


def _kind(value: Any) -> int:
    if _is_missing(value):
        return _MISSING
    if isinstance(value, (int, float, Decimal)):
        return _NUMBER
    if isinstance(value, str):
        return _STRING
    if isinstance(value, (date, datetime)):
        return _TEMPORAL
    return _OTHER


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _sign(a: Any, b: Any) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def _compare_temporal(a: date | datetime, b: date | datetime) -> int:
    left, right = _as_datetime(a), _as_datetime(b)
    try:
        return _sign(left, right)
    except TypeError:
        # naive vs aware: naive first
        return -1 if left.tzinfo is None else 1


def _compare_other(a: Any, b: Any) -> int:
    try:
        return _sign(a, b)
    except TypeError:
        left, right = type(a).__name__, type(b).__name__
        if left != right:
            return -1 if left < right else 1
        return 0


def default_compare(a: Any, b: Any) -> int:
    """Order two cell values; missing values sort after present ones."""
    kind_a, kind_b = _kind(a), _kind(b)
    if kind_a != kind_b:
        return -1 if kind_a < kind_b else 1
    if kind_a == _MISSING:
        return 0
    if kind_a == _TEMPORAL:
        return _compare_temporal(a, b)
    if kind_a == _OTHER:
        return _compare_other(a, b)
    return _sign(a, b)


def reverse(cmp: Comparator) -> Comparator:
    """Negate a comparator."""

    def _reversed(a: Any, b: Any) -> int:
        return -cmp(a, b)

    return _reversed


def casefold_compare(a: Any, b: Any) -> int:
    """Case-insensitive text ordering, ties broken by the raw value."""
    if isinstance(a, str) and isinstance(b, str):
        folded = _sign(a.casefold(), b.casefold())
        return folded or _sign(a, b)
    return default_compare(a, b)


def key_for(cmp: Comparator, field: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Build a ``sorted`` key that compares rows by ``field(row)`` with ``cmp``."""
    wrapped = cmp_to_key(cmp)
    return lambda row: wrapped(field(row))
