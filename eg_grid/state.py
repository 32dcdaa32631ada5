"""Single state owner for sort, page and selection.

The engine always reads state from a ``ControlledSlot``. Without an external
controller the slot is the source of truth. With one, the slot is a cache:
writes are forwarded to the controller's callback and the next value the
controller pushes overwrites the cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from eg_grid.models import SortState

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET: Any = object()


@dataclass
class ControlledSlot(Generic[T]):
    name: str
    value: T
    controlled: bool = False
    on_change: Callable[[T], None] | None = None
    # last value the controller pushed; only meaningful while controlled
    external: Any = None

    def get(self) -> T:
        return self.value

    def push(self, value: Any = _UNSET, on_change: Any = _UNSET) -> None:
        """Accept a new external value and/or callback from the caller.

        Pushing ``None`` releases external control and keeps the cached value
        as the new internal state.
        """
        if value is not _UNSET:
            if value is None:
                self.controlled = False
                self.external = None
            else:
                self.controlled = True
                self.external = value
                self.value = value
        if on_change is not _UNSET:
            self.on_change = on_change

    def is_stale(self, value: T) -> bool:
        """True when a controller still holds a value other than ``value``."""
        return self.controlled and value != self.external

    def set(self, value: T, *, notify: bool = True) -> None:
        """Engine write.

        Uncontrolled slots announce only real changes. Controlled slots also
        announce a value the cache already holds when the controller's last
        push differs from it, e.g. after a silent page re-clamp.
        """
        changed = value != self.value
        if not changed and not (notify and self.is_stale(value)):
            return
        if changed:
            logger.debug("Grid state %s -> %r", self.name, value)
        self.value = value
        if notify and self.on_change is not None:
            self.on_change(value)


@dataclass
class GridStateStore:
    """The engine's view of its three orthogonal state machines."""

    sort: ControlledSlot[SortState] = field(
        default_factory=lambda: ControlledSlot("sort", SortState())
    )
    page: ControlledSlot[int] = field(default_factory=lambda: ControlledSlot("page", 1))
    selection: ControlledSlot[list] = field(
        default_factory=lambda: ControlledSlot("selection", [])
    )
