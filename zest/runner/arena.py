"""Per-test allocation arena.

Each regular test runs inside a fresh arena. Anything the test allocates
from it and does not free is reported as a leak when the arena closes.
"""

import itertools
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..errors import ArenaError


@dataclass(frozen=True)
class Allocation:
    """Handle for a single arena allocation."""
    id: int
    size: int = 0
    label: Optional[str] = None

    def __str__(self) -> str:
        name = self.label or f"#{self.id}"
        return f"{name} ({self.size} bytes)"


class Arena:
    """Tracks allocations made during one test."""

    def __init__(self):
        self._ids = itertools.count(1)
        self._live: dict[int, Allocation] = {}
        self._closed = False

    @property
    def live(self) -> list[Allocation]:
        """Outstanding allocations in allocation order."""
        return list(self._live.values())

    @property
    def closed(self) -> bool:
        return self._closed

    def alloc(self, size: int = 0, label: Optional[str] = None) -> Allocation:
        self._check_open()
        if size < 0:
            raise ArenaError(f"Allocation size must not be negative, got {size}")
        allocation = Allocation(id=next(self._ids), size=size, label=label)
        self._live[allocation.id] = allocation
        return allocation

    def free(self, allocation: Allocation) -> None:
        self._check_open()
        if self._live.get(allocation.id) != allocation:
            raise ArenaError(f"Invalid free of {allocation}")
        del self._live[allocation.id]

    def close(self) -> list[Allocation]:
        """Release the arena and return the allocations that were never freed."""
        self._check_open()
        leaked = self.live
        self._live.clear()
        self._closed = True
        return leaked

    def _check_open(self) -> None:
        if self._closed:
            raise ArenaError("Arena used after close")


@dataclass
class ArenaReport:
    """Filled in when an isolated arena scope exits."""
    leaked: list[Allocation] = field(default_factory=list)

    @property
    def has_leaks(self) -> bool:
        return len(self.leaked) > 0


@contextmanager
def isolated_arena(report: Optional[ArenaReport] = None) -> Iterator[Arena]:
    """Yield a fresh arena and inspect it on every exit path."""
    arena = Arena()
    try:
        yield arena
    finally:
        leaked = [] if arena.closed else arena.close()
        if report is not None:
            report.leaked = leaked
