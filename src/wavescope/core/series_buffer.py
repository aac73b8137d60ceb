from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Deque, Optional

from .errors import ConstructionError
from .models import Observation

DEFAULT_CAPACITY = 100


def validate_capacity(capacity: int) -> int:
    """Return ``capacity`` if it is a positive integer, else raise ConstructionError."""
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ConstructionError(f"capacity must be an int, got {type(capacity).__name__}")
    if capacity <= 0:
        raise ConstructionError("capacity must be positive")
    return capacity


class SeriesBuffer:
    """
    Bounded history of one series, newest observation first.

    ``push`` inserts at the front and drops entries from the back until the
    buffer is within ``capacity`` again. Entries are never reordered.

    ``version`` increases on every push; renderers compare it with the value
    they last drew to decide whether a redraw is needed.
    """

    __slots__ = ("_capacity", "_observations", "_version")

    def __init__(self, capacity: int = DEFAULT_CAPACITY, seed: Optional[Iterable[Observation]] = None) -> None:
        self._capacity = validate_capacity(capacity)
        self._observations: Deque[Observation] = deque()
        self._version = 0
        if seed is not None:
            # Seed entries are in insertion order, so the last one ends up in front.
            for index, value in seed:
                self.push(index, value)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def version(self) -> int:
        return self._version

    def push(self, index: int, value: float) -> list[Observation]:
        """Insert ``(index, value)`` at the front and return any evicted observations."""
        self._observations.appendleft(Observation(int(index), value))
        evicted: list[Observation] = []
        while len(self._observations) > self._capacity:
            evicted.append(self._observations.pop())
        self._version += 1
        return evicted

    def snapshot(self) -> tuple[Observation, ...]:
        """Return a copy of the contents, front (newest) to back (oldest)."""
        return tuple(self._observations)

    def latest(self) -> Optional[Observation]:
        if not self._observations:
            return None
        return self._observations[0]

    def oldest(self) -> Optional[Observation]:
        if not self._observations:
            return None
        return self._observations[-1]

    def __len__(self) -> int:
        return len(self._observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.snapshot())

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"SeriesBuffer(capacity={self._capacity}, len={len(self._observations)})"
