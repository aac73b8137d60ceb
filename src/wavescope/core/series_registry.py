"""Position-indexed collection of series buffers fed one batch per tick."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from numbers import Integral
from typing import List, Optional, Tuple

from .errors import SourceCountMismatch
from .models import BatchEntry, Observation
from .series_buffer import DEFAULT_CAPACITY, SeriesBuffer, validate_capacity

logger = logging.getLogger(__name__)

BatchItem = Tuple[int, int, float]


class SeriesRegistry:
    """
    Own one :class:`SeriesBuffer` per signal source.

    Buffers are created lazily by the first call to :meth:`ensure_and_push`;
    the number of sources seen in that batch is fixed for the life of the
    registry.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = validate_capacity(capacity)
        self._series: List[SeriesBuffer] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_initialized(self) -> bool:
        return bool(self._series)

    def __len__(self) -> int:
        return len(self._series)

    def ensure_and_push(self, batch: Sequence[BatchItem]) -> None:
        """
        Route ``batch`` into the series buffers.

        ``batch`` holds ``(source_position, index, value)`` items in position
        order. The first batch creates the buffers; later batches must have
        exactly one item per existing series, each with an index newer than
        that series' front. The whole batch is validated before any buffer is
        touched.
        """
        entries = self._validated_entries(batch)

        if not self._series:
            self._series = [
                SeriesBuffer(self._capacity, seed=[Observation(entry.index, entry.value)])
                for entry in entries
            ]
            logger.info("Initialized %d series (capacity %d)", len(self._series), self._capacity)
            return

        for entry, series in zip(entries, self._series):
            series.push(entry.index, entry.value)

    def _validated_entries(self, batch: Sequence[BatchItem]) -> List[BatchEntry]:
        entries: List[BatchEntry] = []
        for expected, item in enumerate(batch):
            position, index, value = item
            if position != expected:
                raise ValueError(
                    f"batch entry {expected} is for position {position}; "
                    "entries must be ordered by source position"
                )
            if isinstance(index, bool) or not isinstance(index, Integral):
                raise ValueError(f"batch entry {expected} has non-integer index {index!r}")
            entries.append(BatchEntry(position, int(index), value))

        if not entries:
            raise ValueError("batch must contain at least one entry")
        if not self._series:
            return entries
        if len(entries) != len(self._series):
            raise SourceCountMismatch(expected=len(self._series), got=len(entries))

        for entry, series in zip(entries, self._series):
            front = series.latest()
            if front is not None and entry.index <= front.index:
                raise ValueError(
                    f"index {entry.index} for position {entry.position} does not "
                    f"follow the newest index {front.index}"
                )
        return entries

    def view(self, position: int) -> Optional[tuple[Observation, ...]]:
        """Snapshot of the series at ``position``, or ``None`` before initialization."""
        if not self._series:
            return None
        return self._series[position].snapshot()

    def buffer(self, position: int) -> Optional[SeriesBuffer]:
        if not self._series:
            return None
        return self._series[position]

    def versions(self) -> list[int]:
        return [series.version for series in self._series]

    def latest_index(self) -> Optional[int]:
        """Index of the newest observation (shared by every series), if any."""
        if not self._series:
            return None
        latest = self._series[0].latest()
        return None if latest is None else latest.index
