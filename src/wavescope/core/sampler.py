"""Tick-driven sampler that turns signal source readings into series batches."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..sources.base import SignalSource
from .clock_gate import ClockGate
from .errors import SamplingFailed
from .series_registry import BatchItem, SeriesRegistry

logger = logging.getLogger(__name__)


def _coerce_value(value: Any) -> Optional[float]:
    # Text is not a sample even when it parses as a number.
    if value is None or isinstance(value, (bool, str, bytes)):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class Sampler:
    """
    Sample every source once per due tick and push the batch into the registry.

    ``on_tick`` is called by the host at its own (typically much faster)
    cadence; the :class:`ClockGate` decides which ticks actually sample. All
    values of one batch share a single logical index, incremented once per
    committed batch. A failed tick leaves the gate, the index and every
    buffer exactly as they were.
    """

    def __init__(self, source: SignalSource, registry: SeriesRegistry, gate: ClockGate) -> None:
        self._source = source
        self._registry = registry
        self._gate = gate
        self._index = 0

    @property
    def index(self) -> int:
        """Logical index of the last committed batch (0 before the first one)."""
        return self._index

    @property
    def registry(self) -> SeriesRegistry:
        return self._registry

    @property
    def gate(self) -> ClockGate:
        return self._gate

    @property
    def series_count(self) -> int:
        return len(self._registry)

    def on_tick(self, now: float) -> bool:
        """Sample if due at ``now``; return True when a batch was committed."""
        if not self._gate.is_due(now):
            return False

        next_index = self._index + 1
        batch = self._collect_batch(next_index)
        # SourceCountMismatch propagates before any buffer is touched.
        self._registry.ensure_and_push(batch)
        self._gate.mark_sampled(now)
        self._index = next_index
        logger.debug("Committed batch %d with %d values at t=%.6f", next_index, len(batch), now)
        return True

    def _collect_batch(self, index: int) -> List[BatchItem]:
        try:
            raw_values = list(self._source.sample_all())
        except Exception as exc:
            logger.debug("Signal source failed at index %d: %r", index, exc)
            raise SamplingFailed(f"signal source failed: {exc}") from exc

        if not raw_values:
            raise SamplingFailed("signal source returned no values")

        batch: List[BatchItem] = []
        for position, raw in enumerate(raw_values):
            value = _coerce_value(raw)
            if value is None:
                logger.debug("Source %d produced unusable value %r", position, raw)
                raise SamplingFailed(f"source {position} produced no usable value: {raw!r}")
            batch.append((position, index, value))
        return batch
