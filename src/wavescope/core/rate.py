"""Committed-batch rate, measured from the sampler's logical index."""

from __future__ import annotations

from collections import deque
from typing import Deque, Tuple

DEFAULT_WINDOW = 100


class BatchRateMonitor:
    """
    Report how many batches per second the sampler actually commits.

    Each :meth:`record` call stores the host instant and the sampler's index
    after a committed tick. The rate is the index advance over the time span
    of the retained window, so it reflects the gate-throttled cadence rather
    than the faster host tick.
    """

    __slots__ = ("_points",)

    def __init__(self, window: int = DEFAULT_WINDOW) -> None:
        if window < 2:
            raise ValueError("window must keep at least two points")
        self._points: Deque[Tuple[float, int]] = deque(maxlen=window)

    def record(self, now: float, index: int) -> None:
        if self._points and index <= self._points[-1][1]:
            # The sampler never reuses an index; treat a lower one as a restart.
            self._points.clear()
        self._points.append((float(now), int(index)))

    @property
    def batches_per_second(self) -> float:
        if len(self._points) < 2:
            return 0.0
        (t0, i0), (t1, i1) = self._points[0], self._points[-1]
        if t1 <= t0:
            return 0.0
        return (i1 - i0) / (t1 - t0)
