"""Throttle a fast tick source down to a steady sampling cadence."""

from __future__ import annotations

import math
from typing import Optional

from .errors import ConstructionError


class ClockGate:
    """
    Decide whether enough time has passed since the last committed sample.

    Instants are plain floats in seconds (e.g. ``time.monotonic()``). A gate
    that has never been marked is always due, so the very first tick samples
    immediately.
    """

    __slots__ = ("_min_interval", "_last_sample_at")

    def __init__(self, min_interval: float) -> None:
        try:
            interval = float(min_interval)
        except (TypeError, ValueError) as exc:
            raise ConstructionError(f"min_interval must be a number, got {min_interval!r}") from exc
        if not math.isfinite(interval) or interval < 0.0:
            raise ConstructionError(f"min_interval must be finite and >= 0, got {interval}")
        self._min_interval = interval
        self._last_sample_at: Optional[float] = None

    @property
    def min_interval(self) -> float:
        return self._min_interval

    @property
    def last_sample_at(self) -> Optional[float]:
        """Instant of the last committed sample, or ``None`` if never sampled."""
        return self._last_sample_at

    def is_due(self, now: float) -> bool:
        """Return True when a new sample may be taken at ``now``."""
        if self._last_sample_at is None:
            return True
        return (now - self._last_sample_at) > self._min_interval

    def mark_sampled(self, now: float) -> None:
        """Record ``now`` as the instant of the latest committed sample."""
        self._last_sample_at = float(now)

    def reset(self) -> None:
        """Forget the last sample so the next check is due again."""
        self._last_sample_at = None

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"ClockGate(min_interval={self._min_interval!r}, last_sample_at={self._last_sample_at!r})"
