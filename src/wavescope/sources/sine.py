"""Deterministic sine generator used as the default signal source."""

from __future__ import annotations

import numpy as np


class SineSignalSource:
    """
    Produce one sine value per channel on every call.

    The phase advances by one step per call and wraps at ``period_samples``;
    channel ``n`` is shifted by ``n`` steps so stacked charts stay
    distinguishable.
    """

    def __init__(self, channels: int = 1, amplitude: float = 100.0, period_samples: int = 100) -> None:
        if channels <= 0:
            raise ValueError("channels must be positive")
        if period_samples <= 0:
            raise ValueError("period_samples must be positive")
        self.channels = int(channels)
        self.amplitude = float(amplitude)
        self.period_samples = int(period_samples)
        self._offsets = np.arange(self.channels, dtype=np.float64)
        self._step = 0

    @property
    def step(self) -> int:
        return self._step

    def sample_all(self) -> list[float]:
        self._step = (self._step + 1) % self.period_samples
        phase = (self._offsets + self._step) * 2.0 * np.pi / self.period_samples
        return (self.amplitude * np.sin(phase)).tolist()
