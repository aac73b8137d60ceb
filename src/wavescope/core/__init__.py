"""Sampling core: clock gate, bounded series buffers, registry and sampler.

Nothing in this package imports Qt. The GUI drives :class:`Sampler` from a
timer and only reads snapshots back out of the :class:`SeriesRegistry`.
"""

from .clock_gate import ClockGate
from .errors import ConstructionError, SamplingFailed, SourceCountMismatch, WaveScopeError
from .models import Observation
from .rate import BatchRateMonitor
from .sampler import Sampler
from .series_buffer import SeriesBuffer
from .series_registry import SeriesRegistry

__all__ = [
    "ClockGate",
    "Observation",
    "SeriesBuffer",
    "SeriesRegistry",
    "Sampler",
    "BatchRateMonitor",
    "WaveScopeError",
    "ConstructionError",
    "SourceCountMismatch",
    "SamplingFailed",
]
