"""Shared value types for the sampling core."""

from typing import NamedTuple


class Observation(NamedTuple):
    """One sample of one series: a logical ``index`` and its ``value``."""

    index: int
    value: float


class BatchEntry(NamedTuple):
    position: int
    index: int
    value: float
