"""Exceptions raised by the sampling core."""

from __future__ import annotations


class WaveScopeError(Exception):
    """Base class for errors raised by :mod:`wavescope.core`."""


class ConstructionError(WaveScopeError, ValueError):
    """A buffer, registry or gate was built with unusable parameters."""


class SourceCountMismatch(WaveScopeError, ValueError):
    """A batch does not match the number of series already established."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"expected a batch of {expected} values, got {got}")
        self.expected = expected
        self.got = got


class SamplingFailed(WaveScopeError, RuntimeError):
    """The signal source could not produce a complete batch for this tick."""


__all__ = [
    "WaveScopeError",
    "ConstructionError",
    "SourceCountMismatch",
    "SamplingFailed",
]
