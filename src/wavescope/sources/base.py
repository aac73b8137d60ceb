"""The signal source capability consumed by :class:`~wavescope.core.Sampler`."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class SignalSource(Protocol):
    """Anything that can read the current value of every tracked source."""

    def sample_all(self) -> Sequence[float]:  # pragma: no cover - protocol
        ...


class CallableSource:
    """Adapt a zero-argument callable into a :class:`SignalSource`."""

    def __init__(self, fn: Callable[[], Sequence[float]]) -> None:
        self._fn = fn

    def sample_all(self) -> Sequence[float]:
        return self._fn()
