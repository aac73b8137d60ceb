"""Toolkit-independent pieces of chart rendering: axis ranges and redraw memo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .core.models import Observation


@dataclass(frozen=True)
class AxisRange:
    x_min: float
    x_max: float
    y_min: float
    y_max: float


def axis_range(
    snapshot: Sequence[Observation],
    window: int,
    value_range: Tuple[float, float],
) -> AxisRange:
    """
    Scroll the x axis so the newest index sits at the right edge.

    The x span is ``window`` logical indices ending at the front observation
    of ``snapshot`` (newest first); the y span is the fixed ``value_range``.
    """
    newest = snapshot[0].index if snapshot else 0
    y_min, y_max = value_range
    return AxisRange(x_min=float(newest - window), x_max=float(newest), y_min=float(y_min), y_max=float(y_max))


class RenderMemo:
    """Remember which buffer version was last drawn so unchanged series are skipped."""

    __slots__ = ("_drawn_version",)

    def __init__(self) -> None:
        self._drawn_version: Optional[int] = None

    def is_stale(self, version: int) -> bool:
        return self._drawn_version != version

    def mark_drawn(self, version: int) -> None:
        self._drawn_version = version

    def invalidate(self) -> None:
        self._drawn_version = None
