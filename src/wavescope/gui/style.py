"""Static chart styling shared by every :class:`~wavescope.gui.wave_chart.WaveChart`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class ChartStyle:
    line_color: RGB = (0, 175, 255)
    line_width: float = 2.0
    fill_alpha: float = 0.175
    grid_alpha: float = 0.1
    axis_color: RGB = (0, 0, 255)
    axis_alpha: float = 0.45
    tick_font_size: int = 15
    title_font_size: int = 22
    title_template: str = "Wave {number}"
    background: str = "w"

    def rgba(self, color: RGB, alpha: float) -> Tuple[int, int, int, int]:
        a = int(round(max(0.0, min(1.0, alpha)) * 255))
        return (color[0], color[1], color[2], a)


DEFAULT_STYLE = ChartStyle()
