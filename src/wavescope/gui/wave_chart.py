"""PyQtGraph chart that draws one series from the registry."""

from __future__ import annotations

from typing import Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ..core.series_registry import SeriesRegistry
from ..render import RenderMemo, axis_range
from .style import DEFAULT_STYLE, ChartStyle


class WaveChart(QWidget):
    """
    Filled line plot of the series at ``position``.

    The chart never writes to the registry. It keeps a :class:`RenderMemo`
    keyed on the buffer's version, so :meth:`refresh` is cheap when nothing
    new was sampled.
    """

    def __init__(
        self,
        registry: SeriesRegistry,
        position: int,
        *,
        window: int = 100,
        value_range: tuple[float, float] = (-100.0, 100.0),
        style: ChartStyle = DEFAULT_STYLE,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._position = position
        self._window = int(window)
        self._value_range = value_range
        self._style = style
        self._memo = RenderMemo()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(5)

        self._title = QLabel(style.title_template.format(number=position + 1), self)
        title_font = QFont()
        title_font.setPointSize(style.title_font_size)
        self._title.setFont(title_font)
        self._title.setAlignment(Qt.AlignHCenter)
        layout.addWidget(self._title)

        self._plot = pg.PlotWidget(self, background=style.background)
        layout.addWidget(self._plot, stretch=1)
        self._configure_plot()

        pen = pg.mkPen(color=style.line_color, width=style.line_width)
        brush = pg.mkBrush(style.rgba(style.line_color, style.fill_alpha))
        self._curve = self._plot.plot([], [], pen=pen, fillLevel=0.0, brush=brush)

    @property
    def position(self) -> int:
        return self._position

    def _configure_plot(self) -> None:
        style = self._style
        item = self._plot.getPlotItem()
        item.setMenuEnabled(False)
        item.hideButtons()
        item.hideAxis("bottom")
        item.showGrid(x=True, y=True, alpha=style.grid_alpha)
        item.setMouseEnabled(x=False, y=False)
        item.enableAutoRange(x=False, y=False)

        left = item.getAxis("left")
        tick_font = QFont()
        tick_font.setPointSize(style.tick_font_size)
        left.setStyle(tickFont=tick_font)
        left.setPen(pg.mkPen(style.rgba(style.axis_color, style.axis_alpha), width=1))

        y_min, y_max = self._value_range
        item.setYRange(y_min, y_max, padding=0.0)

    def invalidate(self) -> None:
        """Force the next :meth:`refresh` to redraw."""
        self._memo.invalidate()

    def refresh(self) -> bool:
        """Redraw if the underlying series changed; return True when drawn."""
        buffer = self._registry.buffer(self._position)
        if buffer is None:
            return False
        version = buffer.version
        if not self._memo.is_stale(version):
            return False

        snapshot = self._registry.view(self._position) or ()
        count = len(snapshot)
        # Snapshots are newest first; pyqtgraph wants ascending x.
        xs = np.fromiter((obs.index for obs in reversed(snapshot)), dtype=np.float64, count=count)
        ys = np.fromiter((obs.value for obs in reversed(snapshot)), dtype=np.float64, count=count)
        self._curve.setData(xs, ys)

        rng = axis_range(snapshot, self._window, self._value_range)
        item = self._plot.getPlotItem()
        item.setXRange(rng.x_min, rng.x_max, padding=0.0)
        item.setYRange(rng.y_min, rng.y_max, padding=0.0)

        self._memo.mark_drawn(version)
        return True
