"""Main window: drives the sampler from a Qt timer and lays out the charts."""

from __future__ import annotations

import logging
import time

from PySide6.QtCore import QTimer, Qt, Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QStackedWidget,
    QWidget,
)

from ..config.runtime import WaveScopeConfig
from ..core.errors import SamplingFailed, SourceCountMismatch
from ..core.rate import BatchRateMonitor
from ..core.sampler import Sampler
from ..tools.debug import time_block
from .style import DEFAULT_STYLE, ChartStyle
from .wave_chart import WaveChart

STATUS_EVERY_N_SAMPLES = 50
ERROR_MESSAGE_MS = 2000


class MainWindow(QMainWindow):
    """Scrolling grid of wave charts fed by a :class:`Sampler`."""

    def __init__(
        self,
        sampler: Sampler,
        config: WaveScopeConfig | None = None,
        style: ChartStyle = DEFAULT_STYLE,
    ) -> None:
        super().__init__()
        self.setWindowTitle("WaveScope")

        self._sampler = sampler
        self._config = config or WaveScopeConfig()
        self._style = style
        self._logger = logging.getLogger(__name__)
        self._charts: list[WaveChart] = []
        self._rate = BatchRateMonitor()

        self._loading_label = QLabel(self.tr("Loading..."))
        self._loading_label.setAlignment(Qt.AlignCenter)

        self._grid_container = QWidget()
        self._grid = QGridLayout(self._grid_container)
        self._grid.setContentsMargins(20, 20, 20, 20)
        self._grid.setHorizontalSpacing(15)
        self._grid.setVerticalSpacing(20)
        self._grid.setAlignment(Qt.AlignTop)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setWidget(self._grid_container)

        self._stack = QStackedWidget()
        self._stack.addWidget(self._loading_label)
        self._stack.addWidget(self._scroll)
        self.setCentralWidget(self._stack)

        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._timer.setInterval(self._config.tick_interval_ms)
        self._timer.timeout.connect(self._on_tick)

    def start(self) -> None:
        self._logger.info(
            "Ticking every %d ms, sampling at most every %.1f ms",
            self._timer.interval(),
            self._config.sample_interval_ms,
        )
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.stop()
        super().closeEvent(event)

    @Slot()
    def _on_tick(self) -> None:
        now = time.monotonic()
        try:
            sampled = self._sampler.on_tick(now)
        except (SamplingFailed, SourceCountMismatch) as exc:
            self._logger.warning("Sampling tick failed: %s", exc)
            self.statusBar().showMessage(f"Sampling failed: {exc}", ERROR_MESSAGE_MS)
            return
        if not sampled:
            return

        self._rate.record(now, self._sampler.index)
        if not self._charts:
            self._build_charts()

        with time_block("redraw charts"):
            for chart in self._charts:
                chart.refresh()

        if self._sampler.index % STATUS_EVERY_N_SAMPLES == 0:
            self.statusBar().showMessage(
                f"{self._sampler.series_count} series | index {self._sampler.index} | "
                f"{self._rate.batches_per_second:.1f} batches/s"
            )

    def _build_charts(self) -> None:
        registry = self._sampler.registry
        per_row = max(1, int(self._config.items_per_row))
        value_range = (self._config.value_min, self._config.value_max)
        row_height = int(self._config.chart_height)

        for position in range(len(registry)):
            chart = WaveChart(
                registry,
                position,
                window=self._config.window_size,
                value_range=value_range,
                style=self._style,
                parent=self._grid_container,
            )
            chart.setFixedHeight(row_height)
            row, col = divmod(position, per_row)
            self._grid.addWidget(chart, row, col)
            self._charts.append(chart)

        # Pad the last row so charts keep the same width as full rows.
        remainder = len(self._charts) % per_row
        if remainder:
            last_row = len(self._charts) // per_row
            for col in range(remainder, per_row):
                self._grid.addWidget(QWidget(self._grid_container), last_row, col)
        for col in range(per_row):
            self._grid.setColumnStretch(col, 1)

        self._stack.setCurrentWidget(self._scroll)
        self._logger.info("Showing %d chart(s), %d per row", len(self._charts), per_row)
