"""Desktop GUI built with PySide6 and pyqtgraph.

:class:`~wavescope.gui.main_window.MainWindow` owns the tick timer and the
chart grid; each :class:`~wavescope.gui.wave_chart.WaveChart` only reads
snapshots from the sampler's registry.
"""
