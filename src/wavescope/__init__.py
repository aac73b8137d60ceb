"""WaveScope: sample numeric signal sources and plot their recent history.

The :mod:`wavescope.core` package holds the sampling/windowing logic and has
no Qt dependency; :mod:`wavescope.gui` drives it from a Qt timer and draws the
series with pyqtgraph.
"""

__version__ = "0.1.0"
