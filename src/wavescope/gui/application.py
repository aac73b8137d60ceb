"""Qt application entry point for the WaveScope desktop GUI.

This module parses the command line, configures logging, builds the sampling
core from :class:`~wavescope.config.WaveScopeConfig`, and starts the Qt event
loop. ``python main.py`` and the ``wavescope`` console script both end up in
``main()`` here.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Tuple

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from ..config.runtime import WaveScopeConfig, load_config
from ..core.clock_gate import ClockGate
from ..core.sampler import Sampler
from ..core.series_registry import SeriesRegistry
from ..dataio.wav_export import write_sine_wav
from ..sources.sine import SineSignalSource
from .main_window import MainWindow

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="WaveScope live waveform viewer")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML configuration file (missing files fall back to defaults)",
    )
    parser.add_argument(
        "--sample-interval-ms",
        type=float,
        default=None,
        help="Minimum time between samples in milliseconds (default: 10)",
    )
    parser.add_argument(
        "--tick-hz",
        type=float,
        default=None,
        help="UI timer rate in Hz (default: 120)",
    )
    parser.add_argument(
        "--channels",
        type=int,
        default=None,
        help="Number of synthetic sine channels (default: 1)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Observations kept per series (default: 100)",
    )
    parser.add_argument(
        "--items-per-row",
        type=int,
        default=None,
        help="Charts per grid row (default: 3)",
    )
    parser.add_argument(
        "--export-wav",
        type=str,
        default=None,
        metavar="PATH",
        help="Write a 5 s 440 Hz test tone to PATH and exit",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: INFO)",
    )
    return parser


def _parse_cli_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = _build_arg_parser()
    args, qt_args = parser.parse_known_args(argv[1:])
    qt_argv = [argv[0], *qt_args]
    return args, qt_argv


def resolve_config(args: argparse.Namespace) -> WaveScopeConfig:
    """Load the config file named on the command line and apply flag overrides."""
    cfg = load_config(args.config)
    overrides = {
        "sample_interval_ms": args.sample_interval_ms,
        "tick_hz": args.tick_hz,
        "channels": args.channels,
        "history_capacity": args.capacity,
        "items_per_row": args.items_per_row,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(cfg, name, value)
    return cfg.sanitized()


def build_sampler(config: WaveScopeConfig) -> Sampler:
    source = SineSignalSource(
        channels=config.channels,
        amplitude=config.amplitude,
        period_samples=config.period_samples,
    )
    registry = SeriesRegistry(config.history_capacity)
    gate = ClockGate(config.sample_interval_s)
    return Sampler(source, registry, gate)


def create_app(
    argv: list[str] | None = None,
    *,
    config: WaveScopeConfig | None = None,
) -> Tuple[QApplication, MainWindow]:
    """
    Create the QApplication and the main WaveScope window.

    Returns
    -------
    app:
        The QApplication instance (owned by caller).
    window:
        The main window, not yet shown or started.
    """
    qt_args = argv if argv is not None else sys.argv
    cfg = config or WaveScopeConfig()
    app = QApplication.instance() or QApplication(qt_args)
    pg.setConfigOptions(antialias=True)

    window = MainWindow(build_sampler(cfg), config=cfg)
    return app, window


def main(argv: list[str] | None = None) -> None:
    raw_argv = argv if argv is not None else sys.argv
    args, qt_argv = _parse_cli_args(list(raw_argv))
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.export_wav:
        write_sine_wav(args.export_wav)
        return

    config = resolve_config(args)
    app, win = create_app(qt_argv, config=config)
    win.resize(1200, int(config.chart_height) + 120)
    win.show()
    win.start()
    raise SystemExit(app.exec())


if __name__ == "__main__":
    main()
