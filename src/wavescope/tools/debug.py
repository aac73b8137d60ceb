"""Opt-in timing hooks enabled with ``WAVESCOPE_DEBUG=1``."""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)

DEBUG_WAVESCOPE = os.getenv("WAVESCOPE_DEBUG", "").lower() in {"1", "true", "yes", "on"}


@contextmanager
def time_block(label: str) -> Iterator[None]:
    """Log the elapsed time of the block at DEBUG level when debugging is enabled."""
    if not DEBUG_WAVESCOPE:
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug("%s took %.3f ms", label, elapsed_ms)
