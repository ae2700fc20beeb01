"""Opt-in timing instrumentation for frame computation."""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


def debug_enabled() -> bool:
    """Return True when ``SENSORVIEW_DEBUG`` asks for timing output."""
    return os.getenv("SENSORVIEW_DEBUG", "").lower() in {"1", "true", "yes", "on"}


@contextmanager
def time_block(label: str, *, log: logging.Logger | None = None) -> Iterator[None]:
    """
    Log how long the wrapped block took, at DEBUG level.

    Costs a single environment lookup when instrumentation is off.
    """
    if not debug_enabled():
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        (log or logger).debug("%s took %.3f ms", label, elapsed_ms)
