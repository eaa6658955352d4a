"""
Logging for the client library.

Every module takes its logger from ``get_logger(__name__)``; HTTP calls are
wrapped in ``timed`` so each request leaves one line with its latency.
"""
from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from typing import Generator

from d2client.core.config import get_settings

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    settings = get_settings()
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    return logger


@contextmanager
def timed(logger: logging.Logger, label: str) -> Generator[dict, None, None]:
    """Log *label*, the ``status`` the block stored, and elapsed milliseconds.

    The line is written even when the block raises (status ``failed``).
    """
    info: dict = {}
    start = time.perf_counter()
    try:
        yield info
    finally:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.info("%s -> %s (%d ms)", label, info.get("status", "failed"), elapsed_ms)
