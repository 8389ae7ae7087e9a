"""Logging setup shared by the runner scripts."""

from __future__ import annotations

import logging
import sys

DEBUG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
CONSOLE_FORMAT = "%(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Send log records to stdout at the given level name."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    fmt = DEBUG_FORMAT if numeric_level <= logging.DEBUG else CONSOLE_FORMAT
    logging.basicConfig(
        level=numeric_level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )
