"""Package logger for Hot Tabs.

The Textual screen owns stdout/stderr while the app runs, so log records
go nowhere unless :func:`configure_logging` attaches a file handler.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("hot_tabs")
logger.addHandler(logging.NullHandler())

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(path: Path, level: int = logging.DEBUG) -> logging.Handler:
    """Send package log records to *path* and return the new handler."""
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
