"""Package logger for Notepad TUI.

Textual owns the terminal while the app runs, so log records go to a file.
Nothing is configured on import; call ``setup_logging()`` from the entry point.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("notepad_tui")
logger.addHandler(logging.NullHandler())

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str | int = "WARNING", path: Path | None = None) -> None:
    """Route package log records to *path* at *level*.

    Unknown level names fall back to WARNING.  If the log file cannot be
    opened, logging stays silent rather than failing the app.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if path is None:
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    for existing in list(logger.handlers):
        if isinstance(existing, logging.FileHandler):
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
