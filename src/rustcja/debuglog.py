"""Best-effort debug log file.

stderr carries the translated diagnostics, so nothing is logged to the
terminal; records go to an append-only file instead. If the file cannot
be opened the wrapper runs without it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rustcja.config import Settings

PACKAGE_LOGGER = "rustcja"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _QuietFileHandler(logging.FileHandler):
    """FileHandler that drops records it fails to write."""

    def handleError(self, record: logging.LogRecord) -> None:
        pass


def setup_debug_logging(settings: Settings) -> logging.Handler | None:
    """Attach the debug file handler to the package logger.

    Returns the handler, or None if logging is disabled or the file is
    not writable. Calling it again with the same path is a no-op.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        # Unknown names come back as "Level <name>"
        level = logging.DEBUG
    logger.setLevel(level)
    logger.propagate = False

    path = settings.debug_log_path
    if path is None:
        return None

    path = Path(path).expanduser().absolute()
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path:
            return handler

    try:
        handler = _QuietFileHandler(path, mode="a", encoding="utf-8")
    except OSError:
        return None

    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    return handler
