"""Application-wide logger writing to platformdirs user_log_dir.

The terminal belongs to the TUI, so log records only ever go to a
rotating file.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "taskdeck"
_LOG_FILE = "taskdeck.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_LEVEL_ENV = "TASKDECK_LOG_LEVEL"

_logger: logging.Logger | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, initialising it on first call.

    Args:
        name: Optional child name, e.g. ``"timer"`` gives ``taskdeck.timer``
    """
    global _logger
    if _logger is None:
        _logger = _configure()
    if name:
        return _logger.getChild(name)
    return _logger


def _configure() -> logging.Logger:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    level_name = os.getenv(_LEVEL_ENV, "DEBUG").upper()
    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(getattr(logging, level_name, logging.DEBUG))
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger
