"""Logging setup for articlekit.

Everything logs through the ``articlekit`` logger (library modules use
``logging.getLogger(__name__)`` and nest under it).  Progress lines and
slug-collision warnings go to stderr; :func:`set_console_level` tunes how
chatty that stream is, and :func:`configure_file_logging` mirrors the run
into a timestamped file for later reading.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

from articlekit.errors import ActionableError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_DIR = "data/logs"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("articlekit")
logger.setLevel(logging.INFO)

_formatter = logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT)

_stderr_handler = logging.StreamHandler(sys.stderr)
_stderr_handler.setLevel(logging.INFO)
_stderr_handler.setFormatter(_formatter)
logger.addHandler(_stderr_handler)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ActionableError.validation(
            field_name="log_level",
            reason=f"'{level}' is not one of {', '.join(LOG_LEVELS)}",
        )
    return logging.getLevelName(name)


def set_console_level(level: int | str) -> int:
    """Set the stderr threshold and return it as a numeric level.

    Lowering the threshold below the logger's own level lowers the logger
    too, otherwise DEBUG records would be dropped before reaching stderr.
    Raising it leaves the logger alone so a file handler keeps its detail.
    """
    numeric = _resolve_level(level)
    _stderr_handler.setLevel(numeric)
    if numeric < logger.level:
        logger.setLevel(numeric)
    return numeric


def console_level() -> int:
    """Current stderr threshold."""
    return _stderr_handler.level


def configure_file_logging(
    log_dir: str = DEFAULT_LOG_DIR,
    *,
    level: int | str = logging.INFO,
) -> logging.FileHandler:
    """Mirror log records into ``<log_dir>/articlekit_<timestamp>.log``.

    The directory is created if needed.  The handler is returned so the
    caller can detach and close it.
    """
    numeric = _resolve_level(level)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    stamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    file_handler = logging.FileHandler(str(log_path / f"articlekit_{stamp}.log"), encoding="utf-8")
    file_handler.setLevel(numeric)
    file_handler.setFormatter(_formatter)

    if numeric < logger.level:
        logger.setLevel(numeric)

    logger.addHandler(file_handler)
    return file_handler


__all__ = [
    "DEFAULT_LOG_DIR",
    "LOG_LEVELS",
    "configure_file_logging",
    "console_level",
    "logger",
    "set_console_level",
]
