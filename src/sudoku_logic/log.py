"""Logging setup for command-line use of the solver.

The engine modules only obtain loggers; handlers are installed here by the
entry points.  Console output defaults to INFO, the log file receives the
DEBUG stream with every removed candidate and the pencil-mark tables.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = "sudoku_logic"

_INSTALLED: List[logging.Handler] = []


def configure_logging(
    *,
    console_level: str = "INFO",
    log_file: Optional[str] = "sudoku.log",
    file_level: str = "DEBUG",
    fmt: str = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s",
) -> logging.Logger:
    """Install console and file handlers on the package logger.

    Handlers installed by an earlier call are removed first.  The log file is
    truncated on every call.
    """

    logger = reset_logging()
    formatter = logging.Formatter(fmt)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.getLevelName(console_level.upper()))
    console.setFormatter(formatter)
    _INSTALLED.append(console)

    levels = [console.level]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.getLevelName(file_level.upper()))
        file_handler.setFormatter(formatter)
        _INSTALLED.append(file_handler)
        levels.append(file_handler.level)

    for handler in _INSTALLED:
        logger.addHandler(handler)
    logger.setLevel(min(levels))
    logger.propagate = False
    return logger


def reset_logging() -> logging.Logger:
    """Detach the handlers installed by :func:`configure_logging`."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _INSTALLED:
        logger.removeHandler(handler)
        handler.close()
    _INSTALLED.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


__all__ = ["PACKAGE_LOGGER", "configure_logging", "reset_logging"]
