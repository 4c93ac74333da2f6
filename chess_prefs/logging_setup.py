"""Logging configuration shared by the command line and the dialog."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
PACKAGE_LOGGER = "chess_prefs"

_installed: List[logging.Handler] = []


def reset_logging() -> None:
    """Remove the handlers added by :func:`configure_logging`."""

    root = logging.getLogger(PACKAGE_LOGGER)
    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()
    root.setLevel(logging.NOTSET)


def configure_logging(level: int | str = logging.INFO, log_file: Optional[Path] = None) -> logging.Logger:
    """Attach console and optional rotating file handlers to the package logger.

    Calling this again replaces the handlers installed by the previous call.
    """

    reset_logging()
    root = logging.getLogger(PACKAGE_LOGGER)

    formatter = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    _installed.append(console)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        _installed.append(file_handler)

    for handler in _installed:
        root.addHandler(handler)
    root.setLevel(level)
    return root


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "configure_logging", "reset_logging"]
