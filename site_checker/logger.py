# site_checker/logger.py
"""Logging setup for SiteChecker.

Everything logs through one named logger::

    from site_checker.logger import logger
    logger.info("Crawl started: %s", base_url)

The console handler prints short ``LEVEL | message`` lines so crawl progress
stays readable next to the click summary; the optional log file gets full
timestamps and rotates at 5 MB.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

LOGGER_NAME: Final[str] = "SiteChecker"
CONSOLE_FORMAT: Final[str] = "%(levelname)-7s | %(message)s"
FILE_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LevelT = Union[int, str]


def _console_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(path: Union[str, Path], fmt: str) -> logging.Handler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: Union[str, Path, None] = None,
    console_format: str = CONSOLE_FORMAT,
    file_format: str = FILE_FORMAT,
) -> logging.Logger:
    """(Re)build the handlers of the SiteChecker logger.

    Existing handlers are closed and replaced, so calling this twice never
    duplicates output. With *log_file* None only the console is used.
    """
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    lg.setLevel(level)
    lg.addHandler(_console_handler(console_format))
    if log_file is not None:
        lg.addHandler(_file_handler(log_file, file_format))
    lg.propagate = False
    return lg


def init_logging(level: _LevelT = "INFO", log_file: Union[str, Path, None] = None) -> logging.Logger:
    """Entry point used by the CLI group."""
    return configure(level=level, log_file=log_file)


def set_level(level: _LevelT) -> None:
    """Change the level without touching the handlers (used by ``--verbose``)."""
    logging.getLogger(LOGGER_NAME).setLevel(level)


logger: logging.Logger = logging.getLogger(LOGGER_NAME)

__all__ = ["logger", "configure", "init_logging", "set_level", "LOGGER_NAME"]
