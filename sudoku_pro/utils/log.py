# -*- coding: utf-8 -*-
"""Logging utils."""
import logging
import os
import sys
from typing import Optional

from sudoku_pro.common.constants import LOG_LEVEL_ENV_VAR

_FORMAT = "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_default_handler: Optional[logging.Handler] = None


def _get_default_handler() -> logging.Handler:
    global _default_handler
    if _default_handler is None:
        _default_handler = logging.StreamHandler(sys.stderr)
        _default_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    return _default_handler


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the package-wide format.

    Args:
        name (`str`): The name of the logger. Defaults to the package logger.
        level (`str`): The log level. If None, read from `SUDOKU_PRO_LOG_LEVEL`
            (default `INFO`).

    Returns:
        `logging.Logger`: The configured logger.
    """
    logger = logging.getLogger(name or "sudoku_pro")
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    logger.setLevel(level.upper())
    handler = _get_default_handler()
    if handler not in logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_log_level(level: str) -> None:
    """Set the level of every logger created through `get_logger`."""
    os.environ[LOG_LEVEL_ENV_VAR] = level.upper()
    for logger in logging.Logger.manager.loggerDict.values():
        if isinstance(logger, logging.Logger) and _get_default_handler() in logger.handlers:
            logger.setLevel(level.upper())
