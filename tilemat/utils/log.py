"""Logger configuration for command line entry points."""

import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV = "TILEMAT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Loggers that already carry our handler
_LOGGER_INITIALIZED: dict[str, bool] = {}


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level!r}")
        return resolved
    return level


def get_logger(
    name: str = "tilemat",
    level: Optional[Union[int, str]] = None,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    stream=None,
) -> logging.Logger:
    """
    Get a logger, attaching a stderr handler the first time ``name`` is seen.

    Args:
        name: Logger name (default 'tilemat', the package root)
        level: Level name or number; falls back to $TILEMAT_LOG_LEVEL, then WARNING
        fmt, datefmt: Formatting for log records
        stream: Handler stream (default sys.stderr)

    Returns:
        Configured logger
    """
    resolved = _resolve_level(level)
    logger = logging.getLogger(name)
    if not _LOGGER_INITIALIZED.get(name, False):
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        logger.addHandler(handler)
        logger.propagate = False
        _LOGGER_INITIALIZED[name] = True

    logger.setLevel(resolved)
    return logger


def reset_logger(name: Optional[str] = None) -> None:
    """Remove handlers added by get_logger (all tracked loggers if name is None)."""
    names = list(_LOGGER_INITIALIZED) if name is None else [name]

    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
        _LOGGER_INITIALIZED.pop(n, None)
