"""Centralized logging helpers.

Every module logs through ``logging.getLogger(__name__)`` below the ``hicupp``
namespace. Strategies write one DEBUG line per iteration under
``hicupp.engine.strategies``; :func:`enable_iteration_logging` surfaces them.
"""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "hicupp"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def get_logger(component: str | None = None, level: int | str | None = None) -> logging.Logger:
    """Return the ``hicupp.<component>`` logger with a single stream handler.

    The handler is attached once and the logger starts at INFO. ``level``, when
    given, is applied on every call and accepts names such as ``"debug"``.
    """
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level is not None:
        logger.setLevel(_coerce_level(level))
    return logger


def enable_iteration_logging(level: int | str = logging.DEBUG) -> logging.Logger:
    """Print the per-iteration diagnostics of every strategy."""
    return get_logger("engine.strategies", level)


__all__ = ["enable_iteration_logging", "get_logger"]
