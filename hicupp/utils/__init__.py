"""Utility exports.

Configuration loading lives in :mod:`hicupp.utils.config`; it depends on the
engine, so it is not re-exported here.
"""

from .logging import enable_iteration_logging, get_logger

__all__ = ["enable_iteration_logging", "get_logger"]
