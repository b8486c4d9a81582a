"""hicupp public interface (surfaces only).

Maximize a black-box objective over n-dimensional axes with one of four
interchangeable algorithms via :func:`hicupp.maximize`.
"""

from __future__ import annotations

from .core import (
    CallableFunction,
    Cancelled,
    Function,
    LoggingMonitor,
    Monitor,
    NoConvergence,
)
from .engine import Algorithm, algorithm_names, maximize

__all__ = [
    "Algorithm",
    "CallableFunction",
    "Cancelled",
    "Function",
    "LoggingMonitor",
    "Monitor",
    "NoConvergence",
    "algorithm_names",
    "maximize",
]

__version__ = "0.1.0"
