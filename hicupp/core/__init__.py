"""Core primitives shared by every strategy.

Objectives, the wrapper chain, monitors and the two failure kinds.
"""

from .errors import Cancelled, HicuppError, NoConvergence
from .function import (
    CallableFunction,
    CloningFunctionWrapper,
    Function,
    FunctionWrapper,
    MonitoringFunctionWrapper,
    wrap_for_evaluation,
)
from .monitor import LoggingMonitor, Monitor

__all__ = [
    "Cancelled",
    "HicuppError",
    "NoConvergence",
    "CallableFunction",
    "CloningFunctionWrapper",
    "Function",
    "FunctionWrapper",
    "MonitoringFunctionWrapper",
    "wrap_for_evaluation",
    "LoggingMonitor",
    "Monitor",
]
