"""Objective surfaces and the wrapper chain every strategy evaluates through.

A :class:`Function` maps a candidate axis (a float64 vector of fixed length)
to a scalar score. Strategies never call a user's function directly; they
evaluate through ``MonitoringFunctionWrapper(CloningFunctionWrapper(f), monitor)``
so that:

- the objective always receives a private copy of the strategy's buffer, and
- every evaluation is preceded by exactly one cancellation check and one
  progress increment on the monitor.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from hicupp.core.monitor import Monitor


@runtime_checkable
class Function(Protocol):
    """Scalar objective over n-dimensional axes.

    The caller owns ``x``. Implementations must not keep a mutable alias to it
    past the call.
    """

    @property
    def argument_count(self) -> int:
        """Return the dimensionality ``n`` accepted by :meth:`evaluate`."""

    def evaluate(self, x: np.ndarray) -> float:
        """Return the objective value at ``x``."""


class FunctionWrapper:
    """A Function that decorates another Function."""

    def __init__(self, inner: Function) -> None:
        self._inner = inner

    @property
    def inner(self) -> Function:
        return self._inner

    @property
    def argument_count(self) -> int:
        return self._inner.argument_count

    def evaluate(self, x: np.ndarray) -> float:
        return self._inner.evaluate(x)


class CloningFunctionWrapper(FunctionWrapper):
    """Hand the inner function a fresh copy of every argument."""

    def evaluate(self, x: np.ndarray) -> float:
        return self._inner.evaluate(np.array(x, dtype=np.float64, copy=True))


class MonitoringFunctionWrapper(FunctionWrapper):
    """Poll the monitor for cancellation and count progress before delegating."""

    def __init__(self, inner: Function, monitor: Monitor | None = None) -> None:
        super().__init__(inner)
        self._monitor = monitor
        self.evaluations = 0

    @property
    def monitor(self) -> Monitor | None:
        return self._monitor

    def evaluate(self, x: np.ndarray) -> float:
        if self._monitor is not None:
            self._monitor.continuing()
            self._monitor.evaluation_started()
        self.evaluations += 1
        return float(self._inner.evaluate(x))


@dataclass(frozen=True, slots=True)
class CallableFunction:
    """Adapt a plain ``callable(x) -> float`` to the :class:`Function` protocol."""

    fn: Callable[[np.ndarray], float]
    dimensions: int

    def __post_init__(self) -> None:
        if self.dimensions <= 0:
            raise ValueError("dimensions must be positive")

    @property
    def argument_count(self) -> int:
        return self.dimensions

    def evaluate(self, x: np.ndarray) -> float:
        return float(self.fn(x))


def wrap_for_evaluation(function: Function, monitor: Monitor | None) -> MonitoringFunctionWrapper:
    """Build the standard evaluation chain used by all strategies."""
    return MonitoringFunctionWrapper(CloningFunctionWrapper(function), monitor)


__all__ = [
    "Function",
    "FunctionWrapper",
    "CloningFunctionWrapper",
    "MonitoringFunctionWrapper",
    "CallableFunction",
    "wrap_for_evaluation",
]
