"""Shared test fixtures and helpers for hicupp tests."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from hicupp.core.errors import Cancelled
from hicupp.core.function import CallableFunction


class CountingFunction:
    """Function that records every argument it receives."""

    def __init__(self, fn: Callable[[np.ndarray], float], dimensions: int) -> None:
        self._fn = fn
        self._dimensions = dimensions
        self.calls: list[np.ndarray] = []

    @property
    def argument_count(self) -> int:
        return self._dimensions

    def evaluate(self, x: np.ndarray) -> float:
        self.calls.append(x)
        return float(self._fn(x))


class RecordingMonitor:
    """Monitor that records every callback and can request cancellation.

    ``cancel_at_iteration`` requests cancellation as soon as that iteration
    starts; ``cancel_after_evaluations`` once that many evaluations started.
    """

    def __init__(
        self,
        *,
        cancel_at_iteration: int | None = None,
        cancel_after_evaluations: int | None = None,
    ) -> None:
        self.cancel_at_iteration = cancel_at_iteration
        self.cancel_after_evaluations = cancel_after_evaluations
        self.cancel_requested = False
        self.evaluations = 0
        self.checks = 0
        self.iterations: list[int] = []
        self.lines: list[str] = []
        self.evaluations_at_cancel: int | None = None
        self.on_iteration: Callable[[int], None] | None = None

    def continuing(self) -> None:
        self.checks += 1
        if self.cancel_requested:
            raise Cancelled()

    def iteration_started(self, iteration: int) -> None:
        self.iterations.append(iteration)
        if self.on_iteration is not None:
            self.on_iteration(iteration)
        if self.cancel_at_iteration is not None and iteration == self.cancel_at_iteration:
            self._request_cancel()

    def evaluation_started(self) -> None:
        self.evaluations += 1
        if self.cancel_after_evaluations is not None and self.evaluations >= self.cancel_after_evaluations:
            self._request_cancel()

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def _request_cancel(self) -> None:
        if not self.cancel_requested:
            self.cancel_requested = True
            self.evaluations_at_cancel = self.evaluations


@pytest.fixture
def recording_monitor() -> RecordingMonitor:
    return RecordingMonitor()


@pytest.fixture
def monitor_factory() -> type[RecordingMonitor]:
    return RecordingMonitor


@pytest.fixture
def counting_factory() -> type[CountingFunction]:
    return CountingFunction


@pytest.fixture
def concave_center() -> np.ndarray:
    return np.array([0.3, -0.2])


@pytest.fixture
def concave_function(concave_center: np.ndarray) -> CallableFunction:
    """Strictly concave bowl with its maximum of 1.0 at ``concave_center``."""

    def fn(x: np.ndarray) -> float:
        return 1.0 - 1000.0 * float(np.sum((x - concave_center) ** 2))

    return CallableFunction(fn=fn, dimensions=2)


@pytest.fixture
def linear_function() -> CallableFunction:
    """Positive linear objective over the [-1, 1] box, largest at x[0] = 1."""

    def fn(x: np.ndarray) -> float:
        return 5.0 + float(x[0]) + 0.5 * float(x[1])

    return CallableFunction(fn=fn, dimensions=3)


@pytest.fixture
def constant_function() -> CallableFunction:
    return CallableFunction(fn=lambda x: 2.5, dimensions=4)
