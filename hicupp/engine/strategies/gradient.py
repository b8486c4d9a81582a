"""Gradient ascent strategy with finite-difference gradients."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np

from hicupp.core.errors import NoConvergence
from hicupp.core.function import Function, MonitoringFunctionWrapper, wrap_for_evaluation
from hicupp.core.monitor import Monitor
from hicupp.engine.candidates import generate_random_axis
from hicupp.engine.interfaces import Strategy
from hicupp.engine.parameters import PRECISION, GradientAscentParameters
from hicupp.engine.types import IterationStats, Solution

_LOGGER = logging.getLogger(__name__)

STEP = 1e-4


@dataclass
class GradientAscentStrategy(Strategy):
    """Independent walkers that climb along the normalized gradient.

    Each walker estimates its gradient by one-sided finite differences, then
    moves ``learning_rate`` along the unit gradient. A walker converges when
    the step would leave the [-1, 1] box, when the objective turns negative,
    when its gradient vanishes, or when the value changes by less than 1e-4.
    Converged walkers are never moved again.
    """

    parameters: GradientAscentParameters = field(default_factory=GradientAscentParameters)
    seed: int | None = None

    history: list[IterationStats] = field(default_factory=list, init=False, repr=False)
    solutions: list[Solution] = field(default_factory=list, init=False, repr=False)
    _rng: np.random.Generator = field(init=False, repr=False)
    _best: Solution | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, GradientAscentParameters):
            raise TypeError(
                f"GradientAscentStrategy requires GradientAscentParameters, got {type(self.parameters).__name__}"
            )
        self._rng = np.random.default_rng(self.seed)

    def _estimate_gradient(self, solution: Solution, wrapper: MonitoringFunctionWrapper) -> np.ndarray:
        n = len(solution.x)
        gradient = np.zeros(n)
        for j in range(n):
            shifted = solution.x.copy()
            shifted[j] += STEP
            forward = wrapper.evaluate(shifted)
            if forward >= solution.fx:
                gradient[j] = (forward - solution.fx) / STEP
                continue
            shifted[j] = solution.x[j] - STEP
            backward = wrapper.evaluate(shifted)
            gradient[j] = (solution.fx - backward) / STEP
        return gradient

    def _step(self, solution: Solution, wrapper: MonitoringFunctionWrapper) -> None:
        norm = float(np.linalg.norm(solution.gradient))
        if norm == 0.0:
            solution.converged = True
            return
        solution.gradient = solution.gradient / norm

        x = solution.x + self.parameters.learning_rate * solution.gradient
        if np.any(np.abs(x) > 1.0):
            solution.converged = True
            return

        fx = wrapper.evaluate(x)
        if fx < 0.0:
            solution.converged = True
            return

        settled = abs(fx - solution.fx) < PRECISION
        solution.x, solution.fx = x, fx
        if settled:
            solution.converged = True

    def maximize(self, function: Function, monitor: Monitor | None = None) -> np.ndarray:
        params = self.parameters
        wrapper = wrap_for_evaluation(function, monitor)
        n = function.argument_count
        self.history = []

        self.solutions = []
        for _ in range(params.number_of_solutions):
            x = generate_random_axis(n, self._rng)
            self.solutions.append(Solution(x=x, fx=wrapper.evaluate(x)))

        best = self._best = max(self.solutions, key=lambda s: s.fx).copy()
        equals = 0

        for iteration in range(1, params.max_iterations + 1):
            if monitor is not None:
                monitor.continuing()
                monitor.iteration_started(iteration)

            active = [s for s in self.solutions if not s.converged]
            for solution in active:
                solution.gradient = self._estimate_gradient(solution, wrapper)
            for solution in active:
                self._step(solution, wrapper)

            candidate = max(self.solutions, key=lambda s: s.fx)
            improvement = candidate.fx - best.fx
            if improvement > 0.0:
                best = self._best = candidate.copy()
                equals = 0
            else:
                equals += 1

            converged = sum(1 for s in self.solutions if s.converged)
            self.history.append(
                IterationStats(
                    iteration=iteration,
                    best=best.fx,
                    spread=improvement,
                    population=len(self.solutions),
                    evaluations=wrapper.evaluations,
                    converged=converged,
                )
            )
            line = f"(iter = {iteration}) (converged = {converged}/{len(self.solutions)}) {best}"
            _LOGGER.debug(line)
            if monitor is not None:
                monitor.write_line(line)

            if converged == len(self.solutions):
                break
            if params.converge_at_max_equals and equals >= params.max_equals:
                break

        if not any(s.converged for s in self.solutions):
            raise NoConvergence("No solutions converged.")

        return best.x.copy()

    def state(self) -> Mapping[str, object]:
        return {
            "seed": self.seed,
            "iterations": len(self.history),
            "converged": sum(1 for s in self.solutions if s.converged),
            "best_score": self._best.fx if self._best is not None else float("-inf"),
        }
