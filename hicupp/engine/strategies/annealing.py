"""Simulated annealing strategy over a population of n+1 candidates."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np

from hicupp.core.errors import NoConvergence
from hicupp.core.function import Function, wrap_for_evaluation
from hicupp.core.monitor import Monitor
from hicupp.engine.candidates import convergence_gap, format_axis, generate_random_axis
from hicupp.engine.interfaces import Strategy
from hicupp.engine.parameters import MIN_TEMPERATURE, PRECISION, AnnealingParameters
from hicupp.engine.types import IterationStats

_LOGGER = logging.getLogger(__name__)


@dataclass
class AnnealingStrategy(Strategy):
    """Population-based simulated annealing.

    The temperature starts at 1 and decays geometrically. Every iteration
    perturbs each candidate by a random unit step scaled by the temperature,
    clamps to the [-1, 1] box and accepts the perturbed population when its
    best value improves on the incumbent's, or otherwise with Metropolis
    probability ``exp(-delta / temperature)``. The all-time best axis is
    tracked independently of acceptance.
    """

    parameters: AnnealingParameters = field(default_factory=AnnealingParameters)
    seed: int | None = None

    history: list[IterationStats] = field(default_factory=list, init=False, repr=False)
    _rng: np.random.Generator = field(init=False, repr=False)
    _best_score: float = field(default=float("-inf"), init=False, repr=False)
    _accepted: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, AnnealingParameters):
            raise TypeError(
                f"AnnealingStrategy requires AnnealingParameters, got {type(self.parameters).__name__}"
            )
        self._rng = np.random.default_rng(self.seed)

    def _perturb(self, population: np.ndarray, temperature: float) -> np.ndarray:
        n = population.shape[1]
        steps = np.array([generate_random_axis(n, self._rng, temperature) for _ in range(len(population))])
        return np.clip(population + steps, -1.0, 1.0)

    def maximize(self, function: Function, monitor: Monitor | None = None) -> np.ndarray:
        params = self.parameters
        wrapper = wrap_for_evaluation(function, monitor)
        n = function.argument_count
        self.history = []
        self._accepted = 0

        population = np.array([generate_random_axis(n, self._rng) for _ in range(n + 1)])
        fx = np.array([wrapper.evaluate(x) for x in population])

        best_population_fx = fx.copy()
        best_index = int(np.argmax(fx))
        best_x = population[best_index].copy()
        self._best_score = float(fx[best_index])

        cooling_rate = params.resolved_cooling_rate()
        temperature = 1.0
        equals = 0

        for iteration in range(1, params.iterations + 1):
            if temperature < MIN_TEMPERATURE:
                break

            if monitor is not None:
                monitor.continuing()
                monitor.iteration_started(iteration)

            candidates = self._perturb(population, temperature)
            candidate_fx = np.array([wrapper.evaluate(x) for x in candidates])

            incumbent = float(fx.max())
            challenger_index = int(np.argmax(candidate_fx))
            challenger = float(candidate_fx[challenger_index])

            if challenger > incumbent:
                accepted = True
            else:
                accepted = self._rng.random() < math.exp(-(incumbent - challenger) / temperature)

            if accepted:
                population, fx = candidates, candidate_fx
                self._accepted += 1
                if fx.max() > best_population_fx.max():
                    best_population_fx = fx.copy()

            if challenger > self._best_score:
                self._best_score = challenger
                best_x = candidates[challenger_index].copy()
                equals = 0
            else:
                equals += 1

            gap = convergence_gap(float(best_population_fx.max()), float(best_population_fx.min()))
            self.history.append(
                IterationStats(
                    iteration=iteration,
                    best=self._best_score,
                    spread=gap,
                    population=n + 1,
                    evaluations=wrapper.evaluations,
                )
            )
            line = (
                f"(iter = {iteration}) (temperature = {temperature:.4f}) (accepted = {accepted}) "
                f"(fx = {self._best_score:.6e}) (gap = {gap:.6e}) (x = {format_axis(best_x)})"
            )
            _LOGGER.debug(line)
            if monitor is not None:
                monitor.write_line(line)

            if gap <= PRECISION:
                return best_x
            if params.converge_at_max_equals and equals >= params.max_equals:
                return best_x

            temperature *= 1.0 - cooling_rate

        raise NoConvergence(
            f"Simulated annealing does not converge after {len(self.history)} iterations "
            f"(final temperature {temperature:.4f})."
        )

    def state(self) -> Mapping[str, object]:
        return {
            "seed": self.seed,
            "iterations": len(self.history),
            "accepted": self._accepted,
            "best_score": self._best_score,
        }
