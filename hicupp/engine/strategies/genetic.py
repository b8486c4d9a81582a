"""Genetic algorithm strategy over real-valued axes."""

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
from hicupp.engine.parameters import PRECISION, GeneticParameters
from hicupp.engine.types import Chromosome, IterationStats

_LOGGER = logging.getLogger(__name__)


@dataclass
class GeneticStrategy(Strategy):
    """Genetic algorithm with crossover, mutation, spawning and truncation selection.

    Each generation appends ``population_size`` single-point crossover
    children, replaces ``mutations_per_gen`` random individuals with fresh
    candidates, appends ``spawns_per_gen`` fresh candidates and keeps the
    ``population_size`` fittest. Children are not renormalized, so the search
    may drift off the unit sphere.

    The returned axis is the fittest individual seen in any generation. A
    generation whose top individual differs from it but improves on it by at
    most 1e-4 ends the run.
    """

    parameters: GeneticParameters = field(default_factory=GeneticParameters)
    seed: int | None = None

    history: list[IterationStats] = field(default_factory=list, init=False, repr=False)
    population: list[Chromosome] = field(default_factory=list, init=False, repr=False)
    _rng: np.random.Generator = field(init=False, repr=False)
    _fittest: Chromosome | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, GeneticParameters):
            raise TypeError(f"GeneticStrategy requires GeneticParameters, got {type(self.parameters).__name__}")
        self._rng = np.random.default_rng(self.seed)

    def _random_chromosome(self, n: int, wrapper: MonitoringFunctionWrapper) -> Chromosome:
        x = generate_random_axis(n, self._rng)
        return Chromosome(x=x, fx=wrapper.evaluate(x))

    def _pick_mate(self, father: Chromosome, size: int) -> Chromosome:
        # Resample only when some other individual carries a different axis.
        candidates = self.population[:size]
        if all(np.array_equal(c.x, father.x) for c in candidates):
            return candidates[int(self._rng.integers(size))]
        while True:
            mother = candidates[int(self._rng.integers(size))]
            if not np.array_equal(mother.x, father.x):
                return mother

    def _crossover(self, father: Chromosome, mother: Chromosome, wrapper: MonitoringFunctionWrapper) -> Chromosome:
        n = len(father.x)
        child = father.x.copy()
        if n > 1:
            cut = int(self._rng.integers(1, n))
            child[:cut] = mother.x[:cut]
        return Chromosome(x=child, fx=wrapper.evaluate(child))

    def maximize(self, function: Function, monitor: Monitor | None = None) -> np.ndarray:
        params = self.parameters
        size = params.population_size
        wrapper = wrap_for_evaluation(function, monitor)
        n = function.argument_count
        self.history = []

        self.population = [self._random_chromosome(n, wrapper) for _ in range(size)]
        self.population.sort(key=lambda c: c.fx, reverse=True)
        fittest = self._fittest = self.population[0]
        equals = 0

        for generation in range(1, params.max_generations + 1):
            if monitor is not None:
                monitor.continuing()
                monitor.iteration_started(generation)

            # crossover
            for _ in range(size):
                father = self.population[int(self._rng.integers(size))]
                mother = self._pick_mate(father, size)
                self.population.append(self._crossover(father, mother, wrapper))

            # mutation
            for _ in range(params.mutations_per_gen):
                self.population[int(self._rng.integers(size))] = self._random_chromosome(n, wrapper)

            # spawn
            self.population.extend(self._random_chromosome(n, wrapper) for _ in range(params.spawns_per_gen))

            # selection
            self.population.sort(key=lambda c: c.fx, reverse=True)
            del self.population[size:]

            # fittest is the best individual ever selected; mutation can evict it.
            candidate = self.population[0]
            changed = not candidate.same_as(fittest)
            delta = candidate.fx - fittest.fx
            if delta > 0.0:
                fittest = self._fittest = candidate
                equals = 0
            else:
                equals += 1

            self.history.append(
                IterationStats(
                    iteration=generation,
                    best=fittest.fx,
                    spread=delta,
                    population=len(self.population),
                    evaluations=wrapper.evaluations,
                )
            )
            line = f"(gen = {generation}) {fittest} (delta = {delta:.6e})"
            _LOGGER.debug(line)
            if monitor is not None:
                monitor.write_line(line)

            if params.converge_at_max_equals and equals >= params.max_equals:
                break
            if changed and 0.0 <= delta <= PRECISION:
                break
        else:
            raise NoConvergence(f"Genetic algorithm does not converge after {params.max_generations} generations.")

        return fittest.x.copy()

    def state(self) -> Mapping[str, object]:
        return {
            "seed": self.seed,
            "generations": len(self.history),
            "population_size": len(self.population),
            "best_score": self._fittest.fx if self._fittest is not None else float("-inf"),
        }
