"""Algorithm selectors and their per-algorithm parameter variants.

Each algorithm owns exactly one frozen parameter dataclass. Values are
validated at construction, so a run never starts from an invalid
configuration. Defaults mirror the values pre-filled in the parameter dialogs
of the interactive application.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, Final, Union


class Algorithm(IntEnum):
    """Closed set of maximization algorithms, keyed by their legacy index."""

    SIMPLEX = 0
    ANNEALING = 1
    GENETIC = 2
    GRADIENT = 3

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def resolve(cls, selector: Algorithm | int | str) -> Algorithm:
        """Turn an enum member, legacy index or registry name into a member.

        Raises ValueError for anything that does not name an algorithm.
        """
        if isinstance(selector, Algorithm):
            return selector
        if isinstance(selector, str):
            key = selector.strip().lower()
            if key not in _NAMES:
                raise ValueError(f"Unknown algorithm: {selector}. Available: {list(_NAMES)}")
            return _NAMES[key]
        if isinstance(selector, bool) or not isinstance(selector, int):
            raise TypeError(f"Algorithm selector must be Algorithm, int or str, got {type(selector)}")
        try:
            return cls(selector)
        except ValueError:
            raise ValueError(f"Unknown algorithm index: {selector}") from None


_DISPLAY_NAMES: Final[dict[Algorithm, str]] = {
    Algorithm.SIMPLEX: "Simplex",
    Algorithm.ANNEALING: "Simulated annealing",
    Algorithm.GENETIC: "Genetic algorithm",
    Algorithm.GRADIENT: "Gradient ascent",
}

_NAMES: Final[dict[str, Algorithm]] = {
    "simplex": Algorithm.SIMPLEX,
    "annealing": Algorithm.ANNEALING,
    "genetic": Algorithm.GENETIC,
    "gradient": Algorithm.GRADIENT,
}


def algorithm_names() -> list[str]:
    """Return display names in index order."""
    return [_DISPLAY_NAMES[algorithm] for algorithm in Algorithm]


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True, slots=True)
class SimplexParameters:
    """Nelder–Mead settings.

    ``max_iterations`` bounds runs that never meet the convergence gap.
    """

    max_iterations: int = 5000

    def __post_init__(self) -> None:
        _require_positive(max_iterations=self.max_iterations)


@dataclass(frozen=True, slots=True)
class AnnealingParameters:
    """Simulated annealing settings.

    ``iterations`` is the length of the cooling schedule. When ``cooling_rate``
    is omitted it is chosen so the temperature reaches the 0.1 floor after
    ``iterations`` steps.
    """

    iterations: int = 100
    converge_at_max_equals: bool = True
    max_equals: int = 20
    cooling_rate: float | None = None

    def __post_init__(self) -> None:
        _require_positive(iterations=self.iterations, max_equals=self.max_equals)
        if self.cooling_rate is not None and not 0.0 < self.cooling_rate < 1.0:
            raise ValueError(f"cooling_rate must lie in (0, 1), got {self.cooling_rate}")

    def resolved_cooling_rate(self) -> float:
        if self.cooling_rate is not None:
            return self.cooling_rate
        return 1.0 - MIN_TEMPERATURE ** (1.0 / self.iterations)

    def schedule_length(self) -> int:
        """Number of iterations before the schedule is exhausted."""
        if self.cooling_rate is None:
            return self.iterations
        steps = math.floor(math.log(MIN_TEMPERATURE) / math.log(1.0 - self.cooling_rate)) + 1
        return max(1, min(self.iterations, steps))


@dataclass(frozen=True, slots=True)
class GeneticParameters:
    """Genetic algorithm settings."""

    population_size: int = 20
    max_generations: int = 30
    mutations_per_gen: int = 5
    spawns_per_gen: int = 10
    converge_at_max_equals: bool = False
    max_equals: int = 5

    def __post_init__(self) -> None:
        _require_positive(
            population_size=self.population_size,
            max_generations=self.max_generations,
            mutations_per_gen=self.mutations_per_gen,
            spawns_per_gen=self.spawns_per_gen,
            max_equals=self.max_equals,
        )


@dataclass(frozen=True, slots=True)
class GradientAscentParameters:
    """Gradient ascent settings.

    ``learning_rate`` is the fixed length of every step along the unit
    gradient.
    """

    max_iterations: int = 100
    number_of_solutions: int = 5
    converge_at_max_equals: bool = True
    max_equals: int = 20
    learning_rate: float = 0.01

    def __post_init__(self) -> None:
        _require_positive(
            max_iterations=self.max_iterations,
            number_of_solutions=self.number_of_solutions,
            max_equals=self.max_equals,
        )
        if not (math.isfinite(self.learning_rate) and self.learning_rate > 0.0):
            raise ValueError(f"learning_rate must be a positive finite number, got {self.learning_rate}")


AlgorithmParameters = Union[
    SimplexParameters,
    AnnealingParameters,
    GeneticParameters,
    GradientAscentParameters,
]

PARAMETER_TYPES: Final[dict[Algorithm, type]] = {
    Algorithm.SIMPLEX: SimplexParameters,
    Algorithm.ANNEALING: AnnealingParameters,
    Algorithm.GENETIC: GeneticParameters,
    Algorithm.GRADIENT: GradientAscentParameters,
}

# Shared numeric constants.
PRECISION: Final = 1e-4
MIN_TEMPERATURE: Final = 0.1


def default_parameters(algorithm: Algorithm | int | str) -> AlgorithmParameters:
    return PARAMETER_TYPES[Algorithm.resolve(algorithm)]()


def parameters_from_mapping(
    algorithm: Algorithm | int | str,
    values: Mapping[str, Any] | None,
) -> AlgorithmParameters:
    """Build the parameter variant for ``algorithm`` from plain config data.

    Unknown keys raise ValueError so that typos in config files surface early.
    """
    cls = PARAMETER_TYPES[Algorithm.resolve(algorithm)]
    values = dict(values or {})
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown parameters for {cls.__name__}: {unknown}. Available: {sorted(known)}")
    return cls(**values)


def algorithm_for(parameters: AlgorithmParameters) -> Algorithm:
    for algorithm, cls in PARAMETER_TYPES.items():
        if type(parameters) is cls:
            return algorithm
    raise TypeError(f"Not an algorithm parameter variant: {type(parameters).__name__}")


@dataclass(frozen=True, slots=True)
class EvaluationBudget:
    """Lower and upper bound on objective evaluations for one run."""

    minimum: int
    maximum: int

    def duration(self, seconds_per_evaluation: float) -> tuple[float, float]:
        """Scale the budget to a (minimum, maximum) wall-clock estimate in seconds."""
        if seconds_per_evaluation < 0:
            raise ValueError("seconds_per_evaluation must be non-negative")
        return (self.minimum * seconds_per_evaluation, self.maximum * seconds_per_evaluation)


def evaluation_budget(parameters: AlgorithmParameters, dimensions: int) -> EvaluationBudget:
    """Estimate how many evaluations a run with ``parameters`` can cost.

    Counts include the initial population. The minimum assumes the earliest
    possible convergence, the maximum the full budget.
    """
    _require_positive(dimensions=dimensions)
    n = dimensions

    if isinstance(parameters, SimplexParameters):
        # Worst iteration: reflection, contraction, then a shrink of n vertices.
        return EvaluationBudget(minimum=n + 1, maximum=(n + 1) + parameters.max_iterations * (n + 2))

    if isinstance(parameters, AnnealingParameters):
        population = n + 1
        return EvaluationBudget(
            minimum=2 * population,
            maximum=population * (1 + parameters.schedule_length()),
        )

    if isinstance(parameters, GeneticParameters):
        per_generation = parameters.population_size + parameters.mutations_per_gen + parameters.spawns_per_gen
        return EvaluationBudget(
            minimum=parameters.population_size + per_generation,
            maximum=parameters.population_size + parameters.max_generations * per_generation,
        )

    if isinstance(parameters, GradientAscentParameters):
        m = parameters.number_of_solutions
        return EvaluationBudget(
            minimum=m + m * n,
            maximum=m + parameters.max_iterations * m * (2 * n + 1),
        )

    raise TypeError(f"Not an algorithm parameter variant: {type(parameters).__name__}")


__all__ = [
    "Algorithm",
    "AlgorithmParameters",
    "AnnealingParameters",
    "EvaluationBudget",
    "GeneticParameters",
    "GradientAscentParameters",
    "MIN_TEMPERATURE",
    "PARAMETER_TYPES",
    "PRECISION",
    "SimplexParameters",
    "algorithm_for",
    "algorithm_names",
    "default_parameters",
    "evaluation_budget",
    "parameters_from_mapping",
]
