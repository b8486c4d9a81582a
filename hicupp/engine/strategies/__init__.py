"""Strategy registry surface.

Provides a small factory to obtain a Strategy by algorithm.
"""

from __future__ import annotations

from typing import Final

from hicupp.engine.interfaces import Strategy
from hicupp.engine.parameters import PARAMETER_TYPES, Algorithm, AlgorithmParameters, algorithm_for
from hicupp.engine.strategies.annealing import AnnealingStrategy
from hicupp.engine.strategies.genetic import GeneticStrategy
from hicupp.engine.strategies.gradient import GradientAscentStrategy
from hicupp.engine.strategies.simplex import SimplexStrategy

_REGISTRY: Final[dict[Algorithm, type[Strategy]]] = {
    Algorithm.SIMPLEX: SimplexStrategy,
    Algorithm.ANNEALING: AnnealingStrategy,
    Algorithm.GENETIC: GeneticStrategy,
    Algorithm.GRADIENT: GradientAscentStrategy,
}


def strategy_for(
    algorithm: Algorithm | int | str,
    parameters: AlgorithmParameters | None = None,
    *,
    seed: int | None = None,
) -> Strategy:
    """Return a fresh Strategy instance for ``algorithm``.

    Parameters
    ----------
    algorithm : Algorithm | int | str
        Enum member, legacy index (0 simplex, 1 annealing, 2 genetic,
        3 gradient) or registry name ("simplex", "annealing", "genetic",
        "gradient").
    parameters : AlgorithmParameters | None
        Variant matching ``algorithm``; ``None`` selects its defaults.
    seed : int | None
        Seed for the strategy's generator.

    Raises
    ------
    ValueError
        If ``algorithm`` names no algorithm.
    TypeError
        If ``parameters`` is not the variant ``algorithm`` expects.
    """
    selected = Algorithm.resolve(algorithm)
    cls = _REGISTRY[selected]
    if parameters is None:
        return cls(seed=seed)  # type: ignore[call-arg]
    if algorithm_for(parameters) is not selected:
        raise TypeError(
            f"{selected.display_name} requires {PARAMETER_TYPES[selected].__name__}, got {type(parameters).__name__}"
        )
    return cls(parameters=parameters, seed=seed)  # type: ignore[call-arg]


__all__ = [
    "strategy_for",
    "SimplexStrategy",
    "AnnealingStrategy",
    "GeneticStrategy",
    "GradientAscentStrategy",
]
