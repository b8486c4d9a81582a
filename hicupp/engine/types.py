"""Population members and per-iteration records shared by the strategies."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from hicupp.engine.candidates import format_axis


@dataclass(frozen=True, slots=True, eq=False)
class Chromosome:
    """Genetic algorithm individual: an axis and its fitness."""

    x: np.ndarray
    fx: float

    def same_as(self, other: Chromosome) -> bool:
        return self.fx == other.fx and np.array_equal(self.x, other.x)

    def __str__(self) -> str:
        return f"(fx = {self.fx:.6e}) (x = {format_axis(self.x)})"


@dataclass(slots=True, eq=False)
class Solution:
    """Gradient ascent walker.

    Once ``converged`` is set the walker is frozen: strategies never touch its
    ``x`` or ``fx`` again. ``gradient`` defaults to zeros shaped like ``x``.
    """

    x: np.ndarray
    fx: float
    gradient: np.ndarray | None = None
    converged: bool = False

    def __post_init__(self) -> None:
        if self.gradient is None:
            self.gradient = np.zeros_like(self.x)

    def copy(self) -> Solution:
        return Solution(x=self.x.copy(), fx=self.fx, gradient=self.gradient.copy(), converged=self.converged)

    def __str__(self) -> str:
        return (
            f"(fx = {self.fx:.6e}) (gradient = {format_axis(self.gradient)}) "
            f"(x = {format_axis(self.x)}) (converged = {self.converged})"
        )


@dataclass(frozen=True, slots=True)
class IterationStats:
    """Numbers tracked for each iteration of a strategy.

    ``spread`` is the algorithm's own progress measure: the convergence gap
    for simplex and annealing, the fitness delta for the genetic algorithm and
    the best-value delta for gradient ascent. ``converged`` counts converged
    population members where that notion exists.
    """

    iteration: int
    best: float
    spread: float
    population: int
    evaluations: int
    converged: int = 0


__all__ = ["Chromosome", "Solution", "IterationStats"]
