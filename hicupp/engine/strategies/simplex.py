"""Nelder–Mead simplex strategy (maximizing)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np

from hicupp.core.errors import NoConvergence
from hicupp.core.function import Function, wrap_for_evaluation
from hicupp.core.monitor import Monitor
from hicupp.engine.candidates import convergence_gap, format_axis, generate_random_axis
from hicupp.engine.interfaces import Strategy
from hicupp.engine.parameters import PRECISION, SimplexParameters
from hicupp.engine.types import IterationStats

_LOGGER = logging.getLogger(__name__)

REFLECTION = 1.0
EXPANSION = 2.0
CONTRACTION = 0.5


@dataclass
class SimplexStrategy(Strategy):
    """Nelder–Mead over n+1 vertices seeded on the unit sphere.

    Each iteration moves the worst vertex (``low``) through the centroid of
    the others: reflection, then expansion when the reflection beats the best
    vertex, otherwise contraction, and finally a shrink toward the best vertex
    when nothing improves on the worst. The run stops once the convergence gap
    between the best and worst vertex values is at most 1e-4.

    Parameters
    ----------
    parameters : SimplexParameters
        Iteration ceiling.
    seed : int | None
        Seed for the vertex generator.
    """

    parameters: SimplexParameters = field(default_factory=SimplexParameters)
    seed: int | None = None

    history: list[IterationStats] = field(default_factory=list, init=False, repr=False)
    _rng: np.random.Generator = field(init=False, repr=False)
    _vertices: np.ndarray | None = field(default=None, init=False, repr=False)
    _fx: np.ndarray | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, SimplexParameters):
            raise TypeError(f"SimplexStrategy requires SimplexParameters, got {type(self.parameters).__name__}")
        self._rng = np.random.default_rng(self.seed)

    def maximize(self, function: Function, monitor: Monitor | None = None) -> np.ndarray:
        wrapper = wrap_for_evaluation(function, monitor)
        n = function.argument_count
        self.history = []

        vertices = np.array([generate_random_axis(n, self._rng) for _ in range(n + 1)])
        fx = np.array([wrapper.evaluate(vertex) for vertex in vertices])
        self._vertices, self._fx = vertices, fx

        for iteration in range(1, self.parameters.max_iterations + 1):
            if monitor is not None:
                monitor.continuing()
                monitor.iteration_started(iteration)

            low = int(np.argmin(fx))
            high = int(np.argmax(fx))
            gap = convergence_gap(fx[high], fx[low])

            self.history.append(
                IterationStats(
                    iteration=iteration,
                    best=float(fx[high]),
                    spread=gap,
                    population=n + 1,
                    evaluations=wrapper.evaluations,
                )
            )
            line = f"(iter = {iteration}) (fx = {fx[high]:.6e}) (gap = {gap:.6e}) (x = {format_axis(vertices[high])})"
            _LOGGER.debug(line)
            if monitor is not None:
                monitor.write_line(line)

            if gap <= PRECISION:
                return vertices[high].copy()

            centroid = (vertices.sum(axis=0) - vertices[low]) / n
            direction = centroid - vertices[low]

            xref = centroid + REFLECTION * direction
            fref = wrapper.evaluate(xref)

            if fref > fx[high]:
                xexp = centroid + EXPANSION * direction
                fexp = wrapper.evaluate(xexp)
                if fexp > fref:
                    vertices[low], fx[low] = xexp, fexp
                else:
                    vertices[low], fx[low] = xref, fref
            elif any(fref > fx[i] for i in range(n + 1) if i != low):
                vertices[low], fx[low] = xref, fref
            else:
                xcon = centroid - CONTRACTION * direction
                fcon = wrapper.evaluate(xcon)
                if fcon > fx[low]:
                    vertices[low], fx[low] = xcon, fcon
                else:
                    for i in range(n + 1):
                        if i != high:
                            vertices[i] = (vertices[i] + vertices[high]) / 2.0
                            fx[i] = wrapper.evaluate(vertices[i])

        raise NoConvergence(
            f"Simplex does not converge after {self.parameters.max_iterations} iterations."
        )

    def state(self) -> Mapping[str, object]:
        if self._fx is None:
            return {"seed": self.seed}
        return {
            "seed": self.seed,
            "iterations": len(self.history),
            "best_score": float(np.max(self._fx)),
        }
