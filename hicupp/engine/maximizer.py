"""Single entry point that routes a maximization to the selected algorithm."""

from __future__ import annotations

import logging

import numpy as np

from hicupp.core.function import Function
from hicupp.core.monitor import Monitor
from hicupp.engine.parameters import Algorithm, AlgorithmParameters
from hicupp.engine.strategies import strategy_for

_LOGGER = logging.getLogger(__name__)


def maximize(
    function: Function,
    algorithm: Algorithm | int | str = Algorithm.SIMPLEX,
    monitor: Monitor | None = None,
    parameters: AlgorithmParameters | None = None,
    *,
    seed: int | None = None,
) -> np.ndarray:
    """Return an axis for which ``function`` is (sufficiently) maximal.

    The returned vector is the maximizer, not its value; callers needing the
    value evaluate it through their own Function.

    Raises
    ------
    NoConvergence
        The algorithm spent its budget without converging.
    Cancelled
        Passed through from ``monitor.continuing()``.
    TypeError
        ``parameters`` does not match ``algorithm``.
    ValueError
        ``algorithm`` names no algorithm.
    """
    selected = Algorithm.resolve(algorithm)
    strategy = strategy_for(selected, parameters, seed=seed)
    _LOGGER.info(
        "Running maximizer algorithm=%s dimensions=%d",
        selected.display_name,
        function.argument_count,
    )
    x = strategy.maximize(function, monitor)
    _LOGGER.info("Maximizer finished algorithm=%s iterations=%d", selected.display_name, len(strategy.history))
    return x


__all__ = ["maximize"]
