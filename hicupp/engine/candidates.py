"""Candidate generation and small numeric helpers shared by the strategies."""

from __future__ import annotations

import time

import numpy as np

from hicupp.core.function import Function


def generate_random_axis(n: int, rng: np.random.Generator, scale: float = 1.0) -> np.ndarray:
    """Return a random point on the sphere of radius ``scale`` in R^n.

    Draws n i.i.d. uniform(-1, 1) values and L2-normalizes them. An all-zero
    draw (only plausible for tiny n) is resampled.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    while True:
        x = rng.uniform(-1.0, 1.0, size=n)
        norm = float(np.linalg.norm(x))
        if norm > 0.0:
            return x * (scale / norm)


def convergence_gap(high: float, low: float) -> float:
    """Relative gap ``2|high - low| / (|high| + |low|)``; zero when equal."""
    diff = abs(high - low)
    if diff == 0.0:
        return 0.0
    return 2.0 * diff / (abs(high) + abs(low))


def format_axis(x: np.ndarray) -> str:
    return ", ".join(f"{value:.6e}" for value in x)


def time_evaluation(function: Function, rng: np.random.Generator | None = None) -> float:
    """Return the wall-clock seconds one evaluation of a random axis takes."""
    rng = rng if rng is not None else np.random.default_rng()
    x = generate_random_axis(function.argument_count, rng)
    start = time.perf_counter()
    function.evaluate(x)
    return time.perf_counter() - start


__all__ = ["generate_random_axis", "convergence_gap", "format_axis", "time_evaluation"]
