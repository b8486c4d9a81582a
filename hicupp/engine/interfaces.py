"""Engine protocol surfaces (no implementations).

A Strategy is one maximization algorithm bound to its parameter variant and
an optional seed. ``maximize`` runs the whole search synchronously and returns
the located maximizer; the strategy keeps a per-iteration ``history`` for
inspection afterwards.

Every implementation follows the same contract:

1. Evaluate only through :func:`~hicupp.core.function.wrap_for_evaluation`.
2. At the start of each iteration call ``monitor.continuing()`` and then
   ``monitor.iteration_started(i)`` (1-based).
3. Write one diagnostic line per iteration with ``monitor.write_line``.
4. Raise :class:`~hicupp.core.errors.NoConvergence` when the budget is spent
   without meeting the convergence predicate; let
   :class:`~hicupp.core.errors.Cancelled` propagate untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from hicupp.core.function import Function
    from hicupp.core.monitor import Monitor
    from hicupp.engine.types import IterationStats


class Strategy(Protocol):
    """Maximizes a black-box Function over candidate axes."""

    history: list[IterationStats]

    def maximize(self, function: Function, monitor: Monitor | None = None) -> np.ndarray:
        """Return an axis for which ``function`` is (sufficiently) maximal."""

    def state(self) -> Mapping[str, object]:
        """Return a serializable snapshot of the last run."""
