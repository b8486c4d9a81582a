"""Monitor surfaces: cancellation, progress and a diagnostic line sink."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Protocol

from hicupp.core.errors import Cancelled
from hicupp.utils.logging import get_logger


class Monitor(Protocol):
    """Caller-supplied observer of a running maximization.

    ``continuing`` is the only cancellation point; strategies poll it once
    immediately before every objective evaluation (and at the start of each
    iteration). A monitor is optional everywhere; passing ``None`` gives a
    silent, non-cancellable run with identical results.
    """

    def continuing(self) -> None:
        """Raise :class:`~hicupp.core.errors.Cancelled` if an abort was requested."""

    def iteration_started(self, iteration: int) -> None:
        """Report that iteration (or generation) ``iteration`` begins."""

    def evaluation_started(self) -> None:
        """Report that one objective evaluation is about to run."""

    def write_line(self, text: str) -> None:
        """Receive one line of per-iteration diagnostics."""


@dataclass
class LoggingMonitor:
    """Monitor that forwards diagnostics to a logger and counts progress.

    ``cancel`` may be called from any thread, e.g. a UI thread while the
    maximization runs on a worker.
    """

    logger: logging.Logger = field(default_factory=lambda: get_logger("monitor"))
    level: int = logging.INFO
    iterations: int = field(default=0, init=False)
    evaluations: int = field(default=0, init=False)
    _cancel_event: threading.Event = field(default_factory=threading.Event, init=False, repr=False)

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def cancellation_requested(self) -> bool:
        return self._cancel_event.is_set()

    def continuing(self) -> None:
        if self._cancel_event.is_set():
            raise Cancelled()

    def iteration_started(self, iteration: int) -> None:
        self.iterations = iteration

    def evaluation_started(self) -> None:
        self.evaluations += 1

    def write_line(self, text: str) -> None:
        self.logger.log(self.level, text)


__all__ = ["Monitor", "LoggingMonitor"]
