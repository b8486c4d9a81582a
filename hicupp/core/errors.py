"""Failure kinds raised out of a maximization run."""

from __future__ import annotations


class HicuppError(Exception):
    """Base class for recoverable engine failures."""


class NoConvergence(HicuppError):
    """An algorithm spent its budget without meeting its convergence predicate.

    The caller may report the message and retry with other parameters or
    another algorithm.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Cancelled(HicuppError):
    """The monitor requested that the computation stop."""

    def __init__(self, message: str = "Computation cancelled") -> None:
        super().__init__(message)
