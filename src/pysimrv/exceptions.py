"""
Exception hierarchy for pysimrv.

Every error is raised synchronously at the call site. The concrete classes
also derive from the matching built-in so callers can catch ``ValueError``
or ``KeyError`` without importing this module.
"""

from __future__ import annotations


class RandomVariateError(Exception):
    """Base exception for all pysimrv errors."""


class InvalidParameterError(RandomVariateError, ValueError):
    """A distribution or random variable parameter is outside its domain."""


class InvalidProbabilityError(RandomVariateError, ValueError):
    """A probability argument lies outside [0, 1] (or a documented sub-interval)."""


class ConvergenceError(RandomVariateError, ArithmeticError):
    """An iterative numerical routine did not reach its tolerance."""


class ControlsError(RandomVariateError, KeyError):
    """A controls object has unknown, missing, or mistyped keys."""

    def __str__(self) -> str:
        # KeyError quotes its argument; report the message as written.
        return str(self.args[0]) if self.args else ""
