"""
Running mean statistic.
"""

from __future__ import annotations

import math
from collections.abc import Iterable


class Mean:
    """
    Running count, sum, minimum, maximum and mean of observed values.

    Values are added with ``set_value`` or ``+=``.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self.reset()

    def reset(self) -> None:
        """Forget every observation."""
        self._max: float = -math.inf
        self._min: float = math.inf
        self._sum: float = 0.0
        self._mean: float = math.nan
        self._number: int = 0

    def set_value(self, value: float) -> None:
        """Add one observation."""
        if value > self._max:
            self._max = value
        if value < self._min:
            self._min = value
        self._sum += value
        self._number += 1
        self._mean = self._sum / self._number

    def __iadd__(self, value: float) -> Mean:
        self.set_value(value)
        return self

    def collect(self, values: Iterable[float]) -> None:
        """Add every value of ``values``."""
        for value in values:
            self.set_value(value)

    @property
    def number_of_samples(self) -> int:
        return self._number

    @property
    def min(self) -> float:
        """Smallest value seen (inf before any observation)."""
        return self._min

    @property
    def max(self) -> float:
        """Largest value seen (-inf before any observation)."""
        return self._max

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def mean(self) -> float:
        """Average of the values seen (NaN before any observation)."""
        return self._mean

    def __str__(self) -> str:
        lines = [
            f"Number of samples : {self.number_of_samples}",
            f"Minimum           : {self.min}",
            f"Maximum           : {self.max}",
            f"Sum               : {self.sum}",
            f"Mean              : {self.mean}",
        ]
        if self.name:
            lines.insert(0, f"Name              : {self.name}")
        return "\n".join(lines)
