"""
Running variance statistic with a Student-t confidence interval.
"""

from __future__ import annotations

import math

from scipy import stats

from pysimrv.exceptions import InvalidParameterError
from pysimrv.stats.mean import Mean


class Variance(Mean):
    """
    Extends Mean with sample variance, standard deviation and the
    half-width of a confidence interval on the mean.

    Uses Welford's update so long runs of large values stay accurate.
    """

    def reset(self) -> None:
        super().reset()
        self._m2: float = 0.0
        self._running_mean: float = 0.0

    def set_value(self, value: float) -> None:
        super().set_value(value)
        delta = value - self._running_mean
        self._running_mean += delta / self._number
        self._m2 += delta * (value - self._running_mean)

    @property
    def variance(self) -> float:
        """
        Sample variance.

        Uses the n-1 denominator; NaN with fewer than two observations.
        """
        if self._number < 2:
            return math.nan
        return self._m2 / (self._number - 1)

    @property
    def std_dev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def std_error(self) -> float:
        """Standard error of the mean."""
        return self.std_dev / math.sqrt(self._number) if self._number >= 2 else math.nan

    def half_width(self, level: float = 0.95) -> float:
        """
        Half-width of the ``level`` confidence interval on the mean.

        t_{1-(1-level)/2, n-1} * s / sqrt(n); NaN with fewer than two
        observations.
        """
        if not 0.0 < level < 1.0:
            raise InvalidParameterError(f"confidence level must be in (0, 1), got {level}")
        if self._number < 2:
            return math.nan
        t = stats.t.ppf(1.0 - (1.0 - level) / 2.0, self._number - 1)
        return float(t) * self.std_error

    def confidence_interval(self, level: float = 0.95) -> tuple[float, float]:
        hw = self.half_width(level)
        return self.mean - hw, self.mean + hw

    def __str__(self) -> str:
        lines = [
            f"Variance          : {self.variance}",
            f"Standard Deviation: {self.std_dev}",
            f"95% Half-width    : {self.half_width()}",
        ]
        lines.append(super().__str__())
        return "\n".join(lines)
