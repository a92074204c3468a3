"""
Beta family: Beta, GeneralizedBeta and PearsonType6.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pysimrv.distributions.base import (
    POSITIVE_REAL_LINE,
    ContinuousDistribution,
    Interval,
    check_parameter_count,
    check_positive,
    check_range,
)
from pysimrv.rng import RNStreamIfc, resolve_stream
from pysimrv.special import incomplete_beta, inv_incomplete_beta, log_beta_function

if TYPE_CHECKING:
    from pysimrv.rvariable import BetaRV, GeneralizedBetaRV, PearsonType6RV


def beta_inv_cdf(p: float, alpha1: float, alpha2: float) -> float:
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return 1.0
    return inv_incomplete_beta(p, alpha1, alpha2)


def generalized_beta_inv_cdf(
    p: float, alpha1: float, alpha2: float, minimum: float, maximum: float
) -> float:
    return minimum + (maximum - minimum) * beta_inv_cdf(p, alpha1, alpha2)


def pearson_type6_inv_cdf(p: float, alpha1: float, alpha2: float, beta: float) -> float:
    """Quantile of beta * Y / (1 - Y) with Y ~ Beta(alpha1, alpha2)."""
    fib = beta_inv_cdf(p, alpha1, alpha2)
    if fib >= 1.0:
        return math.inf
    return beta * fib / (1.0 - fib)


def _beta_pdf(x: float, a: float, b: float) -> float:
    if x < 0.0 or x > 1.0:
        return 0.0
    if x == 0.0:
        if a < 1.0:
            return math.inf
        return b if a == 1.0 else 0.0
    if x == 1.0:
        if b < 1.0:
            return math.inf
        return a if b == 1.0 else 0.0
    log_pdf = (a - 1.0) * math.log(x) + (b - 1.0) * math.log1p(-x) - log_beta_function(a, b)
    return math.exp(log_pdf)


class Beta(ContinuousDistribution):
    """Beta distribution on [0, 1]. Parameters: [alpha1, alpha2]."""

    parameter_names = ("alpha1", "alpha2")

    def __init__(self, alpha1: float = 1.0, alpha2: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([alpha1, alpha2])

    @property
    def alpha1(self) -> float:
        return self._alpha1

    @property
    def alpha2(self) -> float:
        return self._alpha2

    @property
    def parameters(self) -> list[float]:
        return [self._alpha1, self._alpha2]

    def set_parameters(self, params: Sequence[float]) -> None:
        a1, a2 = check_parameter_count(params, 2, "Beta")
        check_positive("alpha1", a1)
        check_positive("alpha2", a2)
        self._alpha1 = a1
        self._alpha2 = a2

    def pdf(self, x: float) -> float:
        return _beta_pdf(x, self._alpha1, self._alpha2)

    def cdf(self, x: float) -> float:
        return incomplete_beta(x, self._alpha1, self._alpha2)

    def _inv_cdf(self, p: float) -> float:
        return beta_inv_cdf(p, self._alpha1, self._alpha2)

    @property
    def mean(self) -> float:
        return self._alpha1 / (self._alpha1 + self._alpha2)

    @property
    def variance(self) -> float:
        a, b = self._alpha1, self._alpha2
        s = a + b
        return a * b / (s * s * (s + 1.0))

    @property
    def domain(self) -> Interval:
        return Interval(0.0, 1.0)

    def random_variable(self, stream: RNStreamIfc | None = None) -> BetaRV:
        from pysimrv.rvariable import BetaRV

        return BetaRV(self._alpha1, self._alpha2, resolve_stream(stream))


class GeneralizedBeta(ContinuousDistribution):
    """Beta distribution rescaled to [min, max]. Parameters: [alpha1, alpha2, min, max]."""

    parameter_names = ("alpha1", "alpha2", "minimum", "maximum")

    def __init__(
        self,
        alpha1: float = 1.0,
        alpha2: float = 1.0,
        minimum: float = 0.0,
        maximum: float = 1.0,
        stream: RNStreamIfc | None = None,
    ) -> None:
        super().__init__(stream)
        self.set_parameters([alpha1, alpha2, minimum, maximum])

    @property
    def alpha1(self) -> float:
        return self._beta.alpha1

    @property
    def alpha2(self) -> float:
        return self._beta.alpha2

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def maximum(self) -> float:
        return self._max

    @property
    def parameters(self) -> list[float]:
        return [self._beta.alpha1, self._beta.alpha2, self._min, self._max]

    def set_parameters(self, params: Sequence[float]) -> None:
        a1, a2, lo, hi = check_parameter_count(params, 4, "GeneralizedBeta")
        check_range("minimum", lo, "maximum", hi)
        self._beta = Beta(a1, a2, self._stream)
        self._min = lo
        self._max = hi

    def pdf(self, x: float) -> float:
        width = self._max - self._min
        return self._beta.pdf((x - self._min) / width) / width

    def cdf(self, x: float) -> float:
        return self._beta.cdf((x - self._min) / (self._max - self._min))

    def _inv_cdf(self, p: float) -> float:
        return generalized_beta_inv_cdf(p, self._beta.alpha1, self._beta.alpha2, self._min, self._max)

    @property
    def mean(self) -> float:
        return self._min + (self._max - self._min) * self._beta.mean

    @property
    def variance(self) -> float:
        width = self._max - self._min
        return width * width * self._beta.variance

    @property
    def domain(self) -> Interval:
        return Interval(self._min, self._max)

    def random_variable(self, stream: RNStreamIfc | None = None) -> GeneralizedBetaRV:
        from pysimrv.rvariable import GeneralizedBetaRV

        return GeneralizedBetaRV(
            self._beta.alpha1, self._beta.alpha2, self._min, self._max, resolve_stream(stream)
        )


class PearsonType6(ContinuousDistribution):
    """
    Pearson type VI (beta prime) distribution.

    X = beta * Y / (1 - Y) with Y ~ Beta(alpha1, alpha2). The mean exists
    only for alpha2 > 1 and the variance only for alpha2 > 2; otherwise they
    are NaN. Parameters: [alpha1, alpha2, beta].
    """

    parameter_names = ("alpha1", "alpha2", "beta")

    def __init__(
        self,
        alpha1: float = 2.0,
        alpha2: float = 3.0,
        beta: float = 1.0,
        stream: RNStreamIfc | None = None,
    ) -> None:
        super().__init__(stream)
        self.set_parameters([alpha1, alpha2, beta])

    @property
    def alpha1(self) -> float:
        return self._alpha1

    @property
    def alpha2(self) -> float:
        return self._alpha2

    @property
    def beta(self) -> float:
        return self._beta_scale

    @property
    def parameters(self) -> list[float]:
        return [self._alpha1, self._alpha2, self._beta_scale]

    def set_parameters(self, params: Sequence[float]) -> None:
        a1, a2, beta = check_parameter_count(params, 3, "PearsonType6")
        check_positive("alpha1", a1)
        check_positive("alpha2", a2)
        check_positive("beta", beta)
        self._alpha1 = a1
        self._alpha2 = a2
        self._beta_scale = beta
        self._beta = Beta(a1, a2, self._stream)

    def pdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        a1, a2, b = self._alpha1, self._alpha2, self._beta_scale
        y = x / b
        log_pdf = (a1 - 1.0) * math.log(y) - math.log(b) - log_beta_function(a1, a2) - (a1 + a2) * math.log1p(y)
        return math.exp(log_pdf)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return self._beta.cdf(x / (x + self._beta_scale))

    def _inv_cdf(self, p: float) -> float:
        return pearson_type6_inv_cdf(p, self._alpha1, self._alpha2, self._beta_scale)

    @property
    def mean(self) -> float:
        if self._alpha2 <= 1.0:
            return math.nan
        return self._beta_scale * self._alpha1 / (self._alpha2 - 1.0)

    @property
    def variance(self) -> float:
        a1, a2, b = self._alpha1, self._alpha2, self._beta_scale
        if a2 <= 2.0:
            return math.nan
        return b * b * a1 * (a1 + a2 - 1.0) / ((a2 - 2.0) * (a2 - 1.0) ** 2)

    @property
    def domain(self) -> Interval:
        return POSITIVE_REAL_LINE

    def random_variable(self, stream: RNStreamIfc | None = None) -> PearsonType6RV:
        from pysimrv.rvariable import PearsonType6RV

        return PearsonType6RV(self._alpha1, self._alpha2, self._beta_scale, resolve_stream(stream))
