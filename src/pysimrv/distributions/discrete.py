"""
Discrete distributions on the integers.

Each family has a module-level quantile function (``xxx_inv_cdf``) that is
the single generation algorithm for that family: the distribution classes,
the ``pysimrv.variates`` functions and the random variables all call it.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pysimrv.distributions.base import (
    DiscreteDistribution,
    Interval,
    LossFunctionDistribution,
    check_integer,
    check_open_unit_interval,
    check_parameter_count,
    check_positive,
    check_range,
    check_unit_interval,
    discrete_inverse_search,
    normal_approximation,
)
from pysimrv.exceptions import InvalidProbabilityError
from pysimrv.rng import RNStreamIfc, resolve_stream
from pysimrv.special import (
    incomplete_beta,
    incomplete_gamma_complement,
    log_gamma_function,
    within_machine_epsilon,
)

if TYPE_CHECKING:
    from pysimrv.rvariable import (
        BernoulliRV,
        BinomialRV,
        ConstantRV,
        DUniformRV,
        GeometricRV,
        NegativeBinomialRV,
        PoissonRV,
    )


def _is_integer(x: float) -> bool:
    return math.isfinite(x) and math.floor(x) == x


# Quantile functions


def bernoulli_inv_cdf(p: float, prob_success: float) -> float:
    """Smallest x in {0, 1} with cdf(x) >= p."""
    return 0.0 if p <= 1.0 - prob_success else 1.0


def binomial_inv_cdf(p: float, prob_success: float, num_trials: int) -> float:
    if prob_success == 0.0 or p == 0.0:
        return 0.0
    if prob_success == 1.0 or p == 1.0:
        return float(num_trials)
    mean = num_trials * prob_success
    variance = mean * (1.0 - prob_success)
    start = normal_approximation(p, mean, variance)
    return float(
        discrete_inverse_search(
            p, lambda k: binomial_cdf(k, prob_success, num_trials), start, 0, num_trials
        )
    )


def poisson_inv_cdf(p: float, mean: float) -> float:
    if p == 0.0:
        return 0.0
    if p == 1.0:
        return math.inf
    start = normal_approximation(p, mean, mean)
    return float(discrete_inverse_search(p, lambda k: poisson_cdf(k, mean), start))


def duniform_inv_cdf(p: float, minimum: int, maximum: int) -> float:
    """Smallest integer x in [minimum, maximum] with (x - minimum + 1) / n >= p."""
    if p <= 0.0:
        return float(minimum)
    k = math.ceil(p * (maximum - minimum + 1)) - 1
    return float(minimum + min(max(k, 0), maximum - minimum))


def geometric_inv_cdf(p: float, prob_success: float) -> float:
    """ceil(log(1 - p) / log(1 - prob_success) - 1), number of failures before a success."""
    x = math.ceil(math.log1p(-p) / math.log1p(-prob_success) - 1.0)
    return float(max(x, 0))


def negative_binomial_inv_cdf(p: float, prob_success: float, num_successes: float) -> float:
    if p == 0.0:
        return 0.0
    if p == 1.0:
        return math.inf
    q = 1.0 - prob_success
    mean = num_successes * q / prob_success
    variance = mean / prob_success
    start = normal_approximation(p, mean, variance)
    return float(
        discrete_inverse_search(
            p, lambda k: negative_binomial_cdf(k, prob_success, num_successes), start
        )
    )


# Cumulative distribution functions


def binomial_cdf(x: float, prob_success: float, num_trials: int) -> float:
    if x < 0.0:
        return 0.0
    k = math.floor(x)
    if k >= num_trials:
        return 1.0
    return incomplete_beta(1.0 - prob_success, num_trials - k, k + 1)


def poisson_cdf(x: float, mean: float) -> float:
    if x < 0.0:
        return 0.0
    return incomplete_gamma_complement(math.floor(x) + 1.0, mean)


def negative_binomial_cdf(x: float, prob_success: float, num_successes: float) -> float:
    if x < 0.0:
        return 0.0
    return incomplete_beta(prob_success, num_successes, math.floor(x) + 1.0)


class Bernoulli(DiscreteDistribution):
    """Bernoulli(p): 1 with probability p, 0 otherwise. Parameters: [p]."""

    parameter_names = ("prob_success",)

    def __init__(self, prob_success: float = 0.5, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([prob_success])

    @property
    def prob_success(self) -> float:
        return self._p

    @property
    def parameters(self) -> list[float]:
        return [self._p]

    def set_parameters(self, params: Sequence[float]) -> None:
        (p,) = check_parameter_count(params, 1, "Bernoulli")
        check_unit_interval("probability of success", p)
        self._p = p

    def pmf(self, x: float) -> float:
        if x == 0.0:
            return 1.0 - self._p
        if x == 1.0:
            return self._p
        return 0.0

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        if x < 1.0:
            return 1.0 - self._p
        return 1.0

    def _inv_cdf(self, p: float) -> float:
        return bernoulli_inv_cdf(p, self._p)

    @property
    def mean(self) -> float:
        return self._p

    @property
    def variance(self) -> float:
        return self._p * (1.0 - self._p)

    @property
    def domain(self) -> Interval:
        return Interval(0.0, 1.0)

    def random_variable(self, stream: RNStreamIfc | None = None) -> BernoulliRV:
        from pysimrv.rvariable import BernoulliRV

        return BernoulliRV(self._p, resolve_stream(stream))


class Binomial(DiscreteDistribution):
    """Number of successes in n Bernoulli trials. Parameters: [p, n]."""

    parameter_names = ("prob_success", "num_trials")

    def __init__(
        self, prob_success: float = 0.5, num_trials: int = 1, stream: RNStreamIfc | None = None
    ) -> None:
        super().__init__(stream)
        self.set_parameters([prob_success, num_trials])

    @property
    def prob_success(self) -> float:
        return self._p

    @property
    def num_trials(self) -> int:
        return self._n

    @property
    def parameters(self) -> list[float]:
        return [self._p, self._n]

    def set_parameters(self, params: Sequence[float]) -> None:
        p, n = check_parameter_count(params, 2, "Binomial")
        check_unit_interval("probability of success", p)
        n = check_integer("number of trials", n)
        check_positive("number of trials", n)
        self._p = p
        self._n = n

    def pmf(self, x: float) -> float:
        if not _is_integer(x) or x < 0 or x > self._n:
            return 0.0
        k = int(x)
        if self._p == 0.0:
            return 1.0 if k == 0 else 0.0
        if self._p == 1.0:
            return 1.0 if k == self._n else 0.0
        n = self._n
        log_pmf = (
            log_gamma_function(n + 1.0)
            - log_gamma_function(k + 1.0)
            - log_gamma_function(n - k + 1.0)
            + k * math.log(self._p)
            + (n - k) * math.log1p(-self._p)
        )
        return math.exp(log_pmf)

    def cdf(self, x: float) -> float:
        return binomial_cdf(x, self._p, self._n)

    def _inv_cdf(self, p: float) -> float:
        return binomial_inv_cdf(p, self._p, self._n)

    @property
    def mean(self) -> float:
        return self._n * self._p

    @property
    def variance(self) -> float:
        return self._n * self._p * (1.0 - self._p)

    @property
    def domain(self) -> Interval:
        return Interval(0.0, float(self._n))

    def random_variable(self, stream: RNStreamIfc | None = None) -> BinomialRV:
        from pysimrv.rvariable import BinomialRV

        return BinomialRV(self._p, self._n, resolve_stream(stream))


class Poisson(DiscreteDistribution, LossFunctionDistribution):
    """Poisson(mean). Parameters: [mean]."""

    parameter_names = ("mean",)

    def __init__(self, mean: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([mean])

    @property
    def parameters(self) -> list[float]:
        return [self._mean]

    def set_parameters(self, params: Sequence[float]) -> None:
        (mean,) = check_parameter_count(params, 1, "Poisson")
        check_positive("mean", mean)
        self._mean = mean

    def pmf(self, x: float) -> float:
        if not _is_integer(x) or x < 0:
            return 0.0
        return math.exp(x * math.log(self._mean) - self._mean - log_gamma_function(x + 1.0))

    def cdf(self, x: float) -> float:
        return poisson_cdf(x, self._mean)

    def _inv_cdf(self, p: float) -> float:
        return poisson_inv_cdf(p, self._mean)

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._mean

    @property
    def domain(self) -> Interval:
        return Interval(0.0, math.inf)

    def first_order_loss(self, x: float) -> float:
        k = math.floor(x)
        mu = self._mean
        return mu * self.complementary_cdf(k - 1) - x * self.complementary_cdf(k)

    def second_order_loss(self, x: float) -> float:
        k = math.floor(x)
        mu = self._mean
        return 0.5 * (
            mu * mu * self.complementary_cdf(k - 2)
            - 2.0 * x * mu * self.complementary_cdf(k - 1)
            + x * (x + 1.0) * self.complementary_cdf(k)
        )

    def random_variable(self, stream: RNStreamIfc | None = None) -> PoissonRV:
        from pysimrv.rvariable import PoissonRV

        return PoissonRV(self._mean, resolve_stream(stream))


class DUniform(DiscreteDistribution):
    """Discrete uniform on the integers min..max. Parameters: [min, max]."""

    parameter_names = ("minimum", "maximum")

    def __init__(self, minimum: int = 0, maximum: int = 1, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([minimum, maximum])

    @property
    def minimum(self) -> int:
        return self._min

    @property
    def maximum(self) -> int:
        return self._max

    @property
    def parameters(self) -> list[float]:
        return [self._min, self._max]

    def set_parameters(self, params: Sequence[float]) -> None:
        lo, hi = check_parameter_count(params, 2, "DUniform")
        lo = check_integer("minimum", lo)
        hi = check_integer("maximum", hi)
        check_range("minimum", lo, "maximum", hi)
        self._min = lo
        self._max = hi

    @property
    def num_points(self) -> int:
        return self._max - self._min + 1

    def pmf(self, x: float) -> float:
        if not _is_integer(x) or x < self._min or x > self._max:
            return 0.0
        return 1.0 / self.num_points

    def cdf(self, x: float) -> float:
        if x < self._min:
            return 0.0
        if x >= self._max:
            return 1.0
        return (math.floor(x) - self._min + 1) / self.num_points

    def _inv_cdf(self, p: float) -> float:
        return duniform_inv_cdf(p, self._min, self._max)

    @property
    def mean(self) -> float:
        return (self._min + self._max) / 2.0

    @property
    def variance(self) -> float:
        n = self.num_points
        return (n * n - 1.0) / 12.0

    @property
    def domain(self) -> Interval:
        return Interval(float(self._min), float(self._max))

    def random_variable(self, stream: RNStreamIfc | None = None) -> DUniformRV:
        from pysimrv.rvariable import DUniformRV

        return DUniformRV(self._min, self._max, resolve_stream(stream))


class Geometric(DiscreteDistribution, LossFunctionDistribution):
    """
    Number of failures before the first success, support {0, 1, 2, ...}.

    Parameters: [p] with 0 < p < 1.
    """

    parameter_names = ("prob_success",)

    def __init__(self, prob_success: float = 0.5, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([prob_success])

    @property
    def prob_success(self) -> float:
        return self._p

    @property
    def parameters(self) -> list[float]:
        return [self._p]

    def set_parameters(self, params: Sequence[float]) -> None:
        (p,) = check_parameter_count(params, 1, "Geometric")
        check_open_unit_interval("probability of success", p)
        self._p = p
        self._q = 1.0 - p

    def pmf(self, x: float) -> float:
        if not _is_integer(x) or x < 0:
            return 0.0
        return self._p * self._q**x

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        return 1.0 - self._q ** (math.floor(x) + 1.0)

    def inv_cdf(self, p: float) -> float:
        if within_machine_epsilon(p, 0.0) or within_machine_epsilon(p, 1.0) or not 0.0 < p < 1.0:
            raise InvalidProbabilityError(
                f"Geometric quantile requires p strictly inside (0, 1), got {p}"
            )
        return self._inv_cdf(p)

    def _inv_cdf(self, p: float) -> float:
        return geometric_inv_cdf(p, self._p)

    @property
    def mean(self) -> float:
        return self._q / self._p

    @property
    def variance(self) -> float:
        return self._q / (self._p * self._p)

    @property
    def domain(self) -> Interval:
        return Interval(0.0, math.inf)

    def first_order_loss(self, x: float) -> float:
        if x < 0.0:
            return self.mean - x
        if x > 0.0:
            b = self._q / self._p
            return b * self._q**x
        return self.mean

    def second_order_loss(self, x: float) -> float:
        mu = self.mean
        sbm = 0.5 * (self.variance + mu * mu - mu)
        if x < 0.0:
            s = 0.0
            y = 0
            while y > x:
                s += self.first_order_loss(y)
                y -= 1
            return s + sbm
        if x > 0.0:
            b = self._q / self._p
            return b * b * self._q**x
        return sbm

    def random_variable(self, stream: RNStreamIfc | None = None) -> GeometricRV:
        from pysimrv.rvariable import GeometricRV

        return GeometricRV(self._p, resolve_stream(stream))


class NegativeBinomial(DiscreteDistribution):
    """
    Number of failures before the r-th success.

    Parameters: [p, r] with 0 < p < 1 and r > 0 (r need not be integral).
    """

    parameter_names = ("prob_success", "num_successes")

    def __init__(
        self, prob_success: float = 0.5, num_successes: float = 1.0, stream: RNStreamIfc | None = None
    ) -> None:
        super().__init__(stream)
        self.set_parameters([prob_success, num_successes])

    @property
    def prob_success(self) -> float:
        return self._p

    @property
    def num_successes(self) -> float:
        return self._r

    @property
    def parameters(self) -> list[float]:
        return [self._p, self._r]

    def set_parameters(self, params: Sequence[float]) -> None:
        p, r = check_parameter_count(params, 2, "NegativeBinomial")
        check_open_unit_interval("probability of success", p)
        check_positive("number of successes", r)
        self._p = p
        self._r = r

    def pmf(self, x: float) -> float:
        if not _is_integer(x) or x < 0:
            return 0.0
        r = self._r
        log_pmf = (
            log_gamma_function(x + r)
            - log_gamma_function(r)
            - log_gamma_function(x + 1.0)
            + r * math.log(self._p)
            + x * math.log1p(-self._p)
        )
        return math.exp(log_pmf)

    def cdf(self, x: float) -> float:
        return negative_binomial_cdf(x, self._p, self._r)

    def _inv_cdf(self, p: float) -> float:
        return negative_binomial_inv_cdf(p, self._p, self._r)

    @property
    def mean(self) -> float:
        return self._r * (1.0 - self._p) / self._p

    @property
    def variance(self) -> float:
        return self._r * (1.0 - self._p) / (self._p * self._p)

    @property
    def domain(self) -> Interval:
        return Interval(0.0, math.inf)

    def random_variable(self, stream: RNStreamIfc | None = None) -> NegativeBinomialRV:
        from pysimrv.rvariable import NegativeBinomialRV

        return NegativeBinomialRV(self._p, self._r, resolve_stream(stream))


class Constant(DiscreteDistribution):
    """Degenerate distribution at a single value. Parameters: [value]."""

    parameter_names = ("value",)

    def __init__(self, value: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([value])

    @property
    def value(self) -> float:
        return self._value

    @property
    def parameters(self) -> list[float]:
        return [self._value]

    def set_parameters(self, params: Sequence[float]) -> None:
        (value,) = check_parameter_count(params, 1, "Constant")
        self._value = value

    def pmf(self, x: float) -> float:
        return 1.0 if x == self._value else 0.0

    def cdf(self, x: float) -> float:
        return 0.0 if x < self._value else 1.0

    def _inv_cdf(self, p: float) -> float:
        return self._value

    def sample(self) -> float:
        return self._value

    @property
    def mean(self) -> float:
        return self._value

    @property
    def variance(self) -> float:
        return 0.0

    @property
    def domain(self) -> Interval:
        return Interval(self._value, self._value)

    def random_variable(self, stream: RNStreamIfc | None = None) -> ConstantRV:
        from pysimrv.rvariable import ConstantRV

        return ConstantRV(self._value)
