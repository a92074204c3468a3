"""
Continuous distributions with closed-form quantile functions.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from scipy import integrate

from pysimrv.distributions.base import (
    POSITIVE_REAL_LINE,
    ContinuousDistribution,
    Interval,
    LossFunctionDistribution,
    check_parameter_count,
    check_positive,
    check_range,
)
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc, resolve_stream
from pysimrv.special import gamma_function, std_normal_cdf, std_normal_inv_cdf, std_normal_pdf

if TYPE_CHECKING:
    from pysimrv.rvariable import (
        ExponentialRV,
        JohnsonBRV,
        LaplaceRV,
        LognormalRV,
        LogLogisticRV,
        NormalRV,
        TriangularRV,
        UniformRV,
        WeibullRV,
    )


# Quantile functions


def uniform_inv_cdf(p: float, minimum: float, maximum: float) -> float:
    return minimum + p * (maximum - minimum)


def normal_inv_cdf(p: float, mean: float, variance: float) -> float:
    return mean + math.sqrt(variance) * std_normal_inv_cdf(p)


def lognormal_parameters(mean: float, variance: float) -> tuple[float, float]:
    """(mu, sigma) of the underlying normal for a lognormal with the given mean and variance."""
    d = variance + mean * mean
    t = mean * mean
    mu = math.log(t / math.sqrt(d))
    sigma = math.sqrt(math.log(d / t))
    return mu, sigma


def lognormal_inv_cdf(p: float, mean: float, variance: float) -> float:
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return math.inf
    mu, sigma = lognormal_parameters(mean, variance)
    return math.exp(mu + sigma * std_normal_inv_cdf(p))


def exponential_inv_cdf(p: float, mean: float) -> float:
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return math.inf
    return -mean * math.log1p(-p)


def weibull_inv_cdf(p: float, shape: float, scale: float) -> float:
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return math.inf
    return scale * (-math.log1p(-p)) ** (1.0 / shape)


def log_logistic_inv_cdf(p: float, shape: float, scale: float) -> float:
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return math.inf
    return scale * (p / (1.0 - p)) ** (1.0 / shape)


def laplace_inv_cdf(p: float, mean: float, scale: float) -> float:
    if p <= 0.0:
        return -math.inf
    if p >= 1.0:
        return math.inf
    u = p - 0.5
    return mean - scale * math.copysign(1.0, u) * math.log(1.0 - 2.0 * abs(u))


def johnson_b_inv_cdf(p: float, alpha1: float, alpha2: float, minimum: float, maximum: float) -> float:
    if p <= 0.0:
        return minimum
    if p >= 1.0:
        return maximum
    z = std_normal_inv_cdf(p)
    y = math.exp((z - alpha1) / alpha2)
    if math.isinf(y):
        return maximum
    return (minimum + maximum * y) / (y + 1.0)


def triangular_inv_cdf(p: float, minimum: float, mode: float, maximum: float) -> float:
    """Quantile of triang(0, c, 1) with c = (mode - min) / range, rescaled to [min, max]."""
    width = maximum - minimum
    c = (mode - minimum) / width
    if c == 0.0:
        x = 1.0 - math.sqrt(1.0 - p)
    elif c == 1.0:
        x = math.sqrt(p)
    elif p < c:
        x = math.sqrt(c * p)
    else:
        x = 1.0 - math.sqrt((1.0 - c) * (1.0 - p))
    return minimum + width * x


def check_triangular(minimum: float, mode: float, maximum: float) -> None:
    if minimum > mode:
        raise InvalidParameterError(f"min ({minimum}) must be <= mode ({mode})")
    if minimum >= maximum:
        raise InvalidParameterError(f"min ({minimum}) must be < max ({maximum})")
    if mode > maximum:
        raise InvalidParameterError(f"mode ({mode}) must be <= max ({maximum})")


class Uniform(ContinuousDistribution):
    """Uniform on [min, max]. Parameters: [min, max]."""

    parameter_names = ("minimum", "maximum")

    def __init__(
        self, minimum: float = 0.0, maximum: float = 1.0, stream: RNStreamIfc | None = None
    ) -> None:
        super().__init__(stream)
        self.set_parameters([minimum, maximum])

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def maximum(self) -> float:
        return self._max

    @property
    def parameters(self) -> list[float]:
        return [self._min, self._max]

    def set_parameters(self, params: Sequence[float]) -> None:
        lo, hi = check_parameter_count(params, 2, "Uniform")
        check_range("minimum", lo, "maximum", hi)
        self._min = lo
        self._max = hi

    def pdf(self, x: float) -> float:
        if self._min <= x <= self._max:
            return 1.0 / (self._max - self._min)
        return 0.0

    def cdf(self, x: float) -> float:
        if x < self._min:
            return 0.0
        if x >= self._max:
            return 1.0
        return (x - self._min) / (self._max - self._min)

    def _inv_cdf(self, p: float) -> float:
        return uniform_inv_cdf(p, self._min, self._max)

    @property
    def mean(self) -> float:
        return (self._min + self._max) / 2.0

    @property
    def variance(self) -> float:
        w = self._max - self._min
        return w * w / 12.0

    @property
    def domain(self) -> Interval:
        return Interval(self._min, self._max)

    def random_variable(self, stream: RNStreamIfc | None = None) -> UniformRV:
        from pysimrv.rvariable import UniformRV

        return UniformRV(self._min, self._max, resolve_stream(stream))


class Normal(ContinuousDistribution, LossFunctionDistribution):
    """Normal distribution. Parameters: [mean, variance]."""

    parameter_names = ("mean", "variance")

    def __init__(self, mean: float = 0.0, variance: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([mean, variance])

    @property
    def parameters(self) -> list[float]:
        return [self._mean, self._variance]

    def set_parameters(self, params: Sequence[float]) -> None:
        mean, variance = check_parameter_count(params, 2, "Normal")
        check_positive("variance", variance)
        self._mean = mean
        self._variance = variance
        self._sd = math.sqrt(variance)

    def pdf(self, x: float) -> float:
        return std_normal_pdf((x - self._mean) / self._sd) / self._sd

    def cdf(self, x: float) -> float:
        return std_normal_cdf((x - self._mean) / self._sd)

    def _inv_cdf(self, p: float) -> float:
        return normal_inv_cdf(p, self._mean, self._variance)

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._variance

    def first_order_loss(self, x: float) -> float:
        z = (x - self._mean) / self._sd
        return self._sd * (std_normal_pdf(z) - z * (1.0 - std_normal_cdf(z)))

    def second_order_loss(self, x: float) -> float:
        z = (x - self._mean) / self._sd
        g2 = (z * z + 1.0) * (1.0 - std_normal_cdf(z)) - z * std_normal_pdf(z)
        return 0.5 * self._variance * g2

    def random_variable(self, stream: RNStreamIfc | None = None) -> NormalRV:
        from pysimrv.rvariable import NormalRV

        return NormalRV(self._mean, self._variance, resolve_stream(stream))


class Lognormal(ContinuousDistribution, LossFunctionDistribution):
    """
    Lognormal distribution parameterized by its own mean and variance.

    The underlying normal has mu = log(mean^2 / sqrt(variance + mean^2)) and
    sigma = sqrt(log(1 + variance / mean^2)). Parameters: [mean, variance].
    """

    parameter_names = ("mean", "variance")

    def __init__(self, mean: float = 1.0, variance: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([mean, variance])

    @property
    def parameters(self) -> list[float]:
        return [self._mean, self._variance]

    def set_parameters(self, params: Sequence[float]) -> None:
        mean, variance = check_parameter_count(params, 2, "Lognormal")
        check_positive("mean", mean)
        check_positive("variance", variance)
        self._mean = mean
        self._variance = variance
        self._mu, self._sigma = lognormal_parameters(mean, variance)

    @property
    def normal_mean(self) -> float:
        """mu of the underlying normal."""
        return self._mu

    @property
    def normal_std_dev(self) -> float:
        """sigma of the underlying normal."""
        return self._sigma

    def pdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        z = (math.log(x) - self._mu) / self._sigma
        return std_normal_pdf(z) / (x * self._sigma)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return std_normal_cdf((math.log(x) - self._mu) / self._sigma)

    def _inv_cdf(self, p: float) -> float:
        return lognormal_inv_cdf(p, self._mean, self._variance)

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._variance

    @property
    def domain(self) -> Interval:
        return POSITIVE_REAL_LINE

    def moment(self, n: int) -> float:
        """Raw moment E[X^n] = exp(n mu + n^2 sigma^2 / 2)."""
        return math.exp(n * self._mu + 0.5 * n * n * self._sigma * self._sigma)

    @property
    def moment3(self) -> float:
        return self.moment(3)

    @property
    def moment4(self) -> float:
        return self.moment(4)

    @property
    def skewness(self) -> float:
        t = math.exp(self._sigma * self._sigma)
        return (t + 2.0) * math.sqrt(t - 1.0)

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        t = math.exp(self._sigma * self._sigma)
        return t**4 + 2.0 * t**3 + 3.0 * t**2 - 6.0

    def first_order_loss(self, x: float) -> float:
        if x <= 0.0:
            return self._mean - x
        z = (math.log(x) - self._mu) / self._sigma
        return self._mean * std_normal_cdf(self._sigma - z) - x * std_normal_cdf(-z)

    def second_order_loss(self, x: float) -> float:
        m = self._mean
        m2 = self._variance + m * m
        if x <= 0.0:
            return 0.5 * (m2 - 2.0 * x * m + x * x)
        z = (math.log(x) - self._mu) / self._sigma
        s = self._sigma
        return 0.5 * (
            m2 * std_normal_cdf(2.0 * s - z)
            - 2.0 * x * m * std_normal_cdf(s - z)
            + x * x * std_normal_cdf(-z)
        )

    def random_variable(self, stream: RNStreamIfc | None = None) -> LognormalRV:
        from pysimrv.rvariable import LognormalRV

        return LognormalRV(self._mean, self._variance, resolve_stream(stream))


class Exponential(ContinuousDistribution, LossFunctionDistribution):
    """Exponential distribution. Parameters: [mean]."""

    parameter_names = ("mean",)

    def __init__(self, mean: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([mean])

    @property
    def parameters(self) -> list[float]:
        return [self._mean]

    def set_parameters(self, params: Sequence[float]) -> None:
        (mean,) = check_parameter_count(params, 1, "Exponential")
        check_positive("mean", mean)
        self._mean = mean

    def pdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        return math.exp(-x / self._mean) / self._mean

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        return 1.0 - math.exp(-x / self._mean)

    def _inv_cdf(self, p: float) -> float:
        return exponential_inv_cdf(p, self._mean)

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._mean * self._mean

    @property
    def domain(self) -> Interval:
        return POSITIVE_REAL_LINE

    @property
    def moment3(self) -> float:
        return self._mean**3 * gamma_function(4.0)

    @property
    def moment4(self) -> float:
        return self._mean**4 * gamma_function(5.0)

    @property
    def skewness(self) -> float:
        return 2.0

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return 6.0

    def first_order_loss(self, x: float) -> float:
        if x < 0.0:
            return self._mean - x
        return self._mean * math.exp(-x / self._mean)

    def second_order_loss(self, x: float) -> float:
        m = self._mean
        if x < 0.0:
            return 0.5 * (m * m + (m - x) ** 2)
        return m * m * math.exp(-x / m)

    def random_variable(self, stream: RNStreamIfc | None = None) -> ExponentialRV:
        from pysimrv.rvariable import ExponentialRV

        return ExponentialRV(self._mean, resolve_stream(stream))


class Weibull(ContinuousDistribution):
    """Weibull distribution. Parameters: [shape, scale]."""

    parameter_names = ("shape", "scale")

    def __init__(self, shape: float = 1.0, scale: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([shape, scale])

    @property
    def shape(self) -> float:
        return self._shape

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def parameters(self) -> list[float]:
        return [self._shape, self._scale]

    def set_parameters(self, params: Sequence[float]) -> None:
        shape, scale = check_parameter_count(params, 2, "Weibull")
        check_positive("shape", shape)
        check_positive("scale", scale)
        self._shape = shape
        self._scale = scale

    def pdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        a, b = self._shape, self._scale
        if x == 0.0:
            if a < 1.0:
                return math.inf
            return 1.0 / b if a == 1.0 else 0.0
        return (a / b) * (x / b) ** (a - 1.0) * math.exp(-((x / b) ** a))

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return 1.0 - math.exp(-((x / self._scale) ** self._shape))

    def _inv_cdf(self, p: float) -> float:
        return weibull_inv_cdf(p, self._shape, self._scale)

    @property
    def mean(self) -> float:
        a = self._shape
        return self._scale / a * gamma_function(1.0 / a)

    @property
    def variance(self) -> float:
        a, b = self._shape, self._scale
        g1 = gamma_function(1.0 / a)
        g2 = gamma_function(2.0 / a)
        return b * b / a * (2.0 * g2 - g1 * g1 / a)

    @property
    def domain(self) -> Interval:
        return POSITIVE_REAL_LINE

    def random_variable(self, stream: RNStreamIfc | None = None) -> WeibullRV:
        from pysimrv.rvariable import WeibullRV

        return WeibullRV(self._shape, self._scale, resolve_stream(stream))


class LogLogistic(ContinuousDistribution):
    """Log-logistic distribution. Parameters: [shape, scale]."""

    parameter_names = ("shape", "scale")

    def __init__(self, shape: float = 1.0, scale: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([shape, scale])

    @property
    def shape(self) -> float:
        return self._shape

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def parameters(self) -> list[float]:
        return [self._shape, self._scale]

    def set_parameters(self, params: Sequence[float]) -> None:
        shape, scale = check_parameter_count(params, 2, "LogLogistic")
        check_positive("shape", shape)
        check_positive("scale", scale)
        self._shape = shape
        self._scale = scale

    def pdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        a, b = self._shape, self._scale
        if x == 0.0:
            if a < 1.0:
                return math.inf
            return 1.0 / b if a == 1.0 else 0.0
        y = (x / b) ** a
        return (a / b) * (x / b) ** (a - 1.0) / ((1.0 + y) ** 2)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return 1.0 / (1.0 + (x / self._scale) ** (-self._shape))

    def _inv_cdf(self, p: float) -> float:
        return log_logistic_inv_cdf(p, self._shape, self._scale)

    @property
    def mean(self) -> float:
        if self._shape <= 1.0:
            return math.nan
        theta = math.pi / self._shape
        return self._scale * theta / math.sin(theta)

    @property
    def variance(self) -> float:
        if self._shape <= 2.0:
            return math.nan
        theta = math.pi / self._shape
        b = self._scale
        return b * b * (2.0 * theta / math.sin(2.0 * theta) - theta * theta / math.sin(theta) ** 2)

    @property
    def domain(self) -> Interval:
        return POSITIVE_REAL_LINE

    def random_variable(self, stream: RNStreamIfc | None = None) -> LogLogisticRV:
        from pysimrv.rvariable import LogLogisticRV

        return LogLogisticRV(self._shape, self._scale, resolve_stream(stream))


class Laplace(ContinuousDistribution):
    """Laplace (double exponential) distribution. Parameters: [mean, scale]."""

    parameter_names = ("mean", "scale")

    def __init__(self, mean: float = 0.0, scale: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([mean, scale])

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def parameters(self) -> list[float]:
        return [self._mean, self._scale]

    def set_parameters(self, params: Sequence[float]) -> None:
        mean, scale = check_parameter_count(params, 2, "Laplace")
        check_positive("scale", scale)
        self._mean = mean
        self._scale = scale

    def pdf(self, x: float) -> float:
        return math.exp(-abs(x - self._mean) / self._scale) / (2.0 * self._scale)

    def cdf(self, x: float) -> float:
        if x < self._mean:
            return 0.5 * math.exp((x - self._mean) / self._scale)
        return 1.0 - 0.5 * math.exp(-(x - self._mean) / self._scale)

    def _inv_cdf(self, p: float) -> float:
        return laplace_inv_cdf(p, self._mean, self._scale)

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return 2.0 * self._scale * self._scale

    def random_variable(self, stream: RNStreamIfc | None = None) -> LaplaceRV:
        from pysimrv.rvariable import LaplaceRV

        return LaplaceRV(self._mean, self._scale, resolve_stream(stream))


class JohnsonB(ContinuousDistribution):
    """
    Johnson SB distribution on [min, max].

    If Z is standard normal, X = (min + max * Y) / (1 + Y) with
    Y = exp((Z - alpha1) / alpha2). Parameters: [alpha1, alpha2, min, max].
    The moments have no closed form and are computed by quadrature.
    """

    parameter_names = ("alpha1", "alpha2", "minimum", "maximum")

    def __init__(
        self,
        alpha1: float = 0.0,
        alpha2: float = 1.0,
        minimum: float = 0.0,
        maximum: float = 1.0,
        stream: RNStreamIfc | None = None,
    ) -> None:
        super().__init__(stream)
        self.set_parameters([alpha1, alpha2, minimum, maximum])

    @property
    def alpha1(self) -> float:
        return self._alpha1

    @property
    def alpha2(self) -> float:
        return self._alpha2

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def maximum(self) -> float:
        return self._max

    @property
    def parameters(self) -> list[float]:
        return [self._alpha1, self._alpha2, self._min, self._max]

    def set_parameters(self, params: Sequence[float]) -> None:
        a1, a2, lo, hi = check_parameter_count(params, 4, "JohnsonB")
        check_positive("alpha2", a2)
        check_range("minimum", lo, "maximum", hi)
        self._alpha1 = a1
        self._alpha2 = a2
        self._min = lo
        self._max = hi

    def _z(self, x: float) -> float:
        return self._alpha1 + self._alpha2 * math.log((x - self._min) / (self._max - x))

    def pdf(self, x: float) -> float:
        if x <= self._min or x >= self._max:
            return 0.0
        jacobian = self._alpha2 * (self._max - self._min) / ((x - self._min) * (self._max - x))
        return jacobian * std_normal_pdf(self._z(x))

    def cdf(self, x: float) -> float:
        if x <= self._min:
            return 0.0
        if x >= self._max:
            return 1.0
        return std_normal_cdf(self._z(x))

    def _inv_cdf(self, p: float) -> float:
        return johnson_b_inv_cdf(p, self._alpha1, self._alpha2, self._min, self._max)

    def _raw_moment(self, n: int) -> float:
        value, _ = integrate.quad(lambda u: self._inv_cdf(u) ** n, 0.0, 1.0, limit=200)
        return value

    @property
    def mean(self) -> float:
        return self._raw_moment(1)

    @property
    def variance(self) -> float:
        m = self._raw_moment(1)
        return self._raw_moment(2) - m * m

    @property
    def domain(self) -> Interval:
        return Interval(self._min, self._max)

    def random_variable(self, stream: RNStreamIfc | None = None) -> JohnsonBRV:
        from pysimrv.rvariable import JohnsonBRV

        return JohnsonBRV(self._alpha1, self._alpha2, self._min, self._max, resolve_stream(stream))


class Triangular(ContinuousDistribution):
    """
    Triangular distribution on [min, max] with peak at mode.

    mode == min gives a left-triangular shape, mode == max a
    right-triangular one. Parameters: [min, mode, max].
    """

    parameter_names = ("minimum", "mode", "maximum")

    def __init__(
        self,
        minimum: float = 0.0,
        mode: float = 0.5,
        maximum: float = 1.0,
        stream: RNStreamIfc | None = None,
    ) -> None:
        super().__init__(stream)
        self.set_parameters([minimum, mode, maximum])

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def mode(self) -> float:
        return self._mode

    @property
    def maximum(self) -> float:
        return self._max

    @property
    def parameters(self) -> list[float]:
        return [self._min, self._mode, self._max]

    def set_parameters(self, params: Sequence[float]) -> None:
        lo, mode, hi = check_parameter_count(params, 3, "Triangular")
        check_triangular(lo, mode, hi)
        self._min = lo
        self._mode = mode
        self._max = hi

    def pdf(self, x: float) -> float:
        lo, c, hi = self._min, self._mode, self._max
        width = hi - lo
        if x < lo or x > hi:
            return 0.0
        if x < c:
            return 2.0 * (x - lo) / (width * (c - lo))
        if x == c:
            return 2.0 / width
        return 2.0 * (hi - x) / (width * (hi - c))

    def cdf(self, x: float) -> float:
        lo, c, hi = self._min, self._mode, self._max
        width = hi - lo
        if x <= lo:
            return 0.0
        if x >= hi:
            return 1.0
        if x <= c:
            return (x - lo) ** 2 / (width * (c - lo))
        return 1.0 - (hi - x) ** 2 / (width * (hi - c))

    def _inv_cdf(self, p: float) -> float:
        return triangular_inv_cdf(p, self._min, self._mode, self._max)

    @property
    def mean(self) -> float:
        return (self._min + self._mode + self._max) / 3.0

    @property
    def variance(self) -> float:
        a, c, b = self._min, self._mode, self._max
        return (a * a + b * b + c * c - a * b - a * c - b * c) / 18.0

    @property
    def skewness(self) -> float:
        a, c, b = self._min, self._mode, self._max
        q = a * a + b * b + c * c - a * b - a * c - b * c
        return math.sqrt(2.0) * (a + b - 2.0 * c) * (2.0 * a - b - c) * (a - 2.0 * b + c) / (5.0 * q**1.5)

    @property
    def domain(self) -> Interval:
        return Interval(self._min, self._max)

    def random_variable(self, stream: RNStreamIfc | None = None) -> TriangularRV:
        from pysimrv.rvariable import TriangularRV

        return TriangularRV(self._min, self._mode, self._max, resolve_stream(stream))
