"""
Gamma family: Gamma, ChiSquared and PearsonType5.

The Gamma quantile goes through the inverse chi-square function; Pearson
type V is the reciprocal of a Gamma variate.
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
)
from pysimrv.rng import RNStreamIfc, resolve_stream
from pysimrv.special import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_NUMERICAL_PRECISION,
    incomplete_gamma,
    inv_chi_square_distribution,
    log_gamma_function,
)

if TYPE_CHECKING:
    from pysimrv.rvariable import ChiSquaredRV, GammaRV, PearsonType5RV


def gamma_inv_cdf(p: float, shape: float, scale: float) -> float:
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return math.inf
    if shape == 1.0:
        return -scale * math.log1p(-p)
    chi = inv_chi_square_distribution(
        p,
        2.0 * shape,
        log_gamma_function(shape),
        DEFAULT_MAX_ITERATIONS,
        DEFAULT_NUMERICAL_PRECISION,
    )
    return 0.5 * scale * chi


def chi_squared_inv_cdf(p: float, dof: float) -> float:
    return inv_chi_square_distribution(p, dof)


def pearson_type5_inv_cdf(p: float, shape: float, scale: float) -> float:
    """Quantile of 1/Y with Y ~ Gamma(shape, 1/scale)."""
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return math.inf
    y = gamma_inv_cdf(1.0 - p, shape, 1.0 / scale)
    return math.inf if y == 0.0 else 1.0 / y


def _gamma_pdf(x: float, shape: float, scale: float) -> float:
    if x < 0.0:
        return 0.0
    if x == 0.0:
        if shape < 1.0:
            return math.inf
        return 1.0 / scale if shape == 1.0 else 0.0
    log_pdf = (shape - 1.0) * math.log(x) - x / scale - log_gamma_function(shape) - shape * math.log(scale)
    return math.exp(log_pdf)


class Gamma(ContinuousDistribution):
    """Gamma distribution. Parameters: [shape, scale]."""

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
        shape, scale = check_parameter_count(params, 2, "Gamma")
        check_positive("shape", shape)
        check_positive("scale", scale)
        self._shape = shape
        self._scale = scale

    def pdf(self, x: float) -> float:
        return _gamma_pdf(x, self._shape, self._scale)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return incomplete_gamma(self._shape, x / self._scale)

    def _inv_cdf(self, p: float) -> float:
        return gamma_inv_cdf(p, self._shape, self._scale)

    @property
    def mean(self) -> float:
        return self._shape * self._scale

    @property
    def variance(self) -> float:
        return self._shape * self._scale * self._scale

    @property
    def skewness(self) -> float:
        return 2.0 / math.sqrt(self._shape)

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return 6.0 / self._shape

    @property
    def domain(self) -> Interval:
        return POSITIVE_REAL_LINE

    def random_variable(self, stream: RNStreamIfc | None = None) -> GammaRV:
        from pysimrv.rvariable import GammaRV

        return GammaRV(self._shape, self._scale, resolve_stream(stream))


class ChiSquared(ContinuousDistribution):
    """Chi-squared distribution. Parameters: [dof]."""

    parameter_names = ("dof",)

    def __init__(self, dof: float = 1.0, stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters([dof])

    @property
    def dof(self) -> float:
        return self._dof

    @property
    def parameters(self) -> list[float]:
        return [self._dof]

    def set_parameters(self, params: Sequence[float]) -> None:
        (dof,) = check_parameter_count(params, 1, "ChiSquared")
        check_positive("degrees of freedom", dof)
        self._dof = dof

    def pdf(self, x: float) -> float:
        return _gamma_pdf(x, 0.5 * self._dof, 2.0)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return incomplete_gamma(0.5 * self._dof, 0.5 * x)

    def _inv_cdf(self, p: float) -> float:
        return chi_squared_inv_cdf(p, self._dof)

    @property
    def mean(self) -> float:
        return self._dof

    @property
    def variance(self) -> float:
        return 2.0 * self._dof

    @property
    def domain(self) -> Interval:
        return POSITIVE_REAL_LINE

    def random_variable(self, stream: RNStreamIfc | None = None) -> ChiSquaredRV:
        from pysimrv.rvariable import ChiSquaredRV

        return ChiSquaredRV(self._dof, resolve_stream(stream))


class PearsonType5(ContinuousDistribution):
    """
    Pearson type V (inverted gamma) distribution.

    X = 1/Y where Y ~ Gamma(shape, 1/scale). The mean exists only for
    shape > 1 and the variance only for shape > 2; otherwise they are NaN.
    Parameters: [shape, scale].
    """

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
        shape, scale = check_parameter_count(params, 2, "PearsonType5")
        check_positive("shape", shape)
        check_positive("scale", scale)
        self._shape = shape
        self._scale = scale
        self._gamma = Gamma(shape, 1.0 / scale, self._stream)

    def pdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        a, b = self._shape, self._scale
        log_pdf = -(a + 1.0) * math.log(x) - b / x + a * math.log(b) - log_gamma_function(a)
        return math.exp(log_pdf)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return 1.0 - self._gamma.cdf(1.0 / x)

    def _inv_cdf(self, p: float) -> float:
        return pearson_type5_inv_cdf(p, self._shape, self._scale)

    @property
    def mean(self) -> float:
        if self._shape <= 1.0:
            return math.nan
        return self._scale / (self._shape - 1.0)

    @property
    def variance(self) -> float:
        a = self._shape
        if a <= 2.0:
            return math.nan
        return self._scale**2 / ((a - 2.0) * (a - 1.0) ** 2)

    @property
    def domain(self) -> Interval:
        return POSITIVE_REAL_LINE

    def random_variable(self, stream: RNStreamIfc | None = None) -> PearsonType5RV:
        from pysimrv.rvariable import PearsonType5RV

        return PearsonType5RV(self._shape, self._scale, resolve_stream(stream))
