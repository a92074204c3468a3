"""
Continuous random variables.

Most delegate to the ``pysimrv.variates`` functions. The Gamma, Beta and
Pearson variables hold a distribution bound to the same stream and invert
its cdf directly.
"""

from __future__ import annotations

from pysimrv.distributions.base import check_positive, check_range
from pysimrv.distributions.beta import Beta, GeneralizedBeta, PearsonType6
from pysimrv.distributions.continuous import check_triangular
from pysimrv.distributions.gamma import ChiSquared, Gamma, PearsonType5
from pysimrv.rng import RNStreamIfc
from pysimrv.rvariable.base import RVariable
from pysimrv.variates import (
    r_exponential,
    r_johnson_b,
    r_laplace,
    r_log_logistic,
    r_lognormal,
    r_normal,
    r_triangular,
    r_uniform,
    r_weibull,
)


class UniformRV(RVariable):
    parameter_names = ("minimum", "maximum")

    def __init__(
        self,
        minimum: float = 0.0,
        maximum: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_range("minimum", minimum, "maximum", maximum)
        super().__init__(stream, name)
        self._min = minimum
        self._max = maximum

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def maximum(self) -> float:
        return self._max

    def _generate(self) -> float:
        return r_uniform(self._min, self._max, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> UniformRV:
        return UniformRV(self._min, self._max, stream)


class NormalRV(RVariable):
    parameter_names = ("mean", "variance")

    def __init__(
        self,
        mean: float = 0.0,
        variance: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("variance", variance)
        super().__init__(stream, name)
        self._mean = mean
        self._variance = variance

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._variance

    def _generate(self) -> float:
        return r_normal(self._mean, self._variance, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> NormalRV:
        return NormalRV(self._mean, self._variance, stream)


class LognormalRV(RVariable):
    """Lognormal variable parameterized by its own mean and variance."""

    parameter_names = ("mean", "variance")

    def __init__(
        self,
        mean: float = 1.0,
        variance: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("mean", mean)
        check_positive("variance", variance)
        super().__init__(stream, name)
        self._mean = mean
        self._variance = variance

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._variance

    def _generate(self) -> float:
        return r_lognormal(self._mean, self._variance, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> LognormalRV:
        return LognormalRV(self._mean, self._variance, stream)


class ExponentialRV(RVariable):
    parameter_names = ("mean",)

    def __init__(self, mean: float = 1.0, stream: RNStreamIfc | None = None, name: str | None = None) -> None:
        check_positive("mean", mean)
        super().__init__(stream, name)
        self._mean = mean

    @property
    def mean(self) -> float:
        return self._mean

    def _generate(self) -> float:
        return r_exponential(self._mean, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> ExponentialRV:
        return ExponentialRV(self._mean, stream)


class WeibullRV(RVariable):
    parameter_names = ("shape", "scale")

    def __init__(
        self,
        shape: float = 1.0,
        scale: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("shape", shape)
        check_positive("scale", scale)
        super().__init__(stream, name)
        self._shape = shape
        self._scale = scale

    @property
    def shape(self) -> float:
        return self._shape

    @property
    def scale(self) -> float:
        return self._scale

    def _generate(self) -> float:
        return r_weibull(self._shape, self._scale, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> WeibullRV:
        return WeibullRV(self._shape, self._scale, stream)


class LogLogisticRV(RVariable):
    parameter_names = ("shape", "scale")

    def __init__(
        self,
        shape: float = 1.0,
        scale: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("shape", shape)
        check_positive("scale", scale)
        super().__init__(stream, name)
        self._shape = shape
        self._scale = scale

    @property
    def shape(self) -> float:
        return self._shape

    @property
    def scale(self) -> float:
        return self._scale

    def _generate(self) -> float:
        return r_log_logistic(self._shape, self._scale, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> LogLogisticRV:
        return LogLogisticRV(self._shape, self._scale, stream)


class LaplaceRV(RVariable):
    parameter_names = ("mean", "scale")

    def __init__(
        self,
        mean: float = 0.0,
        scale: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("scale", scale)
        super().__init__(stream, name)
        self._mean = mean
        self._scale = scale

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def scale(self) -> float:
        return self._scale

    def _generate(self) -> float:
        return r_laplace(self._mean, self._scale, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> LaplaceRV:
        return LaplaceRV(self._mean, self._scale, stream)


class JohnsonBRV(RVariable):
    parameter_names = ("alpha1", "alpha2", "minimum", "maximum")

    def __init__(
        self,
        alpha1: float = 0.0,
        alpha2: float = 1.0,
        minimum: float = 0.0,
        maximum: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("alpha2", alpha2)
        check_range("minimum", minimum, "maximum", maximum)
        super().__init__(stream, name)
        self._alpha1 = alpha1
        self._alpha2 = alpha2
        self._min = minimum
        self._max = maximum

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

    def _generate(self) -> float:
        return r_johnson_b(self._alpha1, self._alpha2, self._min, self._max, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> JohnsonBRV:
        return JohnsonBRV(self._alpha1, self._alpha2, self._min, self._max, stream)


class TriangularRV(RVariable):
    parameter_names = ("minimum", "mode", "maximum")

    def __init__(
        self,
        minimum: float = 0.0,
        mode: float = 0.5,
        maximum: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_triangular(minimum, mode, maximum)
        super().__init__(stream, name)
        self._min = minimum
        self._mode = mode
        self._max = maximum

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def mode(self) -> float:
        return self._mode

    @property
    def maximum(self) -> float:
        return self._max

    def _generate(self) -> float:
        return r_triangular(self._min, self._mode, self._max, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> TriangularRV:
        return TriangularRV(self._min, self._mode, self._max, stream)


class GammaRV(RVariable):
    parameter_names = ("shape", "scale")

    def __init__(
        self,
        shape: float = 1.0,
        scale: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("shape", shape)
        check_positive("scale", scale)
        super().__init__(stream, name)
        self._gamma = Gamma(shape, scale, self._stream)

    @property
    def shape(self) -> float:
        return self._gamma.shape

    @property
    def scale(self) -> float:
        return self._gamma.scale

    def _generate(self) -> float:
        return self._gamma.inv_cdf(self._stream.rand_u01())

    def new_instance(self, stream: RNStreamIfc | None = None) -> GammaRV:
        return GammaRV(self.shape, self.scale, stream)


class ChiSquaredRV(RVariable):
    parameter_names = ("dof",)

    def __init__(self, dof: float = 1.0, stream: RNStreamIfc | None = None, name: str | None = None) -> None:
        check_positive("degrees of freedom", dof)
        super().__init__(stream, name)
        self._chi = ChiSquared(dof, self._stream)

    @property
    def dof(self) -> float:
        return self._chi.dof

    def _generate(self) -> float:
        return self._chi.inv_cdf(self._stream.rand_u01())

    def new_instance(self, stream: RNStreamIfc | None = None) -> ChiSquaredRV:
        return ChiSquaredRV(self.dof, stream)


class PearsonType5RV(RVariable):
    parameter_names = ("shape", "scale")

    def __init__(
        self,
        shape: float = 1.0,
        scale: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("shape", shape)
        check_positive("scale", scale)
        super().__init__(stream, name)
        self._pearson = PearsonType5(shape, scale, self._stream)

    @property
    def shape(self) -> float:
        return self._pearson.shape

    @property
    def scale(self) -> float:
        return self._pearson.scale

    def _generate(self) -> float:
        return self._pearson.inv_cdf(self._stream.rand_u01())

    def new_instance(self, stream: RNStreamIfc | None = None) -> PearsonType5RV:
        return PearsonType5RV(self.shape, self.scale, stream)


class BetaRV(RVariable):
    parameter_names = ("alpha1", "alpha2")

    def __init__(
        self,
        alpha1: float = 1.0,
        alpha2: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("alpha1", alpha1)
        check_positive("alpha2", alpha2)
        super().__init__(stream, name)
        self._beta = Beta(alpha1, alpha2, self._stream)

    @property
    def alpha1(self) -> float:
        return self._beta.alpha1

    @property
    def alpha2(self) -> float:
        return self._beta.alpha2

    def _generate(self) -> float:
        return self._beta.inv_cdf(self._stream.rand_u01())

    def new_instance(self, stream: RNStreamIfc | None = None) -> BetaRV:
        return BetaRV(self.alpha1, self.alpha2, stream)


class GeneralizedBetaRV(RVariable):
    parameter_names = ("alpha1", "alpha2", "minimum", "maximum")

    def __init__(
        self,
        alpha1: float = 1.0,
        alpha2: float = 1.0,
        minimum: float = 0.0,
        maximum: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("alpha1", alpha1)
        check_positive("alpha2", alpha2)
        check_range("minimum", minimum, "maximum", maximum)
        super().__init__(stream, name)
        self._beta = GeneralizedBeta(alpha1, alpha2, minimum, maximum, self._stream)

    @property
    def alpha1(self) -> float:
        return self._beta.alpha1

    @property
    def alpha2(self) -> float:
        return self._beta.alpha2

    @property
    def minimum(self) -> float:
        return self._beta.minimum

    @property
    def maximum(self) -> float:
        return self._beta.maximum

    def _generate(self) -> float:
        return self._beta.inv_cdf(self._stream.rand_u01())

    def new_instance(self, stream: RNStreamIfc | None = None) -> GeneralizedBetaRV:
        return GeneralizedBetaRV(self.alpha1, self.alpha2, self.minimum, self.maximum, stream)


class PearsonType6RV(RVariable):
    parameter_names = ("alpha1", "alpha2", "beta")

    def __init__(
        self,
        alpha1: float = 2.0,
        alpha2: float = 3.0,
        beta: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("alpha1", alpha1)
        check_positive("alpha2", alpha2)
        check_positive("beta", beta)
        super().__init__(stream, name)
        self._pearson = PearsonType6(alpha1, alpha2, beta, self._stream)

    @property
    def alpha1(self) -> float:
        return self._pearson.alpha1

    @property
    def alpha2(self) -> float:
        return self._pearson.alpha2

    @property
    def beta(self) -> float:
        return self._pearson.beta

    def _generate(self) -> float:
        return self._pearson.inv_cdf(self._stream.rand_u01())

    def new_instance(self, stream: RNStreamIfc | None = None) -> PearsonType6RV:
        return PearsonType6RV(self.alpha1, self.alpha2, self.beta, stream)
