"""
Bivariate normal and lognormal random variables.
"""

from __future__ import annotations

import math

from pysimrv.distributions.base import check_positive
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc
from pysimrv.rvariable.ar1 import check_correlation
from pysimrv.rvariable.base import MVRVariable
from pysimrv.special import std_normal_inv_cdf


class BivariateNormalRV(MVRVariable):
    """
    Pair of correlated normal values.

    With independent standard normals z0 and z1,
    x0 = mean1 + sd1 * z0 and
    x1 = mean2 + sd2 * (rho * z0 + sqrt(1 - rho^2) * z1).
    """

    def __init__(
        self,
        mean1: float = 0.0,
        var1: float = 1.0,
        mean2: float = 0.0,
        var2: float = 1.0,
        correlation: float = 0.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("var1", var1)
        check_positive("var2", var2)
        check_correlation(correlation)
        super().__init__(stream, name)
        self._mean1 = mean1
        self._var1 = var1
        self._mean2 = mean2
        self._var2 = var2
        self._rho = correlation

    @property
    def mean1(self) -> float:
        return self._mean1

    @property
    def variance1(self) -> float:
        return self._var1

    @property
    def mean2(self) -> float:
        return self._mean2

    @property
    def variance2(self) -> float:
        return self._var2

    @property
    def correlation(self) -> float:
        return self._rho

    def _generate(self) -> list[float]:
        z0 = std_normal_inv_cdf(self._stream.rand_u01())
        z1 = std_normal_inv_cdf(self._stream.rand_u01())
        s1 = math.sqrt(self._var1)
        s2 = math.sqrt(self._var2)
        x0 = self._mean1 + s1 * z0
        x1 = self._mean2 + s2 * (self._rho * z0 + math.sqrt(1.0 - self._rho * self._rho) * z1)
        return [x0, x1]

    def new_instance(self, stream: RNStreamIfc | None = None) -> BivariateNormalRV:
        return BivariateNormalRV(self._mean1, self._var1, self._mean2, self._var2, self._rho, stream)

    def __repr__(self) -> str:
        return (
            f"BivariateNormalRV(mu1={self._mean1}, var1={self._var1}, "
            f"mu2={self._mean2}, var2={self._var2}, rho={self._rho})"
        )


class BivariateLogNormalRV(MVRVariable):
    """
    Pair of correlated lognormal values.

    The means, variances and correlation are those of the lognormal pair.
    They are matched to an underlying bivariate normal whose output is
    exponentiated.
    """

    def __init__(
        self,
        mean1: float = 1.0,
        var1: float = 1.0,
        mean2: float = 1.0,
        var2: float = 1.0,
        correlation: float = 0.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("mean1", mean1)
        check_positive("var1", var1)
        check_positive("mean2", mean2)
        check_positive("var2", var2)
        check_correlation(correlation)

        n_mean1 = math.log(mean1 * mean1 / math.sqrt(mean1 * mean1 + var1))
        n_var1 = math.log(1.0 + var1 / (mean1 * mean1))
        n_mean2 = math.log(mean2 * mean2 / math.sqrt(mean2 * mean2 + var2))
        n_var2 = math.log(1.0 + var2 / (mean2 * mean2))
        arg = 1.0 + correlation * math.sqrt(var1 * var2) / abs(mean1 * mean2)
        if arg <= 0.0:
            raise InvalidParameterError(
                f"correlation {correlation} is not attainable for these lognormal marginals"
            )
        n_rho = math.log(arg) / math.sqrt(n_var1 * n_var2)
        if not -1.0 <= n_rho <= 1.0:
            raise InvalidParameterError(
                f"correlation {correlation} is not attainable for these lognormal marginals"
            )

        super().__init__(stream, name)
        self._mean1 = mean1
        self._var1 = var1
        self._mean2 = mean2
        self._var2 = var2
        self._rho = correlation
        self._normal = BivariateNormalRV(n_mean1, n_var1, n_mean2, n_var2, n_rho, self._stream)

    @property
    def mean1(self) -> float:
        return self._mean1

    @property
    def variance1(self) -> float:
        return self._var1

    @property
    def mean2(self) -> float:
        return self._mean2

    @property
    def variance2(self) -> float:
        return self._var2

    @property
    def correlation(self) -> float:
        return self._rho

    @property
    def normal(self) -> BivariateNormalRV:
        """The underlying bivariate normal."""
        return self._normal

    def _generate(self) -> list[float]:
        return [math.exp(x) for x in self._normal.sample()]

    def new_instance(self, stream: RNStreamIfc | None = None) -> BivariateLogNormalRV:
        return BivariateLogNormalRV(self._mean1, self._var1, self._mean2, self._var2, self._rho, stream)

    def __repr__(self) -> str:
        return (
            f"BivariateLogNormalRV(mu1={self._mean1}, var1={self._var1}, "
            f"mu2={self._mean2}, var2={self._var2}, rho={self._rho})"
        )
