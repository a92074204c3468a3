"""
Discrete random variables.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import ClassVar

from pysimrv.distributions.base import (
    check_integer,
    check_open_unit_interval,
    check_positive,
    check_range,
    check_unit_interval,
)
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc
from pysimrv.rvariable.base import RVariable
from pysimrv.variates import (
    is_valid_cdf,
    r_bernoulli,
    r_binomial,
    r_duniform,
    r_geometric,
    r_neg_binomial,
    r_poisson,
    randomly_select,
)


class BernoulliRV(RVariable):
    parameter_names = ("prob_success",)

    def __init__(
        self, prob_success: float = 0.5, stream: RNStreamIfc | None = None, name: str | None = None
    ) -> None:
        check_unit_interval("probability of success", prob_success)
        super().__init__(stream, name)
        self._p = prob_success

    @property
    def prob_success(self) -> float:
        return self._p

    def _generate(self) -> float:
        return r_bernoulli(self._p, self._stream)

    def sample_boolean(self) -> bool:
        """One draw as a boolean."""
        return self.sample() == 1.0

    def new_instance(self, stream: RNStreamIfc | None = None) -> BernoulliRV:
        return BernoulliRV(self._p, stream)


class BinomialRV(RVariable):
    parameter_names = ("prob_success", "num_trials")

    def __init__(
        self,
        prob_success: float = 0.5,
        num_trials: int = 1,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_unit_interval("probability of success", prob_success)
        n = check_integer("number of trials", num_trials)
        check_positive("number of trials", n)
        super().__init__(stream, name)
        self._p = prob_success
        self._n = n

    @property
    def prob_success(self) -> float:
        return self._p

    @property
    def num_trials(self) -> int:
        return self._n

    def _generate(self) -> float:
        return r_binomial(self._p, self._n, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> BinomialRV:
        return BinomialRV(self._p, self._n, stream)


class PoissonRV(RVariable):
    parameter_names = ("mean",)

    def __init__(self, mean: float = 1.0, stream: RNStreamIfc | None = None, name: str | None = None) -> None:
        check_positive("mean", mean)
        super().__init__(stream, name)
        self._mean = mean

    @property
    def mean(self) -> float:
        return self._mean

    def _generate(self) -> float:
        return r_poisson(self._mean, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> PoissonRV:
        return PoissonRV(self._mean, stream)


class DUniformRV(RVariable):
    """Equally likely integers in [minimum, maximum]."""

    parameter_names = ("minimum", "maximum")

    def __init__(
        self,
        minimum: int = 0,
        maximum: int = 1,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        lo = check_integer("minimum", minimum)
        hi = check_integer("maximum", maximum)
        check_range("minimum", lo, "maximum", hi)
        super().__init__(stream, name)
        self._min = lo
        self._max = hi

    @property
    def minimum(self) -> int:
        return self._min

    @property
    def maximum(self) -> int:
        return self._max

    def _generate(self) -> float:
        return r_duniform(self._min, self._max, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> DUniformRV:
        return DUniformRV(self._min, self._max, stream)


class GeometricRV(RVariable):
    """Failures before the first success, on {0, 1, 2, ...}."""

    parameter_names = ("prob_success",)

    def __init__(
        self, prob_success: float = 0.5, stream: RNStreamIfc | None = None, name: str | None = None
    ) -> None:
        check_open_unit_interval("probability of success", prob_success)
        super().__init__(stream, name)
        self._p = prob_success

    @property
    def prob_success(self) -> float:
        return self._p

    def _generate(self) -> float:
        return r_geometric(self._p, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> GeometricRV:
        return GeometricRV(self._p, stream)


class ShiftedGeometricRV(RVariable):
    """Trials until the first success, on {1, 2, 3, ...}."""

    parameter_names = ("prob_success",)

    def __init__(
        self, prob_success: float = 0.5, stream: RNStreamIfc | None = None, name: str | None = None
    ) -> None:
        check_open_unit_interval("probability of success", prob_success)
        super().__init__(stream, name)
        self._p = prob_success

    @property
    def prob_success(self) -> float:
        return self._p

    def _generate(self) -> float:
        return 1.0 + r_geometric(self._p, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> ShiftedGeometricRV:
        return ShiftedGeometricRV(self._p, stream)


class NegativeBinomialRV(RVariable):
    """Failures before the r-th success."""

    parameter_names = ("prob_success", "num_successes")

    def __init__(
        self,
        prob_success: float = 0.5,
        num_successes: float = 1.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_open_unit_interval("probability of success", prob_success)
        check_positive("number of successes", num_successes)
        super().__init__(stream, name)
        self._p = prob_success
        self._r = num_successes

    @property
    def prob_success(self) -> float:
        return self._p

    @property
    def num_successes(self) -> float:
        return self._r

    def _generate(self) -> float:
        return r_neg_binomial(self._p, self._r, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> NegativeBinomialRV:
        return NegativeBinomialRV(self._p, self._r, stream)


class ConstantRV(RVariable):
    """
    Always returns the same value.

    No stream is consumed; the stream-control operations do nothing.
    ``previous_value`` starts at the value.
    """

    parameter_names = ("value",)

    ZERO: ClassVar[ConstantRV]
    ONE: ClassVar[ConstantRV]
    TWO: ClassVar[ConstantRV]
    POSITIVE_INFINITY: ClassVar[ConstantRV]

    def __init__(self, value: float = 1.0, name: str | None = None) -> None:
        self._stream = None
        self._name = name
        self._value = value
        self._previous_value = value

    @property
    def value(self) -> float:
        return self._value

    def _generate(self) -> float:
        return self._value

    @property
    def antithetic(self) -> bool:
        return False

    @antithetic.setter
    def antithetic(self, flag: bool) -> None:
        pass

    def reset_start_stream(self) -> None:
        pass

    def reset_start_substream(self) -> None:
        pass

    def advance_to_next_substream(self) -> None:
        pass

    def new_instance(self, stream: RNStreamIfc | None = None) -> ConstantRV:
        return ConstantRV(self._value)

    def new_antithetic_instance(self) -> ConstantRV:
        return ConstantRV(self._value)


ConstantRV.ZERO = ConstantRV(0.0)
ConstantRV.ONE = ConstantRV(1.0)
ConstantRV.TWO = ConstantRV(2.0)
ConstantRV.POSITIVE_INFINITY = ConstantRV(math.inf)


class DEmpiricalRV(RVariable):
    """Selects ``values[i]`` with probability cdf[i] - cdf[i-1]."""

    parameter_names = ("values", "cdf")

    def __init__(
        self,
        values: Sequence[float],
        cdf: Sequence[float],
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        if values is None or cdf is None:
            raise ValueError("values and cdf must not be None")
        if len(values) == 0:
            raise InvalidParameterError("values must not be empty")
        if len(values) != len(cdf):
            raise InvalidParameterError(
                f"values ({len(values)}) and cdf ({len(cdf)}) must have equal length"
            )
        if not is_valid_cdf(cdf):
            raise InvalidParameterError(f"invalid cdf: {list(cdf)}")
        super().__init__(stream, name)
        self._values = list(values)
        self._cdf = list(cdf)

    @property
    def values(self) -> list[float]:
        return list(self._values)

    @property
    def cdf(self) -> list[float]:
        return list(self._cdf)

    def _generate(self) -> float:
        return randomly_select(self._values, self._stream, self._cdf)

    def new_instance(self, stream: RNStreamIfc | None = None) -> DEmpiricalRV:
        return DEmpiricalRV(self._values, self._cdf, stream)


class EmpiricalRV(RVariable):
    """Resamples uniformly, with replacement, from a fixed data set."""

    def __init__(
        self, data: Sequence[float], stream: RNStreamIfc | None = None, name: str | None = None
    ) -> None:
        if data is None:
            raise ValueError("data must not be None")
        if len(data) == 0:
            raise InvalidParameterError("data must not be empty")
        super().__init__(stream, name)
        self._data = list(data)

    @property
    def data(self) -> list[float]:
        return list(self._data)

    def _generate(self) -> float:
        return randomly_select(self._data, self._stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> EmpiricalRV:
        return EmpiricalRV(self._data, stream)

    def __repr__(self) -> str:
        return f"EmpiricalRV(n={len(self._data)})"
