"""
Distributions translated by a non-negative shift.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pysimrv.distributions.base import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
    Interval,
    LossFunctionDistribution,
    check_non_negative,
)
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc, resolve_stream

if TYPE_CHECKING:
    from pysimrv.rvariable import ShiftedRV


class ShiftedDistribution(Distribution):
    """
    X = shift + Y where Y follows the wrapped distribution.

    The shift moves the support only; the variance is that of Y. The
    parameter array is [shift, *wrapped parameters]. Without an explicit
    stream the shifted distribution shares the wrapped one's stream.
    """

    def __init__(
        self, distribution: Distribution, shift: float = 0.0, stream: RNStreamIfc | None = None
    ) -> None:
        if distribution is None:
            raise ValueError("distribution must not be None")
        super().__init__(stream if stream is not None else distribution.stream)
        check_non_negative("shift", shift)
        self._distribution = distribution
        self._shift = shift

    @classmethod
    def from_parameters(cls, params: Sequence[float], stream: RNStreamIfc | None = None) -> Distribution:
        raise InvalidParameterError(
            "a shifted distribution cannot be built from parameters alone; "
            "wrap a distribution instance instead"
        )

    @property
    def distribution(self) -> Distribution:
        """The wrapped distribution."""
        return self._distribution

    @property
    def shift(self) -> float:
        return self._shift

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ("shift", *self._distribution.parameter_names)

    @property
    def parameters(self) -> list[float]:
        return [self._shift, *self._distribution.parameters]

    def set_parameters(self, params: Sequence[float]) -> None:
        if params is None:
            raise ValueError("ShiftedDistribution parameter array must not be None")
        if len(params) < 1:
            raise InvalidParameterError("ShiftedDistribution needs at least the shift parameter")
        check_non_negative("shift", params[0])
        self._distribution.set_parameters(params[1:])
        self._shift = params[0]

    def set_shift(self, shift: float) -> None:
        check_non_negative("shift", shift)
        self._shift = shift

    def pdf(self, x: float) -> float:
        if not isinstance(self._distribution, ContinuousDistribution):
            raise TypeError(f"{type(self._distribution).__name__} has no density")
        return self._distribution.pdf(x - self._shift)

    def pmf(self, x: float) -> float:
        if not isinstance(self._distribution, DiscreteDistribution):
            raise TypeError(f"{type(self._distribution).__name__} has no mass function")
        return self._distribution.pmf(x - self._shift)

    def cdf(self, x: float) -> float:
        return self._distribution.cdf(x - self._shift)

    def _inv_cdf(self, p: float) -> float:
        return self._distribution.inv_cdf(p) + self._shift

    @property
    def mean(self) -> float:
        return self._shift + self._distribution.mean

    @property
    def variance(self) -> float:
        return self._distribution.variance

    @property
    def domain(self) -> Interval:
        lower, upper = self._distribution.domain
        return Interval(lower + self._shift, upper + self._shift)

    def new_instance(self, stream: RNStreamIfc | None = None) -> ShiftedDistribution:
        stream = resolve_stream(stream)
        return type(self)(self._distribution.new_instance(stream), self._shift, stream)

    def random_variable(self, stream: RNStreamIfc | None = None) -> ShiftedRV:
        from pysimrv.rvariable import ShiftedRV

        return ShiftedRV(self._distribution.random_variable(stream), self._shift)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shift={self._shift!r}, distribution={self._distribution!r})"


class ShiftedLossFunctionDistribution(ShiftedDistribution, LossFunctionDistribution):
    """Shifted distribution whose wrapped distribution has loss functions."""

    def __init__(
        self, distribution: Distribution, shift: float = 0.0, stream: RNStreamIfc | None = None
    ) -> None:
        if not isinstance(distribution, LossFunctionDistribution):
            raise InvalidParameterError(
                f"{type(distribution).__name__} does not provide loss functions"
            )
        super().__init__(distribution, shift, stream)

    def first_order_loss(self, x: float) -> float:
        return self._distribution.first_order_loss(x - self._shift)

    def second_order_loss(self, x: float) -> float:
        return self._distribution.second_order_loss(x - self._shift)
