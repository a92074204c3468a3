"""
Distribution base classes.

A distribution is a parameter object bound to one uniform stream. It
exposes the analytic view (cdf, inverse cdf, density or mass, moments) and
can sample itself by inverse transform on the bound stream.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, NamedTuple

from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc, StreamControlMixin, resolve_stream
from pysimrv.special import check_probability, std_normal_inv_cdf

if TYPE_CHECKING:
    from pysimrv.rvariable.base import RVariable


class Interval(NamedTuple):
    """Closed interval [lower, upper] (either end may be infinite)."""

    lower: float
    upper: float

    def contains(self, x: float) -> bool:
        return self.lower <= x <= self.upper

    @property
    def width(self) -> float:
        return self.upper - self.lower


REAL_LINE = Interval(-math.inf, math.inf)
POSITIVE_REAL_LINE = Interval(0.0, math.inf)


def check_positive(name: str, value: float) -> None:
    if not value > 0.0:
        raise InvalidParameterError(f"{name} must be > 0, got {value}")


def check_non_negative(name: str, value: float) -> None:
    if not value >= 0.0:
        raise InvalidParameterError(f"{name} must be >= 0, got {value}")


def check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise InvalidParameterError(f"{name} must be in [0, 1], got {value}")


def check_open_unit_interval(name: str, value: float) -> None:
    if not 0.0 < value < 1.0:
        raise InvalidParameterError(f"{name} must be in (0, 1), got {value}")


def check_range(min_name: str, minimum: float, max_name: str, maximum: float) -> None:
    if not minimum < maximum:
        raise InvalidParameterError(f"{min_name} ({minimum}) must be < {max_name} ({maximum})")


def check_integer(name: str, value: float) -> int:
    """Return ``value`` as an int, rejecting non-integral values."""
    if math.isnan(value) or math.isinf(value) or int(value) != value:
        raise InvalidParameterError(f"{name} must be an integer, got {value}")
    return int(value)


def check_parameter_count(params: Sequence[float], expected: int, family: str) -> list[float]:
    if params is None:
        raise ValueError(f"{family} parameter array must not be None")
    if len(params) != expected:
        raise InvalidParameterError(f"{family} expects {expected} parameters, got {len(params)}")
    return list(params)


def discrete_inverse_search(
    p: float,
    cdf: Callable[[float], float],
    start: float,
    lower: int = 0,
    upper: float = math.inf,
) -> int:
    """
    Smallest integer x in [lower, upper] with cdf(x) >= p.

    The search steps outward from ``start``, typically a normal
    approximation of the quantile.
    """
    if math.isnan(start):
        start = lower
    x = int(min(max(math.floor(start), lower), upper))
    if cdf(x) >= p:
        while x > lower and cdf(x - 1) >= p:
            x -= 1
    else:
        while x < upper and cdf(x) < p:
            x += 1
    return x


def normal_approximation(p: float, mean: float, variance: float) -> float:
    """Starting point for discrete inverse searches."""
    return mean + math.sqrt(variance) * std_normal_inv_cdf(p)


class Distribution(StreamControlMixin, ABC):
    """
    Base class for all distributions.

    Subclasses implement ``cdf``, ``_inv_cdf`` (p already checked to lie in
    [0, 1]), ``mean``, ``variance``, ``parameters`` and ``set_parameters``.
    The ``parameters`` order is fixed per family and is the serialization
    contract used by ``from_parameters``.
    """

    parameter_names: tuple[str, ...] = ()

    def __init__(self, stream: RNStreamIfc | None = None) -> None:
        self._stream = resolve_stream(stream)

    @property
    def stream(self) -> RNStreamIfc:
        """The bound uniform stream."""
        return self._stream

    @stream.setter
    def stream(self, stream: RNStreamIfc) -> None:
        if stream is None:
            raise ValueError("stream must not be None")
        self._stream = stream

    @abstractmethod
    def cdf(self, x: float) -> float:
        """P(X <= x)."""
        ...

    def cdf_between(self, x1: float, x2: float) -> float:
        """P(x1 < X <= x2). Requires x1 <= x2."""
        if x1 > x2:
            raise InvalidParameterError(f"x1 ({x1}) must be <= x2 ({x2})")
        return self.cdf(x2) - self.cdf(x1)

    def complementary_cdf(self, x: float) -> float:
        """P(X > x)."""
        return 1.0 - self.cdf(x)

    def inv_cdf(self, p: float) -> float:
        """Quantile function. Raises InvalidProbabilityError unless 0 <= p <= 1."""
        check_probability(p)
        return self._inv_cdf(p)

    @abstractmethod
    def _inv_cdf(self, p: float) -> float: ...

    @property
    @abstractmethod
    def mean(self) -> float: ...

    @property
    @abstractmethod
    def variance(self) -> float: ...

    @property
    def std_dev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def domain(self) -> Interval:
        """Support of the distribution."""
        return REAL_LINE

    @property
    @abstractmethod
    def parameters(self) -> list[float]:
        """Parameters as an ordered list (see ``parameter_names``)."""
        ...

    @abstractmethod
    def set_parameters(self, params: Sequence[float]) -> None:
        """Replace all parameters in place. Invalid values raise InvalidParameterError."""
        ...

    @classmethod
    def from_parameters(cls, params: Sequence[float], stream: RNStreamIfc | None = None) -> Distribution:
        """Build an instance from an ordered parameter array."""
        params = check_parameter_count(params, len(cls.parameter_names), cls.__name__)
        return cls(*params, stream=stream)

    def new_instance(self, stream: RNStreamIfc | None = None) -> Distribution:
        """Same parameters, bound to ``stream`` or to a fresh stream when None."""
        return type(self).from_parameters(self.parameters, stream=resolve_stream(stream))

    def new_antithetic_instance(self) -> Distribution:
        """Same parameters, bound to the antithetic counterpart of the current stream."""
        return self.new_instance(self._stream.new_antithetic_instance())

    def sample(self) -> float:
        """One draw by inverse transform on the bound stream."""
        return self._inv_cdf(self._stream.rand_u01())

    def sample_n(self, n: int) -> list[float]:
        return [self.sample() for _ in range(n)]

    def __call__(self) -> float:
        return self.sample()

    @abstractmethod
    def random_variable(self, stream: RNStreamIfc | None = None) -> RVariable:
        """A random variable with the same parameters, on ``stream`` or a fresh one."""
        ...

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in zip(self.parameter_names, self.parameters))
        return f"{type(self).__name__}({items})"


class ContinuousDistribution(Distribution):
    """Distribution with a probability density function."""

    @abstractmethod
    def pdf(self, x: float) -> float: ...


class DiscreteDistribution(Distribution):
    """Distribution with a probability mass function."""

    @abstractmethod
    def pmf(self, x: float) -> float: ...


class LossFunctionDistribution(ABC):
    """
    Distributions with first and second order loss functions.

    The first order loss is E[max(X - x, 0)]. The second order loss is
    half the second moment of the excess.
    """

    @abstractmethod
    def first_order_loss(self, x: float) -> float: ...

    @abstractmethod
    def second_order_loss(self, x: float) -> float: ...
