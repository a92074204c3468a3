"""
User-specified discrete distributions.

``DEmpiricalCDF`` is built from (value, cumulative probability) pairs and
``DEmpiricalPMF`` from (value, probability) pairs. Both flatten their pairs
into the parameter array: [v1, c1, v2, c2, ...].
"""

from __future__ import annotations

import bisect
import logging
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pysimrv.distributions.base import DiscreteDistribution, Interval
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc, resolve_stream
from pysimrv.special import DEFAULT_NUMERICAL_PRECISION

if TYPE_CHECKING:
    from pysimrv.rvariable import DEmpiricalRV

logger = logging.getLogger(__name__)


def split_pairs(pairs: Sequence[float]) -> tuple[list[float], list[float]]:
    """Split [v1, x1, v2, x2, ...] into ([v1, v2, ...], [x1, x2, ...])."""
    if pairs is None:
        raise ValueError("pairs array must not be None")
    if len(pairs) < 2 or len(pairs) % 2 != 0:
        raise InvalidParameterError(
            f"pairs array must have a positive even length, got {len(pairs)}"
        )
    return [float(v) for v in pairs[0::2]], [float(x) for x in pairs[1::2]]


def join_pairs(values: Sequence[float], others: Sequence[float]) -> list[float]:
    """Interleave two equal-length sequences into [v1, x1, v2, x2, ...]."""
    if len(values) != len(others):
        raise InvalidParameterError(
            f"values ({len(values)}) and probabilities ({len(others)}) must have equal length"
        )
    pairs: list[float] = []
    for v, x in zip(values, others):
        pairs.extend((float(v), float(x)))
    return pairs


class _DiscreteEmpirical(DiscreteDistribution):
    """Shared machinery over sorted support points and cumulative probabilities."""

    _values: list[float]
    _cdf: list[float]

    @classmethod
    def from_parameters(cls, params: Sequence[float], stream: RNStreamIfc | None = None) -> _DiscreteEmpirical:
        return cls(params, stream)

    @property
    def values(self) -> list[float]:
        """Support points in increasing order."""
        return list(self._values)

    @property
    def cumulative_probabilities(self) -> list[float]:
        return list(self._cdf)

    @property
    def probabilities(self) -> list[float]:
        """Individual point probabilities."""
        probs = []
        previous = 0.0
        for c in self._cdf:
            probs.append(c - previous)
            previous = c
        return probs

    @property
    def pmf_parameters(self) -> list[float]:
        """Flattened (value, probability) pairs."""
        return join_pairs(self._values, self.probabilities)

    @property
    def cdf_parameters(self) -> list[float]:
        """Flattened (value, cumulative probability) pairs."""
        return join_pairs(self._values, self._cdf)

    def pmf(self, x: float) -> float:
        i = bisect.bisect_left(self._values, x)
        if i < len(self._values) and self._values[i] == x:
            return self._cdf[i] - (self._cdf[i - 1] if i > 0 else 0.0)
        return 0.0

    def cdf(self, x: float) -> float:
        i = bisect.bisect_right(self._values, x)
        if i == 0:
            return 0.0
        return self._cdf[i - 1]

    def _inv_cdf(self, p: float) -> float:
        for value, c in zip(self._values, self._cdf):
            if p <= c:
                return value
        return self._values[-1]

    @property
    def mean(self) -> float:
        return math.fsum(v * p for v, p in zip(self._values, self.probabilities))

    @property
    def variance(self) -> float:
        m = self.mean
        return math.fsum((v - m) ** 2 * p for v, p in zip(self._values, self.probabilities))

    @property
    def domain(self) -> Interval:
        return Interval(self._values[0], self._values[-1])

    def random_variable(self, stream: RNStreamIfc | None = None) -> DEmpiricalRV:
        from pysimrv.rvariable import DEmpiricalRV

        return DEmpiricalRV(self._values, self._cdf, resolve_stream(stream))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(values={self._values}, cdf={self._cdf})"


class DEmpiricalCDF(_DiscreteEmpirical):
    """
    Discrete distribution from (value, cumulative probability) pairs.

    Values must be strictly increasing and the cumulative probabilities
    non-decreasing in [0, 1], ending at 1.0 within the default numerical
    precision (the last one is then stored as exactly 1.0).
    """

    def __init__(self, pairs: Sequence[float], stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters(pairs)

    @staticmethod
    def make_pairs(cdf: Sequence[float], values: Sequence[float] | None = None, start: float = 0.0) -> list[float]:
        """
        Flattened pairs for a cdf over ``values``.

        When ``values`` is None the support is start, start + 1, start + 2, ...
        """
        if values is None:
            values = [start + i for i in range(len(cdf))]
        return join_pairs(values, cdf)

    @property
    def parameters(self) -> list[float]:
        return self.cdf_parameters

    def set_parameters(self, params: Sequence[float]) -> None:
        values, cdf = split_pairs(params)
        for a, b in zip(values, values[1:]):
            if not a < b:
                raise InvalidParameterError(f"values must be strictly increasing, got {a} then {b}")
        previous = 0.0
        for c in cdf:
            if not 0.0 <= c <= 1.0 + DEFAULT_NUMERICAL_PRECISION:
                raise InvalidParameterError(f"cumulative probability {c} is outside [0, 1]")
            if c < previous:
                raise InvalidParameterError(
                    f"cumulative probabilities must be non-decreasing, got {previous} then {c}"
                )
            previous = c
        if abs(cdf[-1] - 1.0) > DEFAULT_NUMERICAL_PRECISION:
            raise InvalidParameterError(f"last cumulative probability must be 1.0, got {cdf[-1]}")
        cdf[-1] = 1.0
        self._values = values
        self._cdf = cdf

    def to_pmf(self) -> DEmpiricalPMF:
        """Equivalent (value, probability) distribution on the same stream."""
        return DEmpiricalPMF(self.pmf_parameters, self._stream)


class DEmpiricalPMF(_DiscreteEmpirical):
    """
    Discrete distribution from (value, probability) pairs.

    Points are kept sorted by value. Zero-probability points are skipped
    with a warning. The probabilities must sum to 1 within the default
    numerical precision; the last point absorbs the rounding remainder.
    """

    def __init__(self, pairs: Sequence[float], stream: RNStreamIfc | None = None) -> None:
        super().__init__(stream)
        self.set_parameters(pairs)

    @staticmethod
    def make_pairs(probs: Sequence[float], values: Sequence[float] | None = None, start: float = 0.0) -> list[float]:
        """Flattened pairs for ``probs`` over ``values`` (start, start + 1, ... when None)."""
        if values is None:
            values = [start + i for i in range(len(probs))]
        return join_pairs(values, probs)

    @property
    def parameters(self) -> list[float]:
        return self.pmf_parameters

    def set_parameters(self, params: Sequence[float]) -> None:
        values, probs = split_pairs(params)
        points: dict[float, float] = {}
        total = 0.0
        for v, p in zip(values, probs):
            if not 0.0 <= p <= 1.0:
                raise InvalidParameterError(f"probability {p} for value {v} is outside [0, 1]")
            if p == 0.0:
                logger.warning("Skipping value %s with zero probability", v)
                continue
            if v in points:
                raise InvalidParameterError(f"value {v} appears more than once")
            total += p
            if total > 1.0 + DEFAULT_NUMERICAL_PRECISION:
                raise InvalidParameterError(f"probabilities sum to more than 1 ({total})")
            points[v] = p
        if not points:
            raise InvalidParameterError("at least one value must have positive probability")
        if abs(total - 1.0) > DEFAULT_NUMERICAL_PRECISION:
            raise InvalidParameterError(f"probabilities must sum to 1, got {total}")

        self._values = sorted(points)
        self._cdf = []
        cumulative = 0.0
        for v in self._values:
            cumulative += points[v]
            self._cdf.append(min(cumulative, 1.0))
        self._cdf[-1] = 1.0

    def to_cdf(self) -> DEmpiricalCDF:
        """Equivalent (value, cumulative probability) distribution on the same stream."""
        return DEmpiricalCDF(self.cdf_parameters, self._stream)
