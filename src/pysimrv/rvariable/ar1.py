"""
First-order autoregressive normal processes.

``AR1NormalRV`` generates X_t = mean + phi * (X_{t-1} - mean) + e_t with
e_t ~ N(0, variance * (1 - phi^2)), so every X_t is marginally
N(mean, variance) with lag-1 correlation phi. ``AR1CorrelatedStream`` maps
a standard AR(1) process through the normal cdf to get a stream of
correlated U(0,1) values.
"""

from __future__ import annotations

import math

from pysimrv.distributions.base import check_positive
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc, resolve_stream
from pysimrv.rvariable.base import RVariable
from pysimrv.special import std_normal_cdf
from pysimrv.variates import r_normal


def check_correlation(phi: float) -> None:
    if not -1.0 <= phi <= 1.0:
        raise InvalidParameterError(f"correlation must be in [-1, 1], got {phi}")


class AR1NormalRV(RVariable):
    """
    Stationary AR(1) normal process.

    The initial state X_0 is drawn from N(mean, variance) at construction
    and again whenever the stream is repositioned, so a reset replays the
    same trajectory. The process state and the errors share the bound stream.
    """

    parameter_names = ("mean", "variance", "lag1_correlation")

    def __init__(
        self,
        mean: float = 0.0,
        variance: float = 1.0,
        lag1_correlation: float = 0.0,
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        check_positive("variance", variance)
        check_correlation(lag1_correlation)
        super().__init__(stream, name)
        self._mean = mean
        self._variance = variance
        self._phi = lag1_correlation
        self._error_variance = variance * (1.0 - lag1_correlation * lag1_correlation)
        self._restart()

    def _restart(self) -> None:
        self._x = r_normal(self._mean, self._variance, self._stream)
        self._previous_value = math.nan

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._variance

    @property
    def lag1_correlation(self) -> float:
        return self._phi

    @property
    def error_variance(self) -> float:
        """Variance of the innovations, variance * (1 - phi^2)."""
        return self._error_variance

    @property
    def state(self) -> float:
        """Current value of the process."""
        return self._x

    def _generate(self) -> float:
        error = 0.0
        if self._error_variance > 0.0:
            error = r_normal(0.0, self._error_variance, self._stream)
        self._x = self._mean + self._phi * (self._x - self._mean) + error
        return self._x

    def reset_start_stream(self) -> None:
        self._stream.reset_start_stream()
        self._restart()

    def reset_start_substream(self) -> None:
        self._stream.reset_start_substream()
        self._restart()

    def advance_to_next_substream(self) -> None:
        self._stream.advance_to_next_substream()
        self._restart()

    def new_instance(self, stream: RNStreamIfc | None = None) -> AR1NormalRV:
        return AR1NormalRV(self._mean, self._variance, self._phi, stream)


class AR1CorrelatedStream(RNStreamIfc):
    """
    Uniform stream with lag-1 correlated draws.

    Each draw is Phi(X_t) for a standard AR(1) normal process X_t driven by
    the wrapped stream. Resetting the stream restarts the process so the
    sequence reproduces.
    """

    def __init__(
        self, lag1_correlation: float = 0.0, stream: RNStreamIfc | None = None, name: str | None = None
    ) -> None:
        check_correlation(lag1_correlation)
        self._phi = lag1_correlation
        self._stream = resolve_stream(stream)
        self._name = name
        self._previous_u = math.nan
        self._restart()

    def _restart(self) -> None:
        self._ar1 = AR1NormalRV(0.0, 1.0, self._phi, self._stream)

    @property
    def lag1_correlation(self) -> float:
        return self._phi

    @property
    def underlying_stream(self) -> RNStreamIfc:
        return self._stream

    def rand_u01(self) -> float:
        u = std_normal_cdf(self._ar1.sample())
        self._previous_u = u
        return u

    @property
    def previous_u01(self) -> float:
        return self._previous_u

    @property
    def antithetic(self) -> bool:
        return self._stream.antithetic

    @antithetic.setter
    def antithetic(self, flag: bool) -> None:
        self._stream.antithetic = flag

    def reset_start_stream(self) -> None:
        self._stream.reset_start_stream()
        self._restart()

    def reset_start_substream(self) -> None:
        self._stream.reset_start_substream()
        self._restart()

    def advance_to_next_substream(self) -> None:
        self._stream.advance_to_next_substream()
        self._restart()

    def new_instance(self, name: str | None = None) -> AR1CorrelatedStream:
        return AR1CorrelatedStream(self._phi, self._stream.new_instance(), name)

    def new_antithetic_instance(self, name: str | None = None) -> AR1CorrelatedStream:
        return AR1CorrelatedStream(self._phi, self._stream.new_antithetic_instance(), name)
