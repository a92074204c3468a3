"""
Random variable base classes.

A random variable is a generator bound to one uniform stream. Every draw
goes through ``sample()``, which records the value as ``previous_value``.
Parameters are fixed at construction.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from pysimrv.rng import RNStreamIfc, StreamControlMixin, resolve_stream


class RVariable(StreamControlMixin, ABC):
    """
    Base class for scalar random variables.

    Subclasses implement ``_generate`` and ``new_instance`` and list their
    parameter property names in ``parameter_names`` for ``repr``.
    Calling the variable is the same as ``sample()``.
    """

    parameter_names: tuple[str, ...] = ()

    def __init__(self, stream: RNStreamIfc | None = None, name: str | None = None) -> None:
        self._stream = resolve_stream(stream)
        self._name = name
        self._previous_value = math.nan

    @abstractmethod
    def _generate(self) -> float:
        """Produce one value from the bound stream."""
        ...

    def sample(self) -> float:
        """Generate a value and remember it as ``previous_value``."""
        value = self._generate()
        self._previous_value = value
        return value

    def __call__(self) -> float:
        return self.sample()

    def sample_n(self, n: int) -> list[float]:
        """The next ``n`` values."""
        return [self.sample() for _ in range(n)]

    @property
    def previous_value(self) -> float:
        """Last value returned by ``sample`` (NaN before the first draw)."""
        return self._previous_value

    @property
    def name(self) -> str | None:
        return self._name

    @abstractmethod
    def new_instance(self, stream: RNStreamIfc | None = None) -> RVariable:
        """Same parameters, bound to ``stream`` or to a fresh stream when None."""
        ...

    def new_antithetic_instance(self) -> RVariable:
        """Same parameters, bound to the antithetic counterpart of the current stream."""
        return self.new_instance(self._stream.new_antithetic_instance())

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={getattr(self, k)!r}" for k in self.parameter_names)
        return f"{type(self).__name__}({items})"


class MVRVariable(StreamControlMixin, ABC):
    """Base class for multivariate random variables returning a fixed-length list."""

    dimension: int = 2

    def __init__(self, stream: RNStreamIfc | None = None, name: str | None = None) -> None:
        self._stream = resolve_stream(stream)
        self._name = name
        self._previous_value = [math.nan] * self.dimension

    @abstractmethod
    def _generate(self) -> list[float]: ...

    def sample(self) -> list[float]:
        value = self._generate()
        self._previous_value = list(value)
        return value

    def __call__(self) -> list[float]:
        return self.sample()

    def sample_n(self, n: int) -> list[list[float]]:
        return [self.sample() for _ in range(n)]

    @property
    def previous_value(self) -> list[float]:
        return list(self._previous_value)

    @property
    def name(self) -> str | None:
        return self._name

    @abstractmethod
    def new_instance(self, stream: RNStreamIfc | None = None) -> MVRVariable: ...

    def new_antithetic_instance(self) -> MVRVariable:
        return self.new_instance(self._stream.new_antithetic_instance())
