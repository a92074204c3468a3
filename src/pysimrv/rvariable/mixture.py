"""
Mixture of random variables selected by a discrete cdf.
"""

from __future__ import annotations

from collections.abc import Sequence

from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc
from pysimrv.rvariable.base import RVariable
from pysimrv.variates import is_valid_cdf, randomly_select


class MixtureRV(RVariable):
    """
    Picks component i with probability cdf[i] - cdf[i-1], then samples it.

    The selection uses this variable's stream; each component draws from
    its own stream. ``new_instance`` shares the components, while
    ``new_antithetic_instance`` also switches every component to its
    antithetic counterpart.
    """

    def __init__(
        self,
        components: Sequence[RVariable],
        cdf: Sequence[float],
        stream: RNStreamIfc | None = None,
        name: str | None = None,
    ) -> None:
        if components is None or cdf is None:
            raise ValueError("components and cdf must not be None")
        if len(components) == 0:
            raise InvalidParameterError("a mixture needs at least one component")
        if len(components) != len(cdf):
            raise InvalidParameterError(
                f"components ({len(components)}) and cdf ({len(cdf)}) must have equal length"
            )
        if not is_valid_cdf(cdf):
            raise InvalidParameterError(f"invalid cdf: {list(cdf)}")
        super().__init__(stream, name)
        self._components = list(components)
        self._cdf = list(cdf)

    @property
    def components(self) -> list[RVariable]:
        return list(self._components)

    @property
    def cdf(self) -> list[float]:
        return list(self._cdf)

    def _generate(self) -> float:
        return randomly_select(self._components, self._stream, self._cdf).sample()

    def new_instance(self, stream: RNStreamIfc | None = None) -> MixtureRV:
        return MixtureRV(self._components, self._cdf, stream)

    def new_antithetic_instance(self) -> MixtureRV:
        components = [rv.new_antithetic_instance() for rv in self._components]
        return MixtureRV(components, self._cdf, self._stream.new_antithetic_instance())

    def __repr__(self) -> str:
        return f"MixtureRV(components={self._components!r}, cdf={self._cdf!r})"
