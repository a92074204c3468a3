"""
Random variables translated by a non-negative shift.
"""

from __future__ import annotations

from pysimrv.distributions.base import check_non_negative
from pysimrv.rng import RNStreamIfc
from pysimrv.rvariable.base import RVariable


class ShiftedRV(RVariable):
    """Draws shift + Y where Y is the wrapped variable; both share its stream."""

    parameter_names = ("shift", "rv")

    def __init__(self, rv: RVariable, shift: float = 0.0, name: str | None = None) -> None:
        if rv is None:
            raise ValueError("rv must not be None")
        check_non_negative("shift", shift)
        super().__init__(rv.stream, name)
        self._rv = rv
        self._shift = shift

    @property
    def rv(self) -> RVariable:
        """The wrapped random variable."""
        return self._rv

    @property
    def shift(self) -> float:
        return self._shift

    def _generate(self) -> float:
        return self._shift + self._rv.sample()

    def new_instance(self, stream: RNStreamIfc | None = None) -> ShiftedRV:
        return ShiftedRV(self._rv.new_instance(stream), self._shift)
