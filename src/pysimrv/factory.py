"""
Random variable factory driven by named parameter controls.

A ``Controls`` object carries a family tag and a fixed set of typed,
named parameters. ``get_controls`` hands out the defaults for a family and
``get_random_variable`` turns a (possibly edited) controls object into the
matching random variable. The key names and default values are the
configuration-file contract, so they never change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, NamedTuple

from pysimrv.exceptions import ControlsError
from pysimrv.rng import RNStreamIfc, resolve_stream
from pysimrv.rvariable import (
    BernoulliRV,
    BetaRV,
    BinomialRV,
    ChiSquaredRV,
    ConstantRV,
    DEmpiricalRV,
    DUniformRV,
    ExponentialRV,
    GammaRV,
    GeneralizedBetaRV,
    GeometricRV,
    JohnsonBRV,
    LaplaceRV,
    LogLogisticRV,
    LognormalRV,
    NegativeBinomialRV,
    NormalRV,
    PearsonType5RV,
    PearsonType6RV,
    PoissonRV,
    RVariable,
    ShiftedGeometricRV,
    TriangularRV,
    UniformRV,
    WeibullRV,
)

logger = logging.getLogger(__name__)


class RVType(Enum):
    """Families the factory can build."""

    Bernoulli = "Bernoulli"
    Beta = "Beta"
    ChiSquared = "ChiSquared"
    Binomial = "Binomial"
    Constant = "Constant"
    DUniform = "DUniform"
    Exponential = "Exponential"
    Gamma = "Gamma"
    GeneralizedBeta = "GeneralizedBeta"
    Geometric = "Geometric"
    JohnsonB = "JohnsonB"
    Laplace = "Laplace"
    LogLogistic = "LogLogistic"
    Lognormal = "Lognormal"
    NegativeBinomial = "NegativeBinomial"
    Normal = "Normal"
    PearsonType5 = "PearsonType5"
    PearsonType6 = "PearsonType6"
    Poisson = "Poisson"
    ShiftedGeometric = "ShiftedGeometric"
    Triangular = "Triangular"
    Uniform = "Uniform"
    Weibull = "Weibull"
    DEmpirical = "DEmpirical"


class ControlType(Enum):
    DOUBLE = "double"
    INTEGER = "integer"
    DOUBLE_ARRAY = "double_array"


class Controls:
    """
    Typed named parameters for one random variable family.

    The key set and each key's kind are fixed when the controls are made.
    Setting an unknown key, or a value of the wrong kind, raises
    ``ControlsError``.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._types: dict[str, ControlType] = {}
        self._values: dict[str, Any] = {}

    @property
    def name(self) -> str:
        """The family tag."""
        return self._name

    def keys(self) -> list[str]:
        return list(self._values)

    def control_type(self, key: str) -> ControlType:
        self._check_key(key)
        return self._types[key]

    def add_double_control(self, key: str, value: float) -> None:
        self._types[key] = ControlType.DOUBLE
        self._values[key] = float(value)

    def add_integer_control(self, key: str, value: int) -> None:
        self._types[key] = ControlType.INTEGER
        self._values[key] = int(value)

    def add_double_array_control(self, key: str, value: Sequence[float]) -> None:
        self._types[key] = ControlType.DOUBLE_ARRAY
        self._values[key] = [float(v) for v in value]

    def _check_key(self, key: str) -> None:
        if key not in self._types:
            raise ControlsError(f"{self._name} has no control named '{key}'")

    def _check_kind(self, key: str, kind: ControlType) -> None:
        self._check_key(key)
        if self._types[key] is not kind:
            raise ControlsError(
                f"control '{key}' of {self._name} is {self._types[key].value}, not {kind.value}"
            )

    def get_double_control(self, key: str) -> float:
        self._check_kind(key, ControlType.DOUBLE)
        return self._values[key]

    def get_integer_control(self, key: str) -> int:
        self._check_kind(key, ControlType.INTEGER)
        return self._values[key]

    def get_double_array_control(self, key: str) -> list[float]:
        self._check_kind(key, ControlType.DOUBLE_ARRAY)
        return list(self._values[key])

    def set_double_control(self, key: str, value: float) -> None:
        self._check_kind(key, ControlType.DOUBLE)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ControlsError(f"control '{key}' needs a number, got {value!r}")
        self._values[key] = float(value)

    def set_integer_control(self, key: str, value: int) -> None:
        self._check_kind(key, ControlType.INTEGER)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ControlsError(f"control '{key}' needs an integer, got {value!r}")
        self._values[key] = value

    def set_double_array_control(self, key: str, value: Sequence[float]) -> None:
        self._check_kind(key, ControlType.DOUBLE_ARRAY)
        if value is None or isinstance(value, (str, bytes)):
            raise ControlsError(f"control '{key}' needs a sequence of numbers, got {value!r}")
        self._values[key] = [float(v) for v in value]

    def set_control(self, key: str, value: Any) -> None:
        """Set a control through the setter matching its kind."""
        kind = self.control_type(key)
        if kind is ControlType.DOUBLE:
            self.set_double_control(key, value)
        elif kind is ControlType.INTEGER:
            self.set_integer_control(key, value)
        else:
            self.set_double_array_control(key, value)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of key to value, arrays copied."""
        return {k: list(v) if isinstance(v, list) else v for k, v in self._values.items()}

    def update(self, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            self.set_control(key, value)

    @classmethod
    def from_dict(cls, rv_type: RVType | str, values: Mapping[str, Any]) -> Controls:
        """Defaults for ``rv_type`` overridden by ``values``."""
        controls = get_controls(rv_type)
        controls.update(values)
        return controls

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Controls):
            return NotImplemented
        return self._name == other._name and self._types == other._types and self._values == other._values

    def __repr__(self) -> str:
        return f"Controls(name={self._name!r}, {self.to_dict()!r})"


class ControlSpec(NamedTuple):
    key: str
    kind: ControlType
    default: Any


_DBL = ControlType.DOUBLE
_INT = ControlType.INTEGER
_ARR = ControlType.DOUBLE_ARRAY

Builder = Callable[[Controls, RNStreamIfc], RVariable]


def _d(c: Controls, key: str) -> float:
    return c.get_double_control(key)


def _i(c: Controls, key: str) -> int:
    return c.get_integer_control(key)


def _a(c: Controls, key: str) -> list[float]:
    return c.get_double_array_control(key)


_SCHEMAS: dict[RVType, tuple[tuple[ControlSpec, ...], Builder]] = {
    RVType.Bernoulli: (
        (ControlSpec("ProbOfSuccess", _DBL, 0.5),),
        lambda c, s: BernoulliRV(_d(c, "ProbOfSuccess"), s),
    ),
    RVType.Beta: (
        (ControlSpec("alpha1", _DBL, 1.0), ControlSpec("alpha2", _DBL, 1.0)),
        lambda c, s: BetaRV(_d(c, "alpha1"), _d(c, "alpha2"), s),
    ),
    RVType.ChiSquared: (
        (ControlSpec("dof", _DBL, 1.0),),
        lambda c, s: ChiSquaredRV(_d(c, "dof"), s),
    ),
    RVType.Binomial: (
        (ControlSpec("ProbOfSuccess", _DBL, 0.5), ControlSpec("NumTrials", _INT, 2)),
        lambda c, s: BinomialRV(_d(c, "ProbOfSuccess"), _i(c, "NumTrials"), s),
    ),
    RVType.Constant: (
        (ControlSpec("value", _DBL, 1.0),),
        lambda c, s: ConstantRV(_d(c, "value")),
    ),
    RVType.DUniform: (
        (ControlSpec("min", _INT, 0), ControlSpec("max", _INT, 1)),
        lambda c, s: DUniformRV(_i(c, "min"), _i(c, "max"), s),
    ),
    RVType.Exponential: (
        (ControlSpec("mean", _DBL, 1.0),),
        lambda c, s: ExponentialRV(_d(c, "mean"), s),
    ),
    RVType.Gamma: (
        (ControlSpec("shape", _DBL, 1.0), ControlSpec("scale", _DBL, 1.0)),
        lambda c, s: GammaRV(_d(c, "shape"), _d(c, "scale"), s),
    ),
    RVType.GeneralizedBeta: (
        (
            ControlSpec("alpha1", _DBL, 1.0),
            ControlSpec("alpha2", _DBL, 1.0),
            ControlSpec("min", _DBL, 0.0),
            ControlSpec("max", _DBL, 1.0),
        ),
        lambda c, s: GeneralizedBetaRV(_d(c, "alpha1"), _d(c, "alpha2"), _d(c, "min"), _d(c, "max"), s),
    ),
    RVType.Geometric: (
        (ControlSpec("ProbOfSuccess", _DBL, 0.5),),
        lambda c, s: GeometricRV(_d(c, "ProbOfSuccess"), s),
    ),
    RVType.JohnsonB: (
        (
            ControlSpec("alpha1", _DBL, 0.0),
            ControlSpec("alpha2", _DBL, 1.0),
            ControlSpec("min", _DBL, 0.0),
            ControlSpec("max", _DBL, 1.0),
        ),
        lambda c, s: JohnsonBRV(_d(c, "alpha1"), _d(c, "alpha2"), _d(c, "min"), _d(c, "max"), s),
    ),
    RVType.Laplace: (
        (ControlSpec("mean", _DBL, 0.0), ControlSpec("scale", _DBL, 1.0)),
        lambda c, s: LaplaceRV(_d(c, "mean"), _d(c, "scale"), s),
    ),
    RVType.LogLogistic: (
        (ControlSpec("shape", _DBL, 1.0), ControlSpec("scale", _DBL, 1.0)),
        lambda c, s: LogLogisticRV(_d(c, "shape"), _d(c, "scale"), s),
    ),
    RVType.Lognormal: (
        (ControlSpec("mean", _DBL, 1.0), ControlSpec("variance", _DBL, 1.0)),
        lambda c, s: LognormalRV(_d(c, "mean"), _d(c, "variance"), s),
    ),
    RVType.NegativeBinomial: (
        (ControlSpec("ProbOfSuccess", _DBL, 0.5), ControlSpec("NumSuccesses", _INT, 1)),
        lambda c, s: NegativeBinomialRV(_d(c, "ProbOfSuccess"), float(_i(c, "NumSuccesses")), s),
    ),
    RVType.Normal: (
        (ControlSpec("mean", _DBL, 0.0), ControlSpec("variance", _DBL, 1.0)),
        lambda c, s: NormalRV(_d(c, "mean"), _d(c, "variance"), s),
    ),
    RVType.PearsonType5: (
        (ControlSpec("shape", _DBL, 1.0), ControlSpec("scale", _DBL, 1.0)),
        lambda c, s: PearsonType5RV(_d(c, "shape"), _d(c, "scale"), s),
    ),
    RVType.PearsonType6: (
        (ControlSpec("alpha1", _DBL, 2.0), ControlSpec("alpha2", _DBL, 3.0), ControlSpec("beta", _DBL, 1.0)),
        lambda c, s: PearsonType6RV(_d(c, "alpha1"), _d(c, "alpha2"), _d(c, "beta"), s),
    ),
    RVType.Poisson: (
        (ControlSpec("mean", _DBL, 1.0),),
        lambda c, s: PoissonRV(_d(c, "mean"), s),
    ),
    RVType.ShiftedGeometric: (
        (ControlSpec("ProbOfSuccess", _DBL, 0.5),),
        lambda c, s: ShiftedGeometricRV(_d(c, "ProbOfSuccess"), s),
    ),
    RVType.Triangular: (
        (ControlSpec("min", _DBL, 0.0), ControlSpec("mode", _DBL, 0.5), ControlSpec("max", _DBL, 1.0)),
        lambda c, s: TriangularRV(_d(c, "min"), _d(c, "mode"), _d(c, "max"), s),
    ),
    RVType.Uniform: (
        (ControlSpec("min", _DBL, 0.0), ControlSpec("max", _DBL, 1.0)),
        lambda c, s: UniformRV(_d(c, "min"), _d(c, "max"), s),
    ),
    RVType.Weibull: (
        (ControlSpec("shape", _DBL, 1.0), ControlSpec("scale", _DBL, 1.0)),
        lambda c, s: WeibullRV(_d(c, "shape"), _d(c, "scale"), s),
    ),
    RVType.DEmpirical: (
        (ControlSpec("values", _ARR, [0.0, 1.0]), ControlSpec("cdf", _ARR, [0.5, 1.0])),
        lambda c, s: DEmpiricalRV(_a(c, "values"), _a(c, "cdf"), s),
    ),
}


def rv_type_of(name: RVType | str) -> RVType:
    """Look up a family by enum member or tag string."""
    if isinstance(name, RVType):
        return name
    try:
        return RVType(name)
    except ValueError:
        raise ControlsError(f"unknown random variable type '{name}'") from None


def get_controls(rv_type: RVType | str) -> Controls:
    """Fresh controls holding the default parameters of ``rv_type``."""
    rv_type = rv_type_of(rv_type)
    specs, _ = _SCHEMAS[rv_type]
    controls = Controls(rv_type.value)
    for spec in specs:
        if spec.kind is ControlType.DOUBLE:
            controls.add_double_control(spec.key, spec.default)
        elif spec.kind is ControlType.INTEGER:
            controls.add_integer_control(spec.key, spec.default)
        else:
            controls.add_double_array_control(spec.key, spec.default)
    return controls


def get_random_variable(controls: Controls, stream: RNStreamIfc | None = None) -> RVariable:
    """
    Build the random variable described by ``controls``.

    The controls' key set and kinds must match the family's schema exactly.
    A ``None`` stream means a fresh stream from the default factory.
    """
    if controls is None:
        raise ValueError("controls must not be None")
    rv_type = rv_type_of(controls.name)
    specs, builder = _SCHEMAS[rv_type]
    expected = {spec.key: spec.kind for spec in specs}
    supplied = {key: controls.control_type(key) for key in controls.keys()}
    if expected != supplied:
        raise ControlsError(
            f"controls for {rv_type.value} must have keys {sorted(expected)}, got {sorted(supplied)}"
        )
    rv = builder(controls, resolve_stream(stream))
    logger.debug("Built %r from %s controls", rv, rv_type.value)
    return rv
