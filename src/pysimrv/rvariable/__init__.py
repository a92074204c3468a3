"""Random variables bound to a uniform stream."""

from pysimrv.rvariable.base import MVRVariable, RVariable
from pysimrv.rvariable.discrete import (
    BernoulliRV,
    BinomialRV,
    ConstantRV,
    DEmpiricalRV,
    DUniformRV,
    EmpiricalRV,
    GeometricRV,
    NegativeBinomialRV,
    PoissonRV,
    ShiftedGeometricRV,
)
from pysimrv.rvariable.continuous import (
    BetaRV,
    ChiSquaredRV,
    ExponentialRV,
    GammaRV,
    GeneralizedBetaRV,
    JohnsonBRV,
    LaplaceRV,
    LogLogisticRV,
    LognormalRV,
    NormalRV,
    PearsonType5RV,
    PearsonType6RV,
    TriangularRV,
    UniformRV,
    WeibullRV,
)
from pysimrv.rvariable.mixture import MixtureRV
from pysimrv.rvariable.shifted import ShiftedRV
from pysimrv.rvariable.ar1 import AR1CorrelatedStream, AR1NormalRV
from pysimrv.rvariable.bivariate import BivariateLogNormalRV, BivariateNormalRV

__all__ = [
    "RVariable",
    "MVRVariable",
    # Discrete
    "BernoulliRV",
    "BinomialRV",
    "ConstantRV",
    "DEmpiricalRV",
    "DUniformRV",
    "EmpiricalRV",
    "GeometricRV",
    "NegativeBinomialRV",
    "PoissonRV",
    "ShiftedGeometricRV",
    # Continuous
    "BetaRV",
    "ChiSquaredRV",
    "ExponentialRV",
    "GammaRV",
    "GeneralizedBetaRV",
    "JohnsonBRV",
    "LaplaceRV",
    "LogLogisticRV",
    "LognormalRV",
    "NormalRV",
    "PearsonType5RV",
    "PearsonType6RV",
    "TriangularRV",
    "UniformRV",
    "WeibullRV",
    # Composite and correlated
    "MixtureRV",
    "ShiftedRV",
    "AR1NormalRV",
    "AR1CorrelatedStream",
    "BivariateNormalRV",
    "BivariateLogNormalRV",
]
