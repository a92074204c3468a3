"""Probability distributions."""

from pysimrv.distributions.base import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
    Interval,
    LossFunctionDistribution,
)
from pysimrv.distributions.beta import Beta, GeneralizedBeta, PearsonType6
from pysimrv.distributions.continuous import (
    Exponential,
    JohnsonB,
    Laplace,
    Lognormal,
    LogLogistic,
    Normal,
    Triangular,
    Uniform,
    Weibull,
)
from pysimrv.distributions.discrete import (
    Bernoulli,
    Binomial,
    Constant,
    DUniform,
    Geometric,
    NegativeBinomial,
    Poisson,
)
from pysimrv.distributions.empirical import DEmpiricalCDF, DEmpiricalPMF
from pysimrv.distributions.gamma import ChiSquared, Gamma, PearsonType5
from pysimrv.distributions.shifted import ShiftedDistribution, ShiftedLossFunctionDistribution

__all__ = [
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    "LossFunctionDistribution",
    "Interval",
    # Discrete
    "Bernoulli",
    "Binomial",
    "Constant",
    "DUniform",
    "Geometric",
    "NegativeBinomial",
    "Poisson",
    # Continuous
    "Exponential",
    "JohnsonB",
    "Laplace",
    "Lognormal",
    "LogLogistic",
    "Normal",
    "Triangular",
    "Uniform",
    "Weibull",
    "Gamma",
    "ChiSquared",
    "PearsonType5",
    "Beta",
    "GeneralizedBeta",
    "PearsonType6",
    # Empirical
    "DEmpiricalCDF",
    "DEmpiricalPMF",
    # Wrappers
    "ShiftedDistribution",
    "ShiftedLossFunctionDistribution",
]
