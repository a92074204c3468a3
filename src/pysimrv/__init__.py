"""
pysimrv - random variates and probability distributions for simulation.

Uniform streams, special functions, distribution objects, stream-bound
random variables, free variate functions and a controls-driven factory.
"""

import logging

from pysimrv.exceptions import (
    ControlsError,
    ConvergenceError,
    InvalidParameterError,
    InvalidProbabilityError,
    RandomVariateError,
)
from pysimrv.rng import (
    MRG32k3aStream,
    RNStreamFactory,
    RNStreamIfc,
    get_default_factory,
    new_stream,
    reset_default_factory,
)
from pysimrv.distributions import (
    Bernoulli,
    Beta,
    Binomial,
    ChiSquared,
    Constant,
    ContinuousDistribution,
    DEmpiricalCDF,
    DEmpiricalPMF,
    DiscreteDistribution,
    Distribution,
    DUniform,
    Exponential,
    Gamma,
    GeneralizedBeta,
    Geometric,
    Interval,
    JohnsonB,
    Laplace,
    LogLogistic,
    Lognormal,
    LossFunctionDistribution,
    NegativeBinomial,
    Normal,
    PearsonType5,
    PearsonType6,
    Poisson,
    ShiftedDistribution,
    ShiftedLossFunctionDistribution,
    Triangular,
    Uniform,
    Weibull,
)
from pysimrv.rvariable import (
    AR1CorrelatedStream,
    AR1NormalRV,
    BernoulliRV,
    BetaRV,
    BinomialRV,
    BivariateLogNormalRV,
    BivariateNormalRV,
    ChiSquaredRV,
    ConstantRV,
    DEmpiricalRV,
    DUniformRV,
    EmpiricalRV,
    ExponentialRV,
    GammaRV,
    GeneralizedBetaRV,
    GeometricRV,
    JohnsonBRV,
    LaplaceRV,
    LogLogisticRV,
    LognormalRV,
    MixtureRV,
    MVRVariable,
    NegativeBinomialRV,
    NormalRV,
    PearsonType5RV,
    PearsonType6RV,
    PoissonRV,
    RVariable,
    ShiftedGeometricRV,
    ShiftedRV,
    TriangularRV,
    UniformRV,
    WeibullRV,
)
from pysimrv.factory import Controls, ControlType, RVType, get_controls, get_random_variable
from pysimrv.config import load_controls, load_random_variables
from pysimrv.stats import Mean, Variance

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Errors
    "RandomVariateError",
    "InvalidParameterError",
    "InvalidProbabilityError",
    "ConvergenceError",
    "ControlsError",
    # Streams
    "RNStreamIfc",
    "MRG32k3aStream",
    "RNStreamFactory",
    "new_stream",
    "get_default_factory",
    "reset_default_factory",
    # Distributions
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    "LossFunctionDistribution",
    "Interval",
    "Bernoulli",
    "Binomial",
    "Constant",
    "DUniform",
    "Geometric",
    "NegativeBinomial",
    "Poisson",
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
    "DEmpiricalCDF",
    "DEmpiricalPMF",
    "ShiftedDistribution",
    "ShiftedLossFunctionDistribution",
    # Random variables
    "RVariable",
    "MVRVariable",
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
    "ShiftedRV",
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
    "MixtureRV",
    "AR1NormalRV",
    "AR1CorrelatedStream",
    "BivariateNormalRV",
    "BivariateLogNormalRV",
    # Factory and configuration
    "RVType",
    "ControlType",
    "Controls",
    "get_controls",
    "get_random_variable",
    "load_controls",
    "load_random_variables",
    # Statistics
    "Mean",
    "Variance",
]
