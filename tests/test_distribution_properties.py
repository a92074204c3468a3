"""
Properties every family in the factory registry must satisfy.

Each registered family is checked through a representative distribution:
the cdf is a non-decreasing map into [0, 1], the quantile inverts it,
and the density or mass function carries total probability one.
"""

import pytest
from scipy import integrate

from pysimrv.distributions import (
    Bernoulli,
    Beta,
    Binomial,
    ChiSquared,
    Constant,
    DEmpiricalCDF,
    DUniform,
    Exponential,
    Gamma,
    GeneralizedBeta,
    Geometric,
    JohnsonB,
    Laplace,
    LogLogistic,
    Lognormal,
    NegativeBinomial,
    Normal,
    PearsonType5,
    PearsonType6,
    Poisson,
    ShiftedDistribution,
    Triangular,
    Uniform,
    Weibull,
)
from pysimrv.factory import RVType

CONTINUOUS = {
    RVType.Beta: lambda s: Beta(2.0, 3.0, s),
    RVType.ChiSquared: lambda s: ChiSquared(4.0, s),
    RVType.Exponential: lambda s: Exponential(2.0, s),
    RVType.Gamma: lambda s: Gamma(2.5, 1.5, s),
    RVType.GeneralizedBeta: lambda s: GeneralizedBeta(2.0, 3.0, -1.0, 4.0, s),
    RVType.JohnsonB: lambda s: JohnsonB(0.5, 1.5, 0.0, 2.0, s),
    RVType.Laplace: lambda s: Laplace(-1.0, 2.0, s),
    RVType.LogLogistic: lambda s: LogLogistic(3.0, 2.0, s),
    RVType.Lognormal: lambda s: Lognormal(2.0, 1.0, s),
    RVType.Normal: lambda s: Normal(-1.0, 4.0, s),
    RVType.PearsonType5: lambda s: PearsonType5(3.0, 2.0, s),
    RVType.PearsonType6: lambda s: PearsonType6(2.0, 3.0, 1.0, s),
    RVType.Triangular: lambda s: Triangular(-1.0, 0.5, 2.0, s),
    RVType.Uniform: lambda s: Uniform(-3.0, 1.0, s),
    RVType.Weibull: lambda s: Weibull(1.5, 2.0, s),
}

DISCRETE = {
    RVType.Bernoulli: lambda s: Bernoulli(0.3, s),
    RVType.Binomial: lambda s: Binomial(0.4, 12, s),
    RVType.Constant: lambda s: Constant(3.0, s),
    RVType.DUniform: lambda s: DUniform(-2, 5, s),
    RVType.Geometric: lambda s: Geometric(0.3, s),
    RVType.NegativeBinomial: lambda s: NegativeBinomial(0.4, 3.0, s),
    RVType.Poisson: lambda s: Poisson(3.5, s),
    RVType.ShiftedGeometric: lambda s: ShiftedDistribution(Geometric(0.3, s), 1.0),
    RVType.DEmpirical: lambda s: DEmpiricalCDF([1.0, 0.7, 2.0, 0.8, 4.0, 0.9, 5.0, 1.0], s),
}

ALL = {**CONTINUOUS, **DISCRETE}

PROBABILITIES = [0.001, 0.01, 0.1, 0.3, 0.5, 0.7, 0.9, 0.99, 0.999]

# Kept off the exact cdf steps of the discrete families above.
DISCRETE_PROBABILITIES = [0.01, 0.13, 0.37, 0.52, 0.64, 0.86, 0.99]


def _ids(table):
    return [t.value for t in table]


def test_every_registered_family_is_covered() -> None:
    assert set(ALL) == set(RVType)


class TestCdfShape:
    """The cdf is a non-decreasing map into [0, 1]."""

    @pytest.mark.parametrize("rv_type", list(ALL), ids=_ids(ALL))
    def test_non_decreasing(self, stream, rv_type) -> None:
        d = ALL[rv_type](stream)
        lo, hi = d.inv_cdf(0.001), d.inv_cdf(0.999)
        span = max(hi - lo, 1.0)
        xs = [lo - 0.1 * span + i * 1.2 * span / 200 for i in range(201)]
        values = [d.cdf(x) for x in xs]
        assert all(0.0 <= v <= 1.0 for v in values)
        for a, b in zip(values, values[1:]):
            assert b >= a - 1e-12


class TestContinuousQuantile:
    """The quantile and the cdf invert each other on continuous families."""

    @pytest.mark.parametrize("rv_type", list(CONTINUOUS), ids=_ids(CONTINUOUS))
    @pytest.mark.parametrize("p", PROBABILITIES)
    def test_cdf_of_quantile(self, stream, rv_type, p: float) -> None:
        d = CONTINUOUS[rv_type](stream)
        assert abs(d.cdf(d.inv_cdf(p)) - p) < 1e-7

    @pytest.mark.parametrize("rv_type", list(CONTINUOUS), ids=_ids(CONTINUOUS))
    def test_quantile_of_cdf(self, stream, rv_type) -> None:
        d = CONTINUOUS[rv_type](stream)
        lo, hi = d.inv_cdf(0.02), d.inv_cdf(0.98)
        for i in range(15):
            x = lo + i * (hi - lo) / 14
            assert abs(d.inv_cdf(d.cdf(x)) - x) <= 1e-6 * max(1.0, abs(x))

    @pytest.mark.parametrize("rv_type", list(CONTINUOUS), ids=_ids(CONTINUOUS))
    def test_density_integrates_to_one(self, stream, rv_type) -> None:
        """Integrated piecewise between quantiles so each piece stays smooth."""
        d = CONTINUOUS[rv_type](stream)
        cuts = [d.inv_cdf(p) for p in [1e-12, 0.01, 0.1, 0.5, 0.9, 0.99, 1.0 - 1e-12]]
        total = sum(integrate.quad(d.pdf, a, b, limit=200)[0] for a, b in zip(cuts, cuts[1:]))
        assert abs(total - 1.0) < 1e-6


class TestDiscreteQuantile:
    """The quantile is the smallest support point whose cdf reaches p."""

    @pytest.mark.parametrize("rv_type", list(DISCRETE), ids=_ids(DISCRETE))
    @pytest.mark.parametrize("p", DISCRETE_PROBABILITIES)
    def test_smallest_point_reaching_p(self, stream, rv_type, p: float) -> None:
        d = DISCRETE[rv_type](stream)
        x = d.inv_cdf(p)
        assert d.cdf(x) >= p
        assert d.cdf(x - 1.0) < p

    @pytest.mark.parametrize("rv_type", list(DISCRETE), ids=_ids(DISCRETE))
    def test_quantile_of_cdf(self, stream, rv_type) -> None:
        """Every support point with visible mass is recovered from its cdf."""
        d = DISCRETE[rv_type](stream)
        lower = int(d.domain.lower)
        upper = int(d.inv_cdf(1.0 - 1e-12))
        for x in range(lower, upper + 1):
            if d.pmf(x) > 1e-6:
                assert d.inv_cdf(d.cdf(x) - 1e-9) == x

    @pytest.mark.parametrize("rv_type", list(DISCRETE), ids=_ids(DISCRETE))
    def test_mass_sums_to_one(self, stream, rv_type) -> None:
        d = DISCRETE[rv_type](stream)
        lower = int(d.domain.lower)
        upper = int(d.inv_cdf(1.0 - 1e-12))
        total = sum(d.pmf(x) for x in range(lower, upper + 1))
        assert abs(total - 1.0) < 1e-9
