"""
Tests for the user-specified discrete distributions and the shifted wrapper.
"""

import logging
import math

import pytest

from pysimrv.distributions import (
    DEmpiricalCDF,
    DEmpiricalPMF,
    Exponential,
    Laplace,
    Normal,
    Poisson,
    ShiftedDistribution,
    ShiftedLossFunctionDistribution,
    Uniform,
    Weibull,
)
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rvariable import DEmpiricalRV, NormalRV, ShiftedRV

PAIRS = [1.0, 0.7, 2.0, 0.8, 4.0, 0.9, 5.0, 1.0]


class TestDEmpiricalCDF:
    """Tests for DEmpiricalCDF."""

    def test_moments(self, stream) -> None:
        """Mean is 1(0.7) + 2(0.1) + 4(0.1) + 5(0.1)."""
        d = DEmpiricalCDF(PAIRS, stream)
        assert abs(d.mean - 1.8) < 1e-12
        assert abs(d.variance - 1.96) < 1e-12

    def test_cdf_and_pmf(self, stream) -> None:
        d = DEmpiricalCDF(PAIRS, stream)
        assert d.cdf(0.5) == 0.0
        assert d.cdf(3.0) == 0.8
        assert d.cdf(5.0) == 1.0
        assert abs(d.pmf(2.0) - 0.1) < 1e-12
        assert d.pmf(3.0) == 0.0

    def test_inv_cdf(self, stream) -> None:
        d = DEmpiricalCDF(PAIRS, stream)
        assert d.inv_cdf(0.7) == 1.0
        assert d.inv_cdf(0.75) == 2.0
        assert d.inv_cdf(1.0) == 5.0

    def test_domain_and_values(self, stream) -> None:
        d = DEmpiricalCDF(PAIRS, stream)
        assert d.domain == (1.0, 5.0)
        assert d.values == [1.0, 2.0, 4.0, 5.0]
        assert d.parameters == PAIRS

    def test_last_probability_snapped_to_one(self, stream) -> None:
        d = DEmpiricalCDF([1.0, 0.5, 2.0, 1.0 - 1e-12], stream)
        assert d.cumulative_probabilities[-1] == 1.0

    @pytest.mark.parametrize(
        "pairs",
        [
            [1.0, 0.5, 2.0, 0.9],
            [1.0, 0.6, 2.0, 0.5, 3.0, 1.0],
            [1.0, -0.1, 2.0, 1.0],
            [2.0, 0.5, 1.0, 1.0],
            [1.0, 0.5, 2.0],
            [],
        ],
    )
    def test_invalid_pairs(self, stream, pairs) -> None:
        """Missing final 1.0, decreasing steps, bad values and odd lengths are rejected."""
        with pytest.raises(InvalidParameterError):
            DEmpiricalCDF(pairs, stream)

    def test_sampling_frequencies(self, stream) -> None:
        d = DEmpiricalCDF(PAIRS, stream)
        values = d.sample_n(20000)
        assert set(values) <= {1.0, 2.0, 4.0, 5.0}
        assert abs(values.count(1.0) / 20000 - 0.7) < 0.02

    def test_make_pairs(self) -> None:
        assert DEmpiricalCDF.make_pairs([0.5, 1.0], start=3.0) == [3.0, 0.5, 4.0, 1.0]

    def test_to_pmf(self, stream) -> None:
        pmf = DEmpiricalCDF(PAIRS, stream).to_pmf()
        assert pmf.values == [1.0, 2.0, 4.0, 5.0]
        assert abs(pmf.mean - 1.8) < 1e-12

    def test_random_variable(self, stream) -> None:
        rv = DEmpiricalCDF(PAIRS).random_variable(stream)
        assert isinstance(rv, DEmpiricalRV)
        assert rv.values == [1.0, 2.0, 4.0, 5.0]


class TestDEmpiricalPMF:
    """Tests for DEmpiricalPMF."""

    def test_points_are_sorted(self, stream) -> None:
        d = DEmpiricalPMF([3.0, 0.5, 1.0, 0.5], stream)
        assert d.values == [1.0, 3.0]
        assert d.cumulative_probabilities == [0.5, 1.0]
        assert d.mean == 2.0

    def test_zero_probability_skipped(self, stream, caplog) -> None:
        """Zero-probability points are dropped with a warning."""
        with caplog.at_level(logging.WARNING, logger="pysimrv.distributions.empirical"):
            d = DEmpiricalPMF([1.0, 0.5, 2.0, 0.0, 3.0, 0.5], stream)
        assert d.values == [1.0, 3.0]
        assert "zero probability" in caplog.text

    def test_duplicate_values(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            DEmpiricalPMF([1.0, 0.5, 1.0, 0.5], stream)

    @pytest.mark.parametrize("pairs", [[1.0, 0.5, 2.0, 0.4], [1.0, 0.7, 2.0, 0.7], [1.0, 0.0]])
    def test_probabilities_must_sum_to_one(self, stream, pairs) -> None:
        with pytest.raises(InvalidParameterError):
            DEmpiricalPMF(pairs, stream)

    def test_to_cdf(self, stream) -> None:
        cdf = DEmpiricalPMF(DEmpiricalPMF.make_pairs([0.25, 0.25, 0.5]), stream).to_cdf()
        assert cdf.values == [0.0, 1.0, 2.0]
        assert cdf.cumulative_probabilities == [0.25, 0.5, 1.0]


class TestShiftedDistribution:
    """Tests for ShiftedDistribution."""

    def test_moments_and_quantile(self, stream) -> None:
        d = ShiftedDistribution(Exponential(1.0, stream), 2.0)
        assert d.mean == 3.0
        assert d.variance == 1.0
        assert d.cdf(1.5) == 0.0
        assert abs(d.cdf(3.0) - (1.0 - math.exp(-1.0))) < 1e-12
        assert abs(d.inv_cdf(0.5) - (2.0 + math.log(2.0))) < 1e-12
        assert d.domain == (2.0, math.inf)

    @pytest.mark.parametrize(
        "inner",
        [
            lambda s: Normal(0.0, 1.0, s),
            lambda s: Laplace(-1.0, 2.0, s),
            lambda s: Uniform(-3.0, 1.0, s),
        ],
        ids=["normal", "laplace", "uniform"],
    )
    @pytest.mark.parametrize("p", [0.05, 0.3, 0.5, 0.7, 0.95])
    def test_quantile_round_trip_below_zero(self, stream, inner, p: float) -> None:
        """Inner support reaching below zero keeps cdf(inv_cdf(p)) == p."""
        d = ShiftedDistribution(inner(stream), 1.0)
        x = d.inv_cdf(p)
        assert abs(d.cdf(x) - p) < 1e-9

    def test_cdf_follows_inner_below_shift(self, stream) -> None:
        """Points below the shift still carry the inner distribution's mass."""
        inner = Normal(0.0, 1.0, stream)
        d = ShiftedDistribution(inner, 1.0)
        assert abs(d.cdf(0.4756) - inner.cdf(-0.5244)) < 1e-15
        assert abs(d.cdf(1.0) - 0.5) < 1e-12
        assert d.cdf(0.0) > 0.15

    def test_shares_wrapped_stream(self, stream) -> None:
        inner = Exponential(1.0, stream)
        assert ShiftedDistribution(inner, 1.0).stream is stream

    def test_parameters(self, stream) -> None:
        d = ShiftedDistribution(Normal(0.0, 1.0, stream), 1.0)
        assert d.parameters == [1.0, 0.0, 1.0]
        d.set_parameters([2.0, 5.0, 4.0])
        assert d.mean == 7.0
        assert d.parameter_names == ("shift", "mean", "variance")

    def test_negative_shift(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            ShiftedDistribution(Exponential(1.0, stream), -1.0)

    def test_density(self, stream) -> None:
        d = ShiftedDistribution(Exponential(1.0, stream), 1.0)
        assert d.pdf(1.0) == 1.0
        with pytest.raises(TypeError):
            d.pmf(1.0)

    def test_not_built_from_parameters(self) -> None:
        with pytest.raises(InvalidParameterError):
            ShiftedDistribution.from_parameters([1.0, 2.0])

    def test_new_instance(self, stream, factory) -> None:
        d = ShiftedDistribution(Poisson(2.0, stream), 3.0)
        other_stream = factory.get_stream()
        copy = d.new_instance(other_stream)
        assert copy.stream is other_stream
        assert copy.distribution.stream is other_stream
        assert copy.parameters == d.parameters

    def test_random_variable(self, stream) -> None:
        """The matching variable draws shift + inner draw on the given stream."""
        d = ShiftedDistribution(Exponential(2.0), 3.0)
        rv = d.random_variable(stream)
        assert isinstance(rv, ShiftedRV)
        assert rv.stream is stream
        assert rv.shift == 3.0
        assert all(x >= 3.0 for x in rv.sample_n(200))

    def test_random_variable_replays_inner(self, stream) -> None:
        inner = NormalRV(0.0, 1.0, stream.new_instance())
        rv = ShiftedDistribution(Normal(0.0, 1.0), 2.0).random_variable(stream)
        assert [x - 2.0 for x in rv.sample_n(5)] == pytest.approx(inner.sample_n(5))

    def test_random_variable_antithetic(self, stream) -> None:
        rv = ShiftedDistribution(Exponential(1.0), 1.0).random_variable(stream)
        anti = rv.new_antithetic_instance()
        assert anti.stream.antithetic
        assert anti.shift == 1.0

    def test_loss_functions(self, stream) -> None:
        d = ShiftedLossFunctionDistribution(Exponential(2.0, stream), 1.0)
        assert abs(d.first_order_loss(1.0) - 2.0) < 1e-12

    def test_loss_functions_required(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            ShiftedLossFunctionDistribution(Weibull(1.0, 1.0, stream), 1.0)
