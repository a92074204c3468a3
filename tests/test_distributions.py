"""
Tests for the parametric distributions.
"""

import math

import pytest
from scipy import stats

from pysimrv.distributions import (
    Bernoulli,
    Beta,
    Binomial,
    ChiSquared,
    Constant,
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
    Triangular,
    Uniform,
    Weibull,
)
from pysimrv.exceptions import InvalidParameterError, InvalidProbabilityError
from pysimrv.rng import MRG32k3aStream
from pysimrv.rvariable import ExponentialRV, NormalRV


class TestDiscreteFamilies:
    """Tests for the discrete distributions."""

    def test_bernoulli(self, stream) -> None:
        """cdf and the quantile jump at 1 - p."""
        d = Bernoulli(0.3, stream)
        assert abs(d.cdf(0.5) - 0.7) < 1e-12
        assert d.inv_cdf(0.69) == 0.0
        assert d.inv_cdf(0.71) == 1.0
        assert d.pmf(1.0) == 0.3
        assert d.pmf(0.5) == 0.0
        assert abs(d.variance - 0.21) < 1e-12

    def test_binomial(self, stream) -> None:
        d = Binomial(0.5, 10, stream)
        assert abs(d.pmf(5) - 0.24609375) < 1e-12
        assert abs(d.cdf(5) - 0.623046875) < 1e-12
        assert d.inv_cdf(0.5) == 5.0
        assert d.cdf(-1) == 0.0
        assert d.cdf(10) == 1.0
        assert d.mean == 5.0
        assert d.variance == 2.5

    def test_binomial_rejects_bad_trials(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            Binomial(0.5, 2.5, stream)
        with pytest.raises(InvalidParameterError):
            Binomial(1.5, 10, stream)

    def test_poisson(self, stream) -> None:
        d = Poisson(2.0, stream)
        assert abs(d.cdf(0) - math.exp(-2.0)) < 1e-12
        assert abs(d.pmf(2) - 2.0 * math.exp(-2.0)) < 1e-12
        assert d.inv_cdf(0.5) == 2.0
        assert d.inv_cdf(0.0) == 0.0

    def test_poisson_loss_functions(self, stream) -> None:
        """E[max(X - 1, 0)] = mean - 1 + P(X = 0)."""
        d = Poisson(2.0, stream)
        assert abs(d.first_order_loss(1.0) - (1.0 + math.exp(-2.0))) < 1e-10
        assert abs(d.first_order_loss(0.0) - 2.0) < 1e-10

    def test_duniform(self, stream) -> None:
        """Each of the six faces has cdf step 1/6."""
        d = DUniform(1, 6, stream)
        assert d.inv_cdf(0.5) == 3.0
        assert d.inv_cdf(0.51) == 4.0
        assert d.inv_cdf(0.0) == 1.0
        assert d.inv_cdf(1.0) == 6.0
        assert abs(d.cdf(3) - 0.5) < 1e-12
        assert abs(d.pmf(4) - 1.0 / 6.0) < 1e-12
        assert d.mean == 3.5

    def test_duniform_needs_min_below_max(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            DUniform(3, 3, stream)

    def test_geometric(self, stream) -> None:
        """Smallest integer x with 1 - (1 - p)^(x + 1) >= u."""
        d = Geometric(0.5, stream)
        assert d.inv_cdf(0.5) == 0.0
        assert d.inv_cdf(0.8) == 2.0
        assert d.mean == 1.0
        assert d.variance == 2.0
        assert d.first_order_loss(-2.0) == 3.0
        assert abs(d.first_order_loss(1.0) - 0.5) < 1e-12

    @pytest.mark.parametrize("p", [0.0, 1.0, 1e-17])
    def test_geometric_quantile_endpoints(self, stream, p: float) -> None:
        with pytest.raises(InvalidProbabilityError):
            Geometric(0.5, stream).inv_cdf(p)

    def test_geometric_rejects_probability_one(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            Geometric(1.0, stream)

    def test_negative_binomial(self, stream) -> None:
        d = NegativeBinomial(0.5, 2, stream)
        assert abs(d.pmf(0) - 0.25) < 1e-12
        assert abs(d.pmf(1) - 0.25) < 1e-12
        assert abs(d.pmf(2) - 0.1875) < 1e-12
        assert abs(d.cdf(1) - 0.5) < 1e-12
        assert d.mean == 2.0
        assert d.variance == 4.0
        assert d.inv_cdf(0.45) == 1.0

    def test_constant(self, stream) -> None:
        d = Constant(4.0, stream)
        assert d.sample() == 4.0
        assert d.cdf(3.9) == 0.0
        assert d.cdf(4.0) == 1.0
        assert d.variance == 0.0


class TestContinuousFamilies:
    """Tests for the continuous distributions."""

    def test_exponential(self, stream) -> None:
        d = Exponential(2.0, stream)
        assert abs(d.inv_cdf(0.5) - 2.0 * math.log(2.0)) < 1e-12
        assert abs(d.inv_cdf(0.5) - 1.386294) < 1e-6
        assert d.inv_cdf(1.0) == math.inf
        assert d.variance == 4.0
        assert abs(d.first_order_loss(0.0) - 2.0) < 1e-12

    def test_uniform(self, stream) -> None:
        d = Uniform(2.0, 6.0, stream)
        assert d.inv_cdf(0.25) == 3.0
        assert d.cdf(4.0) == 0.5
        assert abs(d.variance - 16.0 / 12.0) < 1e-12

    def test_uniform_bad_range(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            Uniform(1.0, 1.0, stream)

    def test_normal(self, stream) -> None:
        d = Normal(10.0, 4.0, stream)
        assert d.cdf(10.0) == 0.5
        assert abs(d.inv_cdf(0.5) - 10.0) < 1e-12
        assert abs(d.inv_cdf(0.975) - (10.0 + 2.0 * 1.959963984540054)) < 1e-8
        assert abs(d.first_order_loss(10.0) - 0.7978845608) < 1e-9

    def test_normal_rejects_non_positive_variance(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            Normal(0.0, 0.0, stream)

    def test_lognormal(self, stream) -> None:
        """The parameters are the lognormal's own mean and variance."""
        d = Lognormal(2.0, 1.0, stream)
        assert abs(d.moment(1) - 2.0) < 1e-12
        assert abs(d.moment(2) - 5.0) < 1e-12
        assert abs(d.cdf(d.inv_cdf(0.3)) - 0.3) < 1e-12
        assert d.cdf(0.0) == 0.0

    def test_weibull(self, stream) -> None:
        """Shape 1 reduces to the exponential."""
        d = Weibull(1.0, 2.0, stream)
        assert abs(d.mean - 2.0) < 1e-12
        assert abs(d.variance - 4.0) < 1e-12
        assert abs(d.inv_cdf(0.5) - 2.0 * math.log(2.0)) < 1e-12

    def test_log_logistic(self, stream) -> None:
        d = LogLogistic(2.0, 3.0, stream)
        assert abs(d.inv_cdf(0.5) - 3.0) < 1e-12
        assert abs(d.cdf(3.0) - 0.5) < 1e-12
        assert math.isnan(d.variance)

    def test_laplace(self, stream) -> None:
        d = Laplace(0.0, 1.0, stream)
        assert abs(d.inv_cdf(0.75) - math.log(2.0)) < 1e-12
        assert abs(d.inv_cdf(0.25) + math.log(2.0)) < 1e-12
        assert d.variance == 2.0

    def test_triangular(self, stream) -> None:
        d = Triangular(0.0, 0.5, 1.0, stream)
        assert abs(d.variance - 1.0 / 24.0) < 1e-12
        assert abs(d.inv_cdf(0.5) - 0.5) < 1e-12
        assert abs(d.skewness) < 1e-12

    def test_left_triangular(self, stream) -> None:
        """mode == min gives cdf(x) = 1 - (1 - x)^2 on [0, 1]."""
        d = Triangular(0.0, 0.0, 1.0, stream)
        assert abs(d.cdf(0.5) - 0.75) < 1e-12
        assert abs(d.inv_cdf(0.75) - 0.5) < 1e-12

    def test_triangular_rejects_mode_outside(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            Triangular(0.0, 2.0, 1.0, stream)

    def test_johnson_b(self, stream) -> None:
        """With alpha1 = 0 the median is the midpoint."""
        d = JohnsonB(0.0, 1.0, 0.0, 1.0, stream)
        assert abs(d.inv_cdf(0.5) - 0.5) < 1e-12
        assert abs(d.cdf(0.5) - 0.5) < 1e-12
        assert abs(d.mean - 0.5) < 1e-6
        assert 0.0 < d.variance < 0.25


class TestGammaFamily:
    """Tests for Gamma, ChiSquared and PearsonType5."""

    def test_gamma_exponential_case(self, stream) -> None:
        d = Gamma(1.0, 2.0, stream)
        assert abs(d.inv_cdf(0.5) - 2.0 * math.log(2.0)) < 1e-12
        assert d.mean == 2.0
        assert d.variance == 4.0

    @pytest.mark.parametrize("p", [0.05, 0.5, 0.9])
    def test_gamma_quantile_inverts_cdf(self, stream, p: float) -> None:
        d = Gamma(2.5, 3.0, stream)
        assert abs(d.cdf(d.inv_cdf(p)) - p) < 1e-7

    @pytest.mark.parametrize("shape", [2.5, 25.0, 250.0])
    @pytest.mark.parametrize("p", [1e-15, 1e-30, 1e-100])
    def test_gamma_far_left_tail(self, stream, shape: float, p: float) -> None:
        """Gamma quantiles for tiny p match scipy instead of overflowing."""
        d = Gamma(shape, 2.0, stream)
        expected = stats.gamma.ppf(p, shape, scale=2.0)
        assert abs(d.inv_cdf(p) - expected) <= 1e-6 * expected

    def test_chi_squared(self, stream) -> None:
        d = ChiSquared(1.0, stream)
        assert abs(d.inv_cdf(0.95) - 3.841458820694124) < 1e-7
        assert d.mean == 1.0
        assert d.variance == 2.0

    def test_pearson_type5(self, stream) -> None:
        d = PearsonType5(3.0, 2.0, stream)
        assert abs(d.mean - 1.0) < 1e-12
        assert abs(d.variance - 1.0) < 1e-12
        assert abs(d.cdf(d.inv_cdf(0.4)) - 0.4) < 1e-7

    def test_pearson_type5_missing_moments(self, stream) -> None:
        d = PearsonType5(1.0, 1.0, stream)
        assert math.isnan(d.mean)
        assert math.isnan(d.variance)


class TestBetaFamily:
    """Tests for Beta, GeneralizedBeta and PearsonType6."""

    def test_beta(self, stream) -> None:
        d = Beta(2.0, 2.0, stream)
        assert abs(d.variance - 0.05) < 1e-12
        assert abs(d.inv_cdf(0.5) - 0.5) < 1e-9
        assert abs(d.pdf(0.5) - 1.5) < 1e-12

    def test_generalized_beta(self, stream) -> None:
        d = GeneralizedBeta(2.0, 2.0, 10.0, 20.0, stream)
        assert abs(d.inv_cdf(0.5) - 15.0) < 1e-9
        assert abs(d.variance - 5.0) < 1e-9
        assert abs(d.mean - 15.0) < 1e-12

    def test_pearson_type6(self, stream) -> None:
        d = PearsonType6(2.0, 3.0, 1.0, stream)
        assert abs(d.mean - 1.0) < 1e-12
        assert abs(d.variance - 2.0) < 1e-12
        assert abs(d.cdf(d.inv_cdf(0.7)) - 0.7) < 1e-9


class TestDistributionBehaviour:
    """Tests for the shared Distribution operations."""

    def test_inv_cdf_rejects_bad_probability(self, stream) -> None:
        with pytest.raises(InvalidProbabilityError):
            Exponential(1.0, stream).inv_cdf(1.5)

    def test_cdf_between(self, stream) -> None:
        d = Uniform(0.0, 10.0, stream)
        assert abs(d.cdf_between(2.0, 5.0) - 0.3) < 1e-12
        with pytest.raises(InvalidParameterError):
            d.cdf_between(5.0, 2.0)

    def test_parameters_round_trip(self, stream) -> None:
        """from_parameters rebuilds an equal distribution."""
        d = Triangular(1.0, 2.0, 4.0, stream)
        copy = Triangular.from_parameters(d.parameters, stream)
        assert copy.parameters == [1.0, 2.0, 4.0]

    def test_from_parameters_wrong_length(self) -> None:
        with pytest.raises(InvalidParameterError):
            Normal.from_parameters([1.0])

    def test_set_parameters(self, stream) -> None:
        d = Exponential(1.0, stream)
        d.set_parameters([3.0])
        assert d.mean == 3.0
        with pytest.raises(InvalidParameterError):
            d.set_parameters([-3.0])

    def test_repr(self, stream) -> None:
        assert repr(Normal(10, 4, stream)) == "Normal(mean=10, variance=4)"

    def test_sampling_mean(self, stream) -> None:
        """Sample mean of 20000 draws is close to the true mean."""
        d = Exponential(2.0, stream)
        values = d.sample_n(20000)
        assert abs(sum(values) / len(values) - 2.0) < 0.1

    def test_sample_uses_bound_stream(self) -> None:
        """Two distributions on equal streams produce equal samples."""
        d1 = Gamma(2.0, 1.5, MRG32k3aStream())
        d2 = Gamma(2.0, 1.5, MRG32k3aStream())
        assert d1.sample_n(10) == d2.sample_n(10)

    def test_reset_start_stream(self, stream) -> None:
        d = Normal(0.0, 1.0, stream)
        first = d.sample_n(5)
        d.reset_start_stream()
        assert d.sample_n(5) == first

    def test_antithetic_instance(self, stream) -> None:
        """The antithetic sample sits at the mirrored probability."""
        d = Exponential(1.0, stream)
        anti = d.new_antithetic_instance()
        for _ in range(20):
            assert abs(d.cdf(d.sample()) + anti.cdf(anti.sample()) - 1.0) < 1e-9

    def test_new_instance(self, stream) -> None:
        d = Weibull(2.0, 3.0, stream)
        other = d.new_instance()
        assert other.parameters == d.parameters
        assert other.stream is not d.stream

    def test_random_variable(self, stream) -> None:
        rv = Normal(1.0, 2.0).random_variable(stream)
        assert isinstance(rv, NormalRV)
        assert rv.stream is stream
        assert isinstance(Exponential(3.0).random_variable(), ExponentialRV)

    def test_domain(self, stream) -> None:
        assert Uniform(1.0, 2.0, stream).domain == (1.0, 2.0)
        assert Exponential(1.0, stream).domain.upper == math.inf
