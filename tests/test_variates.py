"""
Tests for the free-function variate generators and selection helpers.
"""

import math

import pytest

from pysimrv.distributions import Exponential, Gamma, Triangular
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import MRG32k3aStream
from pysimrv.variates import (
    is_valid_cdf,
    permutation,
    r_bernoulli,
    r_beta,
    r_beta_g,
    r_binomial,
    r_chi_squared,
    r_duniform,
    r_exponential,
    r_gamma,
    r_geometric,
    r_johnson_b,
    r_laplace,
    r_log_logistic,
    r_lognormal,
    r_neg_binomial,
    r_normal,
    r_pearson_type5,
    r_pearson_type6,
    r_poisson,
    r_triangular,
    r_uniform,
    r_weibull,
    randomly_select,
    sample_without_replacement,
)


class TestGenerators:
    """Tests for the r_xxx functions."""

    def test_agrees_with_distribution(self) -> None:
        """A free function and a distribution on equal streams draw the same values."""
        s1 = MRG32k3aStream()
        s2 = MRG32k3aStream()
        d = Exponential(2.0, s2)
        for _ in range(10):
            assert r_exponential(2.0, s1) == d.sample()

    def test_gamma_agrees_with_distribution(self) -> None:
        s1 = MRG32k3aStream()
        d = Gamma(2.0, 3.0, MRG32k3aStream())
        assert [r_gamma(2.0, 3.0, s1) for _ in range(5)] == d.sample_n(5)

    def test_triangular_agrees_with_distribution(self) -> None:
        s1 = MRG32k3aStream()
        d = Triangular(1.0, 2.0, 5.0, MRG32k3aStream())
        assert [r_triangular(1.0, 2.0, 5.0, s1) for _ in range(5)] == d.sample_n(5)

    def test_discrete_supports(self, stream) -> None:
        assert {r_bernoulli(0.5, stream) for _ in range(200)} == {0.0, 1.0}
        assert {r_duniform(1, 6, stream) for _ in range(2000)} == {1.0, 2.0, 3.0, 4.0, 5.0, 6.0}
        assert all(0.0 <= r_binomial(0.3, 5, stream) <= 5.0 for _ in range(200))
        assert all(r_geometric(0.4, stream) >= 0.0 for _ in range(200))
        assert all(r_neg_binomial(0.4, 2.0, stream) >= 0.0 for _ in range(200))
        assert all(float(r_poisson(3.0, stream)).is_integer() for _ in range(200))

    def test_continuous_ranges(self, stream) -> None:
        for _ in range(200):
            assert 2.0 <= r_uniform(2.0, 3.0, stream) <= 3.0
            assert 0.0 <= r_beta(2.0, 3.0, stream) <= 1.0
            assert 10.0 <= r_beta_g(2.0, 3.0, 10.0, 20.0, stream) <= 20.0
            assert 0.0 <= r_johnson_b(0.5, 1.5, 0.0, 4.0, stream) <= 4.0
            assert r_lognormal(2.0, 1.0, stream) > 0.0
            assert r_weibull(2.0, 1.0, stream) >= 0.0
            assert r_log_logistic(3.0, 1.0, stream) >= 0.0
            assert r_chi_squared(3.0, stream) >= 0.0
            assert r_pearson_type5(3.0, 2.0, stream) > 0.0
            assert r_pearson_type6(2.0, 3.0, 1.0, stream) >= 0.0
            assert math.isfinite(r_laplace(0.0, 1.0, stream))

    def test_normal_sample_mean(self, stream) -> None:
        values = [r_normal(5.0, 4.0, stream) for _ in range(20000)]
        assert abs(sum(values) / len(values) - 5.0) < 0.05

    def test_invalid_parameters(self, stream) -> None:
        """Parameters are checked before any draw."""
        with pytest.raises(InvalidParameterError):
            r_normal(0.0, -1.0, stream)
        with pytest.raises(InvalidParameterError):
            r_uniform(1.0, 0.0, stream)
        with pytest.raises(InvalidParameterError):
            r_triangular(0.0, 2.0, 1.0, stream)
        with pytest.raises(InvalidParameterError):
            r_duniform(1.5, 4, stream)
        with pytest.raises(InvalidParameterError):
            r_geometric(0.0, stream)
        assert stream.rand_u01s(1)[0] == MRG32k3aStream().rand_u01()

    def test_stream_required(self) -> None:
        with pytest.raises(ValueError):
            r_exponential(1.0, None)


class TestSelection:
    """Tests for is_valid_cdf, randomly_select and sampling without replacement."""

    @pytest.mark.parametrize(
        "cdf, expected",
        [
            ([0.2, 0.5, 1.0], True),
            ([1.0], True),
            ([0.2, 0.5, 0.9], False),
            ([0.5, 0.2, 1.0], False),
            ([-0.1, 1.0], False),
            ([], False),
        ],
    )
    def test_is_valid_cdf(self, cdf, expected) -> None:
        assert is_valid_cdf(cdf) is expected

    def test_select_uniform(self, stream) -> None:
        items = ["a", "b", "c"]
        assert {randomly_select(items, stream) for _ in range(300)} == set(items)

    def test_select_with_cdf(self, stream) -> None:
        """A zero-width first step is never selected."""
        for _ in range(100):
            assert randomly_select(["never", "always"], stream, [0.0, 1.0]) == "always"

    def test_select_single(self, stream) -> None:
        assert randomly_select([7], stream, [1.0]) == 7

    def test_select_errors(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            randomly_select([], stream)
        with pytest.raises(InvalidParameterError):
            randomly_select([1, 2], stream, [1.0])
        with pytest.raises(InvalidParameterError):
            randomly_select([1, 2], stream, [0.5, 0.9])
        with pytest.raises(ValueError):
            randomly_select([1, 2], None)

    def test_permutation(self, stream) -> None:
        """A permutation keeps exactly the original elements."""
        for _ in range(20):
            data = [1, 2, 3, 4, 5]
            permutation(data, stream)
            assert len(data) == 5
            assert sorted(data) == [1, 2, 3, 4, 5]

    def test_permutation_reorders(self, stream) -> None:
        orders = set()
        for _ in range(50):
            data = [1, 2, 3, 4, 5]
            permutation(data, stream)
            orders.add(tuple(data))
        assert len(orders) > 1

    def test_sample_without_replacement(self, stream) -> None:
        data = list(range(10))
        sample_without_replacement(data, 3, stream)
        assert len(set(data[:3])) == 3
        assert sorted(data) == list(range(10))

    def test_sample_too_large(self, stream) -> None:
        with pytest.raises(InvalidParameterError):
            sample_without_replacement([1, 2], 3, stream)
