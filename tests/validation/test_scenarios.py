"""
Validation of the reference scenarios for the distributions and helpers.

Expected values:
    Exponential(mean=2).inv_cdf(0.5)      = 2 ln 2 = 1.386294
    Bernoulli(0.3).cdf(0.5)               = 0.7
    Bernoulli(0.3).inv_cdf(0.69 / 0.71)   = 0 / 1
    Triangular(0, 0, 1).cdf(0.5)          = 1 - (1 - 0.5)^2 = 0.75
    DEmpiricalCDF(1:.7, 2:.8, 4:.9, 5:1)  mean = 1.8
    Geometric(0.5).inv_cdf(0.5)           = 0
    permutation([1, 2, 3, 4, 5])          contains exactly {1, ..., 5}
"""

import math

from pysimrv.distributions import Bernoulli, DEmpiricalCDF, Exponential, Geometric, Triangular
from pysimrv.rng import MRG32k3aStream, new_stream, reset_default_factory
from pysimrv.variates import permutation


class TestReferenceScenarios:
    """Reference values for the quantile functions and helpers."""

    def setup_method(self) -> None:
        """Reset state for deterministic tests."""
        reset_default_factory()

    def test_exponential_median(self) -> None:
        d = Exponential(2.0, new_stream())
        assert abs(d.inv_cdf(0.5) - 1.386294) < 1e-6

    def test_bernoulli(self) -> None:
        d = Bernoulli(0.3, new_stream())
        assert abs(d.cdf(0.5) - 0.7) < 1e-12
        assert d.inv_cdf(0.69) == 0.0
        assert d.inv_cdf(0.71) == 1.0

    def test_left_triangular(self) -> None:
        d = Triangular(0.0, 0.0, 1.0, new_stream())
        assert abs(d.cdf(0.5) - 0.75) < 1e-12

    def test_dempirical_mean(self) -> None:
        d = DEmpiricalCDF([1.0, 0.7, 2.0, 0.8, 4.0, 0.9, 5.0, 1.0], new_stream())
        assert abs(d.mean - (1 * 0.7 + 2 * 0.1 + 4 * 0.1 + 5 * 0.1)) < 1e-12

    def test_geometric_median(self) -> None:
        """Smallest x with 1 - 0.5^(x + 1) >= 0.5."""
        d = Geometric(0.5, new_stream())
        assert d.inv_cdf(0.5) == 0.0

    def test_permutation(self) -> None:
        stream = new_stream()
        for _ in range(100):
            data = [1, 2, 3, 4, 5]
            permutation(data, stream)
            assert len(data) == 5
            assert set(data) == {1, 2, 3, 4, 5}


class TestStreamReference:
    """The generator reproduces the published MRG32k3a sequence start."""

    def test_first_draws(self) -> None:
        stream = MRG32k3aStream()
        u = stream.rand_u01()
        assert abs(u - 0.127011122047) < 1e-10
        assert not math.isnan(stream.previous_u01)
