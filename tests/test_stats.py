"""
Tests for the Mean and Variance statistics.
"""

import math

import pytest
from scipy import stats

from pysimrv.exceptions import InvalidParameterError
from pysimrv.stats import Mean, Variance

DATA = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


class TestMean:
    """Tests for Mean."""

    def test_empty(self) -> None:
        m = Mean()
        assert m.number_of_samples == 0
        assert math.isnan(m.mean)
        assert m.min == math.inf
        assert m.max == -math.inf

    def test_collect(self) -> None:
        m = Mean("waits")
        m.collect(DATA)
        assert m.number_of_samples == 8
        assert m.sum == 40.0
        assert m.mean == 5.0
        assert m.min == 2.0
        assert m.max == 9.0

    def test_iadd_and_reset(self) -> None:
        m = Mean()
        m += 3.0
        m += 5.0
        assert m.mean == 4.0
        m.reset()
        assert m.number_of_samples == 0

    def test_str(self) -> None:
        m = Mean("waits")
        m.set_value(1.0)
        text = str(m)
        assert "Name              : waits" in text
        assert "Mean              : 1.0" in text


class TestVariance:
    """Tests for Variance."""

    def test_variance(self) -> None:
        v = Variance()
        v.collect(DATA)
        assert abs(v.variance - 32.0 / 7.0) < 1e-12
        assert abs(v.std_dev - math.sqrt(32.0 / 7.0)) < 1e-12
        assert v.mean == 5.0

    def test_too_few_samples(self) -> None:
        v = Variance()
        v += 1.0
        assert math.isnan(v.variance)
        assert math.isnan(v.half_width())

    def test_half_width(self) -> None:
        v = Variance()
        v.collect(DATA)
        expected = stats.t.ppf(0.975, 7) * math.sqrt(32.0 / 7.0) / math.sqrt(8.0)
        assert abs(v.half_width() - expected) < 1e-12
        lo, hi = v.confidence_interval()
        assert abs((hi - lo) / 2.0 - expected) < 1e-12

    def test_bad_level(self) -> None:
        v = Variance()
        v.collect(DATA)
        with pytest.raises(InvalidParameterError):
            v.half_width(1.0)

    def test_large_offset(self) -> None:
        """Variance stays accurate for values far from zero."""
        v = Variance()
        v.collect(1e9 + x for x in DATA)
        assert abs(v.variance - 32.0 / 7.0) < 1e-6

    def test_str(self) -> None:
        v = Variance()
        v.collect(DATA)
        assert "95% Half-width" in str(v)
