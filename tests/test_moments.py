"""Tests for central moments, skewness, kurtosis and covariance."""
import pytest
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from rollstats import CentralMoments, Skew, Kurtosis, Covariance


def _population_moment(values, order):
    arr = np.asarray(values)
    return np.mean((arr - arr.mean()) ** order)


def test_central_moments_sums(random_stream):
    """Test the unnormalised moment sums against direct computation."""
    cm = CentralMoments()
    for x in random_stream:
        cm.update(x)

    n = len(random_stream)
    assert cm.n == n
    assert cm.mean == pytest.approx(np.mean(random_stream), rel=1e-12)
    assert cm.m2 == pytest.approx((n - 1) * np.var(random_stream, ddof=1), rel=1e-9)
    assert cm.m3 == pytest.approx(n * _population_moment(random_stream, 3), rel=1e-7, abs=1e-9)
    assert cm.m4 == pytest.approx(n * _population_moment(random_stream, 4), rel=1e-9)


def test_skew_values(normal_sample):
    """Test bias corrected and biased skewness."""
    corrected, biased = Skew(), Skew(bias=True)
    for x in normal_sample:
        corrected.update(x)
        biased.update(x)

    assert corrected.get() == pytest.approx(1.0561156354390309, rel=1e-9)
    assert biased.get() == pytest.approx(0.7712778091518129, rel=1e-9)


def test_skew_biased_matches_numpy(random_stream):
    """Test biased skewness against the population formula."""
    skew = Skew(bias=True)
    for x in random_stream:
        skew.update(x)
    expected = _population_moment(random_stream, 3) / _population_moment(random_stream, 2) ** 1.5
    assert skew.get() == pytest.approx(expected, rel=1e-7, abs=1e-9)


def test_kurtosis_values(normal_sample):
    """Test bias corrected and biased excess kurtosis."""
    corrected, biased = Kurtosis(), Kurtosis(bias=True)
    for x in normal_sample:
        corrected.update(x)
        biased.update(x)

    assert corrected.get() == pytest.approx(0.46142635465045007, rel=1e-9)
    assert biased.get() == pytest.approx(-0.6989395355484169, rel=1e-9)


def test_kurtosis_biased_matches_numpy(random_stream):
    """Test biased excess kurtosis against the population formula."""
    kurt = Kurtosis(bias=True)
    for x in random_stream:
        kurt.update(x)
    expected = _population_moment(random_stream, 4) / _population_moment(random_stream, 2) ** 2 - 3
    assert kurt.get() == pytest.approx(expected, rel=1e-9)


def test_small_samples_fall_back_to_biased():
    """Test the correction is skipped when it is undefined."""
    skew, skew_biased = Skew(), Skew(bias=True)
    kurt, kurt_biased = Kurtosis(), Kurtosis(bias=True)
    for x in [1.0, 2.0, 4.0]:
        for stat in (skew, skew_biased, kurt, kurt_biased):
            stat.update(x)

    # n = 3: skew correction defined, kurtosis correction not
    assert skew.get() != skew_biased.get()
    assert kurt.get() == kurt_biased.get()


def test_degenerate_samples_are_zero():
    """Test empty and constant streams report 0."""
    assert Skew().get() == 0.0
    assert Kurtosis().get() == 0.0

    skew, kurt = Skew(), Kurtosis()
    for _ in range(10):
        skew.update(2.5)
        kurt.update(2.5)
    assert skew.get() == 0.0
    assert kurt.get() == 0.0


def test_covariance_example():
    """Test covariance on a three point sample."""
    cov = Covariance()
    for x, y in zip([-2.1, -1.0, 4.3], [3.0, 1.1, 0.12]):
        cov.update(x, y)
    assert cov.get() == pytest.approx(-4.286, rel=1e-9)


@pytest.mark.parametrize("ddof", [0, 1])
def test_covariance_matches_numpy(random_stream, ddof):
    """Test covariance against numpy."""
    xs = random_stream
    ys = [2.0 * x + np.sin(i) for i, x in enumerate(xs)]
    cov = Covariance(ddof)
    for x, y in zip(xs, ys):
        cov.update(x, y)
    assert cov.get() == pytest.approx(np.cov(xs, ys, ddof=ddof)[0, 1], rel=1e-9)


def test_covariance_single_pair():
    """Test the divisor never drops below one."""
    cov = Covariance()
    cov.update(1.0, 2.0)
    assert cov.get() == 0.0
