"""Tests for the generic rolling wrapper."""
import pytest
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from rollstats import (
    Rolling,
    Sum,
    Count,
    Mean,
    Variance,
    Quantile,
    InvalidParameter,
    WindowInvariantError,
)


def test_rolling_sum(nine_values):
    """Test rolling sum with window 2."""
    rolling_sum = Rolling(Sum(), 2)
    for x in nine_values:
        rolling_sum.update(x)
    assert rolling_sum.get() == 9.0
    assert list(rolling_sum.window) == [5.0, 4.0]


def test_rolling_variance(nine_values):
    """Test rolling variance with window 2."""
    rolling_var = Rolling(Variance(), 2)
    for x in nine_values:
        rolling_var.update(x)
    assert rolling_var.get() == pytest.approx(0.5)


def test_rolling_count_saturates():
    """Test the count never exceeds the window."""
    rolling_count = Rolling(Count(), 4)
    for i in range(10):
        rolling_count.update(float(i))
        assert rolling_count.get() == min(i + 1, 4)
    assert len(rolling_count) == 4


@pytest.mark.parametrize("window", [1, 5, 30])
def test_rolling_mean_and_var_match_numpy(random_stream, window):
    """Test the wrapped accumulator always reflects exactly the window contents."""
    rolling_mean = Rolling(Mean(), window)
    rolling_var = Rolling(Variance(ddof=0), window)
    for i, x in enumerate(random_stream):
        rolling_mean.update(x)
        rolling_var.update(x)
        current = random_stream[max(0, i + 1 - window):i + 1]
        assert rolling_mean.get() == pytest.approx(np.mean(current), rel=1e-9, abs=1e-9)
        assert rolling_var.get() == pytest.approx(np.var(current), rel=1e-6, abs=1e-9)


def test_window_size_zero():
    """Test a zero window is rejected."""
    with pytest.raises(InvalidParameter):
        Rolling(Sum(), 0)


def test_non_revertable_rejected():
    """Test accumulators without revert cannot be windowed."""
    with pytest.raises(InvalidParameter):
        Rolling(Quantile(0.5), 3)


def test_revert_failure_is_fatal():
    """Test a wrapped accumulator that cannot revert breaks the invariant."""
    count = Count()
    rolling_count = Rolling(count, 2)
    rolling_count.update(1.0)
    rolling_count.update(2.0)

    # Feed the wrapped accumulator out of band
    count.n = 0
    with pytest.raises(WindowInvariantError):
        rolling_count.update(3.0)
