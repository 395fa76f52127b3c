"""
Elementary O(1) accumulators.

Count, Sum, Mean and Variance are revertable and can be windowed with
:class:`rollstats.rolling.Rolling`. Min, Max, AbsMax and PeakToPeak only
grow; their windowed counterparts live in :mod:`rollstats.order`.
"""
import sys

from .base import RollableUnivariate, Univariate
from .errors import RevertUnderflow

FLOAT_MAX = sys.float_info.max


class Count(RollableUnivariate):
    """Number of observations seen."""

    def __init__(self):
        self.n = 0

    def update(self, x: float = 0.0) -> None:
        self.n += 1

    def revert(self, x: float = 0.0) -> None:
        if self.n == 0:
            raise RevertUnderflow("Cannot revert: count is already zero")
        self.n -= 1

    def get(self) -> float:
        return float(self.n)


class Sum(RollableUnivariate):
    """Running sum."""

    def __init__(self):
        self.sum = 0.0

    def update(self, x: float) -> None:
        self.sum += x

    def revert(self, x: float) -> None:
        self.sum -= x

    def get(self) -> float:
        return self.sum


class Mean(RollableUnivariate):
    """
    Running arithmetic mean (West, 1979).

    Reverting every observation, in any order, brings the mean back to 0.
    """

    def __init__(self):
        self.mean = 0.0
        self.count = Count()

    def update(self, x: float) -> None:
        self.count.update(x)
        self.mean += (x - self.mean) / self.count.n

    def revert(self, x: float) -> None:
        self.count.revert(x)
        if self.count.n == 0:
            self.mean = 0.0
        else:
            self.mean -= (x - self.mean) / self.count.n

    def get(self) -> float:
        return self.mean

    @property
    def n(self) -> int:
        return self.count.n


class Variance(RollableUnivariate):
    """
    Numerically stable running variance using Welford's algorithm.

    Args:
        ddof: Delta degrees of freedom. The divisor is ``n - ddof``.
    """

    def __init__(self, ddof: int = 1):
        self.ddof = ddof
        self.mean = Mean()
        self.state = 0.0

    def update(self, x: float) -> None:
        mean_old = self.mean.get()
        self.mean.update(x)
        self.state += (x - mean_old) * (x - self.mean.get())

    def revert(self, x: float) -> None:
        mean_old = self.mean.get()
        self.mean.revert(x)
        self.state -= (x - mean_old) * (x - self.mean.get())

    def get(self) -> float:
        n = self.mean.n
        if n > self.ddof:
            # Clamp to 0 to avoid negative variance due to floating point errors
            return max(0.0, self.state) / (n - self.ddof)
        return 0.0

    @property
    def std(self) -> float:
        return self.get() ** 0.5


class Min(Univariate):
    """Running minimum. Starts at the largest representable float."""

    def __init__(self):
        self.min = FLOAT_MAX

    def update(self, x: float) -> None:
        if x < self.min:
            self.min = x

    def get(self) -> float:
        return self.min


class Max(Univariate):
    """Running maximum. Starts at the lowest representable float."""

    def __init__(self):
        self.max = -FLOAT_MAX

    def update(self, x: float) -> None:
        if x > self.max:
            self.max = x

    def get(self) -> float:
        return self.max


class AbsMax(Univariate):
    """Running maximum of absolute values."""

    def __init__(self):
        self.abs_max = 0.0

    def update(self, x: float) -> None:
        if abs(x) > self.abs_max:
            self.abs_max = abs(x)

    def get(self) -> float:
        return self.abs_max


class PeakToPeak(Univariate):
    """Running ``max - min``."""

    def __init__(self):
        self.min = Min()
        self.max = Max()

    def update(self, x: float) -> None:
        self.min.update(x)
        self.max.update(x)

    def get(self) -> float:
        if self.min.get() > self.max.get():
            return 0.0
        return self.max.get() - self.min.get()
