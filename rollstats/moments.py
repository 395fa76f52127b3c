"""
Central moments, skewness and kurtosis.

All three share one accumulator implementing Welford's one-pass algorithm
generalised to order 4. See "Algorithms for calculating variance",
section Higher-order statistics.
"""
import math

from .base import Univariate
from .summary import Count


class CentralMoments:
    """
    Unnormalised central-moment sums up to order 4.

    At ``n`` observations ``m2`` is ``(n - 1)`` times the sample variance and
    ``m3`` / ``m4`` are the third and fourth central moment sums.
    """

    def __init__(self):
        self.delta = 0.0
        self.sum_delta = 0.0
        self.m1 = 0.0
        self.m2 = 0.0
        self.m3 = 0.0
        self.m4 = 0.0
        self.count = Count()

    @property
    def n(self) -> int:
        return self.count.n

    def update(self, x: float) -> None:
        # Order matters: m4 and m3 consume the pre-update m2/m3, and m1 the
        # pre-update running mean.
        self.count.update(x)
        n = self.count.n
        self.delta = (x - self.sum_delta) / n
        self.m1 = (x - self.sum_delta) * self.delta * (n - 1)
        self.sum_delta += self.delta

        delta_sq = self.delta * self.delta
        self.m4 += (
            self.m1 * delta_sq * (n * n - 3 * n + 3)
            + 6 * delta_sq * self.m2
            - 4 * self.delta * self.m3
        )
        self.m3 += self.m1 * self.delta * (n - 2) - 3 * self.delta * self.m2
        self.m2 += self.m1

    @property
    def mean(self) -> float:
        return self.sum_delta


class Skew(Univariate):
    """
    Running skewness.

    Args:
        bias: If False, the estimate is corrected for statistical bias
            (adjusted Fisher-Pearson coefficient). The correction needs at
            least three observations; below that the biased value is returned.
    """

    def __init__(self, bias: bool = False):
        self.bias = bias
        self.central_moments = CentralMoments()

    def update(self, x: float) -> None:
        self.central_moments.update(x)

    def get(self) -> float:
        cm = self.central_moments
        n = cm.n
        if cm.m2 == 0:
            return 0.0
        skew = math.sqrt(n) * cm.m3 / cm.m2 ** 1.5
        if not self.bias and n > 2:
            return math.sqrt(n * (n - 1)) / (n - 2) * skew
        return skew


class Kurtosis(Univariate):
    """
    Running excess kurtosis.

    Args:
        bias: If False, the estimate is corrected for statistical bias. The
            correction is only defined for more than three observations;
            below that the biased value is returned.
    """

    def __init__(self, bias: bool = False):
        self.bias = bias
        self.central_moments = CentralMoments()

    def update(self, x: float) -> None:
        self.central_moments.update(x)

    def get(self) -> float:
        cm = self.central_moments
        n = cm.n
        if cm.m2 == 0:
            return 0.0
        kurtosis = n * cm.m4 / (cm.m2 * cm.m2)
        if not self.bias and n > 3:
            return ((n * n - 1) * kurtosis - 3 * (n - 1) ** 2) / ((n - 2) * (n - 3))
        return kurtosis - 3
