"""
Exponentially weighted statistics.

References:
    Finch, T. (2009). Incremental calculation of weighted mean and variance.
"""
from .base import Univariate
from .errors import InvalidParameter


class EWMean(Univariate):
    """
    Exponentially weighted mean.

    Args:
        alpha: Smoothing factor in (0, 1]. The closer to 1, the faster the
            mean adapts to recent values.
    """

    def __init__(self, alpha: float = 0.5):
        if not 0.0 < alpha <= 1.0:
            raise InvalidParameter(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self.mean = 0.0
        self.seeded = False

    def update(self, x: float) -> None:
        if not self.seeded:
            self.mean = x
            self.seeded = True
        else:
            self.mean = self.alpha * x + (1.0 - self.alpha) * self.mean

    def get(self) -> float:
        return self.mean


class EWVariance(Univariate):
    """Exponentially weighted variance, ``E[x^2] - E[x]^2``."""

    def __init__(self, alpha: float = 0.5):
        self.alpha = alpha
        self.mean = EWMean(alpha)
        self.sq_mean = EWMean(alpha)

    def update(self, x: float) -> None:
        self.mean.update(x)
        self.sq_mean.update(x * x)

    def get(self) -> float:
        return self.sq_mean.get() - self.mean.get() ** 2


class FEWMean(Univariate):
    """
    Fading exponentially weighted mean.

    Unlike :class:`EWMean`, this keeps a decaying weight sum so the first
    updates match the exact mean of the values seen, instead of converging
    towards it asymptotically.

    Args:
        fading_factor: Decay applied to the accumulated weight at each step,
            in [0, 1). Smaller values keep more of the past.
    """

    def __init__(self, fading_factor: float = 0.01):
        if not 0.0 <= fading_factor < 1.0:
            raise InvalidParameter(f"fading_factor must be in [0, 1), got {fading_factor}")
        self.fading_factor = fading_factor
        self.mean = 0.0
        self.weight_sum = 0.0

    def update(self, x: float) -> None:
        if self.weight_sum == 0.0:
            self.mean = x
            self.weight_sum = 1.0
            return
        weight = (1.0 - self.fading_factor) * self.weight_sum
        self.mean = (weight * self.mean + x) / (weight + 1.0)
        self.weight_sum = weight + 1.0

    def get(self) -> float:
        return self.mean
