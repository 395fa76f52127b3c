"""
Quantile statistics.

Global quantiles use the P² algorithm, which tracks five markers instead of
storing observations. Windowed quantiles interpolate linearly between ranks
of a :class:`SortedWindow`.

References:
    Jain, R. and Chlamtac, I. (1985). The P² algorithm for dynamic calculation
    of quantiles and histograms without storing observations.
"""
import bisect
import math
from typing import List, Tuple

from .base import Univariate
from .errors import InvalidParameter
from .sorted_window import SortedWindow


def _check_quantile(q: float, name: str = "q") -> None:
    if not 0.0 <= q <= 1.0:
        raise InvalidParameter(f"{name} must be between 0 and 1, got {q}")


def _check_quantile_pair(q_inf: float, q_sup: float) -> None:
    _check_quantile(q_inf, "q_inf")
    _check_quantile(q_sup, "q_sup")
    if q_inf >= q_sup:
        raise InvalidParameter(f"q_inf must be strictly less than q_sup, got {q_inf} >= {q_sup}")


class Quantile(Univariate):
    """
    Running quantile estimator using the P² algorithm.

    The first five observations seed the marker heights (kept sorted). From
    the sixth on, each update moves one bracket, shifts the actual marker
    positions, advances the desired positions and nudges the three interior
    markers with a parabolic (or, failing that, linear) prediction.

    Args:
        q: Quantile to estimate, between 0 and 1.

    Example:
        median = Quantile(0.5)
        for x in [9, 7, 3, 2, 6, 1, 8, 5, 4]:
            median.update(x)
        median.get()  # 5.0
    """

    def __init__(self, q: float = 0.5):
        _check_quantile(q)
        self.q = q
        # Per-observation increments of the desired marker positions
        self.increments = [0.0, q / 2.0, q, (1.0 + q) / 2.0, 1.0]
        self.desired_positions = [1.0, 1.0 + 2.0 * q, 1.0 + 4.0 * q, 3.0 + 2.0 * q, 5.0]
        self.positions = [1, 2, 3, 4, 5]
        self.heights: List[float] = []
        self.n = 0

    @property
    def is_active(self) -> bool:
        """True once the markers are driven by the P² updates."""
        return self.n > 5

    def update(self, x: float) -> None:
        self.n += 1
        if self.n <= 5:
            bisect.insort(self.heights, x)
            return

        k = self._find_bracket(x)

        for i in range(k, 5):
            self.positions[i] += 1
        for i in range(5):
            self.desired_positions[i] += self.increments[i]

        self._adjust()

    def _find_bracket(self, x: float) -> int:
        """Find k such that heights[k-1] <= x < heights[k], extending the extremes."""
        heights = self.heights
        if x < heights[0]:
            heights[0] = x
            return 1
        for i in range(1, 5):
            if heights[i - 1] <= x < heights[i]:
                return i
        if x > heights[4]:
            heights[4] = x
        return 4

    def _adjust(self) -> None:
        heights = self.heights
        positions = self.positions
        for i in range(1, 4):
            n = positions[i]
            d = self.desired_positions[i] - n
            if (d >= 1.0 and positions[i + 1] - n > 1) or (d <= -1.0 and positions[i - 1] - n < -1):
                step = 1 if d > 0 else -1
                qn = self._parabolic(i, step)
                if heights[i - 1] < qn < heights[i + 1]:
                    heights[i] = qn
                else:
                    heights[i] = self._linear(i, step)
                positions[i] = n + step

    def _parabolic(self, i: int, d: int) -> float:
        h = self.heights
        p = self.positions
        outer = d / (p[i + 1] - p[i - 1])
        inner_left = (p[i] - p[i - 1] + d) * (h[i + 1] - h[i]) / (p[i + 1] - p[i])
        inner_right = (p[i + 1] - p[i] - d) * (h[i] - h[i - 1]) / (p[i] - p[i - 1])
        return h[i] + outer * (inner_left + inner_right)

    def _linear(self, i: int, d: int) -> float:
        h = self.heights
        p = self.positions
        return h[i] + d * (h[i + d] - h[i]) / (p[i + d] - p[i])

    def get(self) -> float:
        if self.is_active:
            return self.heights[2]
        if not self.heights:
            return 0.0
        length = len(self.heights)
        index = int(min(length - 1, length * self.q))
        return self.heights[index]


class IQR(Univariate):
    """
    Running interquartile range, the difference of two P² estimates.

    Args:
        q_inf: Lower quantile. Defaults to 0.25.
        q_sup: Upper quantile. Defaults to 0.75.
    """

    def __init__(self, q_inf: float = 0.25, q_sup: float = 0.75):
        _check_quantile_pair(q_inf, q_sup)
        self.q_inf = Quantile(q_inf)
        self.q_sup = Quantile(q_sup)

    def update(self, x: float) -> None:
        self.q_inf.update(x)
        self.q_sup.update(x)

    def get(self) -> float:
        return self.q_sup.get() - self.q_inf.get()


def interpolation_ranks(q: float, length: int) -> Tuple[int, int, float]:
    """
    Ranks bracketing quantile ``q`` in a sorted sequence of ``length`` items.

    Returns:
        (lower, higher, frac) such that the quantile is
        ``s[lower] + (s[higher] - s[lower]) * frac``
    """
    idx = q * (length - 1)
    lower = int(math.floor(idx))
    higher = min(lower + 1, length - 1)
    return lower, higher, idx - lower


def _interpolate(window: SortedWindow, ranks: Tuple[int, int, float]) -> float:
    lower, higher, frac = ranks
    return window[lower] + (window[higher] - window[lower]) * frac


class RollingQuantile(Univariate):
    """
    Quantile over the last ``window_size`` values, linearly interpolated.

    Ranks for a full window are computed once here; while the window is
    still filling up they are recomputed against its current length.

    Args:
        q: Quantile, between 0 and 1.
        window_size: Size of the rolling window.
    """

    def __init__(self, q: float, window_size: int):
        _check_quantile(q)
        self.q = q
        self.window_size = window_size
        self.sorted_window = SortedWindow(window_size)
        self.ranks = interpolation_ranks(q, window_size)

    def update(self, x: float) -> None:
        self.sorted_window.push(x)

    def _current_ranks(self) -> Tuple[int, int, float]:
        if self.sorted_window.is_full:
            return self.ranks
        return interpolation_ranks(self.q, len(self.sorted_window))

    def get(self) -> float:
        if not self.sorted_window:
            return 0.0
        return _interpolate(self.sorted_window, self._current_ranks())


class RollingIQR(Univariate):
    """
    Interquartile range over the last ``window_size`` values.

    Both quantiles are read from a single shared sorted window.

    Args:
        q_inf: Lower quantile.
        q_sup: Upper quantile, strictly greater than ``q_inf``.
        window_size: Size of the rolling window.
    """

    def __init__(self, q_inf: float, q_sup: float, window_size: int):
        _check_quantile_pair(q_inf, q_sup)
        self.q_inf = q_inf
        self.q_sup = q_sup
        self.window_size = window_size
        self.sorted_window = SortedWindow(window_size)
        self.ranks_inf = interpolation_ranks(q_inf, window_size)
        self.ranks_sup = interpolation_ranks(q_sup, window_size)

    def update(self, x: float) -> None:
        self.sorted_window.push(x)

    def get(self) -> float:
        window = self.sorted_window
        if not window:
            return 0.0
        if window.is_full:
            ranks_inf, ranks_sup = self.ranks_inf, self.ranks_sup
        else:
            ranks_inf = interpolation_ranks(self.q_inf, len(window))
            ranks_sup = interpolation_ranks(self.q_sup, len(window))
        return _interpolate(window, ranks_sup) - _interpolate(window, ranks_inf)
