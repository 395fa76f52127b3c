"""
Order statistics: argmin and the windowed min / max family.

Windowed variants are thin views over a :class:`SortedWindow`. An empty
window reports 0.0.
"""
from typing import Optional

from .base import Univariate
from .sorted_window import SortedWindow


class RollingMin(Univariate):
    """Minimum over the last ``window_size`` values."""

    def __init__(self, window_size: int):
        self.sorted_window = SortedWindow(window_size)

    def update(self, x: float) -> None:
        self.sorted_window.push(x)

    def get(self) -> float:
        if not self.sorted_window:
            return 0.0
        return self.sorted_window.front()


class RollingMax(Univariate):
    """Maximum over the last ``window_size`` values."""

    def __init__(self, window_size: int):
        self.sorted_window = SortedWindow(window_size)

    def update(self, x: float) -> None:
        self.sorted_window.push(x)

    def get(self) -> float:
        if not self.sorted_window:
            return 0.0
        return self.sorted_window.back()


class RollingAbsMax(Univariate):
    """Maximum absolute value over the last ``window_size`` values."""

    def __init__(self, window_size: int):
        self.sorted_window = SortedWindow(window_size)

    def update(self, x: float) -> None:
        self.sorted_window.push(x)

    def get(self) -> float:
        if not self.sorted_window:
            return 0.0
        return max(abs(self.sorted_window.front()), abs(self.sorted_window.back()))


class RollingPeakToPeak(Univariate):
    """``max - min`` over the last ``window_size`` values."""

    def __init__(self, window_size: int):
        self.sorted_window = SortedWindow(window_size)

    def update(self, x: float) -> None:
        self.sorted_window.push(x)

    def get(self) -> float:
        if not self.sorted_window:
            return 0.0
        return self.sorted_window.back() - self.sorted_window.front()


class ArgMin(Univariate):
    """Index (0-based, in arrival order) of the first occurrence of the minimum."""

    def __init__(self):
        self.min: Optional[float] = None
        self.n = 0
        self.argmin = 0

    def update(self, x: float) -> None:
        if self.min is None or x < self.min:
            self.min = x
            self.argmin = self.n
        self.n += 1

    def get(self) -> float:
        return float(self.argmin)


class RollingArgMin(Univariate):
    """
    Position of the window minimum, counted back from the newest value.

    The cached position is shifted by one on each push instead of scanning
    the window. A new value at or below the previous minimum resets it to 0.
    When the cached position would move past the oldest slot, it is looked
    up again by scanning the arrival order from the newest end.

    Example:
        window 3, input [1, 2, 3, 4, 1, 2, 3, 1.5]
        positions      [0, 1, 2, 0, 0, 1, 2, 0]
    """

    def __init__(self, window_size: int):
        self.sorted_window = SortedWindow(window_size)
        self.argmin = 0

    def update(self, x: float) -> None:
        if not self.sorted_window:
            self.argmin = 0
            self.sorted_window.push(x)
            return

        minimum = self.sorted_window.front()
        self.sorted_window.push(x)
        if x > minimum:
            if self.argmin < len(self.sorted_window) - 1:
                self.argmin += 1
            else:
                self.argmin = next(
                    i for i, y in enumerate(reversed(self.sorted_window.unsorted)) if y == x
                )
        else:
            self.argmin = 0

    def get(self) -> float:
        return float(self.argmin)
