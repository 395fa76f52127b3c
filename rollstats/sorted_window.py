"""
Bounded sliding window kept both in arrival order and in sorted order.

Used by every windowed order statistic (min, max, quantiles, argmin).
"""
import bisect
import logging
import math
from collections import deque
from typing import Deque, Iterator, List

from .errors import InvalidParameter, WindowInvariantError

logger = logging.getLogger(__name__)


class SortedWindow:
    """
    Last ``window_size`` values, in arrival order and in sorted order.

    ``push`` evicts the oldest value once the window is full: it is located
    in the sorted list by binary search, removed, then the new value is
    inserted at its sorted position. Cost is O(log w) for the searches plus
    O(w) for the list shift.

    Indexing returns the i-th smallest value currently in the window.
    """

    def __init__(self, window_size: int):
        if window_size < 1:
            raise InvalidParameter(f"window_size must be >= 1, got {window_size}")
        self.window_size = window_size
        self.unsorted: Deque[float] = deque()
        self.sorted: List[float] = []
        logger.debug(f"[SortedWindow] Initialized with window_size={window_size}")

    def push(self, value: float) -> None:
        if math.isnan(value):
            raise ValueError("[SortedWindow] NaN values cannot be ordered")

        if len(self.unsorted) == self.window_size:
            oldest = self.unsorted.popleft()
            pos = bisect.bisect_left(self.sorted, oldest)
            if pos == len(self.sorted) or self.sorted[pos] != oldest:
                logger.error(
                    f"[SortedWindow] Evicted value {oldest} not found in sorted window "
                    f"(size={len(self.sorted)})"
                )
                raise WindowInvariantError(f"Evicted value {oldest} is not in the sorted window")
            del self.sorted[pos]

        self.unsorted.append(value)
        bisect.insort(self.sorted, value)

    def front(self) -> float:
        """Smallest value in the window."""
        return self.sorted[0]

    def back(self) -> float:
        """Largest value in the window."""
        return self.sorted[-1]

    @property
    def is_full(self) -> bool:
        return len(self.sorted) == self.window_size

    def __getitem__(self, index: int) -> float:
        return self.sorted[index]

    def __len__(self) -> int:
        return len(self.sorted)

    def __iter__(self) -> Iterator[float]:
        return iter(self.sorted)

    def __repr__(self):
        return f"<SortedWindow size={len(self)}/{self.window_size} sorted={self.sorted}>"
