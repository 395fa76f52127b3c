"""
Generic rolling wrapper.

Turns any revertable accumulator (Sum, Count, Mean, Variance, ...) into a
statistic over the last ``window_size`` observations.
"""
import logging
from collections import deque
from typing import Deque

from .base import RollableUnivariate, Univariate
from .errors import InvalidParameter, RevertUnderflow, WindowInvariantError

logger = logging.getLogger(__name__)


class Rolling(Univariate):
    """
    Fixed-size window over a revertable accumulator.

    Inputs are kept in a FIFO. Once the FIFO is full, the oldest value is
    reverted from the wrapped accumulator before the new one is applied, so
    the accumulator always reflects exactly the FIFO contents.

    Args:
        to_roll: Accumulator exposing ``update``, ``get`` and ``revert``. It is
            owned by the wrapper from here on and must not be fed directly.
        window_size: Number of trailing observations to keep.

    Example:
        rolling_var = Rolling(Variance(), 2)
        for x in [9, 7, 3, 2, 6, 1, 8, 5, 4]:
            rolling_var.update(x)
        rolling_var.get()  # 0.5
    """

    def __init__(self, to_roll: RollableUnivariate, window_size: int):
        if window_size < 1:
            raise InvalidParameter(f"window_size must be >= 1, got {window_size}")
        if not callable(getattr(to_roll, "revert", None)):
            raise InvalidParameter(f"{type(to_roll).__name__} does not support revert")
        self.to_roll = to_roll
        self.window_size = window_size
        self.window: Deque[float] = deque()
        logger.debug(
            f"[Rolling] Wrapping {type(to_roll).__name__} with window_size={window_size}"
        )

    def update(self, x: float) -> None:
        if len(self.window) == self.window_size:
            oldest = self.window[0]
            try:
                self.to_roll.revert(oldest)
            except RevertUnderflow as e:
                logger.error(
                    f"[Rolling] {type(self.to_roll).__name__} refused to revert {oldest}: {e}"
                )
                raise WindowInvariantError(
                    f"Wrapped accumulator out of sync with its window: {e}"
                ) from e
            self.window.popleft()
        self.window.append(x)
        self.to_roll.update(x)

    def get(self) -> float:
        return self.to_roll.get()

    def __len__(self) -> int:
        return len(self.window)
