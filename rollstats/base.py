"""
Capability interfaces shared by every accumulator.

A statistic is anything exposing ``update`` and ``get``. Accumulators that
can undo an observation additionally implement ``revert`` and can then be
wrapped by :class:`rollstats.rolling.Rolling` to turn them into windowed
statistics.
"""
from abc import ABC, abstractmethod


class Univariate(ABC):
    """Statistic over a single stream of floats."""

    @abstractmethod
    def update(self, x: float) -> None:
        """Incorporate one observation."""

    @abstractmethod
    def get(self) -> float:
        """Return the current value of the statistic."""

    def __repr__(self):
        return f"<{type(self).__name__} value={self.get()}>"


class Bivariate(ABC):
    """Statistic over paired observations."""

    @abstractmethod
    def update(self, x: float, y: float) -> None:
        """Incorporate one (x, y) pair."""

    @abstractmethod
    def get(self) -> float:
        """Return the current value of the statistic."""

    def __repr__(self):
        return f"<{type(self).__name__} value={self.get()}>"


class Revertable(ABC):
    """Accumulator that can remove a previously applied observation."""

    @abstractmethod
    def revert(self, x: float) -> None:
        """
        Undo a previous ``update(x)``.

        Raises:
            RevertUnderflow: if no observation is left to remove
        """


class RollableUnivariate(Univariate, Revertable):
    """Univariate statistic that supports ``revert`` and can be windowed."""
