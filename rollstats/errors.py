"""Error types raised by rollstats accumulators."""


class RollstatsError(Exception):
    """Base class for all rollstats errors."""


class InvalidParameter(RollstatsError, ValueError):
    """Raised at construction time when a configuration value is out of range."""


class RevertUnderflow(RollstatsError):
    """Raised when reverting more observations than were ever applied."""


class WindowInvariantError(RollstatsError, AssertionError):
    """
    Internal invariant break in a windowed structure.

    Either an evicted value could not be located in the sorted window, or a
    rolling adapter's wrapped accumulator refused to revert a value it was
    previously fed. Neither can happen through the public API; callers
    should not try to recover from it.
    """


class SnapshotError(RollstatsError, ValueError):
    """Raised when a snapshot record cannot be decoded."""
