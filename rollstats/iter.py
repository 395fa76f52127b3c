"""
Stream adapters.

Drive an accumulator from an iterable and yield the running statistic after
each element. Each helper builds a fresh accumulator, so a generator can
only be restarted by calling the helper again.
"""
from typing import Iterable, Iterator

import numpy as np

from .base import Univariate
from .ewm import EWMean, EWVariance
from .moments import Kurtosis, Skew
from .order import RollingMax, RollingMin
from .quantile import IQR, Quantile
from .summary import AbsMax, Count, Max, Mean, Min, PeakToPeak, Sum, Variance


def iter_stat(values: Iterable[float], stat: Univariate) -> Iterator[float]:
    """Yield ``stat.get()`` after feeding each value to ``stat.update``."""
    for x in values:
        stat.update(x)
        yield stat.get()


def running_values(values: Iterable[float], stat: Univariate) -> np.ndarray:
    """
    Materialise the running statistic as an array.

    Returns:
        float64 array with one entry per input value
    """
    return np.fromiter(iter_stat(values, stat), dtype=np.float64)


def online_sum(values: Iterable[float]) -> Iterator[float]:
    return iter_stat(values, Sum())


def online_mean(values: Iterable[float]) -> Iterator[float]:
    return iter_stat(values, Mean())


def online_count(values: Iterable[float]) -> Iterator[float]:
    return iter_stat(values, Count())


def online_var(values: Iterable[float], ddof: int = 1) -> Iterator[float]:
    return iter_stat(values, Variance(ddof))


def online_min(values: Iterable[float]) -> Iterator[float]:
    return iter_stat(values, Min())


def online_max(values: Iterable[float]) -> Iterator[float]:
    return iter_stat(values, Max())


def online_abs_max(values: Iterable[float]) -> Iterator[float]:
    return iter_stat(values, AbsMax())


def online_ptp(values: Iterable[float]) -> Iterator[float]:
    return iter_stat(values, PeakToPeak())


def online_quantile(values: Iterable[float], q: float = 0.5) -> Iterator[float]:
    return iter_stat(values, Quantile(q))


def online_iqr(values: Iterable[float], q_inf: float = 0.25, q_sup: float = 0.75) -> Iterator[float]:
    return iter_stat(values, IQR(q_inf, q_sup))


def online_skew(values: Iterable[float], bias: bool = False) -> Iterator[float]:
    return iter_stat(values, Skew(bias))


def online_kurtosis(values: Iterable[float], bias: bool = False) -> Iterator[float]:
    return iter_stat(values, Kurtosis(bias))


def online_ewmean(values: Iterable[float], alpha: float = 0.5) -> Iterator[float]:
    return iter_stat(values, EWMean(alpha))


def online_ewvar(values: Iterable[float], alpha: float = 0.5) -> Iterator[float]:
    return iter_stat(values, EWVariance(alpha))


def rolling_min(values: Iterable[float], window_size: int) -> Iterator[float]:
    return iter_stat(values, RollingMin(window_size))


def rolling_max(values: Iterable[float], window_size: int) -> Iterator[float]:
    return iter_stat(values, RollingMax(window_size))
