"""Build accumulators from declarative statistic specs."""
import logging
from typing import Any, Callable, Dict

from .base import Univariate
from .errors import InvalidParameter
from .ewm import EWMean, EWVariance, FEWMean
from .moments import Kurtosis, Skew
from .order import ArgMin, RollingAbsMax, RollingArgMin, RollingMax, RollingMin, RollingPeakToPeak
from .quantile import IQR, Quantile, RollingIQR, RollingQuantile
from .rolling import Rolling
from .summary import AbsMax, Count, Max, Mean, Min, PeakToPeak, Sum, Variance

logger = logging.getLogger(__name__)


STATISTIC_KINDS: Dict[str, Callable[..., Univariate]] = {
    # Global
    "count": lambda: Count(),
    "sum": lambda: Sum(),
    "mean": lambda: Mean(),
    "var": lambda ddof=1: Variance(ddof),
    "min": lambda: Min(),
    "max": lambda: Max(),
    "abs_max": lambda: AbsMax(),
    "ptp": lambda: PeakToPeak(),
    "argmin": lambda: ArgMin(),
    "skew": lambda bias=False: Skew(bias),
    "kurtosis": lambda bias=False: Kurtosis(bias),
    "ewmean": lambda alpha=0.5: EWMean(alpha),
    "ewvar": lambda alpha=0.5: EWVariance(alpha),
    "fewmean": lambda fading_factor=0.01: FEWMean(fading_factor),
    "quantile": lambda q=0.5: Quantile(q),
    "iqr": lambda q_inf=0.25, q_sup=0.75: IQR(q_inf, q_sup),
    # Windowed, backed by a sorted window
    "rolling_min": lambda window: RollingMin(window),
    "rolling_max": lambda window: RollingMax(window),
    "rolling_abs_max": lambda window: RollingAbsMax(window),
    "rolling_ptp": lambda window: RollingPeakToPeak(window),
    "rolling_argmin": lambda window: RollingArgMin(window),
    "rolling_quantile": lambda window, q=0.5: RollingQuantile(q, window),
    "rolling_iqr": lambda window, q_inf=0.25, q_sup=0.75: RollingIQR(q_inf, q_sup, window),
    # Windowed, revertable accumulators wrapped in Rolling
    "rolling_count": lambda window: Rolling(Count(), window),
    "rolling_sum": lambda window: Rolling(Sum(), window),
    "rolling_mean": lambda window: Rolling(Mean(), window),
    "rolling_var": lambda window, ddof=1: Rolling(Variance(ddof), window),
}


def build_statistic(kind: str, **params: Any) -> Univariate:
    """
    Create an accumulator by kind name.

    Args:
        kind: One of ``STATISTIC_KINDS``
        **params: Constructor parameters (``window``, ``q``, ``ddof``, ...)

    Raises:
        InvalidParameter: unknown kind, unexpected parameter or out-of-range value
    """
    builder = STATISTIC_KINDS.get(kind)
    if builder is None:
        raise InvalidParameter(f"Unknown statistic kind: {kind}")
    try:
        stat = builder(**params)
    except TypeError as e:
        raise InvalidParameter(f"Invalid parameters for {kind}: {params} ({e})") from e
    logger.debug(f"[factory] Built {kind} with {params}")
    return stat


def build_from_config(stat_config) -> Univariate:
    """Create an accumulator from a ``config.StatisticConfig``."""
    return build_statistic(stat_config.kind, **stat_config.params())
