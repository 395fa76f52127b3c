from .errors import RollstatsError, InvalidParameter, RevertUnderflow, WindowInvariantError, SnapshotError
from .base import Univariate, Bivariate, Revertable, RollableUnivariate
from .summary import Count, Sum, Mean, Variance, Min, Max, AbsMax, PeakToPeak
from .moments import CentralMoments, Skew, Kurtosis
from .covariance import Covariance
from .ewm import EWMean, EWVariance, FEWMean
from .quantile import Quantile, IQR, RollingQuantile, RollingIQR
from .sorted_window import SortedWindow
from .order import RollingMin, RollingMax, RollingAbsMax, RollingPeakToPeak, ArgMin, RollingArgMin
from .rolling import Rolling
from .factory import build_statistic, build_from_config
from .snapshot import to_record, from_record, to_ndjson, from_ndjson

__all__ = [
    'RollstatsError',
    'InvalidParameter',
    'RevertUnderflow',
    'WindowInvariantError',
    'SnapshotError',
    'Univariate',
    'Bivariate',
    'Revertable',
    'RollableUnivariate',
    'Count',
    'Sum',
    'Mean',
    'Variance',
    'Min',
    'Max',
    'AbsMax',
    'PeakToPeak',
    'CentralMoments',
    'Skew',
    'Kurtosis',
    'Covariance',
    'EWMean',
    'EWVariance',
    'FEWMean',
    'Quantile',
    'IQR',
    'RollingQuantile',
    'RollingIQR',
    'SortedWindow',
    'RollingMin',
    'RollingMax',
    'RollingAbsMax',
    'RollingPeakToPeak',
    'ArgMin',
    'RollingArgMin',
    'Rolling',
    'build_statistic',
    'build_from_config',
    'to_record',
    'from_record',
    'to_ndjson',
    'from_ndjson',
]
