"""
Snapshot accumulator state to flat records and back.

A record is a JSON-compatible dict ``{"type": <class name>, "state": {...}}``.
Nested accumulators become nested records and windows become
``{"deque": [...]}`` entries, so a record round-trips through
:func:`to_ndjson` / :func:`from_ndjson` unchanged.
"""
import json
from collections import deque
from typing import Any, Dict

from .covariance import Covariance
from .errors import SnapshotError
from .ewm import EWMean, EWVariance, FEWMean
from .moments import CentralMoments, Kurtosis, Skew
from .order import ArgMin, RollingAbsMax, RollingArgMin, RollingMax, RollingMin, RollingPeakToPeak
from .quantile import IQR, Quantile, RollingIQR, RollingQuantile
from .rolling import Rolling
from .sorted_window import SortedWindow
from .summary import AbsMax, Count, Max, Mean, Min, PeakToPeak, Sum, Variance

SNAPSHOT_TYPES = {
    cls.__name__: cls
    for cls in (
        Count, Sum, Mean, Variance, Min, Max, AbsMax, PeakToPeak,
        CentralMoments, Skew, Kurtosis, Covariance,
        EWMean, EWVariance, FEWMean,
        Quantile, IQR, RollingQuantile, RollingIQR,
        SortedWindow, RollingMin, RollingMax, RollingAbsMax, RollingPeakToPeak,
        ArgMin, RollingArgMin, Rolling,
    )
}


def _encode(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, deque):
        return {"deque": [_encode(v) for v in value]}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    if type(value).__name__ in SNAPSHOT_TYPES:
        return to_record(value)
    raise SnapshotError(f"Cannot snapshot value of type {type(value).__name__}")


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        return [_decode(v) for v in value]
    if isinstance(value, dict):
        if "deque" in value:
            return deque(_decode(v) for v in value["deque"])
        return from_record(value)
    return value


def to_record(stat: Any) -> Dict[str, Any]:
    """
    Convert an accumulator into a flat, JSON-compatible record.

    Raises:
        SnapshotError: if the accumulator (or something it holds) has no
            registered snapshot type
    """
    name = type(stat).__name__
    if SNAPSHOT_TYPES.get(name) is not type(stat):
        raise SnapshotError(f"Unknown snapshot type: {name}")
    return {
        "type": name,
        "state": {key: _encode(value) for key, value in vars(stat).items()},
    }


def from_record(record: Dict[str, Any]) -> Any:
    """
    Rebuild an accumulator from a record produced by :func:`to_record`.

    The rebuilt accumulator behaves exactly like the original from this
    point on.
    """
    if not isinstance(record, dict) or "type" not in record or "state" not in record:
        raise SnapshotError(f"Malformed snapshot record: {record!r}")

    cls = SNAPSHOT_TYPES.get(record["type"])
    if cls is None:
        raise SnapshotError(f"Unknown snapshot type: {record['type']}")

    stat = cls.__new__(cls)
    for key, value in record["state"].items():
        setattr(stat, key, _decode(value))
    return stat


def to_ndjson(stat: Any) -> str:
    """Serialize an accumulator as a single NDJSON line."""
    return json.dumps(to_record(stat), separators=(',', ':')) + '\n'


def from_ndjson(line: str) -> Any:
    """Rebuild an accumulator from an NDJSON line."""
    try:
        record = json.loads(line.strip())
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid snapshot line: {e}") from e
    return from_record(record)
