"""Pandas integration for tspack.

Usage:
    import tspack.pandas_ext  # registers the accessor

    # Pack a Series indexed by time
    frame = series.tspack.pack(attrs)
    approx = tspack.pandas_ext.unpack_frame(frame)

    # Or use the functional API
    frame = tspack.pandas_ext.pack_series(series, attrs)
"""

from typing import List

import numpy as np
import pandas as pd

from .config import PackAttributes
from .packer import TimeSeriesDataPacker
from .representation import expand_ranges
from .samples import Sample

PACKED_COLUMNS = ["start", "end", "value"]


def _index_seconds(index: pd.Index) -> np.ndarray:
    """Index as float seconds; datetimes become seconds since the epoch."""
    if isinstance(index, pd.DatetimeIndex):
        if index.tz is not None:
            index = index.tz_convert("UTC").tz_localize(None)
        return (index - pd.Timestamp(0)) / pd.Timedelta(seconds=1)
    return np.asarray(index, dtype=np.float64)


def series_to_samples(series: pd.Series) -> List[Sample]:
    """Convert a Series to (timestamp_seconds, value) pairs."""
    seconds = np.asarray(_index_seconds(series.index), dtype=np.float64)
    values = series.to_numpy(dtype=np.float64)
    return list(zip(seconds.tolist(), values.tolist()))


# ---- Functional API ----

def pack_series(series: pd.Series, attributes: PackAttributes) -> pd.DataFrame:
    """Pack a numeric Series indexed by time.

    Args:
        series: Values indexed by a DatetimeIndex or numeric seconds.
        attributes: Packing configuration.

    Returns:
        DataFrame with start, end (seconds) and value columns, one row per range.
    """
    packer = TimeSeriesDataPacker()
    packed = packer.pack(series_to_samples(series), attributes)
    frame = pd.DataFrame(
        [(start, end, value) for (start, end), value in packed],
        columns=PACKED_COLUMNS,
        dtype=np.float64,
    )
    frame.attrs["series_name"] = series.name
    return frame


def unpack_frame(frame: pd.DataFrame) -> pd.Series:
    """Expand a packed DataFrame into a Series indexed by seconds.

    Each range contributes its start and, when it spans time, its end.
    """
    missing = [c for c in PACKED_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"Packed frame is missing columns: {missing}")

    samples = expand_ranges(
        ((start, end), value)
        for start, end, value in frame[PACKED_COLUMNS].itertuples(index=False)
    )
    index = [ts for ts, _ in samples]
    values = [v for _, v in samples]

    return pd.Series(
        values,
        index=pd.Index(index, dtype=np.float64, name="timestamp"),
        name=frame.attrs.get("series_name"),
        dtype=np.float64,
    )


# ---- Pandas accessor ----

@pd.api.extensions.register_series_accessor("tspack")
class TSPackAccessor:
    """Pandas Series accessor for packing.

    Usage:
        import tspack.pandas_ext

        frame = series.tspack.pack(attrs)
        ratio = series.tspack.estimate_ratio(attrs)
    """

    def __init__(self, pandas_obj):
        self._obj = pandas_obj

    def pack(self, attributes: PackAttributes) -> pd.DataFrame:
        """Pack this Series into a start/end/value DataFrame."""
        return pack_series(self._obj, attributes)

    def estimate_ratio(self, attributes: PackAttributes) -> float:
        """Samples per packed range after packing with ``attributes``."""
        frame = self.pack(attributes)
        return len(self._obj) / max(len(frame), 1)
