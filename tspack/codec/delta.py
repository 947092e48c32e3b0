"""Delta strategy: each value stored as the difference from its predecessor."""

from typing import List, Sequence

import numpy as np

from ..samples import PackedRange, Sample


def delta_pack(samples: Sequence[Sample]) -> List[PackedRange]:
    """Encode values as differences from the previous raw value.

    The first sample is stored verbatim. Every sample becomes a
    single-point range at its own timestamp.
    """
    if not samples:
        return []

    timestamps = [ts for ts, _ in samples]
    values = np.array([v for _, v in samples], dtype=np.float64)
    encoded = np.concatenate([values[:1], np.diff(values)])

    return [((ts, ts), v) for ts, v in zip(timestamps, encoded.tolist())]


def delta_unpack(packed: Sequence[PackedRange]) -> List[Sample]:
    """Rebuild values by running sum over the stored deltas.

    Timestamps come from each range's start. Exact up to floating-point
    rounding accumulated over the sum.
    """
    if not packed:
        return []

    timestamps = [start for (start, _), _ in packed]
    deltas = np.array([v for _, v in packed], dtype=np.float64)
    values = np.cumsum(deltas)

    return list(zip(timestamps, values.tolist()))
