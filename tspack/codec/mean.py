"""Mean-tolerance strategy.

Samples within a percentage band around the window mean are replaced by
ranges carrying the mean; samples outside the band are kept verbatim as
single-point ranges.
"""

from typing import List, Sequence, Tuple

import numpy as np

from ..samples import PackedRange, Sample
from .merge import merge_adjacent_equal_value_ranges


def _band(reference: float, percent: float) -> Tuple[float, float]:
    # Empty (lower > upper) for negative references: nothing is in band.
    tolerance = reference * (percent / 100.0)
    return reference - tolerance, reference + tolerance


def mean_pack(samples: Sequence[Sample], percent: float) -> List[PackedRange]:
    """Band samples around the mean of the whole window.

    Args:
        samples: (timestamp, value) pairs of one window, in time order.
        percent: Band half-width as a percentage of the mean.

    Returns:
        Packed ranges, in-band groups valued at the mean, merged where
        neighbours touch with equal values.
    """
    if not samples:
        return []

    values = np.fromiter((v for _, v in samples), dtype=np.float64, count=len(samples))
    avg = float(np.mean(values))
    lower, upper = _band(avg, percent)

    result: List[PackedRange] = []
    group_start = group_end = None

    for ts, value in samples:
        if lower <= value <= upper:
            if group_start is None:
                group_start = ts
            group_end = ts
        else:
            if group_start is not None:
                result.append(((group_start, group_end), avg))
                group_start = group_end = None
            result.append(((ts, ts), value))

    if group_start is not None:
        result.append(((group_start, group_end), avg))

    return merge_adjacent_equal_value_ranges(result)


def mean_refine(ranges: Sequence[PackedRange], percent: float) -> List[PackedRange]:
    """Fold already packed ranges using the current range as the reference mean.

    Each range absorbs its successor when the successor's value lies in the
    band around the current range's value. The reference is the value of
    the range being grown, not a recomputed mean of everything it covers,
    so it drifts from range to range.
    """
    if not ranges:
        return []

    result: List[PackedRange] = []
    (start, end), reference = ranges[0]

    for (next_start, next_end), next_value in ranges[1:]:
        lower, upper = _band(reference, percent)
        if lower <= next_value <= upper:
            end = next_end
        else:
            result.append(((start, end), reference))
            (start, end), reference = (next_start, next_end), next_value

    result.append(((start, end), reference))
    return result
