"""Similar-values strategy: run-length collapse of near-equal samples."""

from typing import List, Sequence

from ..samples import PackedRange, Sample
from .merge import values_close


def similar_values_pack(samples: Sequence[Sample], epsilon: float = 0.0) -> List[PackedRange]:
    """Collapse runs of consecutive samples within ``epsilon`` of the run's first value.

    Each run becomes ``((first_ts, last_ts), first_value)``. The comparison is
    always against the run's first value, so a slow drift eventually opens
    a new run.

    Args:
        samples: (timestamp, value) pairs in time order.
        epsilon: Value tolerance; NaN matches NaN.

    Returns:
        One packed range per run.
    """
    if not samples:
        return []

    result: List[PackedRange] = []
    run_start, value = samples[0]
    run_end = run_start

    for ts, sample_value in samples[1:]:
        if values_close(sample_value, value, epsilon):
            run_end = ts
        else:
            result.append(((run_start, run_end), value))
            run_start = run_end = ts
            value = sample_value

    result.append(((run_start, run_end), value))
    return result


def similar_values_refine(ranges: Sequence[PackedRange], epsilon: float = 0.0) -> List[PackedRange]:
    """Apply run collapsing to already packed ranges.

    Consecutive ranges whose values are within ``epsilon`` of the run's
    first value are joined into one range spanning all of them.
    """
    if not ranges:
        return []

    result: List[PackedRange] = []
    (run_start, run_end), value = ranges[0]

    for (start, end), range_value in ranges[1:]:
        if values_close(range_value, value, epsilon):
            run_end = max(run_end, end)
        else:
            result.append(((run_start, run_end), value))
            run_start, run_end = start, end
            value = range_value

    result.append(((run_start, run_end), value))
    return result
