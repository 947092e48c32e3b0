"""Range merge engine.

Coalesces packed ranges that carry the same value (exactly, or within a
precision epsilon) and whose time spans touch or overlap. Two tolerances are
involved and kept separate:

    adjacency_epsilon  - how close two span boundaries must be to "touch"
                         (ADJACENCY_EPSILON, essentially exact contact)
    value_epsilon      - how close two values must be to be "the same"
                         (0.0 for exact equality, or the configured
                         precision_epsilon when epsilon merging is on)
"""

import math
from typing import Iterable, List

from ..config import ADJACENCY_EPSILON
from ..samples import PackedRange


def values_close(a: float, b: float, epsilon: float) -> bool:
    """Tolerance equality where NaN equals NaN.

    Infinities never match, not even themselves: their difference is NaN.
    """
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan or b_nan:
        return a_nan and b_nan
    return abs(a - b) <= epsilon


def merge_adjacent_ranges(
    ranges: Iterable[PackedRange],
    value_epsilon: float = 0.0,
    adjacency_epsilon: float = ADJACENCY_EPSILON,
) -> List[PackedRange]:
    """Sort ranges by start and coalesce touching ranges of equal value.

    The merged range keeps the value of the earlier range and extends to
    the later end of the two.

    Args:
        ranges: Packed ranges in any order.
        value_epsilon: Tolerance for comparing values.
        adjacency_epsilon: Maximum gap (seconds) still counted as touching.

    Returns:
        Ranges sorted by start, with no two neighbours mergeable.
    """
    ordered = sorted(ranges, key=lambda r: r[0][0])
    if not ordered:
        return []

    merged: List[PackedRange] = []
    (start, end), value = ordered[0]

    for (next_start, next_end), next_value in ordered[1:]:
        touching = abs(next_start - end) <= adjacency_epsilon or next_start <= end
        same = next_value == value or values_close(value, next_value, value_epsilon)
        if touching and same:
            end = max(end, next_end)
        else:
            merged.append(((start, end), value))
            start, end, value = next_start, next_end, next_value

    merged.append(((start, end), value))
    return merged


def merge_adjacent_equal_value_ranges(ranges: Iterable[PackedRange]) -> List[PackedRange]:
    """Merge touching ranges whose values are exactly equal."""
    return merge_adjacent_ranges(ranges, value_epsilon=0.0)
