"""Split sorted samples into time-bounded windows."""

from typing import List, Sequence

from .config import MICROSECONDS_PER_SECOND
from .samples import Sample


def split_into_windows(
    samples: Sequence[Sample],
    microseconds_time_window: int,
) -> List[List[Sample]]:
    """Group consecutive samples whose timestamps stay within one window.

    A window opens at its first sample's timestamp and accepts every
    following sample no more than the window duration later. The first
    sample past that bound opens the next window.

    Args:
        samples: (timestamp_seconds, value) pairs sorted by timestamp.
        microseconds_time_window: Window duration in microseconds.

    Returns:
        Non-empty windows in input order.
    """
    if not samples:
        return []

    window_seconds = microseconds_time_window / MICROSECONDS_PER_SECOND

    windows: List[List[Sample]] = []
    current: List[Sample] = []
    window_start = samples[0][0]

    for ts, value in samples:
        if ts - window_start > window_seconds:
            windows.append(current)
            current = []
            window_start = ts
        current.append((ts, value))

    windows.append(current)
    return windows
