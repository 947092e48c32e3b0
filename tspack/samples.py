"""Sample and packed-range tuple types shared across the pipeline."""

from typing import Tuple

# (timestamp_seconds, value)
Sample = Tuple[float, float]

# ((start_seconds, end_seconds), value), start <= end
PackedRange = Tuple[Tuple[float, float], float]
