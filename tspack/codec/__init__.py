"""tspack codec subpackage.

Per-strategy pack functions, the inverses for the lossless strategies
(delta, XOR) and the range merge engine.
"""

from .delta import delta_pack, delta_unpack
from .gorilla import xor_pack, xor_unpack
from .mean import mean_pack, mean_refine
from .merge import (
    merge_adjacent_equal_value_ranges,
    merge_adjacent_ranges,
    values_close,
)
from .similar import similar_values_pack, similar_values_refine

__all__ = [
    "delta_pack",
    "delta_unpack",
    "xor_pack",
    "xor_unpack",
    "mean_pack",
    "mean_refine",
    "similar_values_pack",
    "similar_values_refine",
    "merge_adjacent_ranges",
    "merge_adjacent_equal_value_ranges",
    "values_close",
]
