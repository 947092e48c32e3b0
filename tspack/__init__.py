"""tspack: time-series data packer.

Compresses (timestamp, value) samples into value ranges with configurable
strategies (similar-values runs, mean-tolerance banding, delta, XOR/Gorilla)
and expands them back into approximate samples.

    import tspack
    packer = tspack.TimeSeriesDataPacker()
    attrs = tspack.PackAttributes(
        strategy_types=(tspack.PackStrategy.similar_values(),),
        microseconds_time_window=1_000_000,
    )
    packed = packer.pack(samples, attrs)
    attrs, approx = packer.unpack()

Pandas integration (requires pandas):
    import tspack.pandas_ext
    frame = series.tspack.pack(attrs)
"""

__version__ = "0.1.0"

from .codec import (
    delta_pack,
    delta_unpack,
    mean_pack,
    merge_adjacent_equal_value_ranges,
    merge_adjacent_ranges,
    similar_values_pack,
    xor_pack,
    xor_unpack,
)
from .config import ADJACENCY_EPSILON, PackAttributes, PackStrategy, StrategyKind
from .errors import InvalidWindowError, PackError
from .packer import TimeSeriesDataPacker
from .representation import Packed, Raw, apply_strategy, finalize_to_packed
from .samples import PackedRange, Sample
from .windowing import split_into_windows

__all__ = [
    "__version__",
    "TimeSeriesDataPacker",
    "PackAttributes",
    "PackStrategy",
    "StrategyKind",
    "ADJACENCY_EPSILON",
    "PackError",
    "InvalidWindowError",
    "Sample",
    "PackedRange",
    "Raw",
    "Packed",
    "apply_strategy",
    "finalize_to_packed",
    "split_into_windows",
    "similar_values_pack",
    "mean_pack",
    "delta_pack",
    "delta_unpack",
    "xor_pack",
    "xor_unpack",
    "merge_adjacent_ranges",
    "merge_adjacent_equal_value_ranges",
]
