"""Pipeline representations and the per-strategy driver.

A window travels through the strategy pipeline either as raw samples or as
packed ranges:

    Raw(samples)   --strategy pack-->    Packed(ranges)
    Packed(ranges) --strategy refine-->  Packed(ranges)

Similar-values and mean refine packed ranges in place. Delta and XOR only
make sense relative to the raw predecessor value, so a packed input is
first expanded back to samples (each range contributes its start and, when
it spans time, its end) and then encoded again. Any run collapsing done by
an earlier strategy is given up in that step.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .codec.delta import delta_pack
from .codec.gorilla import xor_pack
from .codec.mean import mean_pack, mean_refine
from .codec.similar import similar_values_pack, similar_values_refine
from .config import PackStrategy, StrategyKind
from .samples import PackedRange, Sample


@dataclass(frozen=True)
class Raw:
    samples: Tuple[Sample, ...]


@dataclass(frozen=True)
class Packed:
    ranges: Tuple[PackedRange, ...]


Representation = Union[Raw, Packed]


def expand_ranges(ranges: Iterable[PackedRange]) -> List[Sample]:
    """Turn ranges into samples: the start of each, plus the end when it differs."""
    samples: List[Sample] = []
    for (start, end), value in ranges:
        samples.append((start, value))
        if end != start:
            samples.append((end, value))
    return samples


def _pack_raw(samples, strategy: PackStrategy, epsilon: float) -> List[PackedRange]:
    kind = strategy.kind
    if kind is StrategyKind.SIMILAR_VALUES:
        return similar_values_pack(samples, epsilon)
    if kind is StrategyKind.MEAN:
        return mean_pack(samples, strategy.values_compression_percent)
    if kind is StrategyKind.DELTA:
        return delta_pack(samples)
    if kind is StrategyKind.XOR:
        return xor_pack(samples)
    raise ValueError(f"Unknown strategy kind: {kind!r}")


def _refine_packed(ranges, strategy: PackStrategy, epsilon: float) -> List[PackedRange]:
    kind = strategy.kind
    if kind is StrategyKind.SIMILAR_VALUES:
        return similar_values_refine(ranges, epsilon)
    if kind is StrategyKind.MEAN:
        return mean_refine(ranges, strategy.values_compression_percent)
    if kind is StrategyKind.DELTA:
        return delta_pack(expand_ranges(ranges))
    if kind is StrategyKind.XOR:
        return xor_pack(expand_ranges(ranges))
    raise ValueError(f"Unknown strategy kind: {kind!r}")


def apply_strategy(
    representation: Representation,
    strategy: PackStrategy,
    epsilon: float = 0.0,
) -> Packed:
    """Run one strategy over a window's current representation.

    Args:
        representation: Raw samples or packed ranges of one window.
        strategy: Strategy to apply.
        epsilon: Precision epsilon for tolerance comparisons.

    Returns:
        The packed result.
    """
    if isinstance(representation, Raw):
        return Packed(tuple(_pack_raw(representation.samples, strategy, epsilon)))
    if isinstance(representation, Packed):
        return Packed(tuple(_refine_packed(representation.ranges, strategy, epsilon)))
    raise TypeError(
        f"Expected Raw or Packed representation, got {type(representation).__name__}"
    )


def finalize_to_packed(representation: Representation) -> List[PackedRange]:
    """Return packed ranges, turning leftover raw samples into point ranges."""
    if isinstance(representation, Raw):
        return [((ts, ts), value) for ts, value in representation.samples]
    if isinstance(representation, Packed):
        return list(representation.ranges)
    raise TypeError(
        f"Expected Raw or Packed representation, got {type(representation).__name__}"
    )
