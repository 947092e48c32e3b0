"""Central configuration for the time-series data packer."""

import enum
from dataclasses import dataclass, field
from typing import Tuple

# Seconds per configured window unit.
MICROSECONDS_PER_SECOND = 1_000_000

# Two ranges whose boundaries are closer than this (in seconds) touch.
ADJACENCY_EPSILON = 1e-9


class StrategyKind(enum.Enum):
    """Closed set of packing strategies."""

    SIMILAR_VALUES = "similar"
    MEAN = "mean"
    DELTA = "delta"
    XOR = "xor"


@dataclass(frozen=True)
class PackStrategy:
    """One step of the packing pipeline.

    ``values_compression_percent`` is the tolerance band width used by the
    ``MEAN`` strategy and ignored by the others.
    """

    kind: StrategyKind
    values_compression_percent: int = 0

    @classmethod
    def similar_values(cls) -> "PackStrategy":
        return cls(StrategyKind.SIMILAR_VALUES)

    @classmethod
    def mean(cls, values_compression_percent: int) -> "PackStrategy":
        return cls(StrategyKind.MEAN, values_compression_percent)

    @classmethod
    def delta(cls) -> "PackStrategy":
        return cls(StrategyKind.DELTA)

    @classmethod
    def xor(cls) -> "PackStrategy":
        return cls(StrategyKind.XOR)

    @classmethod
    def parse(cls, text: str) -> "PackStrategy":
        """Build a strategy from a string such as ``"similar"`` or ``"mean:5"``.

        Args:
            text: Strategy name, optionally followed by ``:<percent>`` for mean.

        Returns:
            The parsed strategy.

        Raises:
            ValueError: Unknown strategy name or bad mean percentage.
        """
        name, _, arg = text.strip().partition(":")
        name = name.lower()
        try:
            kind = StrategyKind(name)
        except ValueError:
            choices = [k.value for k in StrategyKind]
            raise ValueError(
                f"Unknown strategy: {name!r}. Choose from: {choices}"
            ) from None

        if kind is StrategyKind.MEAN:
            if not arg:
                raise ValueError("Mean strategy needs a percentage, e.g. 'mean:5'")
            try:
                percent = int(arg)
            except ValueError:
                raise ValueError(f"Invalid mean percentage: {arg!r}") from None
            return cls.mean(percent)

        if arg:
            raise ValueError(f"Strategy {name!r} takes no argument (got {arg!r})")
        return cls(kind)

    def __str__(self) -> str:
        if self.kind is StrategyKind.MEAN:
            return f"{self.kind.value}:{self.values_compression_percent}"
        return self.kind.value


@dataclass
class PackAttributes:
    """All packing parameters in one place."""

    # Applied left to right; later strategies see earlier output.
    strategy_types: Tuple[PackStrategy, ...] = field(default_factory=tuple)
    microseconds_time_window: int = MICROSECONDS_PER_SECOND
    # Tolerance for value equality (similar-values runs, epsilon merging).
    precision_epsilon: float = 0.0
    # Compare values with precision_epsilon in the final merge instead of exactly.
    epsilon_merge: bool = False

    def __post_init__(self):
        self.strategy_types = tuple(self.strategy_types)

    @property
    def merge_epsilon(self) -> float:
        return max(self.precision_epsilon, 0.0) if self.epsilon_merge else 0.0
