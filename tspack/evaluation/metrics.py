"""Evaluation metrics for packed series: compression ratio, reconstruction error."""

from typing import Dict, List, Optional, Sequence

import numpy as np

from ..config import PackAttributes, PackStrategy, StrategyKind
from ..packer import TimeSeriesDataPacker
from ..samples import PackedRange, Sample


def compression_ratio(n_samples: int, n_ranges: int) -> float:
    """Stored numbers before packing over stored numbers after.

    A sample holds two numbers (timestamp, value); a range holds three.
    """
    if n_ranges == 0:
        return 1.0
    return (2.0 * n_samples) / (3.0 * n_ranges)


def step_reconstruction(original: Sequence[Sample], packed: Sequence[PackedRange]) -> np.ndarray:
    """Value each original timestamp takes under the packed ranges.

    A timestamp inside (or after) a range takes that range's value, which
    is how the run-collapsing strategies are meant to be read back.
    Timestamps before the first range take the first range's value.
    """
    if not original:
        return np.array([], dtype=np.float64)
    if not packed:
        return np.full(len(original), np.nan)

    starts = np.array([start for (start, _), _ in packed], dtype=np.float64)
    values = np.array([v for _, v in packed], dtype=np.float64)
    timestamps = np.array([ts for ts, _ in original], dtype=np.float64)

    idx = np.searchsorted(starts, timestamps, side="right") - 1
    return values[np.clip(idx, 0, len(values) - 1)]


def reconstruction_rmse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Root mean squared error between original and reconstructed values."""
    if len(original) == 0:
        return 0.0
    return float(np.sqrt(np.mean((original - reconstructed) ** 2)))


def max_abs_error(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Largest absolute difference between original and reconstructed values."""
    if len(original) == 0:
        return 0.0
    return float(np.max(np.abs(original - reconstructed)))


def evaluate_strategy(
    samples: Sequence[Sample],
    strategies: Sequence[PackStrategy],
    microseconds_time_window: int,
    precision_epsilon: float = 0.0,
) -> Dict[str, float]:
    """Pack samples with one pipeline and measure size and error.

    Delta and XOR pipelines are read back through their own inverse; the
    others through the step reconstruction.

    Returns:
        Dict with n_samples, n_ranges, ratio, rmse and max_error.
    """
    attrs = PackAttributes(
        strategy_types=tuple(strategies),
        microseconds_time_window=microseconds_time_window,
        precision_epsilon=precision_epsilon,
    )
    packer = TimeSeriesDataPacker()
    packed = packer.pack(samples, attrs)
    ordered = packer.original_samples

    original = np.array([v for _, v in ordered], dtype=np.float64)
    if strategies and strategies[-1].kind in (StrategyKind.DELTA, StrategyKind.XOR):
        decoded = packer.decode()
        if len(decoded) == len(ordered):
            reconstructed = np.array([v for _, v in decoded], dtype=np.float64)
        else:
            # Duplicate timestamps merged away; fall back to the step read.
            reconstructed = step_reconstruction(ordered, packed)
    else:
        reconstructed = step_reconstruction(ordered, packed)

    return {
        "n_samples": len(ordered),
        "n_ranges": len(packed),
        "ratio": compression_ratio(len(ordered), len(packed)),
        "rmse": reconstruction_rmse(original, reconstructed),
        "max_error": max_abs_error(original, reconstructed),
    }


def compare_strategies(
    samples: Sequence[Sample],
    microseconds_time_window: int,
    precision_epsilon: float = 0.0,
    mean_percent: int = 5,
    pipelines: Optional[Dict[str, List[PackStrategy]]] = None,
) -> Dict[str, Dict[str, float]]:
    """Evaluate every single-strategy pipeline (or the given ones) on the same data.

    Returns:
        Dict mapping pipeline name -> metrics from evaluate_strategy().
    """
    if pipelines is None:
        pipelines = {
            "similar": [PackStrategy.similar_values()],
            f"mean:{mean_percent}": [PackStrategy.mean(mean_percent)],
            "delta": [PackStrategy.delta()],
            "xor": [PackStrategy.xor()],
        }

    return {
        name: evaluate_strategy(samples, strategies, microseconds_time_window, precision_epsilon)
        for name, strategies in pipelines.items()
    }
