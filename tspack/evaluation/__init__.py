"""Size and error metrics for packed series."""

from .metrics import (
    compare_strategies,
    compression_ratio,
    evaluate_strategy,
    max_abs_error,
    reconstruction_rmse,
    step_reconstruction,
)

__all__ = [
    "compare_strategies",
    "compression_ratio",
    "evaluate_strategy",
    "max_abs_error",
    "reconstruction_rmse",
    "step_reconstruction",
]
