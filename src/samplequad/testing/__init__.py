"""Testing utilities for sample-based quadrature."""

from .strategies import (
    evenly_spaced_samples,
    positive_real_numbers,
    real_numbers,
    sample_counts,
)

__all__ = [
    "evenly_spaced_samples",
    "positive_real_numbers",
    "real_numbers",
    "sample_counts",
]
