"""Hypothesis strategies for quadrature testing."""

from ._evenly_spaced_samples import evenly_spaced_samples
from ._positive_real_numbers import positive_real_numbers
from ._real_numbers import real_numbers
from ._sample_counts import sample_counts

__all__ = [
    # Numeric strategies
    "positive_real_numbers",
    "real_numbers",
    # Sample strategies
    "sample_counts",
    "evenly_spaced_samples",
]
