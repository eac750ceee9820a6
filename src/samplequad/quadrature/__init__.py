"""
Numerical integration (quadrature) of tabulated samples.

Sample-based integration (operates on pre-computed (x, y) pairs):
    trapezoidal, cumulative_trapezoidal, simpson

Sample representation:
    Sample, SampleSequence, as_samples

Spacing validation:
    check_even_spacing

Exceptions:
    QuadratureWarning, IntegrationError, InsufficientSamplesError,
    EvenSampleCountError, UnevenSpacingError, SampleShapeError
"""

from samplequad.quadrature._exceptions import (
    EvenSampleCountError,
    InsufficientSamplesError,
    IntegrationError,
    QuadratureWarning,
    SampleShapeError,
    UnevenSpacingError,
)
from samplequad.quadrature._samples import (
    Sample,
    SampleSequence,
    as_samples,
)
from samplequad.quadrature._simpson import simpson
from samplequad.quadrature._spacing import check_even_spacing
from samplequad.quadrature._trapezoid import (
    cumulative_trapezoidal,
    trapezoidal,
)

__all__ = [
    # Sample-based
    "trapezoidal",
    "cumulative_trapezoidal",
    "simpson",
    # Samples
    "Sample",
    "SampleSequence",
    "as_samples",
    # Validation
    "check_even_spacing",
    # Exceptions
    "QuadratureWarning",
    "IntegrationError",
    "InsufficientSamplesError",
    "EvenSampleCountError",
    "UnevenSpacingError",
    "SampleShapeError",
]
