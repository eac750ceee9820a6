"""Exceptions for sample-based quadrature."""

from typing import Tuple


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., unevenly spaced samples)."""

    pass


class IntegrationError(Exception):
    """Base error for precondition violations reported in strict mode."""

    pass


class InsufficientSamplesError(IntegrationError):
    """Raised when a rule is given fewer samples than it needs."""

    def __init__(self, num_samples: int, minimum: int, rule: str):
        self.num_samples = num_samples
        self.minimum = minimum
        self.rule = rule
        super().__init__(
            f"{rule} requires at least {minimum} samples, got {num_samples}"
        )


class EvenSampleCountError(IntegrationError):
    """Raised when Simpson's rule is given an even number of samples.

    Simpson's rule pairs up slices, so it needs an even number of slices,
    i.e. an odd number of samples.
    """

    def __init__(self, num_samples: int):
        self.num_samples = num_samples
        super().__init__(
            f"simpson requires an odd number of samples, got {num_samples}"
        )


class UnevenSpacingError(IntegrationError):
    """Raised when consecutive x values do not share a common step."""

    def __init__(self, index: int, expected: float, actual: float):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Samples are not evenly spaced: step {index} "
            f"(x[{index + 1}] - x[{index}]) is {actual:.6g}, "
            f"expected {expected:.6g}"
        )


class SampleShapeError(ValueError):
    """Raised when data cannot be read as a sequence of (x, y) pairs."""

    def __init__(self, shape: Tuple[int, ...]):
        self.shape = shape
        super().__init__(
            f"Expected samples of shape (..., n, 2), got {shape}"
        )
