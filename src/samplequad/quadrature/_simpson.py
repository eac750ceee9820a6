"""Simpson's rule for tabulated samples."""

from torch import Tensor

from samplequad.quadrature._exceptions import (
    EvenSampleCountError,
    InsufficientSamplesError,
)
from samplequad.quadrature._samples import (
    SampleSequence,
    _unpack,
    _zeros,
    as_samples,
)
from samplequad.quadrature._spacing import (
    SpacingCheck,
    _validate_check_spacing,
    check_even_spacing,
)


def simpson(
    data: SampleSequence,
    *,
    strict: bool = False,
    check_spacing: SpacingCheck = None,
) -> Tensor:
    """
    Integrate evenly spaced samples using the composite Simpson's rule.

    Computes ``h/3 * (y[0] + 4*y[1] + 2*y[2] + ... + 4*y[n-2] + y[n-1])``
    where ``h = x[1] - x[0]``.

    Parameters
    ----------
    data : SampleSequence
        Ordered (x, y) pairs, or a batch of shape ``(..., n, 2)``. The
        samples are assumed to be evenly spaced with an odd count of at
        least 3 (an even number of slices).
    strict : bool
        If True, raise instead of returning 0 when the sample count is
        unusable: ``InsufficientSamplesError`` for 2 or fewer samples and
        ``EvenSampleCountError`` for an even count.
    check_spacing : {None, "warn", "raise"}
        Optionally verify that all steps match ``h``. Default skips the check.

    Returns
    -------
    Tensor
        ``float64`` integral. Shape is the batch shape of ``data``.

    Notes
    -----
    By default, 2 or fewer samples and an even number of samples both
    produce exactly 0, which cannot be told apart from a genuinely zero
    integral. Use ``strict=True`` to tell them apart.

    Simpson's rule has O(h^4) error vs O(h^2) for the trapezoidal rule.

    Examples
    --------
    >>> simpson([(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)])
    tensor(2.6667, dtype=torch.float64)
    """
    _validate_check_spacing(check_spacing)

    samples = as_samples(data)
    n = samples.shape[-2]

    if n <= 2:
        if strict:
            raise InsufficientSamplesError(n, 3, "simpson")
        return _zeros(samples)

    if n % 2 == 0:
        if strict:
            raise EvenSampleCountError(n)
        return _zeros(samples)

    x, y = _unpack(samples)
    check_even_spacing(x, check_spacing, stacklevel=3)

    h = x[..., 1] - x[..., 0]

    num_odd = n // 2
    num_even = num_odd - 1

    # Interior points alternate 4, 2, 4, ..., 2, 4
    odd = y[..., 1 : 2 * num_odd : 2].sum(dim=-1)
    even = y[..., 2 : 2 * num_even + 1 : 2].sum(dim=-1)

    result = y[..., 0] + y[..., -1]
    result = result + 4.0 * odd
    result = result + 2.0 * even

    return result * (h / 3.0)
