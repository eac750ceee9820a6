"""Trapezoidal rule for tabulated samples."""

from typing import Optional

import torch
from torch import Tensor

from samplequad.quadrature._exceptions import InsufficientSamplesError
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


def trapezoidal(
    data: SampleSequence,
    *,
    strict: bool = False,
    check_spacing: SpacingCheck = None,
) -> Tensor:
    """
    Integrate evenly spaced samples using the composite trapezoidal rule.

    Computes ``h * (y[0]/2 + y[1] + ... + y[n-2] + y[n-1]/2)`` where
    ``h = x[1] - x[0]``.

    Parameters
    ----------
    data : SampleSequence
        Ordered (x, y) pairs, or a batch of shape ``(..., n, 2)``. The
        samples are assumed to be evenly spaced; only the first two x
        values are used.
    strict : bool
        If True, raise ``InsufficientSamplesError`` for fewer than 2 samples
        instead of returning 0.
    check_spacing : {None, "warn", "raise"}
        Optionally verify that all steps match ``h``. Default skips the check.

    Returns
    -------
    Tensor
        ``float64`` integral. Shape is the batch shape of ``data``. Zero when
        there are fewer than 2 samples.

    Examples
    --------
    >>> trapezoidal([(0.0, 0.0), (1.0, 1.0)])
    tensor(0.5000, dtype=torch.float64)
    """
    _validate_check_spacing(check_spacing)

    samples = as_samples(data)
    n = samples.shape[-2]

    if n <= 1:
        if strict:
            raise InsufficientSamplesError(n, 2, "trapezoidal")
        return _zeros(samples)

    x, y = _unpack(samples)
    check_even_spacing(x, check_spacing, stacklevel=3)

    h = x[..., 1] - x[..., 0]

    # Left-to-right fold over the interior points
    result = 0.5 * (y[..., 0] + y[..., -1])
    for i in range(1, n - 1):
        result = result + y[..., i]

    return result * h


def cumulative_trapezoidal(
    data: SampleSequence,
    *,
    initial: Optional[float] = None,
    check_spacing: SpacingCheck = None,
) -> Tensor:
    """
    Cumulatively integrate evenly spaced samples using the trapezoidal rule.

    Parameters
    ----------
    data : SampleSequence
        Ordered (x, y) pairs, or a batch of shape ``(..., n, 2)``.
    initial : float, optional
        If given, insert this value at the beginning. Output then has ``n``
        entries. If None, output has ``n - 1`` entries.
    check_spacing : {None, "warn", "raise"}
        Optionally verify that all steps match ``h``.

    Returns
    -------
    Tensor
        Running integral of shape ``(..., n - 1)`` (or ``(..., n)``). The last
        entry matches ``trapezoidal(data)`` up to rounding.

    Examples
    --------
    >>> cumulative_trapezoidal([(0.0, 1.0), (1.0, 1.0), (2.0, 1.0)])
    tensor([1., 2.], dtype=torch.float64)
    """
    _validate_check_spacing(check_spacing)

    samples = as_samples(data)
    n = samples.shape[-2]
    x, y = _unpack(samples)

    if n <= 1:
        result = y.new_zeros((*samples.shape[:-2], 0))
    else:
        check_even_spacing(x, check_spacing, stacklevel=3)

        h = (x[..., 1] - x[..., 0]).unsqueeze(-1)

        # Area of each slice: (y[i] + y[i+1]) / 2 * h
        increments = 0.5 * (y[..., :-1] + y[..., 1:]) * h

        result = torch.cumsum(increments, dim=-1)

    if initial is not None:
        initial_tensor = torch.full(
            (*result.shape[:-1], 1),
            initial,
            dtype=result.dtype,
            device=result.device,
        )
        result = torch.cat([initial_tensor, result], dim=-1)

    return result
