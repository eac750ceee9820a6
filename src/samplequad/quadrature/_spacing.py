"""Optional check that samples share a common step."""

import warnings
from typing import Literal, Optional

import torch
from torch import Tensor

from samplequad.quadrature._exceptions import (
    QuadratureWarning,
    UnevenSpacingError,
)

SpacingCheck = Optional[Literal["warn", "raise"]]

# Tolerances for comparing each step against x[1] - x[0]
_RTOL = 1e-6
_ATOL = 1e-12


def _validate_check_spacing(check_spacing: SpacingCheck) -> None:
    if check_spacing not in (None, "warn", "raise"):
        raise ValueError(
            f"check_spacing must be None, 'warn', or 'raise', "
            f"got '{check_spacing}'"
        )


def check_even_spacing(
    x: Tensor,
    check_spacing: SpacingCheck,
    *,
    stacklevel: int = 2,
) -> None:
    """
    Compare every step of ``x`` against the first one.

    Parameters
    ----------
    x : Tensor
        Sample positions of shape ``(..., n)``.
    check_spacing : {None, "warn", "raise"}
        ``None`` skips the check. ``"warn"`` emits a ``QuadratureWarning``
        for the first uneven step and ``"raise"`` raises
        ``UnevenSpacingError``.
    stacklevel : int
        Passed to ``warnings.warn``. The default points at the direct caller.
    """
    _validate_check_spacing(check_spacing)

    if check_spacing is None or x.shape[-1] < 3:
        return

    steps = x[..., 1:] - x[..., :-1]
    h = steps[..., :1].expand_as(steps)

    uneven = ~torch.isclose(steps, h, rtol=_RTOL, atol=_ATOL)

    if not uneven.any():
        return

    first = uneven.nonzero()[0]
    index = int(first[-1])
    expected = float(h[tuple(first)])
    actual = float(steps[tuple(first)])

    if check_spacing == "raise":
        raise UnevenSpacingError(index, expected, actual)

    warnings.warn(
        str(UnevenSpacingError(index, expected, actual)),
        QuadratureWarning,
        stacklevel=stacklevel,
    )
