"""Representation of tabulated (x, y) samples."""

from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np
import torch
from torch import Tensor

from samplequad.quadrature._exceptions import SampleShapeError


class Sample(NamedTuple):
    """One measured point of a function.

    Parameters
    ----------
    x : float
        Independent variable.
    y : float
        Function value at ``x``.
    """

    x: float
    y: float


SampleSequence = Union[
    Sequence[Sample],
    Sequence[Tuple[float, float]],
    np.ndarray,
    Tensor,
]


def as_samples(data: SampleSequence) -> Tensor:
    """
    Convert ``data`` to a ``float64`` tensor of (x, y) pairs.

    Parameters
    ----------
    data : SampleSequence
        Ordered (x, y) pairs. A tensor or array of shape ``(..., n, 2)``
        is treated as a batch of sequences that share ``n``.

    Returns
    -------
    Tensor
        Tensor of shape ``(..., n, 2)`` with dtype ``float64``. An empty
        sequence becomes shape ``(0, 2)``. Tensors keep their device.

    Raises
    ------
    SampleShapeError
        If the last dimension is not 2.

    Examples
    --------
    >>> as_samples([(0.0, 0.0), (1.0, 1.0)]).shape
    torch.Size([2, 2])
    """
    samples = torch.as_tensor(data, dtype=torch.float64)

    if samples.ndim == 1 and samples.numel() == 0:
        samples = samples.reshape(0, 2)

    if samples.ndim < 2 or samples.shape[-1] != 2:
        raise SampleShapeError(tuple(samples.shape))

    return samples


def _unpack(samples: Tensor) -> Tuple[Tensor, Tensor]:
    return samples[..., 0], samples[..., 1]


def _zeros(samples: Tensor) -> Tensor:
    """Zero integral with the batch shape of ``samples``."""
    return torch.zeros(
        samples.shape[:-2], dtype=samples.dtype, device=samples.device
    )
