"""samplequad: PyTorch quadrature for tabulated (x, y) samples."""

from . import quadrature

__all__ = [
    "quadrature",
]

__version__ = "0.1.0"
