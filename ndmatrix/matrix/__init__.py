"""Two-dimensional matrix built on NDArray."""

from ndmatrix.matrix.base import Matrix

__all__ = [
    "Matrix",
]
