"""Base array storage, shape helpers and error types."""

from ndmatrix.base.ndarray import NDArray
from ndmatrix.base.array_wrapper import ArrayWrapper
from ndmatrix.base.shape_fns import to_shape, overlap

__all__ = [
    "NDArray",
    "ArrayWrapper",
    "to_shape",
    "overlap",
]
