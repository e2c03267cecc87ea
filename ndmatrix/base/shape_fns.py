"""
Shape normalization and validation utilities.

Shapes enter the public API as an int (1-D) or any sequence of ints and are
stored as owned int64 descriptors.
"""

import operator

import numpy as np
from typing import Iterable, Sequence, Tuple, Union

ShapeLike = Union[int, Sequence[int]]

SUPPORTED_DTYPE_KINDS = "biuf"


def to_shape(shape: ShapeLike) -> np.ndarray:
    """
    Convert a shape-like value into a fresh int64 shape descriptor.

    Parameters
    ----------
    shape : int or sequence of int
        Per-axis extents; a bare int is a 1-D shape

    Returns
    -------
    np.ndarray
        Owned 1-D int64 array of extents

    Examples
    --------
    >>> to_shape(5)
    array([5])
    >>> to_shape((3, 4))
    array([3, 4])
    """
    if isinstance(shape, np.ndarray):
        shape = shape.tolist()
    try:
        extents = [operator.index(shape)]
    except TypeError:
        if not isinstance(shape, Iterable):
            raise ValueError(f"Extents must be integers, got {shape!r}") from None
        extents = [_to_extent(s) for s in shape]
    for extent in extents:
        if extent < 0:
            raise ValueError(f"Extents must be non-negative, got {tuple(extents)}")
    return np.array(extents, dtype=np.int64)


def _to_extent(value) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"Extents must be integers, got {value!r}") from None


def to_index(index: Union[int, Sequence[int]]) -> np.ndarray:
    """Convert an int or tuple of ints into an int64 multi-index."""
    try:
        components = [operator.index(index)]
    except TypeError:
        components = [operator.index(i) for i in index]
    return np.array(components, dtype=np.int64)


def as_tuple(shape: np.ndarray) -> Tuple[int, ...]:
    """Shape descriptor as a tuple of Python ints."""
    return tuple(int(s) for s in shape)


def overlap(a: Sequence[int], b: Sequence[int]) -> Tuple[int, ...]:
    """
    Per-axis minimum of two equal-rank shapes.

    Examples
    --------
    >>> overlap((4, 3), (2, 5))
    (2, 3)
    """
    if len(a) != len(b):
        raise ValueError(f"Expected shapes of equal rank, got {tuple(a)} and {tuple(b)}")
    return tuple(min(x, y) for x, y in zip(a, b))


def check_dtype(dtype) -> np.dtype:
    """
    Resolve and validate an element dtype.

    Only boolean, integer and floating dtypes are supported.
    """
    dtype = np.dtype(dtype)
    if dtype.kind not in SUPPORTED_DTYPE_KINDS:
        raise TypeError(f"Unsupported dtype {dtype}, expected bool, integer or float")
    return dtype
