"""
Index arithmetic and reductions over column-major buffers.

Includes:
- Shape length and column-major strides
- Multi-index <-> flat index conversion
- Linear max/min scans

Shapes are passed as 1-D int64 arrays. Index kernels return -1 instead of
raising so that callers can report the offending index themselves.
"""

import numpy as np
import numba


@numba.jit(nopython=True, cache=True)
def calc_length(shape: np.ndarray) -> int:
    """
    Number of elements addressed by a shape.

    Parameters
    ----------
    shape : np.ndarray
        Per-axis extents (int64)

    Returns
    -------
    int
        Product of the extents, or 0 for a rank-0 shape

    Examples
    --------
    >>> calc_length(np.array([3, 4, 5], dtype=np.int64))
    60
    >>> calc_length(np.empty(0, dtype=np.int64))
    0
    """
    n_dim = shape.shape[0]
    if n_dim == 0:
        return 0
    length = 1
    for d in range(n_dim):
        length *= shape[d]
    return length


@numba.jit(nopython=True, cache=True)
def column_major_strides(shape: np.ndarray) -> np.ndarray:
    """
    Column-major strides: stride_0 = 1, stride_d = stride_{d-1} * shape[d-1].

    Parameters
    ----------
    shape : np.ndarray
        Per-axis extents (int64)

    Returns
    -------
    np.ndarray
        Stride per axis (int64)

    Examples
    --------
    >>> column_major_strides(np.array([3, 4, 5], dtype=np.int64))
    array([ 1,  3, 12])
    """
    n_dim = shape.shape[0]
    strides = np.empty(n_dim, dtype=np.int64)
    acc = 1
    for d in range(n_dim):
        strides[d] = acc
        acc *= shape[d]
    return strides


@numba.jit(nopython=True, cache=True)
def ravel_multi_index(shape: np.ndarray, index: np.ndarray) -> int:
    """
    Convert a multi-index to its flat position.

    Parameters
    ----------
    shape : np.ndarray
        Per-axis extents (int64)
    index : np.ndarray
        One component per axis (int64), same length as ``shape``

    Returns
    -------
    int
        Flat index, or -1 if any component is outside its axis

    Examples
    --------
    >>> ravel_multi_index(np.array([3, 4, 5]), np.array([1, 0, 3]))
    37
    """
    flat = 0
    acc = 1
    for d in range(shape.shape[0]):
        i = index[d]
        if i < 0 or i >= shape[d]:
            return -1
        flat += i * acc
        acc *= shape[d]
    return flat


@numba.jit(nopython=True, cache=True)
def unravel_flat_index(shape: np.ndarray, flat: int) -> np.ndarray:
    """
    Convert a flat position to its multi-index, axis 0 first.

    component[d] = (flat // acc) % shape[d], with acc the running product of
    the preceding extents. Exact inverse of ``ravel_multi_index`` for every
    flat index in [0, length).

    Parameters
    ----------
    shape : np.ndarray
        Per-axis extents (int64)
    flat : int
        Flat index, assumed in range

    Returns
    -------
    np.ndarray
        Multi-index (int64)

    Examples
    --------
    >>> unravel_flat_index(np.array([3, 4, 5]), 37)
    array([1, 0, 3])
    """
    n_dim = shape.shape[0]
    index = np.empty(n_dim, dtype=np.int64)
    acc = 1
    for d in range(n_dim):
        index[d] = (flat // acc) % shape[d]
        acc *= shape[d]
    return index


@numba.jit(nopython=True, cache=True)
def scan_max(buffer: np.ndarray):
    """Largest element of a non-empty buffer."""
    best = buffer[0]
    for i in range(1, buffer.shape[0]):
        if buffer[i] > best:
            best = buffer[i]
    return best


@numba.jit(nopython=True, cache=True)
def scan_min(buffer: np.ndarray):
    """Smallest element of a non-empty buffer."""
    best = buffer[0]
    for i in range(1, buffer.shape[0]):
        if buffer[i] < best:
            best = buffer[i]
    return best
