"""
Numba-compiled kernels for Matrix transposition and resizing.

All kernels work on the flat column-major buffer of a rows x cols matrix,
where element (i, j) lives at i + j * rows.
"""

import numpy as np
import numba


@numba.jit(nopython=True, cache=True)
def _transpose_inplace_nb(buffer: np.ndarray, rows: int, cols: int) -> None:
    """
    Transpose a rows x cols buffer in place by cycle-following.

    Target position k of the cols x rows result takes the element that was
    originally at (k % cols) * rows + k // cols. Positions below k have
    already been filled, so their original element was swapped further along
    the cycle; following the permutation until it reaches a position >= k
    finds where that element currently sits.

    Parameters
    ----------
    buffer : np.ndarray
        Flat column-major data, modified in place
    rows : int
        Rows before transposition
    cols : int
        Columns before transposition
    """
    length = rows * cols
    for k in range(length):
        idx = (k % cols) * rows + k // cols
        while idx < k:
            idx = (idx % cols) * rows + idx // cols
        if idx != k:
            tmp = buffer[k]
            buffer[k] = buffer[idx]
            buffer[idx] = tmp


@numba.jit(nopython=True, cache=True)
def _transpose_out_nb(src: np.ndarray, rows: int, cols: int, dst: np.ndarray) -> None:
    """Write the transpose of a rows x cols buffer into a cols x rows buffer."""
    for i in range(rows):
        for j in range(cols):
            dst[j + i * cols] = src[i + j * rows]


@numba.jit(nopython=True, cache=True)
def _copy_submatrix_nb(
    src: np.ndarray,
    src_rows: int,
    dst: np.ndarray,
    dst_rows: int,
    n_rows: int,
    n_cols: int,
) -> None:
    """
    Copy the top-left n_rows x n_cols block between matrices of different heights.

    Parameters
    ----------
    src : np.ndarray
        Source buffer
    src_rows : int
        Rows of the source matrix
    dst : np.ndarray
        Destination buffer
    dst_rows : int
        Rows of the destination matrix
    n_rows : int
        Rows to copy, at most min(src_rows, dst_rows)
    n_cols : int
        Columns to copy
    """
    for j in range(n_cols):
        for i in range(n_rows):
            dst[i + j * dst_rows] = src[i + j * src_rows]
