"""
Two-dimensional matrix built on NDArray.

Storage and raw indexing are delegated to an owned rank-2 NDArray; this
module adds resize-with-preservation and in-place/out-of-place transpose.
"""

import logging

import numpy as np
import pandas as pd
from typing import Optional, Tuple

from ndmatrix.base.array_wrapper import ArrayWrapper
from ndmatrix.base.errors import ShapeMismatchError
from ndmatrix.base.ndarray import NDArray
from ndmatrix.base.shape_fns import overlap
from ndmatrix.matrix.transpose import (
    _copy_submatrix_nb,
    _transpose_inplace_nb,
    _transpose_out_nb,
)

logger = logging.getLogger(__name__)


class Matrix:
    """
    Column-major rows x cols matrix.

    Axis 0 is rows, axis 1 is columns. The rank is 2 after every
    constructor, ``setup``, ``resize`` and ``transpose`` call.

    Examples
    --------
    >>> m = Matrix(4, 3, dtype=np.int64)
    >>> for k in range(m.length):
    ...     m[k] = k
    >>> m.transpose()
    >>> m.get_shape()
    (3, 4)
    >>> m[0, 1]
    1
    """

    def __init__(self, rows: int = 1, cols: int = 1, dtype=None):
        """
        Parameters
        ----------
        rows : int
            Number of rows
        cols : int
            Number of columns
        dtype : numpy dtype, optional
            Element type, defaults to ``Config.get("allocation.dtype")``
        """
        self._array = NDArray((rows, cols), dtype=dtype)

    def setup(self, rows: int, cols: int, dtype=None) -> "Matrix":
        """Reallocate as a rows x cols matrix, discarding the old contents."""
        self._array.setup((rows, cols), dtype=dtype)
        return self

    def resize(self, rows: int, cols: int) -> "Matrix":
        """
        Reallocate as rows x cols, keeping the overlapping top-left submatrix.

        Elements (i, j) with i < min(old_rows, rows) and j < min(old_cols, cols)
        are copied over. Everything else follows ``allocation.zero_fill``.

        Parameters
        ----------
        rows : int
            New number of rows
        cols : int
            New number of columns

        Returns
        -------
        Matrix
            self
        """
        old = self._array
        new = NDArray((rows, cols), dtype=old.dtype)
        n_rows, n_cols = overlap(old.shape, new.shape)
        _copy_submatrix_nb(old._buffer, old.shape[0], new._buffer, rows, n_rows, n_cols)
        logger.debug("Resized matrix %s -> %s", old.shape, new.shape)
        self._array = new
        return self

    def transpose(self, out: Optional["Matrix"] = None) -> None:
        """
        Transpose in place, or write the transpose into ``out``.

        In place, the data is permuted by cycle-following with O(1) extra
        space and the shape becomes (cols, rows).

        Parameters
        ----------
        out : Matrix, optional
            Destination with ``out.rows == self.cols`` and
            ``out.cols == self.rows``. Passing ``self`` transposes in place.

        Raises
        ------
        ShapeMismatchError
            If ``out`` does not have the swapped dimensions; neither matrix is
            modified
        TypeError
            If the values cannot be cast to the dtype of ``out`` under
            ``same_kind`` casting (e.g. float into int)
        """
        rows, cols = self.get_shape()
        if out is None or out is self:
            _transpose_inplace_nb(self._array._buffer, rows, cols)
            self._array.reshape((cols, rows))
            logger.debug("Transposed matrix in place to %s", (cols, rows))
            return

        if not isinstance(out, Matrix):
            raise TypeError(f"Expected Matrix, got {type(out).__name__}")
        if out.get_shape() != (cols, rows):
            raise ShapeMismatchError(
                f"Transpose of {rows}x{cols} matrix needs a {cols}x{rows} output, "
                f"got {out.rows}x{out.cols}"
            )
        if not np.can_cast(self.dtype, out.dtype, casting="same_kind"):
            raise TypeError(f"Cannot transpose {self.dtype} values into a {out.dtype} matrix")
        src = self._array._buffer.astype(out.dtype, copy=False)
        _transpose_out_nb(src, rows, cols, out._array._buffer)

    # #### extents ####

    @property
    def rows(self) -> int:
        return self._array.get_dim(0)

    @property
    def cols(self) -> int:
        return self._array.get_dim(1)

    @property
    def length(self) -> int:
        return self._array.length

    @property
    def dtype(self) -> np.dtype:
        return self._array.dtype

    def get_dim(self, axis: int) -> int:
        """Extent along axis 0 (rows) or 1 (columns)."""
        return self._array.get_dim(axis)

    def get_shape(self) -> Tuple[int, int]:
        """(rows, cols)"""
        return self._array.shape

    def __len__(self) -> int:
        return self._array.length

    # #### access ####

    def __getitem__(self, key):
        return self._array[key]

    def __setitem__(self, key, value) -> None:
        self._array[key] = value

    def __iter__(self):
        return iter(self._array)

    def get_max(self):
        return self._array.get_max()

    def get_min(self):
        return self._array.get_min()

    # #### copy / assignment ####

    def copy(self) -> "Matrix":
        """Deep copy."""
        out = type(self).__new__(type(self))
        out._array = self._array.copy()
        return out

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    def assign(self, other: "Matrix") -> "Matrix":
        """Deep-copy ``other`` into this matrix. Always returns the receiver."""
        if other is self:
            return self
        if not isinstance(other, Matrix):
            raise TypeError(f"Expected Matrix, got {type(other).__name__}")
        self._array.assign(other._array)
        return self

    def fill(self, value) -> "Matrix":
        """Write ``value`` into every element."""
        self._array.fill(value)
        return self

    # #### conversion ####

    def to_ndarray(self) -> NDArray:
        """Deep copy of the underlying rank-2 array."""
        return self._array.copy()

    def to_numpy(self) -> np.ndarray:
        return self._array.to_numpy()

    @classmethod
    def from_numpy(cls, arr) -> "Matrix":
        """Build a matrix holding a copy of a 2-D array-like."""
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise ShapeMismatchError(f"Expected 2D array, got {arr.ndim}D")
        out = cls.__new__(cls)
        out._array = NDArray.from_numpy(arr)
        return out

    def to_frame(
        self,
        index: Optional[pd.Index] = None,
        columns: Optional[pd.Index] = None,
    ) -> pd.DataFrame:
        """
        Labelled DataFrame copy of the matrix.

        Parameters
        ----------
        index : pd.Index, optional
            Row labels, default RangeIndex
        columns : pd.Index, optional
            Column labels, default RangeIndex

        Returns
        -------
        pd.DataFrame
        """
        wrapper = ArrayWrapper.from_shape(self.get_shape(), index=index, columns=columns)
        return wrapper.wrap(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._array == other._array

    __hash__ = None

    def __str__(self) -> str:
        return str(self._array)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype})"
