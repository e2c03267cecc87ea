"""
Dense N-dimensional array with column-major layout.

Storage is a single owned, contiguous 1-D numpy buffer plus an owned int64
shape descriptor. The first axis varies fastest:

    flat(i0, i1, ..., ik-1) = sum(i_d * stride_d)
    stride_0 = 1, stride_d = stride_{d-1} * shape[d-1]

Every operation validates its inputs before touching the receiver, so a
raised error never leaves a partially updated array behind.
"""

import logging
import operator

import numpy as np
from typing import Iterator, Optional, Tuple, Union

from ndmatrix.base.errors import OutOfBoundsError, ShapeMismatchError
from ndmatrix.base.shape_fns import (
    ShapeLike,
    as_tuple,
    check_dtype,
    to_index,
    to_shape,
)
from ndmatrix.utils.config import Config
from ndmatrix.utils.math import (
    calc_length,
    column_major_strides,
    ravel_multi_index,
    scan_max,
    scan_min,
    unravel_flat_index,
)

logger = logging.getLogger(__name__)


def _allocate(length: int, dtype: np.dtype) -> np.ndarray:
    if Config.get("allocation.zero_fill", True):
        return np.zeros(length, dtype=dtype)
    return np.empty(length, dtype=dtype)


class NDArray:
    """
    Owning, contiguous, column-major N-dimensional array.

    A default-constructed array is empty (rank 0, length 0). Constructing
    with a shape, or calling ``setup``, allocates a buffer of ``prod(shape)``
    elements.

    Examples
    --------
    >>> a = NDArray((3, 4, 5), dtype=np.int64)
    >>> for k in range(len(a)):
    ...     a[k] = k
    >>> a.get_index(37)
    (1, 0, 3)
    >>> a[1, 0, 3]
    37
    """

    def __init__(self, shape: Optional[ShapeLike] = None, dtype=None):
        """
        Parameters
        ----------
        shape : int or sequence of int, optional
            Per-axis extents; an int gives a 1-D array. None gives the empty array.
        dtype : numpy dtype, optional
            Element type (bool, integer or float). Defaults to
            ``Config.get("allocation.dtype")``.
        """
        self._dtype = check_dtype(dtype if dtype is not None else Config.get("allocation.dtype"))
        self._shape = np.empty(0, dtype=np.int64)
        self._length = 0
        self._buffer = np.empty(0, dtype=self._dtype)
        if shape is not None:
            self.setup(shape)

    # #### lifecycle ####

    def setup(self, shape: ShapeLike, dtype=None) -> "NDArray":
        """
        (Re)allocate the array with a new shape.

        The previous buffer and shape descriptor are dropped. Contents of the
        new buffer follow ``allocation.zero_fill``.

        Parameters
        ----------
        shape : int or sequence of int
            Per-axis extents
        dtype : numpy dtype, optional
            New element type; keeps the current one when omitted

        Returns
        -------
        NDArray
            self
        """
        new_dtype = self._dtype if dtype is None else check_dtype(dtype)
        new_shape = to_shape(shape)
        new_length = int(calc_length(new_shape))
        buffer = _allocate(new_length, new_dtype)

        self._dtype = new_dtype
        self._shape = new_shape
        self._length = new_length
        self._buffer = buffer
        logger.debug("Allocated %s array of %d %s elements", self.shape, new_length, new_dtype)
        return self

    def reshape(self, shape: ShapeLike) -> "NDArray":
        """
        Reinterpret the buffer under a new shape with the same element count.

        The rank may change. Buffer contents and their flat positions are
        unchanged.

        Raises
        ------
        ShapeMismatchError
            If ``prod(shape)`` differs from the current length
        """
        new_shape = to_shape(shape)
        new_length = int(calc_length(new_shape))
        if new_length != self._length:
            raise ShapeMismatchError(
                f"Cannot reshape array of {self._length} elements {self.shape} "
                f"into {as_tuple(new_shape)} ({new_length} elements)"
            )
        logger.debug("Reshaped %s -> %s", self.shape, as_tuple(new_shape))
        self._shape = new_shape
        return self

    def copy(self) -> "NDArray":
        """Deep copy: new shape descriptor and new buffer."""
        out = type(self).__new__(type(self))
        out._dtype = self._dtype
        out._shape = self._shape.copy()
        out._length = self._length
        out._buffer = self._buffer.copy()
        return out

    __copy__ = copy

    def __deepcopy__(self, memo) -> "NDArray":
        return self.copy()

    def assign(self, other: "NDArray") -> "NDArray":
        """
        Replace this array's shape, dtype and contents with a deep copy of ``other``.

        Self-assignment is a no-op. Always returns the receiver.
        """
        if other is self:
            return self
        if not isinstance(other, NDArray):
            raise TypeError(f"Expected NDArray, got {type(other).__name__}")
        shape = other._shape.copy()
        buffer = other._buffer.copy()
        self._dtype = other._dtype
        self._shape = shape
        self._length = other._length
        self._buffer = buffer
        return self

    def fill(self, value) -> "NDArray":
        """Write ``value`` into every element without reallocating."""
        self._buffer.fill(value)
        return self

    # #### extents ####

    @property
    def shape(self) -> Tuple[int, ...]:
        """Per-axis extents."""
        return as_tuple(self._shape)

    @property
    def ndim(self) -> int:
        """Number of axes."""
        return int(self._shape.shape[0])

    @property
    def length(self) -> int:
        """Total number of elements."""
        return self._length

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def strides(self) -> Tuple[int, ...]:
        """Column-major strides, in elements."""
        return as_tuple(column_major_strides(self._shape))

    def get_dim(self, axis: int) -> int:
        """Extent along one axis."""
        axis = operator.index(axis)
        if not 0 <= axis < self.ndim:
            raise OutOfBoundsError(f"Axis {axis} out of range for {self.ndim}-D array")
        return int(self._shape[axis])

    def __len__(self) -> int:
        return self._length

    # #### indexing ####

    def _flat(self, key) -> int:
        if isinstance(key, tuple):
            return self.ravel_index(key)
        idx = operator.index(key)
        if not 0 <= idx < self._length:
            raise OutOfBoundsError(
                f"Flat index {idx} out of range for array of length {self._length}"
            )
        return idx

    def ravel_index(self, index: Union[int, Tuple[int, ...]]) -> int:
        """
        Flat position of a multi-index.

        Raises
        ------
        OutOfBoundsError
            If the number of components differs from ``ndim`` or any
            component lies outside its axis
        """
        components = to_index(index)
        if components.shape[0] != self.ndim:
            raise OutOfBoundsError(
                f"Expected {self.ndim} indices for shape {self.shape}, got {components.shape[0]}"
            )
        flat = int(ravel_multi_index(self._shape, components))
        if flat < 0 or flat >= self._length:
            raise OutOfBoundsError(f"Index {as_tuple(components)} out of range for shape {self.shape}")
        return flat

    def get_index(self, flat: int, out: Optional["NDArray"] = None) -> Tuple[int, ...]:
        """
        Multi-index of a flat position, axis 0 first.

        Parameters
        ----------
        flat : int
            Flat index in [0, length)
        out : NDArray, optional
            Rank-1 array of length ``ndim`` that also receives the components

        Returns
        -------
        tuple of int
            One component per axis
        """
        flat = self._flat(operator.index(flat))
        if out is not None and out.shape != (self.ndim,):
            raise ShapeMismatchError(
                f"Output index array must have shape ({self.ndim},), got {out.shape}"
            )
        index = unravel_flat_index(self._shape, flat)
        if out is not None:
            out._buffer[:] = index
        return as_tuple(index)

    def __getitem__(self, key):
        return self._buffer[self._flat(key)]

    def __setitem__(self, key, value) -> None:
        self._buffer[self._flat(key)] = value

    def __iter__(self) -> Iterator:
        return iter(self._buffer.tolist())

    # #### reductions ####

    def get_max(self):
        """Largest element."""
        if self._length == 0:
            raise ValueError("get_max of an empty array")
        return scan_max(self._buffer)

    def get_min(self):
        """Smallest element."""
        if self._length == 0:
            raise ValueError("get_min of an empty array")
        return scan_min(self._buffer)

    # #### conversion ####

    def to_numpy(self) -> np.ndarray:
        """
        Copy of the contents as a Fortran-ordered numpy array of the same shape.

        The empty (rank-0) array converts to a 1-D array of length 0.
        """
        if self.ndim == 0:
            return self._buffer.copy()
        return self._buffer.reshape(self.shape, order="F").copy(order="F")

    @classmethod
    def from_numpy(cls, arr) -> "NDArray":
        """
        Build an array holding a copy of ``arr``.

        Element ``arr[i0, i1, ...]`` lands at the same multi-index, stored
        column-major. A 0-d input has no shape to keep and is rejected.
        """
        arr = np.asarray(arr)
        if arr.ndim == 0:
            raise ShapeMismatchError("Cannot build an array from a 0-d input, expected at least 1 axis")
        out = cls(dtype=arr.dtype)
        shape = to_shape(arr.shape)
        out._shape = shape
        out._length = int(calc_length(shape))
        out._buffer = arr.ravel(order="F").copy()
        return out

    def __eq__(self, other) -> bool:
        if not isinstance(other, NDArray):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._buffer, other._buffer))

    __hash__ = None

    def __str__(self) -> str:
        from ndmatrix.formatting.core import format_array

        return format_array(self)

    def __repr__(self) -> str:
        return f"NDArray(shape={self.shape}, dtype={self._dtype})"
