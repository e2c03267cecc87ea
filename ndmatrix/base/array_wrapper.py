"""
Array wrapper that attaches pandas labels to rank-1 and rank-2 arrays.

The arrays themselves carry no labels. ArrayWrapper keeps the row/column
index separately and converts an NDArray (or Matrix) into a Series or
DataFrame on demand.
"""

import numpy as np
import pandas as pd
from typing import Optional, Tuple, Union

from ndmatrix.base.errors import ShapeMismatchError, UnsupportedRankError


class ArrayWrapper:
    """
    Wraps arrays with index and column information.

    Dimensions:
    - axis 0: rows (Series/DataFrame index)
    - axis 1: columns (DataFrame columns, rank 2 only)
    """

    def __init__(
        self,
        index: Optional[pd.Index] = None,
        columns: Optional[pd.Index] = None,
        ndim: int = 2,
    ):
        """
        Parameters
        ----------
        index : pd.Index, optional
            Row labels
        columns : pd.Index, optional
            Column labels
        ndim : int
            Number of dimensions (1 or 2)
        """
        if ndim not in (1, 2):
            raise UnsupportedRankError(f"Unsupported ndim: {ndim}")
        self._index = index
        self._columns = columns
        self._ndim = ndim

    @property
    def index(self) -> Optional[pd.Index]:
        """Row labels."""
        return self._index

    @property
    def columns(self) -> Optional[pd.Index]:
        """Column labels."""
        return self._columns

    @property
    def ndim(self) -> int:
        return self._ndim

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape derived from index/columns."""
        if self.ndim == 1:
            return (len(self.index),) if self.index is not None else (0,)
        return (
            len(self.index) if self.index is not None else 0,
            len(self.columns) if self.columns is not None else 0,
        )

    def wrap(self, arr) -> Union[pd.Series, pd.DataFrame]:
        """
        Convert an array to a Series (rank 1) or DataFrame (rank 2).

        Parameters
        ----------
        arr : NDArray, Matrix or np.ndarray
            Array to wrap (shape must match wrapper dimensions)

        Returns
        -------
        pd.Series or pd.DataFrame
            Labelled copy of the data
        """
        values = arr.to_numpy() if hasattr(arr, "to_numpy") else np.asarray(arr)
        if values.ndim != self.ndim:
            raise UnsupportedRankError(
                f"Array ndim {values.ndim} doesn't match wrapper ndim {self.ndim}"
            )
        if values.shape != self.shape:
            raise ShapeMismatchError(
                f"Array shape {values.shape} doesn't match wrapper shape {self.shape}"
            )

        if self.ndim == 1:
            return pd.Series(values, index=self.index)
        return pd.DataFrame(values, index=self.index, columns=self.columns)

    @classmethod
    def from_shape(
        cls,
        shape: Tuple[int, ...],
        index: Optional[pd.Index] = None,
        columns: Optional[pd.Index] = None,
    ) -> "ArrayWrapper":
        """
        Create wrapper from shape, generating default indices if needed.

        Parameters
        ----------
        shape : tuple
            Array shape
        index : pd.Index, optional
            Row labels
        columns : pd.Index, optional
            Column labels

        Returns
        -------
        ArrayWrapper
        """
        ndim = len(shape)
        if ndim not in (1, 2):
            raise UnsupportedRankError(f"Unsupported ndim: {ndim}")

        index = pd.RangeIndex(shape[0]) if index is None else pd.Index(index)
        if ndim == 2:
            columns = pd.RangeIndex(shape[1]) if columns is None else pd.Index(columns)
        else:
            columns = None

        return cls(index=index, columns=columns, ndim=ndim)

    def __repr__(self) -> str:
        return (
            f"ArrayWrapper(shape={self.shape}, "
            f"index={'[...]' if self.index is not None else None}, "
            f"columns={'[...]' if self.columns is not None else None})"
        )
