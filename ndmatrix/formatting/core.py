"""
Plain-text rendering of arrays.

- rank 1: one line of fixed-width values
- rank 2: one line per row
- rank 3: each slice along the last axis under a "slice k:" header
"""

import numpy as np
from typing import Optional, TextIO

from ndmatrix.base.errors import UnsupportedRankError
from ndmatrix.base.ndarray import NDArray
from ndmatrix.utils.config import Config


def _format_value(value, width: int, precision: int) -> str:
    if isinstance(value, (bool, int)):
        return f"{int(value):>{width}d}"
    return f"{value:>{width}.{precision}f}"


def _format_rows(values: np.ndarray, width: int, precision: int) -> str:
    lines = []
    for row in values.tolist():
        lines.append("".join(_format_value(v, width, precision) for v in row))
    return "".join(line + "\n" for line in lines)


def format_array(
    arr,
    width: Optional[int] = None,
    precision: Optional[int] = None,
) -> str:
    """
    Render an NDArray or Matrix as fixed-width text.

    Parameters
    ----------
    arr : NDArray or Matrix
        Array to render (rank 0 to 3)
    width : int, optional
        Field width, default ``Config.get("formatting.width")``
    precision : int, optional
        Digits after the decimal point for floats, default
        ``Config.get("formatting.precision")``

    Returns
    -------
    str
        Newline-terminated text, empty for an empty array

    Examples
    --------
    >>> a = NDArray(3, dtype=np.int64)
    >>> format_array(a, width=3)
    '  0  0  0\\n'
    """
    width = Config.get("formatting.width") if width is None else width
    precision = Config.get("formatting.precision") if precision is None else precision
    if isinstance(arr, NDArray) and arr.ndim == 0:
        return ""
    values = arr.to_numpy()

    if values.ndim == 1:
        return _format_rows(values[np.newaxis, :], width, precision)
    if values.ndim == 2:
        return _format_rows(values, width, precision)
    if values.ndim == 3:
        parts = []
        for k in range(values.shape[2]):
            parts.append(f"slice {k}:\n")
            parts.append(_format_rows(values[:, :, k], width, precision))
        return "".join(parts)
    raise UnsupportedRankError(f"Cannot format a {values.ndim}-D array, rank must be at most 3")


def write_array(
    arr,
    stream: TextIO,
    width: Optional[int] = None,
    precision: Optional[int] = None,
) -> None:
    """Write ``format_array(arr)`` to a text stream."""
    stream.write(format_array(arr, width=width, precision=precision))
