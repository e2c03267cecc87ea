"""
ndmatrix - dense column-major arrays

A lightweight N-dimensional array with column-major layout and a 2D Matrix
with resize and in-place/out-of-place transpose.
"""

import logging

__version__ = "0.1.0"

from ndmatrix.base.ndarray import NDArray
from ndmatrix.base.enums import ErrorKind
from ndmatrix.base.errors import (
    NDArrayError,
    OutOfBoundsError,
    ShapeMismatchError,
    UnsupportedRankError,
)
from ndmatrix.matrix.base import Matrix
from ndmatrix.formatting.core import format_array, write_array
from ndmatrix.plotting.core import plot_heatmap, plot_distribution
from ndmatrix.utils.config import Config

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NDArray",
    "Matrix",
    "ErrorKind",
    "NDArrayError",
    "OutOfBoundsError",
    "ShapeMismatchError",
    "UnsupportedRankError",
    "format_array",
    "write_array",
    "plot_heatmap",
    "plot_distribution",
    "Config",
]
