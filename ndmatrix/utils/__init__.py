"""Utility functions and helpers."""

from ndmatrix.utils.config import Config
from ndmatrix.utils.math import (
    calc_length,
    column_major_strides,
    ravel_multi_index,
    unravel_flat_index,
    scan_max,
    scan_min,
)

__all__ = [
    "Config",
    "calc_length",
    "column_major_strides",
    "ravel_multi_index",
    "unravel_flat_index",
    "scan_max",
    "scan_min",
]
