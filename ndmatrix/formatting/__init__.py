"""Text rendering of arrays."""

from ndmatrix.formatting.core import format_array, write_array

__all__ = [
    "format_array",
    "write_array",
]
