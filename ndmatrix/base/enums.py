"""Enumerations for array error conditions."""

from enum import IntEnum


class ErrorKind(IntEnum):
    """Kinds of precondition violation reported by arrays and matrices."""

    OUT_OF_BOUNDS = 0  # Index exceeds an axis extent or the flat length
    SHAPE_MISMATCH = 1  # Element count or dimensions do not agree
    UNSUPPORTED_RANK = 2  # Operation not defined for this number of axes
