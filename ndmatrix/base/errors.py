"""Exceptions raised by NDArray, Matrix and their helpers."""

from ndmatrix.base.enums import ErrorKind


class NDArrayError(Exception):
    """Base class for array precondition violations."""

    kind: ErrorKind


class OutOfBoundsError(NDArrayError, IndexError):
    """Index outside an axis extent or the flat length."""

    kind = ErrorKind.OUT_OF_BOUNDS


class ShapeMismatchError(NDArrayError, ValueError):
    """Requested shape is incompatible with the receiver."""

    kind = ErrorKind.SHAPE_MISMATCH


class UnsupportedRankError(NDArrayError, ValueError):
    """Operation is not defined for an array of this rank."""

    kind = ErrorKind.UNSUPPORTED_RANK
