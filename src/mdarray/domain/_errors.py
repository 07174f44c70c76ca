"""
Indexing-, shape- and element-kind-related exceptions for mdarray.

This module defines the custom errors raised by the index engine, the
`MDArray` container and the elementwise backend. Each error subclasses the
builtin whose contract it refines (`IndexError`, `ValueError`,
`TypeError`) so callers can catch either the precise mdarray error or the
familiar builtin.

The errors carry the offending values as attributes to aid debugging.
"""

from __future__ import annotations

from typing import Any, Sequence


class IndexOutOfRangeError(IndexError):
    """
    Raised when a logical index or storage offset falls outside an array.

    This error is raised by element access (`element`, `set_element`),
    offset translation, and the slice engine when a bound lies outside the
    receiver's shape.

    Attributes
    ----------
    index : Any
        The offending index, offset, or bound.
    shape : tuple[int, ...]
        Shape of the array that rejected the index.
    """

    def __init__(self, index: Any, shape: Sequence[int]) -> None:
        """
        Initialize the IndexOutOfRangeError.

        Parameters
        ----------
        index : Any
            The index (or storage offset) that failed validation.
        shape : Sequence[int]
            Shape of the array the index was checked against.
        """
        super().__init__(f"Index {index!r} is out of range for shape {tuple(shape)}.")
        self.index = index
        self.shape = tuple(shape)


class InsufficientStorageError(ValueError):
    """
    Raised when a buffer is too short for the requested shape.

    Construction truncates oversized buffers, but a buffer that holds fewer
    elements than the shape requires cannot be repaired.
    """

    def __init__(self, expected: int, actual: int) -> None:
        """
        Initialize the InsufficientStorageError.

        Parameters
        ----------
        expected : int
            Number of elements required by the shape.
        actual : int
            Number of elements actually supplied.
        """
        super().__init__(f"Expected {expected} elements but storage only has {actual}.")
        self.expected = expected
        self.actual = actual


class GrowthWithoutFillError(ValueError):
    """
    Raised when `reshape` must grow storage but no fill value was supplied.

    The receiver's shape and storage are left untouched when this is raised.
    """

    def __init__(self, old_shape: Sequence[int], new_shape: Sequence[int]) -> None:
        super().__init__(
            f"Reshape from {tuple(old_shape)} to {tuple(new_shape)} grows storage "
            "and requires a fill value."
        )
        self.old_shape = tuple(old_shape)
        self.new_shape = tuple(new_shape)


class ShapeMismatchError(ValueError):
    """
    Raised when operand shapes (or buffer lengths) are incompatible.

    Attributes
    ----------
    expected : Any
        Expected shape or length.
    actual : Any
        Shape or length actually received.
    """

    def __init__(self, expected: Any, actual: Any, *, op: str = "") -> None:
        prefix = f"{op}: " if op else ""
        super().__init__(f"{prefix}Shape mismatch: {expected} vs {actual}")
        self.expected = expected
        self.actual = actual
        self.op = op


class InvalidDimensionError(ValueError):
    """
    Raised when an axis argument is not a valid dimension of an array.
    """

    def __init__(self, op: str, dim: int, rank: int) -> None:
        super().__init__(
            f"{op}: dimension {dim} should be less than the rank ({rank}) of the array."
        )
        self.op = op
        self.dim = dim
        self.rank = rank


class DtypeNotSupportedError(TypeError):
    """
    Raised when a vectorized operation is requested for an element kind
    that has no registered backend path.

    This is typically raised by `MDArray` arithmetic operators (e.g.
    ``__add__``, ``__mul__``) when the array was built without a numeric
    dtype, or with a dtype other than int32/float32/float64.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g., "add", "neg").
    dtype : str
        String representation of the element kind.
    """

    def __init__(self, op: str, dtype: str) -> None:
        super().__init__(f"{op} is not implemented for dtype '{dtype}'.")
        self.op = op
        self.dtype = dtype


class DtypeMismatchError(TypeError):
    """
    Raised when an elementwise operation combines arrays of different
    element kinds without an explicit `astype` conversion.
    """

    def __init__(self, dtype_a: str, dtype_b: str) -> None:
        super().__init__(f"Dtype mismatch: '{dtype_a}' vs '{dtype_b}'.")
        self.dtype_a = dtype_a
        self.dtype_b = dtype_b
