"""
mdarray: a generic, rank-agnostic multidimensional array.

The public surface re-exports the container, the index value type, the
index-engine functions and the error types:

    >>> from mdarray import MDArray
    >>> A = MDArray.from_nested([[1, 2], [3, 4]])
    >>> MDArray.determinant2d(A)
    -2
"""

from .domain import (
    DtypeMismatchError,
    DtypeNotSupportedError,
    GrowthWithoutFillError,
    IMDArray,
    IndexOutOfRangeError,
    InsufficientStorageError,
    InvalidDimensionError,
    NumericKind,
    ShapeMismatchError,
)
from .infrastructure.array import MDArray
from .infrastructure.indexing import (
    Index,
    end_index,
    enumerate_indices,
    enumerate_region,
    from_offset,
    product_of_elements,
    simplify_shape,
    start_index,
    successor,
    swap_pairs,
    to_offset,
)

__version__ = "1.0.0"

__all__ = [
    MDArray.__name__,
    Index.__name__,
    IMDArray.__name__,
    NumericKind.__name__,
    DtypeMismatchError.__name__,
    DtypeNotSupportedError.__name__,
    GrowthWithoutFillError.__name__,
    IndexOutOfRangeError.__name__,
    InsufficientStorageError.__name__,
    InvalidDimensionError.__name__,
    ShapeMismatchError.__name__,
    "end_index",
    "enumerate_indices",
    "enumerate_region",
    "from_offset",
    "product_of_elements",
    "simplify_shape",
    "start_index",
    "successor",
    "swap_pairs",
    "to_offset",
]
