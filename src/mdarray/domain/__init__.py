"""
Domain layer: interfaces, numeric-kind capabilities, errors and dispatch.
"""

from ._errors import (
    DtypeMismatchError,
    DtypeNotSupportedError,
    GrowthWithoutFillError,
    IndexOutOfRangeError,
    InsufficientStorageError,
    InvalidDimensionError,
    ShapeMismatchError,
)
from ._mdarray import IMDArray
from ._numeric import NumericKind

__all__ = [
    DtypeMismatchError.__name__,
    DtypeNotSupportedError.__name__,
    GrowthWithoutFillError.__name__,
    IndexOutOfRangeError.__name__,
    InsufficientStorageError.__name__,
    InvalidDimensionError.__name__,
    ShapeMismatchError.__name__,
    IMDArray.__name__,
    NumericKind.__name__,
]
