"""
Arithmetic mixins and dtype-specific implementations for MDArray operations.

This package aggregates arithmetic-related MDArray mixins and their concrete
control-path implementations, including:

- addition           (``__add__`` / ``__radd__``)
- subtraction        (``__sub__`` / ``__rsub__``)
- multiplication     (``__mul__`` / ``__rmul__``)
- true division      (``__truediv__`` / ``__rtruediv__``)
- negation           (``__neg__``)

Each operation is implemented using the control-path dispatch mechanism,
keyed on the array's dtype, so the int32 / float32 / float64 backend paths
are selected at runtime behind a single operator on the MDArray class.

Design notes
------------
- Concrete implementation modules are imported for their *side effects*:
  registering control paths with the array control-path manager.
- Arrays without a registered dtype (including generic arrays) raise
  `DtypeNotSupportedError` from every operator in this package.

Public API
----------
Only the base mixin class is exported as part of the public interface:

- ``MDArrayMixinArithmetic``
"""

from ._array_addition import *
from ._array_subtraction import *
from ._array_multiplication import *
from ._array_division import *
from ._array_negation import *
from ._base import MDArrayMixinArithmetic

__all__ = [
    MDArrayMixinArithmetic.__name__,
]
