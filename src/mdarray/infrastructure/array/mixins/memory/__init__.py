"""
Memory mixins and dtype-specific implementations for MDArray buffers.

This package aggregates buffer-level MDArray operations:

- ``fill``   : in-place fill with a scalar value
- ``zero``   : in-place fill with the additive identity
- ``astype`` : conversion to another numeric dtype

Concrete implementation modules are imported for their side effects so
their control paths are registered.

Public API
----------
- ``MDArrayMixinMemory``
"""

from ._array_fill import *
from ._array_astype import *
from ._base import MDArrayMixinMemory

__all__ = [
    MDArrayMixinMemory.__name__,
]
