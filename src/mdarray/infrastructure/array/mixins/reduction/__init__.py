"""
Reduction mixins and dtype-specific implementations for MDArray operations.

- ``sum``  : sum of every element
- ``prod`` : product of every element

Public API
----------
- ``MDArrayMixinReduction``
"""

from ._array_sum import *
from ._array_prod import *
from ._base import MDArrayMixinReduction

__all__ = [
    MDArrayMixinReduction.__name__,
]
