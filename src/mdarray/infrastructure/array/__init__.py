"""
Concrete `MDArray` container assembled from its mixins.

Importing this package registers every dtype control path (arithmetic,
memory, reduction) as a side effect of importing the mixin packages.
"""

from ._mdarray import MDArray

__all__ = [MDArray.__name__]
