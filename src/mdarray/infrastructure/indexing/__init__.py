"""
Index engine for mdarray.

This package aggregates the pure, stateless pieces every structural
operation is built on:

- shape algebra      (``product_of_elements``, ``simplify_shape``, ``swap_pairs``)
- the ``Index`` value type and its paired-swap total order
- index translation  (``to_offset`` / ``from_offset``)
- iteration protocol (``successor``, ``enumerate_indices``, ``enumerate_region``)
"""

from ._shape_algebra import (
    is_square_shape,
    product_of_elements,
    simplify_shape,
    swap_pairs,
)
from ._index import Index, as_index
from ._translation import axis_weights, from_offset, to_offset
from ._enumeration import (
    end_index,
    enumerate_indices,
    enumerate_region,
    start_index,
    successor,
)

__all__ = [
    "is_square_shape",
    "product_of_elements",
    "simplify_shape",
    "swap_pairs",
    Index.__name__,
    "as_index",
    "axis_weights",
    "from_offset",
    "to_offset",
    "end_index",
    "enumerate_indices",
    "enumerate_region",
    "start_index",
    "successor",
]
