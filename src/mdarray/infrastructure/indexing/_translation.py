"""
Index translation engine (row-major).

`to_offset` and `from_offset` form the bijection between a logical
multi-axis index and a flat storage offset. The last axis varies fastest:
axis `i` is weighted by the product of `shape[i+1:]`.

These two functions are exact inverses for every valid index/offset pair.
The paired-axis swap used by the iteration protocol never affects them; it
only changes enumeration order.
"""

from __future__ import annotations

from typing import Sequence

from ...domain._errors import IndexOutOfRangeError
from ._index import Index
from ._shape_algebra import product_of_elements


def axis_weights(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Return the row-major weight of every axis of `shape`.

    Examples
    --------
    >>> axis_weights((2, 3, 4))
    (12, 4, 1)
    """
    weights = [1] * len(shape)
    w = 1
    for i in range(len(shape) - 1, -1, -1):
        weights[i] = w
        w *= int(shape[i])
    return tuple(weights)


def to_offset(index: Sequence[int], shape: Sequence[int]) -> int:
    """
    Translate a logical index into a storage offset.

    Parameters
    ----------
    index : Sequence[int]
        Logical index, one component per axis. Assumed valid for `shape`;
        callers validate first.
    shape : Sequence[int]
        Array shape.

    Returns
    -------
    int
        `sum(index[i] * prod(shape[i+1:]))`.
    """
    offset = 0
    for c, w in zip(index, axis_weights(shape)):
        offset += int(c) * w
    return offset


def from_offset(offset: int, shape: Sequence[int]) -> Index:
    """
    Translate a storage offset back into a logical index.

    A running stride count starts at the total element count and is divided
    by each axis size in declared order; the quotient of the remaining
    offset by the stride count is that axis' component.

    Parameters
    ----------
    offset : int
        Storage offset in `[0, prod(shape))`.
    shape : Sequence[int]
        Array shape.

    Returns
    -------
    Index
        The logical index stored at `offset`.

    Raises
    ------
    IndexOutOfRangeError
        If `offset` is outside the storage of `shape`.
    """
    total = product_of_elements(shape)
    if offset < 0 or offset >= total:
        raise IndexOutOfRangeError(offset, shape)

    components = []
    stride_count = total
    remaining = int(offset)
    for s in shape:
        stride_count //= int(s)
        c = remaining // stride_count
        remaining -= stride_count * c
        components.append(c)

    return Index(components)
