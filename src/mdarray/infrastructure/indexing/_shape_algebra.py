"""
Shape algebra: pure functions over ordered integer sequences.

Functions
---------
- `product_of_elements`: multiplicative fold (empty shape => 1)
- `simplify_shape`: trailing-1 trimming then leading-paired-1 trimming
- `is_square_shape`: classification over the simplified shape
- `swap_pairs`: the paired-axis swap `(0,1), (2,3), ...`

None of these functions mutate their inputs.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def product_of_elements(shape: Sequence[int]) -> int:
    """
    Return the product of the components of `shape`.

    Parameters
    ----------
    shape : Sequence[int]
        Axis sizes.

    Returns
    -------
    int
        Product of all components; 1 for an empty shape.
    """
    p = 1
    for s in shape:
        p *= int(s)
    return p


def swap_pairs(seq: Sequence[T]) -> tuple[T, ...]:
    """
    Exchange the elements at positions `(0, 1), (2, 3), ...` of `seq`.

    A final unpaired element (odd length) is left in place. The transform
    is its own inverse.

    Examples
    --------
    >>> swap_pairs([0, 1, 2, 3, 4])
    (1, 0, 3, 2, 4)
    """
    s = list(seq)
    for i in range(0, len(s) - 1, 2):
        s[i], s[i + 1] = s[i + 1], s[i]
    return tuple(s)


def simplify_shape(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Return the simplified form of `shape`.

    Two passes are applied:

    1. Trailing axes of size 1 are dropped while more than one axis remains.
    2. Leading *pairs* of adjacent size-1 axes are dropped from the front
       (a lone leading 1 followed by a larger axis is kept).

    Parameters
    ----------
    shape : Sequence[int]
        Shape to simplify.

    Returns
    -------
    tuple[int, ...]
        The simplified shape.

    Examples
    --------
    >>> simplify_shape([1, 1, 2, 3, 1])
    (2, 3)
    >>> simplify_shape([1])
    (1,)
    """
    s = list(shape)

    while len(s) > 1 and s[-1] == 1:
        s.pop()

    if len(s) > 1:
        trim = 0
        for i in range(0, len(s) - 1, 2):
            if s[i] == 1 and s[i + 1] == 1:
                trim = i + 2
            else:
                break
        del s[:trim]

    return tuple(s)


def is_square_shape(shape: Sequence[int]) -> bool:
    """
    Return True if every axis of the simplified shape has the same size.

    A simplified shape with a single axis is square only when that axis has
    size 1 (or 0). An empty shape is never square.

    Examples
    --------
    >>> is_square_shape([2, 2, 2, 1])
    True
    >>> is_square_shape([3])
    False
    """
    s = simplify_shape(shape)
    if len(s) == 0:
        return False
    if len(s) == 1:
        return s[0] <= 1
    return all(d == s[0] for d in s[1:])
