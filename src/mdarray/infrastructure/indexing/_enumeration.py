"""
Iteration protocol: successor and canonical enumeration of indices.

The successor of an index is computed like an odometer over its
paired-swapped representation: the first swapped digit is incremented
first, digits that reach their upper bound wrap back to their lower bound
and carry into the next digit. The result is swapped back.

Enumeration starts at the lower bound and takes successors until the
upper bound is reached, inclusive of both endpoints. The same routine
drives full-array iteration (bounds `0 .. shape-1`), the slice engine
(bounds `lo .. hi`), and nested reconstruction.

Enumerations are generators recomputed from their arguments on every call;
nothing is cached across shape mutations.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from ._index import Index
from ._shape_algebra import product_of_elements, swap_pairs


def start_index(shape: Sequence[int]) -> Index:
    """Return the all-zero index of `shape`."""
    return Index.zeros(len(shape))


def end_index(shape: Sequence[int]) -> Index:
    """
    Return the maximal index of `shape` (`shape[i] - 1` on every axis).

    Axes of size 0 contribute 0.
    """
    return Index(s - 1 if s > 0 else 0 for s in shape)


def successor(
    index: Sequence[int],
    upper: Sequence[int],
    lower: Optional[Sequence[int]] = None,
) -> Index:
    """
    Return the index following `index` within the box `[lower, upper]`.

    Parameters
    ----------
    index : Sequence[int]
        Current index.
    upper : Sequence[int]
        Inclusive upper bound of every axis.
    lower : Sequence[int], optional
        Inclusive lower bound of every axis. Defaults to all zeros.

    Returns
    -------
    Index
        The next index in paired-swap order. The successor of `upper` wraps
        around to `lower`.
    """
    if lower is None:
        lower = (0,) * len(index)

    digits = list(swap_pairs(index))
    lo = swap_pairs(lower)
    hi = swap_pairs(upper)

    for j in range(len(digits)):
        if digits[j] < hi[j]:
            digits[j] += 1
            break
        digits[j] = lo[j]

    return Index(swap_pairs(digits))


def enumerate_region(lower: Sequence[int], upper: Sequence[int]) -> Iterator[Index]:
    """
    Yield every index of the inclusive box `[lower, upper]` in canonical order.

    Parameters
    ----------
    lower : Sequence[int]
        First index yielded.
    upper : Sequence[int]
        Last index yielded.

    Yields
    ------
    Index
        Indices from `lower` to `upper`, both inclusive.
    """
    current = Index(lower)
    last = Index(upper)

    while True:
        yield current
        if current == last:
            break
        current = successor(current, last, lower)


def enumerate_indices(shape: Sequence[int]) -> Iterator[Index]:
    """
    Yield every valid index of `shape` in canonical order.

    The sequence has exactly `prod(shape)` entries; it is empty when any axis
    has size 0, and holds the single empty index for a rank-0 shape.
    """
    if product_of_elements(shape) == 0:
        return
    yield from enumerate_region(start_index(shape), end_index(shape))
