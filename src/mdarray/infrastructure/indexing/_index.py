"""
Logical index value type and the paired-swap total order.

An `Index` is an immutable, hashable vector of integers (one component per
axis). Indices of a shape are totally ordered by the iteration protocol:

1. apply the paired-axis swap to both indices,
2. read the swapped sequences as mixed-radix numbers whose *first* digit is
   the least significant, with place values taken from the swapped shape,
3. compare the resulting ordinals.

Because every digit of a valid index is smaller than its radix, comparing
ordinals is the same as comparing the swapped sequences lexicographically
from the most significant (last) digit down. `Index` uses that key for its
rich comparisons, so no shape is needed to sort indices of a common shape;
`ordinal` computes the weighted sum explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Iterable, Iterator, Sequence

from ._shape_algebra import swap_pairs


def _component(c: Any) -> int:
    if not isinstance(c, Integral):
        raise TypeError(f"index components must be integers, got {c!r}")
    return int(c)


@dataclass(frozen=True, eq=False)
class Index:
    """
    Immutable logical index with paired-swap ordering.

    Parameters
    ----------
    components : Iterable[int]
        One integer per axis.

    Notes
    -----
    - Equality requires identical length and equal components. An `Index`
      also compares equal to a plain tuple/list with the same components,
      and hashes like the equivalent tuple.
    - Ordering comparisons between indices of different lengths are not
      defined and raise `TypeError`.
    """

    components: tuple[int, ...]

    def __init__(self, components: Iterable[int] = ()) -> None:
        object.__setattr__(
            self, "components", tuple(_component(c) for c in components)
        )

    @classmethod
    def zeros(cls, rank: int) -> "Index":
        """Return the all-zero index of the given rank."""
        return cls((0,) * rank)

    # ------------------------------------------------------------------
    # Sequence behavior
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[int]:
        return iter(self.components)

    def __getitem__(self, i):
        return self.components[i]

    def __repr__(self) -> str:
        return f"Index{self.components}"

    # ------------------------------------------------------------------
    # Derived indices
    # ------------------------------------------------------------------
    def with_component(self, axis: int, value: int) -> "Index":
        """Return a copy with component `axis` replaced by `value`."""
        c = list(self.components)
        c[axis] = int(value)
        return Index(c)

    def swapped(self, dx: int, dy: int) -> "Index":
        """Return a copy with components `dx` and `dy` exchanged."""
        c = list(self.components)
        c[dx], c[dy] = c[dy], c[dx]
        return Index(c)

    def paired(self) -> "Index":
        """Return the paired-axis swap of this index."""
        return Index(swap_pairs(self.components))

    def ordinal(self, shape: Sequence[int]) -> int:
        """
        Return the position of this index in the canonical enumeration of
        `shape`.

        The paired-swapped index is read as a mixed-radix number, least
        significant digit first, with place values derived from the
        paired-swapped shape.
        """
        digits = swap_pairs(self.components)
        radices = swap_pairs(shape)
        total = 0
        place = 1
        for d, r in zip(digits, radices):
            total += d * place
            place *= int(r)
        return total

    # ------------------------------------------------------------------
    # Equality / hashing
    # ------------------------------------------------------------------
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Index):
            return self.components == other.components
        if isinstance(other, (tuple, list)):
            return len(other) == len(self.components) and all(
                a == b for a, b in zip(self.components, other)
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.components)

    # ------------------------------------------------------------------
    # Paired-swap total order
    # ------------------------------------------------------------------
    def _order_key(self, other: Any) -> tuple[tuple[int, ...], tuple[int, ...]]:
        o = other if isinstance(other, Index) else Index(other)
        if len(o) != len(self):
            raise TypeError(
                f"Cannot order indices of different rank: {self!r} vs {o!r}"
            )
        a = tuple(reversed(swap_pairs(self.components)))
        b = tuple(reversed(swap_pairs(o.components)))
        return a, b

    def __lt__(self, other: Any) -> bool:
        a, b = self._order_key(other)
        return a < b

    def __le__(self, other: Any) -> bool:
        a, b = self._order_key(other)
        return a <= b

    def __gt__(self, other: Any) -> bool:
        a, b = self._order_key(other)
        return a > b

    def __ge__(self, other: Any) -> bool:
        a, b = self._order_key(other)
        return a >= b


def as_index(index: Any) -> Index:
    """
    Coerce an int, a sequence of ints, or an `Index` into an `Index`.
    """
    if isinstance(index, Index):
        return index
    if isinstance(index, Integral):
        return Index((index,))
    return Index(index)
