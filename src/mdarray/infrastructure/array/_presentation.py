"""
Nested-list presentation of `MDArray`.

Arrays render as plain Python lists depending on their rank:

- rank 1: `vector()`      -> ``[a, b, c]``
- rank 2: `matrix()`      -> ``[[a, b], [c, d]]``
- rank>2: `multi_array()` -> nested lists built by folding the canonical
  enumeration two axes at a time

Each accessor returns None when the rank does not match, so callers can
check with `is_vector` / `is_matrix` / `has_higher_order_representation`.
"""

from __future__ import annotations

from typing import Any, Optional


class MDArrayPresentationMixin:
    """
    Conversions of an `MDArray` to nested Python lists, plus `repr`.
    """

    def vector(self) -> Optional[list]:
        """Return the elements as a flat list, or None unless rank is 1."""
        if not self.is_vector:
            return None
        return list(self.storage)

    def matrix(self) -> Optional[list[list]]:
        """Return the rows as nested lists, or None unless rank is 2."""
        if not self.is_matrix:
            return None
        rows, cols = self.shape
        return [[self._get((i, j)) for j in range(cols)] for i in range(rows)]

    def multi_array(self) -> Optional[list]:
        """
        Return the elements as nested lists, or None unless rank > 2.

        The elements are listed in canonical enumeration order and then
        chunked once per axis. Axes are consumed in paired-swap order (axis
        1, axis 0, axis 3, axis 2, ...), so the two innermost levels are the
        matrix over axes 0 and 1 and the outermost level runs along the axis
        consumed last (axis 2 for ranks 3 and 4, axis 4 for rank 5, ...).

        The last chunking step leaves a single list wrapping everything.
        That wrapper is dropped, so the result has one nesting level per
        axis and `len(result)` is the size of the axis consumed last.

        Examples
        --------
        >>> MDArray((2, 2, 2), range(8)).multi_array()
        [[[0, 2], [4, 6]], [[1, 3], [5, 7]]]
        >>> MDArray((1, 1, 1), [7]).multi_array()
        [[[7]]]
        """
        if not self.has_higher_order_representation:
            return None
        if not self.storage:
            return []

        shape = self.shape
        rank = len(shape)
        nested: list[Any] = [self._get(index) for index in self.indices]

        for j in range(rank):
            if j % 2 == 0 and j + 1 < rank:
                axis = j + 1
            elif j % 2 == 1:
                axis = j - 1
            else:
                axis = j
            s = shape[axis]
            nested = [nested[i * s : i * s + s] for i in range(len(nested) // s)]

        return nested[0] if nested else []

    def _category(self) -> str:
        if self.is_empty:
            return "empty"
        if self.is_vector:
            return "vector"
        if self.is_matrix:
            return "matrix"
        return "multi"

    def _nested(self) -> Any:
        if self.is_empty:
            return list(self.storage)
        if self.is_vector:
            return self.vector()
        if self.is_matrix:
            return self.matrix()
        return self.multi_array()

    def __repr__(self) -> str:
        return f"MDArray {tuple(self.shape)} ({self._category()}): {self._nested()}"

    __str__ = __repr__
