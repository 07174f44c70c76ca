"""
MDArray indexing, slicing and structural ops mixin.

This module defines `MDArrayShapeAndIndexingMixin`, which implements the
iteration protocol surface, subscripting, the slice engine and transpose on
top of the container primitives of the concrete `MDArray`.

Design notes
------------
- To avoid circular imports, the implementation does not import `MDArray`
  directly; new arrays are constructed via `self._new(...)`, which goes
  through `self.__class__`.
- Every derived array owns fresh storage; nothing is a view.
- The slice engine walks the source region and a zero-based destination
  region in lock-step using the canonical successor, so source and
  destination shapes may differ (collapsed axes).
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from ...domain._errors import (
    IndexOutOfRangeError,
    InvalidDimensionError,
    ShapeMismatchError,
)
from ...domain._mdarray import IMDArray
from ..indexing import (
    Index,
    as_index,
    end_index,
    enumerate_indices,
    enumerate_region,
    product_of_elements,
    start_index,
    successor,
)


class MDArrayShapeAndIndexingMixin(IMDArray):
    """
    Indexing and structural operations for the concrete `MDArray`.

    Notes
    -----
    - Methods assume the host class provides:
        - `.shape`, `.storage`, `.rank`, `.validate(...)`
        - `.element(...)`, `.set_element(...)`
        - unchecked `._get(...)` / `._put(...)` fast paths
        - `._new(shape, storage)`
    """

    # ------------------------------------------------------------------
    # Iteration protocol surface
    # ------------------------------------------------------------------
    @property
    def start_index(self) -> Index:
        """Index of the first element (all zeros)."""
        return start_index(self.shape)

    @property
    def end_index(self) -> Index:
        """Index of the last element (`shape[i] - 1` on every axis)."""
        return end_index(self.shape)

    @property
    def indices(self) -> Iterator[Index]:
        """
        Every valid index in canonical enumeration order.

        A fresh generator is returned on each access. The empty array has
        no indices.
        """
        if not self.storage:
            return iter(())
        return enumerate_indices(self.shape)

    def index_after(self, index: Sequence[int]) -> Index:
        """
        Return the successor of `index` in canonical order.

        The successor of `end_index` wraps around to `start_index`.
        """
        return successor(as_index(index), self.end_index)

    # ------------------------------------------------------------------
    # Subscripting
    # ------------------------------------------------------------------
    @staticmethod
    def _slice_bounds(key: slice) -> tuple[Index, Index]:
        if key.step is not None or key.start is None or key.stop is None:
            raise TypeError(
                "MDArray slices take inclusive index bounds: a[lower:upper]"
            )
        return as_index(key.start), as_index(key.stop)

    def __getitem__(self, key: Any) -> Any:
        """
        Read one element, or extract an inclusive sub-array.

        Parameters
        ----------
        key : int, tuple[int, ...], Index or slice
            - ``a[i, j, ...]`` / ``a[Index(...)]`` returns one element.
            - ``a[lo:hi]`` with index bounds returns a new `MDArray` holding
              the hyper-rectangle `lo .. hi` (both inclusive).

        Raises
        ------
        IndexOutOfRangeError
            If the index or the bounds fall outside the array.
        TypeError
            If an index component is not an integer.
        """
        if isinstance(key, slice):
            lo, hi = self._slice_bounds(key)
            return self.sub_array(lo, hi)
        return self.element(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Overwrite one element, or an inclusive sub-array.

        For ``a[lo:hi] = b``, only the storage of `b` is used: it is
        reinterpreted under the region's shape and must hold exactly as many
        elements as the region.
        """
        if isinstance(key, slice):
            lo, hi = self._slice_bounds(key)
            self.set_sub_array(value, lo, hi)
            return
        self.set_element(value, key)

    # ------------------------------------------------------------------
    # Slice engine
    # ------------------------------------------------------------------
    def _check_region(self, lower: Index, upper: Index) -> None:
        shape = self.shape
        ok = len(lower) == len(shape) and len(upper) == len(shape)
        if ok:
            ok = all(0 <= lo <= hi < s for lo, hi, s in zip(lower, upper, shape))
        if not ok:
            raise IndexOutOfRangeError((tuple(lower), tuple(upper)), shape)

    @staticmethod
    def _region_shapes(
        lower: Index, upper: Index
    ) -> tuple[tuple[int, ...], tuple[int, ...]]:
        """
        Return `(sub_shape, new_shape)` for an inclusive region.

        `sub_shape` keeps one axis per receiver axis; `new_shape` drops the
        axes whose bounds coincide.
        """
        sub_shape = tuple(hi - lo + 1 for lo, hi in zip(lower, upper))
        new_shape = tuple(s for s in sub_shape if s > 1)
        return sub_shape, new_shape

    def sub_array(self, lower: Sequence[int], upper: Sequence[int]) -> "IMDArray":
        """
        Extract the inclusive hyper-rectangle `lower .. upper`.

        Parameters
        ----------
        lower, upper : Sequence[int]
            Inclusive bounds, one component per axis, with
            `0 <= lower[i] <= upper[i] < shape[i]`.

        Returns
        -------
        MDArray
            New array with fresh storage. Axes where `lower[i] == upper[i]`
            are dropped from its shape.

        Raises
        ------
        IndexOutOfRangeError
            If the bounds have the wrong rank or leave the array.

        Examples
        --------
        >>> a = MDArray.from_nested([[1, 2, 3], [4, 5, 6]])
        >>> a.sub_array((0, 1), (1, 2)).vector() is None
        True
        >>> a[(1, 0):(1, 2)].vector()
        [4, 5, 6]
        """
        lower, upper = as_index(lower), as_index(upper)
        self._check_region(lower, upper)
        sub_shape, new_shape = self._region_shapes(lower, upper)

        out = self._new(sub_shape, [None] * product_of_elements(sub_shape))
        for src, dst in zip(
            enumerate_region(lower, upper), enumerate_indices(sub_shape)
        ):
            out._put(self._get(src), dst)

        out.reshape(new_shape)
        return out

    def set_sub_array(
        self, values: "IMDArray", lower: Sequence[int], upper: Sequence[int]
    ) -> None:
        """
        Overwrite the inclusive hyper-rectangle `lower .. upper` in place.

        The storage of `values` is reinterpreted under the region's shape;
        its own shape is ignored.

        Raises
        ------
        IndexOutOfRangeError
            If the bounds have the wrong rank or leave the array.
        ShapeMismatchError
            If `values` does not hold exactly as many elements as the region.
        """
        lower, upper = as_index(lower), as_index(upper)
        self._check_region(lower, upper)
        sub_shape, new_shape = self._region_shapes(lower, upper)

        buf = list(values.storage)
        if len(buf) != product_of_elements(sub_shape):
            raise ShapeMismatchError(new_shape, values.shape, op="set_sub_array")

        src = self._new(sub_shape, buf)
        for dst, idx in zip(
            enumerate_region(lower, upper), enumerate_indices(sub_shape)
        ):
            self._put(src._get(idx), dst)

    # ------------------------------------------------------------------
    # Transpose
    # ------------------------------------------------------------------
    def transpose(self, dx: int = 0, dy: int = 1) -> "IMDArray":
        """
        Return a new array with axes `dx` and `dy` exchanged.

        The element at `idx` of the result equals the receiver's element at
        `idx` with components `dx` and `dy` swapped.

        Raises
        ------
        InvalidDimensionError
            If `dx` or `dy` is not an axis of the receiver.
        """
        for d in (dx, dy):
            if not 0 <= d < self.rank:
                raise InvalidDimensionError("transpose", d, self.rank)

        shape = list(self.shape)
        shape[dx], shape[dy] = shape[dy], shape[dx]

        out = self._new(shape, [None] * len(self.storage))
        for offset, value in enumerate(self.storage):
            index = self.index_for_offset(offset)
            out._put(value, index.swapped(dx, dy))
        return out

    @property
    def T(self) -> "IMDArray":
        """Transpose of the first two axes."""
        return self.transpose(0, 1)
