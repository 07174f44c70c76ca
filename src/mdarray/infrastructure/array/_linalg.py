"""
MDArray linear-algebra mixin: axis contraction, determinants, symmetry.

This module defines `MDArrayLinalgMixin`, which groups the algebraic
operations of the concrete `MDArray`:

- `contract` (generalized multiplication over one axis pair) and `@`
- `determinant2d` / `determinant` (batched over trailing axes)
- `symmetric` / `antisymmetric` over an axis pair
- the `null` and `identity` factories

Accumulations start from the numeric kind's additive / multiplicative
identity, so the routines work for every element type that supports `+`,
`-` and `*`.
"""

from __future__ import annotations

import warnings
from typing import Any, Optional, Sequence

from ...domain._errors import InvalidDimensionError
from ...domain._mdarray import IMDArray
from ...domain._numeric import DTypeLike, kind_of, normalize_dtype
from ..indexing import enumerate_indices, from_offset, product_of_elements


class MDArrayLinalgMixin:
    """
    Axis contraction, determinants and symmetry predicates for `MDArray`.

    Notes
    -----
    - New arrays are built through the host class (`A.__class__` /
      `self._new(...)`), never by importing `MDArray`.
    - Contraction of incompatible operands is not an error: it returns an
      empty array and emits a `RuntimeWarning`.
    """

    # ------------------------------------------------------------------
    # Axis contraction
    # ------------------------------------------------------------------
    @staticmethod
    def contractible(A: IMDArray, da: int, B: IMDArray, db: int) -> bool:
        """
        Return True iff `A` and `B` can be contracted over axes `da` / `db`.

        The operands must have the same rank, `A.shape[da]` must equal
        `B.shape[db]`, and every axis other than `da` and `db` must have the
        same size in both.
        """
        rank = A.rank
        if rank == 0 or rank != B.rank:
            return False
        if not (0 <= da < rank and 0 <= db < rank):
            return False
        if A.shape[da] != B.shape[db]:
            return False
        return all(
            A.shape[i] == B.shape[i] for i in range(rank) if i != da and i != db
        )

    @staticmethod
    def contract(A: IMDArray, da: int, B: IMDArray, db: int) -> IMDArray:
        """
        Generalized multiplication of `A` and `B` over the axis pair `da`/`db`.

        Parameters
        ----------
        A, B : MDArray
            Operands of equal rank.
        da : int
            Axis of `A` whose size must match `B.shape[db]`.
        db : int
            Axis of `B` whose size must match `A.shape[da]`.

        Returns
        -------
        MDArray
            `C` with `C.shape == A.shape` except `C.shape[da] = B.shape[db]`
            and `C.shape[db] = A.shape[da]`, where

                C[idx] = sum_j A[idx with db := j] * B[idx with da := j]

            for `j` in `range(A.shape[db])`. An empty array is returned (and
            a `RuntimeWarning` emitted) when the operands are not
            contractible.

        Raises
        ------
        IndexOutOfRangeError
            If `B` is shorter than `A.shape[db]` along axis `da`.

        Notes
        -----
        For rank 2, `contract(A, 0, B, 1)` is the ordinary matrix product
        of an `(m, n)` array with an `(n, m)` array: contractibility asks for
        `A.shape[0] == B.shape[1]`, so an `(m, n) @ (n, p)` product with
        `p != m` is rejected. The result is stored in `A`'s element kind;
        products are accumulated in Python precision and converted once.

        Examples
        --------
        >>> A = MDArray.from_nested([[1, 2, 3], [4, 5, 6]])
        >>> B = MDArray.from_nested([[7, 8], [9, 10], [11, 12]])
        >>> MDArray.contract(A, 0, B, 1).matrix()
        [[58, 64], [139, 154]]
        """
        if not MDArrayLinalgMixin.contractible(A, da, B, db):
            warnings.warn(
                f"Cannot contract shapes {tuple(A.shape)} (axis {da}) and "
                f"{tuple(B.shape)} (axis {db}); returning an empty array.",
                RuntimeWarning,
                stacklevel=2,
            )
            return A.__class__(dtype=A.dtype)

        c_shape = list(A.shape)
        c_shape[da] = B.shape[db]
        c_shape[db] = A.shape[da]

        zero = A.kind.additive_identity
        span = A.shape[db]
        storage = []
        for offset in range(product_of_elements(c_shape)):
            index = from_offset(offset, c_shape)
            acc = zero
            for j in range(span):
                acc = acc + A.element(index.with_component(db, j)) * B.element(
                    index.with_component(da, j)
                )
            storage.append(acc)

        return A.__class__(c_shape, storage, dtype=A.dtype)

    def __matmul__(self, other: Any) -> IMDArray:
        """
        Matrix-style product `self @ other`, i.e. `contract(self, 0, other, 1)`.

        Operands must satisfy `self.shape[0] == other.shape[1]`; for rank 2
        that means an `(m, n)` array times an `(n, m)` array.
        """
        if not isinstance(other, MDArrayLinalgMixin):
            return NotImplemented
        return self.contract(self, 0, other, 1)

    # ------------------------------------------------------------------
    # Determinants
    # ------------------------------------------------------------------
    @staticmethod
    def determinant2d(A: IMDArray) -> Optional[Any]:
        """
        Determinant of a square rank-2 array.

        A 2x2 array uses `ad - bc`. For `n > 2` the result is the sum of the
        `n` forward wrapped diagonal products minus the sum of the `n`
        reverse wrapped diagonal products; this equals the true determinant
        for `n == 3` (rule of Sarrus) only.

        Returns
        -------
        Optional[Any]
            The determinant, or None if `A` is not a square matrix of
            dimension at least 2. A typed array returns a value of its
            element kind.
        """
        if A.rank != 2 or not A.is_square:
            return None

        n = A.shape[0]
        if n == 2:
            return A._coerce(
                A._get((0, 0)) * A._get((1, 1)) - A._get((0, 1)) * A._get((1, 0))
            )
        if n < 2:
            return None

        kind = A.kind
        forward = kind.additive_identity
        reverse = kind.additive_identity
        for i in range(n):
            f = kind.multiplicative_identity
            r = kind.multiplicative_identity
            for j in range(n):
                f = f * A._get(((i + j) % n, j))
                r = r * A._get(((i - j) % n, j))
            forward = forward + f
            reverse = reverse + r
        return A._coerce(forward - reverse)

    def determinant(self) -> Optional[IMDArray]:
        """
        Determinant over the first two axes, batched over the others.

        Returns
        -------
        Optional[MDArray]
            - rank 2: an array of shape `(1,)` holding the determinant, or
              None if the receiver has none.
            - rank > 2: an array shaped like `shape[2:]` whose entries are the
              determinants of the `shape[0] x shape[1]` matrices at each
              batch coordinate (None where a matrix has no determinant).
            - rank < 2: None.
        """
        if self.rank < 2:
            return None

        if self.rank == 2:
            det = self.determinant2d(self)
            if det is None:
                return None
            return self._new((1,), [det])

        rows, cols = self.shape[0], self.shape[1]
        batch_shape = self.shape[2:]
        out = self._new(batch_shape, [None] * product_of_elements(batch_shape))
        if rows == 0 or cols == 0:
            return out
        for batch in enumerate_indices(batch_shape):
            lower = (0, 0) + tuple(batch)
            upper = (rows - 1, cols - 1) + tuple(batch)
            out._put(self.determinant2d(self.sub_array(lower, upper)), batch)
        return out

    # ------------------------------------------------------------------
    # Symmetry
    # ------------------------------------------------------------------
    def _check_axis_pair(self, op: str, dx: int, dy: int) -> None:
        for d in (dx, dy):
            if not 0 <= d < self.rank:
                raise InvalidDimensionError(op, d, self.rank)

    def _mirrored_pairs(self, dx: int, dy: int):
        """
        Yield `(value, mirrored_value)` for every element whose index with
        components `dx`/`dy` swapped is a different, valid index.
        """
        for offset, value in enumerate(self.storage):
            index = self.index_for_offset(offset)
            if index[dx] == index[dy]:
                continue
            mirrored = index.swapped(dx, dy)
            if self.validate(mirrored):
                yield value, self._get(mirrored)

    def symmetric(self, dx: int = 0, dy: int = 1) -> bool:
        """
        Return True iff `a[..i..j..] == a[..j..i..]` over the axes `dx`, `dy`.

        Mirrored indices outside the array are skipped.

        Raises
        ------
        InvalidDimensionError
            If `dx` or `dy` is not an axis of the receiver.
        """
        self._check_axis_pair("symmetric", dx, dy)
        return all(v == m for v, m in self._mirrored_pairs(dx, dy))

    def antisymmetric(self, dx: int = 0, dy: int = 1) -> bool:
        """
        Return True iff `a[..i..j..] == -a[..j..i..]` over the axes `dx`, `dy`.

        Mirrored indices outside the array are skipped, and so are elements
        whose index is unchanged by the swap.

        Raises
        ------
        InvalidDimensionError
            If `dx` or `dy` is not an axis of the receiver.
        """
        self._check_axis_pair("antisymmetric", dx, dy)
        return all(v == -m for v, m in self._mirrored_pairs(dx, dy))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def null(cls, shape: Sequence[int], *, dtype: DTypeLike = None) -> IMDArray:
        """
        Array of `shape` filled with the additive identity of `dtype`.
        """
        zero = kind_of(normalize_dtype(dtype)).additive_identity
        return cls.full(shape, zero, dtype=dtype)

    @classmethod
    def identity(
        cls,
        shape: Sequence[int],
        dx: int = 0,
        dy: int = 1,
        *,
        dtype: DTypeLike = None,
    ) -> Optional[IMDArray]:
        """
        Identity array over the axis pair `dx`, `dy`.

        Every element whose index satisfies `index[dx] == index[dy]` is the
        multiplicative identity; all others are the additive identity.

        Returns
        -------
        Optional[MDArray]
            The identity array, or None if `shape` is not square.

        Raises
        ------
        InvalidDimensionError
            If `dx` or `dy` is not an axis of `shape`.
        """
        rank = len(shape)
        for d in (dx, dy):
            if not 0 <= d < rank:
                raise InvalidDimensionError("identity", d, rank)

        out = cls.null(shape, dtype=dtype)
        if not out.is_square:
            return None

        one = out.kind.multiplicative_identity
        for index in out.indices:
            if index[dx] == index[dy]:
                out._put(one, index)
        return out
