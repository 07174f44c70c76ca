"""
Concrete multidimensional array container.

This module provides `MDArray`, a dense, generic, rank-agnostic array that
owns a flat row-major storage list and a shape. Element access goes through
the index translation engine; every structural operation (slicing,
transpose, contraction, determinants) is implemented in a mixin on top of
the container primitives defined here:

- `validate`, `element`, `set_element`
- `reshape` (in place, truncating or growing with a fill value)
- `simplify` (in place shape normalization)
- rank / category queries (`is_vector`, `is_matrix`, `is_square`, ...)

Design notes
------------
- Storage is a plain Python list, so a generic `MDArray` can hold any
  element type. A supported `dtype` (int32, float32, float64) fixes the
  element kind: every stored value is converted to it through the
  vectorized backend, and the dtype selects the backend control path for
  elementwise arithmetic.
- Derived arrays never share storage with their source.
- Mixins construct new arrays through `self.__class__` to avoid importing
  this module.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, Union

import numpy as np

from ...domain._errors import (
    DtypeMismatchError,
    GrowthWithoutFillError,
    IndexOutOfRangeError,
    InsufficientStorageError,
    ShapeMismatchError,
)
from ...domain._mdarray import IMDArray
from ...domain._numeric import DTypeLike, NumericKind, kind_of, normalize_dtype
from ..indexing import (
    Index,
    as_index,
    from_offset,
    is_square_shape,
    product_of_elements,
    simplify_shape,
    to_offset,
)
from ..ops import elementwise_cpu
from ._linalg import MDArrayLinalgMixin
from ._presentation import MDArrayPresentationMixin
from ._shape_and_indexing import MDArrayShapeAndIndexingMixin
from .mixins.arithmetic import MDArrayMixinArithmetic
from .mixins.memory import MDArrayMixinMemory
from .mixins.reduction import MDArrayMixinReduction

Number = Union[int, float]

_NO_FILL = object()


def _normalize_shape(shape: Iterable[Any]) -> tuple[int, ...]:
    """
    Validate and normalize a shape into a tuple of non-negative ints.

    Raises
    ------
    TypeError
        If a component is not an integer.
    ValueError
        If a component is negative.
    """
    out = []
    for s in shape:
        if isinstance(s, bool) or not isinstance(s, Integral):
            raise TypeError(f"shape components must be integers, got {s!r}")
        if s < 0:
            raise ValueError(f"shape components must be non-negative, got {tuple(shape)}")
        out.append(int(s))
    return tuple(out)


def _flatten_nested(data: Any) -> tuple[list, tuple[int, ...]]:
    """
    Flatten nested lists/tuples into a row-major buffer and infer the shape.

    Raises
    ------
    ShapeMismatchError
        If sibling sub-lists have different shapes.
    """
    if not isinstance(data, (list, tuple)):
        return [data], ()

    flat: list = []
    sub_shape: Optional[tuple[int, ...]] = None
    for item in data:
        item_flat, item_shape = _flatten_nested(item)
        if sub_shape is None:
            sub_shape = item_shape
        elif item_shape != sub_shape:
            raise ShapeMismatchError(sub_shape, item_shape, op="from_nested")
        flat.extend(item_flat)

    return flat, (len(data),) + (sub_shape or ())


class MDArray(
    MDArrayShapeAndIndexingMixin,
    MDArrayLinalgMixin,
    MDArrayPresentationMixin,
    MDArrayMixinArithmetic,
    MDArrayMixinMemory,
    MDArrayMixinReduction,
    IMDArray,
):
    """
    Dense multidimensional array with row-major storage.

    Parameters
    ----------
    shape : Sequence[int], optional
        Axis sizes. Omit (together with `storage`) to build an empty array
        with rank 0 and no storage.
    storage : Iterable, optional
        Flat row-major buffer. It must hold at least `prod(shape)` elements
        (1 for rank 0); extra trailing elements are dropped.
    dtype : str, type, np.dtype or None, optional
        Numeric element kind. For int32, float32 and float64 the storage is
        converted to that kind (floats stored as int32 are truncated toward
        zero). None (default) builds a generic array that supports every
        structural operation but no vectorized arithmetic.

    Raises
    ------
    InsufficientStorageError
        If `storage` holds fewer elements than the shape requires.

    Notes
    -----
    - `len(storage) == prod(shape)` holds after every mutating operation,
      except for the empty array (no shape, no storage).
    """

    def __init__(
        self,
        shape: Optional[Sequence[int]] = None,
        storage: Optional[Iterable[Any]] = None,
        *,
        dtype: DTypeLike = None,
    ) -> None:
        self._dtype: Optional[np.dtype] = normalize_dtype(dtype)

        if shape is None:
            if storage is not None:
                raise TypeError("storage requires a shape")
            self._shape: tuple[int, ...] = ()
            self._storage: list = []
            return

        self._shape = _normalize_shape(shape)
        expected = product_of_elements(self._shape)
        buf = list(storage) if storage is not None else []
        if len(buf) < expected:
            raise InsufficientStorageError(expected=expected, actual=len(buf))
        self._storage = self._coerce_storage(buf[:expected])

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def full(
        cls, shape: Sequence[int], value: Any, *, dtype: DTypeLike = None
    ) -> "MDArray":
        """
        Build an array of `shape` with every element set to `value`.
        """
        shape = _normalize_shape(shape)
        return cls(shape, [value] * product_of_elements(shape), dtype=dtype)

    @classmethod
    def from_nested(cls, data: Any, *, dtype: DTypeLike = None) -> "MDArray":
        """
        Build an array from nested lists, inferring the shape.

        Examples
        --------
        >>> MDArray.from_nested([[1, 2, 3], [4, 5, 6]]).shape
        (2, 3)
        """
        flat, shape = _flatten_nested(data)
        return cls(shape, flat, dtype=dtype)

    def copy(self) -> "MDArray":
        """Return an independent copy (new storage list, same shape and dtype)."""
        out = self.__class__(dtype=self._dtype)
        out._shape = self._shape
        out._storage = list(self._storage)
        return out

    def _new(self, shape: Sequence[int], storage: Iterable[Any]) -> "MDArray":
        """Build a new array of the same class and dtype."""
        return self.__class__(shape, storage, dtype=self._dtype)

    def _like(self, storage: Iterable[Any]) -> "MDArray":
        """Build a new array with this array's shape and dtype."""
        if self.is_empty and not self._storage:
            return self.__class__(dtype=self._dtype)
        return self._new(self._shape, storage)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def storage(self) -> list:
        return self._storage

    @property
    def dtype(self) -> Optional[np.dtype]:
        return self._dtype

    @property
    def kind(self) -> NumericKind:
        return kind_of(self._dtype)

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        """Number of stored elements."""
        return len(self._storage)

    @property
    def is_empty(self) -> bool:
        """True iff the rank is 0."""
        return self.rank == 0

    @property
    def is_vector(self) -> bool:
        return self.rank == 1

    @property
    def is_matrix(self) -> bool:
        return self.rank == 2

    @property
    def has_higher_order_representation(self) -> bool:
        """True iff the rank is greater than 2."""
        return self.rank > 2

    @property
    def is_square(self) -> bool:
        """
        True if every axis of the simplified shape has the same size.

        A shape of `(2, 2, 2, 1)` simplifies to `(2, 2, 2)` and is square.
        """
        return is_square_shape(self._shape)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def validate(self, index: Sequence[int]) -> bool:
        """
        Return True iff `index` has one component per axis and every
        component lies in `[0, shape[axis])`.
        """
        if len(index) != len(self._shape):
            return False
        return all(0 <= i < s for i, s in zip(index, self._shape))

    def storage_offset(self, index: Sequence[int]) -> int:
        """Translate a logical index to its storage offset."""
        return to_offset(index, self._shape)

    def index_for_offset(self, offset: int) -> Index:
        """Translate a storage offset to its logical index."""
        return from_offset(offset, self._shape)

    def element(self, index: Any) -> Any:
        """
        Return the element at `index`.

        Raises
        ------
        IndexOutOfRangeError
            If `index` is not valid for this array.
        """
        idx = as_index(index)
        if not self.validate(idx):
            raise IndexOutOfRangeError(tuple(idx), self._shape)
        return self._storage[to_offset(idx, self._shape)]

    def set_element(self, value: Any, index: Any) -> None:
        """
        Overwrite the element at `index`.

        Raises
        ------
        IndexOutOfRangeError
            If `index` is not valid for this array.
        """
        idx = as_index(index)
        if not self.validate(idx):
            raise IndexOutOfRangeError(tuple(idx), self._shape)
        self._storage[to_offset(idx, self._shape)] = self._coerce(value)

    def _get(self, index: Sequence[int]) -> Any:
        """Unchecked element read; `index` must be valid."""
        return self._storage[to_offset(index, self._shape)]

    def _put(self, value: Any, index: Sequence[int]) -> None:
        """Unchecked element write; `index` must be valid."""
        self._storage[to_offset(index, self._shape)] = value

    def _coerce_storage(self, values: list) -> list:
        """Convert `values` to this array's element kind; generic arrays keep them."""
        if self.kind.dtype is None:
            return values
        return elementwise_cpu.cast(values, self.kind.dtype)

    def _coerce(self, value: Any) -> Any:
        return self._coerce_storage([value])[0]

    # ------------------------------------------------------------------
    # Shape mutation
    # ------------------------------------------------------------------
    def reshape(self, shape: Sequence[int], fill: Any = _NO_FILL) -> None:
        """
        Reshape the array in place.

        Shrinking truncates the tail of the storage; growing appends `fill`
        as many times as needed.

        Parameters
        ----------
        shape : Sequence[int]
            New shape. An empty shape keeps a single element.
        fill : Any, optional
            Value used for new elements when storage must grow. Any value,
            None included, counts as a fill.

        Raises
        ------
        GrowthWithoutFillError
            If storage must grow and no `fill` is given. Shape and storage
            are left unchanged.
        """
        new_shape = _normalize_shape(shape)
        length = product_of_elements(new_shape)
        current = len(self._storage)

        if length > current:
            if fill is _NO_FILL:
                raise GrowthWithoutFillError(self._shape, new_shape)
            self._storage.extend([self._coerce(fill)] * (length - current))
        elif length < current:
            del self._storage[length:]

        self._shape = new_shape

    def simplify(self) -> None:
        """Replace the shape with its simplified form (storage is unchanged)."""
        self._shape = simplify_shape(self._shape)

    # ------------------------------------------------------------------
    # Collection protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over elements in canonical enumeration order."""
        for index in self.indices:
            yield self._get(index)

    def __eq__(self, other: Any) -> bool:
        """
        Structural equality: same shape and equal corresponding elements.
        """
        if not isinstance(other, MDArray):
            return NotImplemented
        return self._shape == other._shape and self._storage == other._storage

    __hash__ = None

    def map(self, fn: Callable[[Any], Any]) -> "MDArray":
        """Return a new array with `fn` applied to every stored element."""
        return self._like([fn(v) for v in self._storage])

    # ------------------------------------------------------------------
    # Elementwise-operator helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _binary_op_check(a: "MDArray", b: "MDArray", op: str) -> None:
        """
        Validate operands of a binary elementwise operation.

        Shapes must match exactly (no broadcasting) and element kinds must
        agree.

        Raises
        ------
        ShapeMismatchError
            If shapes differ.
        DtypeMismatchError
            If dtypes differ.
        """
        if a.shape != b.shape:
            raise ShapeMismatchError(a.shape, b.shape, op=op)
        if a.dtype != b.dtype:
            raise DtypeMismatchError(str(a.dtype), str(b.dtype))

    @staticmethod
    def _as_array_like(x: Union["MDArray", Number], like: "MDArray") -> "MDArray":
        """
        Convert an operand into an array compatible with `like`.

        Arrays are returned as-is; Python scalars are lifted to an array of
        `like`'s shape and dtype filled with the scalar.

        Raises
        ------
        TypeError
            If `x` is neither an `MDArray` nor a number.
        """
        if isinstance(x, MDArray):
            return x
        if isinstance(x, (int, float, np.number)):
            return like._like([x] * len(like.storage))
        raise TypeError(f"Unsupported operand type: {type(x)!r}")
