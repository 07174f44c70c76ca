"""
Multidimensional array interface definitions.

This module defines the domain-level interface for dense multidimensional
arrays using structural typing. The mixins that make up the concrete
`MDArray` type their `self` against this protocol so that each mixin can be
read (and tested) without importing the concrete class.

Notes
-----
The protocol mirrors the container primitives (shape, storage, index
validation and element access). Structural operations (slicing, transpose,
contraction) are expressed purely in terms of these primitives.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from ._numeric import NumericKind


@runtime_checkable
class IMDArray(Protocol):
    """
    Dense multidimensional array interface.

    An `IMDArray` owns a flat, row-major storage list and a shape. Elements
    are addressed by logical indices (one component per axis), which are
    translated to storage offsets by the index engine.
    """

    # ---------------------------------------------------------------------
    # Core identity
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """Sizes of each logical axis."""
        ...

    @property
    def storage(self) -> list[Any]:
        """Flat, row-major element buffer."""
        ...

    @property
    def dtype(self) -> Optional[np.dtype]:
        """Numeric element kind, or None for a generic array."""
        ...

    @property
    def kind(self) -> NumericKind:
        """Numeric capability record (identities) for this array's dtype."""
        ...

    @property
    def rank(self) -> int:
        """Number of axes."""
        ...

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def validate(self, index: Sequence[int]) -> bool:
        """
        Return True iff `index` addresses an element of this array.

        Parameters
        ----------
        index : Sequence[int]
            Candidate logical index.

        Returns
        -------
        bool
            True if the index has one in-range component per axis.
        """
        ...

    def element(self, index: Sequence[int]) -> Any:
        """
        Return the element at `index`.

        Raises
        ------
        IndexOutOfRangeError
            If `index` is not valid for this array.
        """
        ...

    def set_element(self, value: Any, index: Sequence[int]) -> None:
        """
        Overwrite the element at `index` with `value`.

        Raises
        ------
        IndexOutOfRangeError
            If `index` is not valid for this array.
        """
        ...

    def reshape(self, shape: Sequence[int], fill: Any = ...) -> None:
        """
        Reshape the array in place, truncating or growing storage.

        Raises
        ------
        GrowthWithoutFillError
            If the new shape needs more storage and no `fill` is given.
        """
        ...

    def copy(self) -> "IMDArray":
        """Return an independent copy with its own storage."""
        ...

    def __iter__(self) -> Iterator[Any]:
        """Iterate over elements in canonical enumeration order."""
        ...
