"""
Memory mixin defining buffer-level MDArray operations.
"""

from typing import Any
from abc import ABC

from .....domain._mdarray import IMDArray
from .....domain._numeric import DTypeLike


class MDArrayMixinMemory(ABC):
    """
    Abstract mixin declaring in-place fills and dtype conversion.

    Notes
    -----
    - `fill` and `astype` are dispatched on the array's dtype.
    - `zero` is expressed in terms of `fill`.
    """

    def fill(self: IMDArray, value: Any) -> None:
        """
        Overwrite every element with `value`, converted to the array's dtype.

        Parameters
        ----------
        value : Any
            Scalar written into every element.

        Notes
        -----
        This operation mutates the array in place and returns None.
        """
        ...

    def zero(self: IMDArray) -> None:
        """Overwrite every element with the dtype's additive identity."""
        self.fill(self.kind.additive_identity)

    def astype(self: IMDArray, dtype: DTypeLike) -> "IMDArray":
        """
        Return a copy converted to another numeric dtype.

        Parameters
        ----------
        dtype : str, type or np.dtype
            Target dtype: int32, float32 or float64.

        Returns
        -------
        IMDArray
            New array with the same shape. Float to int32 conversion truncates
            toward zero.
        """
        ...
