"""
Arithmetic mixin defining elementwise MDArray operators.

This module declares :class:`MDArrayMixinArithmetic`, an abstract mixin that
specifies the public API and semantics of elementwise arithmetic on arrays.

The mixin itself does not implement numerical kernels. Concrete
implementations for each numeric dtype are registered elsewhere via the
control-path dispatch mechanism, which keeps the container core free of
backend code.
"""

from typing import Union
from abc import ABC

from .....domain._mdarray import IMDArray

Number = Union[int, float]


class MDArrayMixinArithmetic(ABC):
    """
    Abstract mixin defining elementwise arithmetic operations for arrays.

    Notes
    -----
    - Methods without a body serve as interface declarations; the dtype
      control paths replace them at import time.
    - Operands must share shape and dtype exactly (no broadcasting).
    - Python scalars are lifted to arrays matching the receiver's shape and
      dtype before the operation, except where a dedicated scalar kernel
      exists (`*` and `/`).
    """

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self: IMDArray, other: Union["IMDArray", Number]) -> "IMDArray":
        """
        Elementwise addition.

        Parameters
        ----------
        other : Union[IMDArray, Number]
            Right-hand operand. Scalars are lifted to arrays matching this
            array's shape and dtype.

        Returns
        -------
        IMDArray
            Array containing ``self[i] + other[i]``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        DtypeMismatchError
            If the dtypes differ.
        DtypeNotSupportedError
            If the array's dtype has no vectorized backend.
        """
        ...

    def __radd__(self: IMDArray, other: Number) -> "IMDArray":
        """
        Right-hand addition to support ``scalar + MDArray``.
        """
        return self.__add__(other)

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self: IMDArray, other: Union["IMDArray", Number]) -> "IMDArray":
        """
        Elementwise subtraction ``self[i] - other[i]``.

        Same operand rules as :meth:`__add__`.
        """
        ...

    def __rsub__(self: IMDArray, other: Number) -> "IMDArray":
        """
        Right-hand subtraction to support ``scalar - MDArray``.

        The scalar is promoted to an array compatible with ``self`` and the
        call is delegated to :meth:`__sub__`.
        """
        other_a = self._as_array_like(other, self)
        return other_a.__sub__(self)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self: IMDArray, other: Union["IMDArray", Number]) -> "IMDArray":
        """
        Elementwise product, or scaling by a scalar.

        Parameters
        ----------
        other : Union[IMDArray, Number]
            An array of identical shape and dtype (elementwise product) or a
            Python scalar (every element is multiplied by it).

        Notes
        -----
        Use ``@`` (axis contraction) for the matrix product.
        """
        ...

    def __rmul__(self: IMDArray, other: Number) -> "IMDArray":
        """
        Right-hand multiplication to support ``scalar * MDArray``.
        """
        return self.__mul__(other)

    # ----------------------------
    # True division
    # ----------------------------
    def __truediv__(self: IMDArray, other: Union["IMDArray", Number]) -> "IMDArray":
        """
        Elementwise quotient, or division by a scalar.

        Notes
        -----
        - int32 quotients are truncated toward zero; a zero divisor raises
          `ZeroDivisionError`.
        - Float dtypes follow IEEE semantics (inf / nan).
        """
        ...

    def __rtruediv__(self: IMDArray, other: Number) -> "IMDArray":
        """
        Right-hand true division to support ``scalar / MDArray``: the scalar
        is divided by every element.
        """
        ...

    # ----------------------------
    # Negation
    # ----------------------------
    def __neg__(self: IMDArray) -> "IMDArray":
        """
        Additive inverse of every element.
        """
        ...
