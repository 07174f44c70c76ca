"""
Dtype-specific implementations of MDArray division via control-path dispatch.

- `A / B`: elementwise quotient.
- `A / s`: every element divided by the scalar.
- `s / A`: the scalar divided by every element (`__rtruediv__`).

int32 quotients truncate toward zero and reject zero divisors; float dtypes
follow IEEE semantics.
"""

from typing import Union

import numpy as np

from ..._array_builder import array_control_path_manager
from ....ops import elementwise_cpu
from .....domain._mdarray import IMDArray

from ._base import MDArrayMixinArithmetic as MMA

Number = Union[int, float]


@array_control_path_manager(MMA, MMA.__truediv__, np.dtype(np.int32))
@array_control_path_manager(MMA, MMA.__truediv__, np.dtype(np.float32))
@array_control_path_manager(MMA, MMA.__truediv__, np.dtype(np.float64))
def array_div_numeric(self: IMDArray, other: Union["IMDArray", Number]) -> "IMDArray":
    """
    Elementwise or scalar division through the NumPy backend.
    """
    if isinstance(other, (int, float, np.number)):
        return self._like(
            elementwise_cpu.scale_divide(self.storage, other, self.dtype)
        )

    other_a = self._as_array_like(other, self)
    self._binary_op_check(self, other_a, "div")
    return self._like(elementwise_cpu.divide(self.storage, other_a.storage, self.dtype))


@array_control_path_manager(MMA, MMA.__rtruediv__, np.dtype(np.int32))
@array_control_path_manager(MMA, MMA.__rtruediv__, np.dtype(np.float32))
@array_control_path_manager(MMA, MMA.__rtruediv__, np.dtype(np.float64))
def array_rdiv_numeric(self: IMDArray, other: Number) -> "IMDArray":
    """
    Divide a scalar by every element through the NumPy backend.
    """
    if not isinstance(other, (int, float, np.number)):
        raise TypeError(f"Unsupported operand type: {type(other)!r}")
    return self._like(elementwise_cpu.rscale_divide(other, self.storage, self.dtype))
