"""
Dtype-specific implementations of MDArray subtraction via control-path dispatch.

Registered for int32, float32 and float64 arrays. The public operator
entrypoint is `MDArrayMixinArithmetic.__sub__`; `__rsub__` lifts the scalar
and delegates here.
"""

from typing import Union

import numpy as np

from ..._array_builder import array_control_path_manager
from ....ops import elementwise_cpu
from .....domain._mdarray import IMDArray

from ._base import MDArrayMixinArithmetic as MMA

Number = Union[int, float]


@array_control_path_manager(MMA, MMA.__sub__, np.dtype(np.int32))
@array_control_path_manager(MMA, MMA.__sub__, np.dtype(np.float32))
@array_control_path_manager(MMA, MMA.__sub__, np.dtype(np.float64))
def array_sub_numeric(self: IMDArray, other: Union["IMDArray", Number]) -> "IMDArray":
    """
    Elementwise subtraction through the NumPy backend.
    """
    other_a = self._as_array_like(other, self)
    self._binary_op_check(self, other_a, "sub")
    return self._like(
        elementwise_cpu.subtract(self.storage, other_a.storage, self.dtype)
    )
