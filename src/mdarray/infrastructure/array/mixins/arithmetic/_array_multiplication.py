"""
Dtype-specific implementations of MDArray multiplication via control-path
dispatch.

`A * B` multiplies elementwise; `A * s` (and `s * A`) scales every element
with a dedicated scalar kernel instead of lifting `s` to a full array.
"""

from typing import Union

import numpy as np

from ..._array_builder import array_control_path_manager
from ....ops import elementwise_cpu
from .....domain._mdarray import IMDArray

from ._base import MDArrayMixinArithmetic as MMA

Number = Union[int, float]


@array_control_path_manager(MMA, MMA.__mul__, np.dtype(np.int32))
@array_control_path_manager(MMA, MMA.__mul__, np.dtype(np.float32))
@array_control_path_manager(MMA, MMA.__mul__, np.dtype(np.float64))
def array_mul_numeric(self: IMDArray, other: Union["IMDArray", Number]) -> "IMDArray":
    """
    Elementwise product or scalar scaling through the NumPy backend.
    """
    if isinstance(other, (int, float, np.number)):
        return self._like(elementwise_cpu.scale(self.storage, other, self.dtype))

    other_a = self._as_array_like(other, self)
    self._binary_op_check(self, other_a, "mul")
    return self._like(
        elementwise_cpu.multiply(self.storage, other_a.storage, self.dtype)
    )
