"""
Dtype-specific implementations of MDArray addition via control-path dispatch.

This module registers the vectorized implementation of elementwise addition
for the numeric dtypes supported by the CPU backend:
- int32
- float32
- float64

The public operator entrypoint is `MDArrayMixinArithmetic.__add__`.
"""

from typing import Union

import numpy as np

from ..._array_builder import array_control_path_manager
from ....ops import elementwise_cpu
from .....domain._mdarray import IMDArray

from ._base import MDArrayMixinArithmetic as MMA

Number = Union[int, float]
"""Scalar types accepted by MDArray arithmetic operators."""


@array_control_path_manager(MMA, MMA.__add__, np.dtype(np.int32))
@array_control_path_manager(MMA, MMA.__add__, np.dtype(np.float32))
@array_control_path_manager(MMA, MMA.__add__, np.dtype(np.float64))
def array_add_numeric(self: IMDArray, other: Union["IMDArray", Number]) -> "IMDArray":
    """
    Elementwise addition through the NumPy backend.

    Scalars are lifted to arrays of the receiver's shape and dtype; shapes and
    dtypes must then match exactly.
    """
    other_a = self._as_array_like(other, self)
    self._binary_op_check(self, other_a, "add")
    return self._like(elementwise_cpu.add(self.storage, other_a.storage, self.dtype))
