"""
Dtype-specific implementations of MDArray negation via control-path dispatch.
"""

import numpy as np

from ..._array_builder import array_control_path_manager
from ....ops import elementwise_cpu
from .....domain._mdarray import IMDArray

from ._base import MDArrayMixinArithmetic as MMA


@array_control_path_manager(MMA, MMA.__neg__, np.dtype(np.int32))
@array_control_path_manager(MMA, MMA.__neg__, np.dtype(np.float32))
@array_control_path_manager(MMA, MMA.__neg__, np.dtype(np.float64))
def array_neg_numeric(self: IMDArray) -> "IMDArray":
    """Additive inverse of every element through the NumPy backend."""
    return self._like(elementwise_cpu.negate(self.storage, self.dtype))
