"""
Numeric implementations of `MDArray.sum`.
"""

from typing import Any

import numpy as np

from ..._array_builder import array_control_path_manager
from ....ops import elementwise_cpu
from .....domain._mdarray import IMDArray

from ._base import MDArrayMixinReduction as MMR


@array_control_path_manager(MMR, MMR.sum, np.dtype(np.int32))
@array_control_path_manager(MMR, MMR.sum, np.dtype(np.float32))
@array_control_path_manager(MMR, MMR.sum, np.dtype(np.float64))
def array_sum_numeric(self: IMDArray) -> Any:
    return elementwise_cpu.reduce_sum(self.storage, self.dtype)
