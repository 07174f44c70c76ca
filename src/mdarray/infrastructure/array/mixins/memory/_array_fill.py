"""
MDArray fill implementations for the numeric dtypes.

`fill` mutates the receiver's storage in place with a buffer produced by the
NumPy backend, so the stored value is converted to the array's dtype (e.g.
`2.7` becomes `2` in an int32 array).
"""

from typing import Any

import numpy as np

from ..._array_builder import array_control_path_manager
from ....ops import elementwise_cpu
from .....domain._mdarray import IMDArray

from ._base import MDArrayMixinMemory as MMM


@array_control_path_manager(MMM, MMM.fill, np.dtype(np.int32))
@array_control_path_manager(MMM, MMM.fill, np.dtype(np.float32))
@array_control_path_manager(MMM, MMM.fill, np.dtype(np.float64))
def array_fill_numeric(self: IMDArray, value: Any) -> None:
    """
    Fill a numeric array in place with a scalar value.
    """
    self.storage[:] = elementwise_cpu.fill(len(self.storage), value, self.dtype)
