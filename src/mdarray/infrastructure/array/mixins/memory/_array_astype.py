"""
MDArray dtype conversion implementations.

Numeric arrays convert through the NumPy backend. Generic arrays (dtype None)
holding plain Python numbers are read as float64 first, so they can be
promoted to a numeric dtype after construction from nested lists.
"""

import numpy as np

from ..._array_builder import array_control_path_manager
from ....ops import elementwise_cpu
from .....domain._mdarray import IMDArray
from .....domain._numeric import DTypeLike, normalize_dtype

from ._base import MDArrayMixinMemory as MMM


@array_control_path_manager(MMM, MMM.astype, np.dtype(np.int32))
@array_control_path_manager(MMM, MMM.astype, np.dtype(np.float32))
@array_control_path_manager(MMM, MMM.astype, np.dtype(np.float64))
@array_control_path_manager(MMM, MMM.astype, None)
def array_astype(self: IMDArray, dtype: DTypeLike) -> "IMDArray":
    """
    Convert the array to `dtype` through the NumPy backend.

    Raises
    ------
    TypeError
        If `dtype` is None or not one of int32 / float32 / float64.
    """
    dst = normalize_dtype(dtype)
    if dst is None:
        raise TypeError("astype requires a numeric dtype")

    out = self.__class__(dtype=dst)
    out._shape = self.shape
    out._storage = elementwise_cpu.convert(self.storage, self.dtype, dst)
    return out
