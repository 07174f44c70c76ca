"""
MDArray control-path manager for element-kind specific dispatch.

This module defines the shared control-path manager used to register and
resolve dtype-specific implementations of `MDArray` methods.

The manager specializes the generic `create_path_builder` utility with the
state attribute name ``"dtype"``. Method dispatch is therefore performed
on the runtime value of ``self.dtype``:

    @array_control_path_manager(MDArrayMixin, MDArrayMixin.op, np.dtype("int32"))
    @array_control_path_manager(MDArrayMixin, MDArrayMixin.op, np.dtype("float32"))
    def op_numeric(self, ...): ...

Calling ``MDArray.op(...)`` on an array whose dtype has no registered path
(including generic arrays with ``dtype=None``) raises
`DtypeNotSupportedError`.
"""

from typing import Any, Callable, Hashable, Type

from ...domain._errors import DtypeNotSupportedError
from ...domain.utils._control_path import create_path_builder

_path_builder = create_path_builder("dtype")


def _trap_unsupported_dtype(method: Callable, dtype: Any) -> None:
    op = method.__name__.strip("_")
    raise DtypeNotSupportedError(op=op, dtype=str(dtype))


def array_control_path_manager(
    cls: Type, method: Callable, dtype: Hashable
) -> Callable[[Callable], Callable]:
    """
    Register a control path of `cls.method` for arrays of element kind `dtype`.
    """
    return _path_builder(cls, method, dtype, _trap_unsupported_dtype)
