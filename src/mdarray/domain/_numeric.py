"""
Numeric element-kind capabilities.

An `MDArray` is generic over its element type. Operations that need to
start an accumulation (axis contraction, determinants, `null`/`identity`
factories, products) ask the array's `NumericKind` for the additive and
multiplicative identities instead of hard-coding `0`/`1`.

Three concrete kinds are registered, matching the element kinds the
vectorized backend supports: int32, float32 and float64. Arrays without a
dtype fall back to `GENERIC_KIND`, whose identities are the Python ints
`0` and `1`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

import numpy as np

DTypeLike = Union[str, type, np.dtype, None]


@dataclass(frozen=True)
class NumericKind:
    """
    Capability record for one numeric element kind.

    Attributes
    ----------
    name : str
        Human-readable kind name (e.g. "float32").
    dtype : Optional[np.dtype]
        NumPy dtype used by the vectorized backend, or None for the generic kind.
    additive_identity : Any
        Element `I` such that `I + e == e` for every element `e`.
    multiplicative_identity : Any
        Element `I` such that `I * e == e` for every element `e`.
    """

    name: str
    dtype: Optional[np.dtype]
    additive_identity: Any
    multiplicative_identity: Any


INT32 = NumericKind("int32", np.dtype(np.int32), 0, 1)
FLOAT32 = NumericKind("float32", np.dtype(np.float32), 0.0, 1.0)
FLOAT64 = NumericKind("float64", np.dtype(np.float64), 0.0, 1.0)
GENERIC_KIND = NumericKind("generic", None, 0, 1)

SUPPORTED_KINDS: dict[np.dtype, NumericKind] = {
    k.dtype: k for k in (INT32, FLOAT32, FLOAT64)
}


def normalize_dtype(dtype: DTypeLike) -> Optional[np.dtype]:
    """
    Normalize a user-facing dtype argument.

    Parameters
    ----------
    dtype : str, type, np.dtype or None
        Anything accepted by `numpy.dtype`, or None for a generic array.

    Returns
    -------
    Optional[np.dtype]
        The normalized dtype, or None.

    Raises
    ------
    TypeError
        If NumPy does not understand `dtype`.
    """
    if dtype is None:
        return None
    return np.dtype(dtype)


def kind_of(dtype: Optional[np.dtype]) -> NumericKind:
    """
    Return the numeric-kind capability for `dtype`.

    Unregistered dtypes (and None) map to `GENERIC_KIND`.
    """
    if dtype is None:
        return GENERIC_KIND
    return SUPPORTED_KINDS.get(np.dtype(dtype), GENERIC_KIND)
