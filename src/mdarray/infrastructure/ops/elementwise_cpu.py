"""
CPU vectorized elementwise kernels (NumPy backend).

This module is the vectorized-math backend consumed by the `MDArray`
elementwise operator layer. Every function works on **flat, shape-free**
buffers of a single numeric element kind and returns a freshly allocated
Python list of the same length (or a scalar for reductions).

Supported element kinds
-----------------------
- int32   (division truncates toward zero, division by zero raises)
- float32
- float64 (IEEE semantics for division by zero: inf / nan)

Design notes
------------
- Kernels never see or produce shape information; the caller re-wraps the
  returned buffer with its own shape.
- Inputs are any sequence NumPy can convert under the requested dtype.
- Outputs are converted back with `ndarray.tolist()` so the container keeps
  plain Python scalars in its storage.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

SUPPORTED_DTYPES = (np.dtype(np.int32), np.dtype(np.float32), np.dtype(np.float64))


def _as_buffer(a: Sequence[Any], dtype: np.dtype) -> np.ndarray:
    """
    Convert a flat sequence into a contiguous 1D ndarray of `dtype`.

    Raises
    ------
    TypeError
        If `dtype` is not one of the supported element kinds.
    """
    dt = np.dtype(dtype)
    if dt not in SUPPORTED_DTYPES:
        raise TypeError(f"elementwise kernels require int32/float32/float64, got dtype={dt}")
    return np.ascontiguousarray(np.asarray(a, dtype=dt).reshape(-1))


def _check_lengths(op: str, a: np.ndarray, b: np.ndarray) -> None:
    if a.shape[0] != b.shape[0]:
        raise ValueError(f"{op}: buffer length mismatch: {a.shape[0]} vs {b.shape[0]}")


def _is_int(dtype: np.dtype) -> bool:
    return np.issubdtype(np.dtype(dtype), np.integer)


def _truncating_divide(num: np.ndarray, den: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Integer division rounding toward zero."""
    if np.any(den == 0):
        raise ZeroDivisionError("integer division by zero")
    q = np.trunc(num.astype(np.float64) / den.astype(np.float64))
    return q.astype(dtype)


def add(a: Sequence[Any], b: Sequence[Any], dtype: np.dtype) -> list:
    """
    Elementwise sum of two equal-length buffers.

    Parameters
    ----------
    a, b : Sequence
        Flat buffers of the same length.
    dtype : np.dtype
        Element kind.

    Returns
    -------
    list
        `a[i] + b[i]` for every `i`.
    """
    x = _as_buffer(a, dtype)
    y = _as_buffer(b, dtype)
    _check_lengths("add", x, y)
    return (x + y).astype(dtype, copy=False).tolist()


def subtract(a: Sequence[Any], b: Sequence[Any], dtype: np.dtype) -> list:
    """Elementwise difference `a[i] - b[i]`."""
    x = _as_buffer(a, dtype)
    y = _as_buffer(b, dtype)
    _check_lengths("subtract", x, y)
    return (x - y).astype(dtype, copy=False).tolist()


def multiply(a: Sequence[Any], b: Sequence[Any], dtype: np.dtype) -> list:
    """Elementwise product `a[i] * b[i]`."""
    x = _as_buffer(a, dtype)
    y = _as_buffer(b, dtype)
    _check_lengths("multiply", x, y)
    return (x * y).astype(dtype, copy=False).tolist()


def divide(a: Sequence[Any], b: Sequence[Any], dtype: np.dtype) -> list:
    """
    Elementwise quotient `a[i] / b[i]`.

    Notes
    -----
    - int32 quotients are truncated toward zero; a zero divisor raises
      `ZeroDivisionError`.
    - Float kinds follow IEEE semantics (inf / nan) without warnings.
    """
    x = _as_buffer(a, dtype)
    y = _as_buffer(b, dtype)
    _check_lengths("divide", x, y)
    if _is_int(dtype):
        return _truncating_divide(x, y, dtype).tolist()
    with np.errstate(divide="ignore", invalid="ignore"):
        return (x / y).astype(dtype, copy=False).tolist()


def scale(a: Sequence[Any], s: Any, dtype: np.dtype) -> list:
    """Multiply every element of `a` by the scalar `s`."""
    x = _as_buffer(a, dtype)
    return (x * np.asarray(s, dtype=dtype)).astype(dtype, copy=False).tolist()


def scale_divide(a: Sequence[Any], s: Any, dtype: np.dtype) -> list:
    """Divide every element of `a` by the scalar `s`."""
    x = _as_buffer(a, dtype)
    y = np.full(x.shape, s, dtype=dtype)
    if _is_int(dtype):
        return _truncating_divide(x, y, dtype).tolist()
    with np.errstate(divide="ignore", invalid="ignore"):
        return (x / y).astype(dtype, copy=False).tolist()


def rscale_divide(s: Any, a: Sequence[Any], dtype: np.dtype) -> list:
    """Divide the scalar `s` by every element of `a`."""
    y = _as_buffer(a, dtype)
    x = np.full(y.shape, s, dtype=dtype)
    if _is_int(dtype):
        return _truncating_divide(x, y, dtype).tolist()
    with np.errstate(divide="ignore", invalid="ignore"):
        return (x / y).astype(dtype, copy=False).tolist()


def negate(a: Sequence[Any], dtype: np.dtype) -> list:
    """Additive inverse of every element."""
    return np.negative(_as_buffer(a, dtype)).tolist()


def fill(length: int, value: Any, dtype: np.dtype) -> list:
    """
    Return a buffer of `length` copies of `value` converted to `dtype`.
    """
    dt = np.dtype(dtype)
    if dt not in SUPPORTED_DTYPES:
        raise TypeError(f"fill requires int32/float32/float64, got dtype={dt}")
    return np.full((int(length),), value, dtype=dt).tolist()


def reduce_sum(a: Sequence[Any], dtype: np.dtype) -> Any:
    """Sum of all elements, as a Python scalar of the element kind."""
    x = _as_buffer(a, dtype)
    return np.sum(x, dtype=dtype).item()


def reduce_prod(a: Sequence[Any], dtype: np.dtype) -> Any:
    """Product of all elements (1 for an empty buffer)."""
    x = _as_buffer(a, dtype)
    return np.prod(x, dtype=dtype).item()


def convert(a: Sequence[Any], src: np.dtype, dst: np.dtype) -> list:
    """
    Convert a buffer between element kinds.

    Float to int32 conversion truncates toward zero. A `src` of None reads
    untyped Python numbers as float64.
    """
    x = _as_buffer(a, src if src is not None else np.float64)
    dt = np.dtype(dst)
    if dt not in SUPPORTED_DTYPES:
        raise TypeError(f"convert requires int32/float32/float64, got dtype={dt}")
    if _is_int(dt) and not _is_int(x.dtype):
        x = np.trunc(x)
    return x.astype(dt).tolist()


def _cast_dense(values: list, dt: np.dtype) -> list:
    x = np.asarray(values).reshape(-1)
    if _is_int(dt) and np.issubdtype(x.dtype, np.floating):
        x = np.trunc(x)
    return x.astype(dt).tolist()


def cast(a: Sequence[Any], dtype: np.dtype) -> list:
    """
    Store an untyped buffer as `dtype`.

    Floats stored as int32 are truncated toward zero. `None` entries mark
    elements without a value and are kept as they are.

    Examples
    --------
    >>> cast([1.5, -2.5, None], np.int32)
    [1, -2, None]
    """
    dt = np.dtype(dtype)
    if dt not in SUPPORTED_DTYPES:
        raise TypeError(f"cast requires int32/float32/float64, got dtype={dt}")
    values = list(a)
    missing = [v is None for v in values]
    if not any(missing):
        return _cast_dense(values, dt)
    dense = iter(_cast_dense([v for v in values if v is not None], dt))
    return [None if m else next(dense) for m in missing]
