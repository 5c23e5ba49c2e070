"""
Element-type policy and numeric constants for pymatrix.

This module is the SINGLE SOURCE OF TRUTH for which element types a Matrix
may hold. A Matrix is generic over N, where N is an integral or
floating-point numpy dtype. Everything else (bool, complex, object,
strings, datetimes) is rejected at construction.

Usage:
    from pymatrix.core.dtypes import resolve_dtype, DEFAULT_DTYPE

    dtype = resolve_dtype(None, init=4)      # platform integer
    dtype = resolve_dtype('float32')         # float32
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pymatrix.core.exceptions import DTypeError


# Element type used when neither dtype nor an init value is given
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# numpy dtype.kind codes: signed int, unsigned int, floating point
KIND_SIGNED = 'i'
KIND_UNSIGNED = 'u'
KIND_FLOATING = 'f'

SUPPORTED_KINDS = frozenset({
    KIND_SIGNED,
    KIND_UNSIGNED,
    KIND_FLOATING,
})

# Default tolerances for allclose() (relative / absolute)
DEFAULT_RTOL: float = 1e-12
DEFAULT_ATOL: float = 1e-14


def is_numeric_dtype(dtype: Any) -> bool:
    """
    Check whether dtype is an integral or floating-point type.

    Unknown or unparseable dtypes return False, never raise.
    """
    try:
        dt = np.dtype(dtype)
    except (TypeError, ValueError):
        return False
    return dt.kind in SUPPORTED_KINDS


def is_integral(dtype: np.dtype) -> bool:
    """Whether dtype is a signed or unsigned integer type."""
    return dtype.kind in (KIND_SIGNED, KIND_UNSIGNED)


def check_dtype(dtype: Any, name: str = 'dtype') -> np.dtype:
    """
    Normalize dtype and verify it is supported.

    Args:
        dtype: Anything np.dtype() accepts
        name: Parameter name for error messages

    Returns:
        The normalized np.dtype

    Raises:
        DTypeError: If dtype cannot be parsed or is not integral/floating
    """
    try:
        dt = np.dtype(dtype)
    except (TypeError, ValueError) as e:
        raise DTypeError(f"{name}: not a valid dtype: {dtype!r}", dtype=dtype) from e

    if dt.kind not in SUPPORTED_KINDS:
        raise DTypeError(
            f"{name}: element type must be integral or floating point, got {dt}",
            dtype=dt,
        )
    return dt


def resolve_dtype(dtype: Any = None, init: Any = None) -> np.dtype:
    """
    Pick the element type for a new Matrix.

    Explicit dtype wins. Otherwise the type of init decides (numpy's own
    inference: int -> platform integer, float -> float64). With neither,
    DEFAULT_DTYPE.

    Raises:
        DTypeError: If the chosen type is not integral or floating point
    """
    if dtype is not None:
        return check_dtype(dtype)
    if init is None:
        return DEFAULT_DTYPE
    if isinstance(init, (bool, np.bool_)):
        raise DTypeError(
            "init: bool is not a numeric element type, pass dtype= explicitly",
            dtype=np.dtype(np.bool_),
        )
    try:
        inferred = np.asarray(init).dtype
    except (TypeError, ValueError, OverflowError) as e:
        raise DTypeError(f"init: cannot infer element type from {init!r}") from e
    return check_dtype(inferred, name='init')
