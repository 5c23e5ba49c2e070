"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion of counts or indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import math
import numbers
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.dtypes import is_integral
from pymatrix.core.exceptions import (
    DimensionError,
    DTypeMismatchError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    ValidationError,
)


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def check_count(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer count (rows or cols).

    Args:
        value: Candidate count
        name: Parameter name for error messages

    Returns:
        The count as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if not _is_int(value):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return int(value)


def check_row_index(idx: Any, rows: int) -> int:
    """
    Verify idx addresses an existing row.

    Negative indices are rejected rather than counted from the end.

    Args:
        idx: Candidate row index
        rows: Number of rows in the matrix

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If idx is not an integer
        IndexOutOfRangeError: If idx is outside [0, rows)
    """
    if not _is_int(idx):
        raise ValidationError(
            f"row index: expected an integer, got {type(idx).__name__} {idx!r}"
        )
    if not 0 <= idx < rows:
        raise IndexOutOfRangeError(
            f"row index {idx} out of range for matrix with {rows} rows",
            index=int(idx),
            bound=rows,
            axis='row',
        )
    return int(idx)


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical (rows, cols).

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: shape mismatch, left is {left[0]}x{left[1]}, "
            f"right is {right[0]}x{right[1]}",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_same_dtype(left: np.dtype, right: np.dtype, operation: str) -> None:
    """
    Verify two operands hold the same element type.

    Raises:
        DTypeMismatchError: If the element types differ
    """
    if left != right:
        raise DTypeMismatchError(
            f"{operation}: element type mismatch, left is {left}, right is {right}",
            left_dtype=left,
            right_dtype=right,
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_representable(value: Any, dtype: np.dtype, name: str) -> Any:
    """
    Verify a scalar fits in the element type without loss.

    Integer types reject fractional, non-finite and out-of-range values.
    Floating types reject finite values beyond the type's range; NaN and
    Inf are allowed.

    Args:
        value: Scalar to check
        dtype: Target element type
        name: Parameter name for error messages

    Returns:
        value converted to dtype's scalar type

    Raises:
        ValidationError: If value is not a real number or does not fit
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )

    if is_integral(dtype):
        if not _is_int(value):
            if not math.isfinite(value) or not float(value).is_integer():
                raise ValidationError(
                    f"{name}: {value!r} is not representable as {dtype}"
                )
            value = int(value)
        info = np.iinfo(dtype)
        if not int(info.min) <= int(value) <= int(info.max):
            raise ValidationError(
                f"{name}: {value} outside range of {dtype} [{info.min}, {info.max}]"
            )
        return dtype.type(int(value))

    finfo = np.finfo(dtype)
    if _is_int(value):
        if abs(int(value)) > float(finfo.max):
            raise ValidationError(f"{name}: {value} outside range of {dtype}")
    elif math.isfinite(value) and abs(float(value)) > float(finfo.max):
        raise ValidationError(f"{name}: {value!r} outside range of {dtype}")
    return dtype.type(value)


def check_castable(array: NDArray[Any], dtype: np.dtype, name: str) -> NDArray[Any]:
    """
    Convert a numeric array to dtype, refusing any lossy conversion.

    Array counterpart of check_representable: fractional or non-finite
    values cannot become integers, and no value may fall outside the
    target type's range.

    Args:
        array: Numeric array (integral or floating kind)
        dtype: Target element type
        name: Parameter name for error messages

    Returns:
        A new array of the target dtype

    Raises:
        ValidationError: If any element does not fit in dtype
    """
    if array.dtype == dtype or array.size == 0:
        return array.astype(dtype, copy=True)

    if is_integral(dtype):
        if not is_integral(array.dtype):
            if not np.all(np.isfinite(array)):
                raise ValidationError(f"{name}: non-finite values cannot be stored as {dtype}")
            if not np.all(array == np.floor(array)):
                raise ValidationError(f"{name}: fractional values cannot be stored as {dtype}")
        info = np.iinfo(dtype)
        lo, hi = array.min().item(), array.max().item()
        if lo < int(info.min) or hi > int(info.max):
            raise ValidationError(
                f"{name}: values in [{lo}, {hi}] outside range of {dtype} [{info.min}, {info.max}]"
            )
    else:
        finfo = np.finfo(dtype)
        finite = array[np.isfinite(array)] if not is_integral(array.dtype) else array
        if finite.size and max(abs(finite.min().item()), abs(finite.max().item())) > float(finfo.max):
            raise ValidationError(f"{name}: values outside range of {dtype}")

    return array.astype(dtype)
