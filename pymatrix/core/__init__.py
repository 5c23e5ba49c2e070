"""
Core infrastructure for pymatrix.

This module provides the shared abstractions used by the dense Matrix
type: the exception hierarchy, input validators and the element-type
policy.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    dtypes: Supported element types, defaults and tolerances
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    DTypeError,
    DTypeMismatchError,
)
from pymatrix.core.dtypes import (
    DEFAULT_DTYPE,
    DEFAULT_RTOL,
    DEFAULT_ATOL,
    SUPPORTED_KINDS,
    is_numeric_dtype,
    resolve_dtype,
)

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "DTypeError",
    "DTypeMismatchError",
    # Element types
    "DEFAULT_DTYPE",
    "DEFAULT_RTOL",
    "DEFAULT_ATOL",
    "SUPPORTED_KINDS",
    "is_numeric_dtype",
    "resolve_dtype",
]
