"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every precondition violation surfaces as one of
these instead of aborting the process.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (counts, indices, fill values)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Input dimensions are incorrect or inconsistent.

    Raised when nested input is not 2-D or its rows have different lengths.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Two matrices have different shapes where equal shapes are required.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
        operation: Name of the operation that required equal shapes
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row index outside [0, rows).

    Also an IndexError, so code written against plain sequences keeps working.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound that was violated
        axis: 'row' or 'col'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str = 'row',
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class DTypeError(ValidationError):
    """
    Element type is not an integral or floating-point type.

    Attributes:
        dtype: The rejected dtype (or type), if known
    """

    def __init__(self, message: str, dtype: object | None = None):
        super().__init__(message)
        self.dtype = dtype


class DTypeMismatchError(DTypeError):
    """
    Operands of a binary operation have different element types.

    Attributes:
        left_dtype: Element type of the left operand
        right_dtype: Element type of the right operand
    """

    def __init__(
        self,
        message: str,
        left_dtype: object | None = None,
        right_dtype: object | None = None,
    ):
        super().__init__(message, dtype=right_dtype)
        self.left_dtype = left_dtype
        self.right_dtype = right_dtype
