"""
pymatrix: a minimal dense 2-D matrix value type for Python.

Generic over an integral or floating-point numpy element type, backed by a
row-major store. Supports construction, two-step element access (m[i][j]),
transpose, element-wise addition, equality and a plain-text dump.

Submodules:
    core: Exceptions, validators, element-type policy
    dense: The Matrix type
"""

__version__ = "0.1.0"

from pymatrix.dense import Matrix
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    DTypeError,
    DTypeMismatchError,
)

__all__ = [
    "__version__",
    "Matrix",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "DTypeError",
    "DTypeMismatchError",
]
