"""
Tests for the element-type policy.

Validates:
    - Integral and floating dtypes are accepted, everything else rejected
    - resolve_dtype precedence: explicit dtype, then init, then default
    - Unknown dtypes never raise from is_numeric_dtype
"""

import numpy as np
import pytest

from pymatrix.core.dtypes import (
    DEFAULT_DTYPE,
    SUPPORTED_KINDS,
    check_dtype,
    is_integral,
    is_numeric_dtype,
    resolve_dtype,
)
from pymatrix.core.exceptions import DTypeError, ValidationError


class TestIsNumericDtype:

    @pytest.mark.parametrize("dtype", [
        np.int8, np.int16, np.int32, np.int64,
        np.uint8, np.uint64,
        np.float16, np.float32, np.float64,
        int, float, "int32", "f8",
    ])
    def test_accepted(self, dtype):
        assert is_numeric_dtype(dtype)

    @pytest.mark.parametrize("dtype", [
        bool, np.bool_, complex, np.complex128, object, str, "U4", "datetime64[s]",
    ])
    def test_rejected(self, dtype):
        assert not is_numeric_dtype(dtype)

    def test_garbage_returns_false(self):
        assert not is_numeric_dtype("not-a-dtype")

    def test_supported_kinds(self):
        assert SUPPORTED_KINDS == frozenset({"i", "u", "f"})


class TestCheckDtype:

    def test_normalizes(self):
        assert check_dtype("float32") == np.dtype(np.float32)

    def test_bool_rejected(self):
        with pytest.raises(DTypeError, match="integral or floating") as exc_info:
            check_dtype(bool)
        assert exc_info.value.dtype == np.dtype(bool)

    def test_garbage_rejected(self):
        with pytest.raises(DTypeError, match="not a valid dtype"):
            check_dtype("not-a-dtype")

    def test_dtype_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            check_dtype(complex)


class TestIsIntegral:

    def test_signed_and_unsigned(self):
        assert is_integral(np.dtype(np.int16))
        assert is_integral(np.dtype(np.uint32))

    def test_float_is_not(self):
        assert not is_integral(np.dtype(np.float64))


class TestResolveDtype:

    def test_default(self):
        assert resolve_dtype() == DEFAULT_DTYPE == np.dtype(np.float64)

    def test_explicit_wins_over_init(self):
        assert resolve_dtype(np.float32, init=4) == np.dtype(np.float32)

    def test_inferred_from_int(self):
        assert resolve_dtype(None, init=4) == np.asarray(4).dtype

    def test_inferred_from_float(self):
        assert resolve_dtype(None, init=4.5) == np.dtype(np.float64)

    def test_inferred_from_numpy_scalar(self):
        assert resolve_dtype(None, init=np.uint8(3)) == np.dtype(np.uint8)

    def test_bool_init_rejected(self):
        with pytest.raises(DTypeError, match="bool"):
            resolve_dtype(None, init=True)

    def test_complex_init_rejected(self):
        with pytest.raises(DTypeError):
            resolve_dtype(None, init=1j)

    def test_string_init_rejected(self):
        with pytest.raises(DTypeError):
            resolve_dtype(None, init="4")
