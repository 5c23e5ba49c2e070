"""
Tests for two-step element access, m[i][j].
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import IndexOutOfRangeError, ValidationError


class TestRowAccess:
    """m[i] returns a writable view of row i."""

    def test_read_element(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m[0][1] == 2
        assert m[1][0] == 3

    def test_write_element_mutates_matrix(self):
        m = Matrix(2, 2, 0)
        m[1][0] = 7
        assert m[1][0] == 7
        np.testing.assert_array_equal(m.to_array(), [[0, 0], [7, 0]])

    def test_row_has_cols_elements(self):
        m = Matrix(3, 5)
        assert len(m[0]) == 5

    def test_row_write_through_slice(self):
        m = Matrix(2, 3, 0)
        m[0][:] = 9
        np.testing.assert_array_equal(m.to_array(), [[9, 9, 9], [0, 0, 0]])

    def test_iteration_yields_rows_in_order(self):
        m = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
        assert [list(r) for r in m] == [[1, 2], [3, 4], [5, 6]]

    def test_whole_row_assignment_not_supported(self):
        m = Matrix(2, 2)
        with pytest.raises(TypeError):
            m[0] = [1.0, 2.0]


class TestRowBounds:
    """Row index outside [0, rows) raises instead of aborting."""

    def test_index_equal_to_rows(self):
        m = Matrix(2, 2)
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            m[2]
        assert exc_info.value.index == 2
        assert exc_info.value.bound == 2

    def test_large_index(self):
        with pytest.raises(IndexOutOfRangeError):
            Matrix(2, 2)[100]

    def test_negative_index(self):
        with pytest.raises(IndexOutOfRangeError):
            Matrix(2, 2)[-1]

    def test_any_index_on_empty(self):
        with pytest.raises(IndexOutOfRangeError):
            Matrix(0, 0)[0]

    def test_catchable_as_index_error(self):
        with pytest.raises(IndexError):
            Matrix(1, 1)[1]

    def test_non_integer_index(self):
        with pytest.raises(ValidationError):
            Matrix(2, 2)[0.0]

    def test_tuple_index_not_supported(self):
        with pytest.raises(ValidationError):
            Matrix(2, 2)[0, 1]

    def test_matrix_stays_usable_after_bad_index(self):
        m = Matrix(2, 2, 3)
        with pytest.raises(IndexOutOfRangeError):
            m[5]
        assert m[1][1] == 3


class TestColumnBounds:
    """Column bounds are enforced by the row itself."""

    def test_column_out_of_range(self):
        m = Matrix(2, 2)
        with pytest.raises(IndexError):
            m[0][2]
