"""
Matrix: a dense 2-D value type over an integral or floating element type.

The Matrix owns a row-major (rows x cols) numpy store. Shape is fixed at
construction; elements change only through two-step indexing, m[i][j] = v.
Every computation (transpose, seq_add) returns a new Matrix.

Precondition violations raise exceptions from pymatrix.core.exceptions
rather than aborting, so callers can recover from a shape mismatch or a
bad row index.

Usage:
    from pymatrix import Matrix

    a = Matrix(2, 2, 4)
    b = Matrix(2, 2, 8)
    c = a + b                  # Matrix(2, 2, 12)
    c[0][1] = 0
    print(c, end='')           # "12 0 \\n12 12 \\n"
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterator, TextIO, TypeVar
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.dtypes import DEFAULT_ATOL, DEFAULT_RTOL, check_dtype, resolve_dtype
from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import (
    check_2d,
    check_castable,
    check_count,
    check_representable,
    check_row_index,
    check_same_dtype,
    check_same_shape,
)
from pymatrix.dense import _format, _kernels

logger = logging.getLogger(__name__)

N = TypeVar('N', bound=np.number)  # Element type: np.integer or np.floating


class Matrix(Generic[N]):
    """
    Dense row-major matrix with a fixed shape.

    Type Parameters:
        N: numpy scalar type of the elements (integral or floating point)

    Construction:
        Matrix(rows, cols)                 every element 0 (float64 unless dtype=)
        Matrix(rows, cols, init)           every element init, type inferred
        Matrix(rows, cols, init, dtype=)   explicit element type
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.moved_from(other)           steals other's store

    Raises:
        ValidationError: negative or non-integer counts, init not
            representable in the element type
        DTypeError: element type is not integral or floating point
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        rows: int,
        cols: int,
        init: Any = None,
        *,
        dtype: Any = None,
    ):
        self._rows = check_count(rows, 'rows')
        self._cols = check_count(cols, 'cols')
        dt = resolve_dtype(dtype, init)

        if init is None:
            self._data = np.zeros((self._rows, self._cols), dtype=dt)
        else:
            fill = check_representable(init, dt, 'init')
            self._data = np.full((self._rows, self._cols), fill, dtype=dt)

        logger.debug("allocated %dx%d %s matrix", self._rows, self._cols, dt)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix[N]:
        """Adopt an already validated 2-D array without copying it."""
        m = cls.__new__(cls)
        m._data = data
        m._rows, m._cols = data.shape
        return m

    # === Construction ===

    @classmethod
    def from_rows(cls, rows: ArrayLike, *, dtype: Any = None) -> Matrix[N]:
        """
        Build a Matrix from a nested sequence or 2-D array.

        The input is copied; later changes to it do not affect the Matrix.
        An empty sequence gives a 0x0 matrix.

        Parameters
        ----------
        rows : array-like
            Nested sequence of equal-length rows, or a 2-D numpy array.
        dtype : optional
            Element type. Inferred from the data if omitted; an explicit
            dtype must hold every value without loss.

        Raises
        ------
        DimensionError
            Input is ragged or not 2-D.
        DTypeError
            Inferred or requested element type is not integral/floating.
        ValidationError
            A value does not fit the requested dtype.
        """
        if isinstance(rows, Matrix):
            rows = rows._data
        try:
            array = np.array(rows)
        except ValueError as e:
            raise DimensionError(f"rows: cannot build a 2D array: {e}") from e

        if array.ndim == 1 and array.size == 0:
            array = array.reshape(0, 0)
        check_2d(array, 'rows')

        check_dtype(array.dtype, name='rows')
        if dtype is not None:
            array = check_castable(array, check_dtype(dtype), 'rows')

        return cls._wrap(np.ascontiguousarray(array))

    def copy(self) -> Matrix[N]:
        """Deep copy: new store, same shape, dtype and values."""
        return self._wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix[N]:
        return self.copy()

    @classmethod
    def moved_from(cls, source: Matrix[N]) -> Matrix[N]:
        """
        Transfer source's store into a new Matrix.

        Afterwards source is a valid 0x0 matrix of the same dtype; its
        former contents belong to the returned Matrix.
        """
        if not isinstance(source, Matrix):
            raise ValidationError(
                f"source: expected Matrix, got {type(source).__name__}"
            )
        data = source._data
        source._data = np.empty((0, 0), dtype=data.dtype)
        source._rows = 0
        source._cols = 0
        logger.debug("moved %dx%d %s store", data.shape[0], data.shape[1], data.dtype)
        return cls._wrap(data)

    def assign(self, source: Matrix[N]) -> Matrix[N]:
        """
        Copy-assignment: replace this Matrix's shape, dtype and values with
        a deep copy of source's. Assigning a Matrix to itself does nothing.

        Returns self.
        """
        if source is self:
            return self
        if not isinstance(source, Matrix):
            raise ValidationError(
                f"source: expected Matrix, got {type(source).__name__}"
            )
        self._data = source._data.copy()
        self._rows = source._rows
        self._cols = source._cols
        return self

    # === Queries ===

    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def columns(self) -> int:
        """Alias of cols()."""
        return self.cols()

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._data.dtype

    def to_array(self) -> NDArray[Any]:
        """Copy of the store as a (rows, cols) numpy array."""
        return self._data.copy()

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[NDArray[Any]]:
        for i in range(self._rows):
            yield self._data[i]

    # === Element access ===

    def __getitem__(self, idx: int) -> NDArray[Any]:
        """
        Row idx as a writable 1-D view, so m[i][j] = v updates the Matrix.

        Column bounds are enforced by the row itself (IndexError).

        Raises:
            IndexOutOfRangeError: idx outside [0, rows)
            ValidationError: idx is not an integer
        """
        i = check_row_index(idx, self._rows)
        return self._data[i]

    # === Computation ===

    def transpose(self) -> Matrix[N]:
        """New (cols x rows) Matrix with result[j][i] == self[i][j]."""
        return self._wrap(_kernels.transpose(self._data))

    def T(self) -> Matrix[N]:
        """Alias of transpose()."""
        return self.transpose()

    def seq_add(self, other: Matrix[N]) -> Matrix[N]:
        """
        Element-wise sum, computed sequentially.

        Parameters
        ----------
        other : Matrix
            Same shape and dtype as self.

        Returns
        -------
        New Matrix with result[i][j] == self[i][j] + other[i][j].

        Raises
        ------
        ShapeMismatchError
            Shapes differ.
        DTypeMismatchError
            Element types differ.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        return self._checked_add(other, stacklevel=4)

    def __add__(self, other: object) -> Matrix[N]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._checked_add(other, stacklevel=4)

    def _checked_add(self, other: Matrix[N], stacklevel: int) -> Matrix[N]:
        # stacklevel counts frames up to the caller of seq_add or +
        check_same_shape(self.shape, other.shape, 'seq_add')
        check_same_dtype(self.dtype, other.dtype, 'seq_add')
        return self._wrap(_kernels.seq_add(self._data, other._data, stacklevel=stacklevel))

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        """
        True iff every element equals its counterpart.

        Raises ShapeMismatchError if the shapes differ.
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, '==')
        return _kernels.all_equal(self._data, other._data)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def allclose(
        self,
        other: Matrix[Any],
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Tolerance equality: |a - b| <= atol + rtol * |b| for every element.

        Raises ShapeMismatchError if the shapes differ.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        check_same_shape(self.shape, other.shape, 'allclose')
        return _kernels.all_close(self._data, other._data, rtol=rtol, atol=atol)

    # === Output ===

    def write(self, out: TextIO) -> TextIO:
        """Write the row-major text dump to out and return out."""
        return _format.write_rows(self._data, out)

    def __str__(self) -> str:
        return _format.dump(self._data)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, dtype={self.dtype})"
