"""
Matrix: dense rows x cols grid of float64 values stored in row-major order.

Arithmetic operators (+, -, *, /) work elementwise between two matrices of
identical shape, or between a matrix and a real scalar, and always return a
new Matrix. ``*`` is the elementwise (Hadamard) product, not the matrix
product. The in-place mutators are set(), transpose() and reshape().

Construction:
    Matrix(3, 5, 3.0)                           3 by 5 matrix of 3.0s
    Matrix.from_array(2, 2, [1.0, 3.0, 3.0, 7.0])
    Matrix.identity(5)
    Matrix.random(3, 5)                         uniform on [0.0, 1.0)
    Matrix.zeros(3, 5)
    Matrix.zeros_like(m1)                       same shape as m1

Operations:
    foo.transpose()                             in place
    trans_foo = foo.transposed()                new matrix
    foo.set(2, 2, 4.2)
    element = bar.get(2, 3)
    foobar.reshape(8, 2)                        4 by 4 -> 8 by 2

Elementwise arithmetic between a Matrix and a Vector is reserved
(CAPABILITY_VECTOR_MATRIX_ELEMENTWISE) and raises UnsupportedOperationError.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylars.core import _elementwise
from pylars.core._elementwise import freeze, is_scalar, read_only
from pylars.core.capabilities import (
    ALL_CAPABILITIES,
    CAPABILITY_VECTOR_MATRIX_ELEMENTWISE,
    MATRIX_CAPABILITIES,
)
from pylars.core.compute.precision import DEFAULT_ATOL, DEFAULT_RTOL, all_close
from pylars.core.compute.random import DEFAULT_HIGH, DEFAULT_LOW, SeedLike, uniform
from pylars.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    UnsupportedOperationError,
    ValidationError,
)
from pylars.core.validation import (
    check_array,
    check_dimension,
    check_element_count,
    check_index,
    check_same_shape,
    check_scalar,
)
from pylars.vector import Vector

logger = logging.getLogger(__name__)


class Matrix:
    """
    Dense matrix of float64 elements with value semantics.

    Elements live in one flat row-major buffer owned by the instance;
    element (row, col) is at position ``row * cols + col``. Invariant:
    ``rows > 0``, ``cols > 0`` and ``len(elements) == rows * cols``.
    """

    __slots__ = ('_data', '_rows', '_cols')

    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]
    # m[row, col] indexing must not make matrices iterable
    __iter__ = None

    def __init__(self, rows: int, cols: int, fill: float = 0.0):
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        fill = check_scalar(fill, "fill")
        self._rows = rows
        self._cols = cols
        self._data = freeze(np.full(rows * cols, fill, dtype=np.float64))

    @classmethod
    def _wrap(cls, data: NDArray[np.float64], rows: int, cols: int) -> Matrix:
        """Adopt an already validated flat float64 array as read-only storage."""
        matrix = cls.__new__(cls)
        matrix._data = freeze(data)
        matrix._rows = rows
        matrix._cols = cols
        return matrix

    # ── Factories ────────────────────────────────────────────────────

    @classmethod
    def from_array(cls, rows: int, cols: int, elements: ArrayLike) -> Matrix:
        """
        Build a rows x cols Matrix filled row-major from ``elements``.

        ``elements`` is either flat or nested exactly (rows, cols) deep, so
        both ``[1, 2, 3, 4]`` and ``[[1, 2], [3, 4]]`` give the same 2 x 2
        matrix. Nested input is flattened in row-major (C) order.

        Raises:
            InvalidShapeError: If rows or cols is not positive
            DimensionMismatchError: If the element count is not rows * cols,
                nested input is not (rows, cols), or elements are neither
                1D nor 2D
            ValidationError: If elements are not real numbers
        """
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        data = check_array(elements, "elements")
        if data.ndim not in (1, 2):
            raise DimensionMismatchError(
                f"elements: expected a flat or (rows, cols) nested sequence, "
                f"got {data.ndim}D with shape {data.shape}",
                expected=2,
                actual=data.ndim,
            )
        if data.ndim == 2 and data.shape != (rows, cols):
            raise DimensionMismatchError(
                f"elements: nested shape {data.shape} does not match ({rows}, {cols})",
                expected=(rows, cols),
                actual=data.shape,
            )
        data = data.reshape(-1)
        check_element_count(data.size, rows * cols, "elements")
        return cls._wrap(data, rows, cols)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols, 0.0)

    @classmethod
    def zeros_like(cls, other: Matrix) -> Matrix:
        """Zero-filled Matrix with the same shape as ``other``."""
        if not isinstance(other, Matrix):
            raise ValidationError(f"other: expected Matrix, got {type(other).__name__}")
        return cls(other.rows, other.cols, 0.0)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n matrix with 1.0 on the main diagonal and 0.0 elsewhere."""
        n = check_dimension(n, "n")
        data = np.zeros(n * n, dtype=np.float64)
        data[::n + 1] = 1.0
        return cls._wrap(data, n, n)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        *,
        low: float = DEFAULT_LOW,
        high: float = DEFAULT_HIGH,
        seed: SeedLike = None,
    ) -> Matrix:
        """
        rows x cols Matrix of independent uniform draws on [low, high).

        Unseeded unless ``seed`` (int or numpy Generator) is given.
        """
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        return cls._wrap(uniform(rows * cols, low=low, high=high, seed=seed), rows, cols)

    # ── Shape and element access ─────────────────────────────────────

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Total element count, rows * cols."""
        return int(self._data.size)

    @property
    def elements(self) -> NDArray[np.float64]:
        """Read-only flat row-major view of the elements."""
        return read_only(self._data)

    def tolist(self) -> list[list[float]]:
        """Elements as a list of rows."""
        return self._data.reshape(self.shape).tolist()

    def __array__(self, dtype=None, copy=None) -> NDArray[np.float64]:
        if copy:
            return np.array(self._data.reshape(self.shape), dtype=dtype, copy=True)
        data = read_only(self._data).reshape(self.shape)
        return data if dtype is None else data.astype(dtype)

    def _position(self, row: int, col: int) -> int:
        try:
            row = check_index(row, self._rows, "row")
            col = check_index(col, self._cols, "col")
        except IndexOutOfBoundsError as e:
            raise IndexOutOfBoundsError(
                f"Matrix index ({row}, {col}) out of bounds for shape {self.shape}",
                index=(row, col),
                shape=self.shape,
            ) from e
        return row * self._cols + col

    def get(self, row: int, col: int) -> float:
        """
        Element at zero-based (row, col).

        Raises:
            IndexOutOfBoundsError: If row or col lies outside the shape
                (negative indices included)
        """
        return float(self._data[self._position(row, col)])

    def set(self, row: int, col: int, value: float) -> None:
        """
        Overwrite the element at zero-based (row, col).

        Same bounds contract as get(). The matrix is left untouched when
        validation fails.
        """
        position = self._position(row, col)
        value = check_scalar(value, "value")
        # Storage stays read-only outside this write
        self._data.flags.writeable = True
        try:
            self._data[position] = value
        finally:
            self._data.flags.writeable = False

    def _split_key(self, key: Any) -> tuple[Any, Any]:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise ValidationError(f"Matrix index must be a (row, col) pair, got {key!r}")
        return key

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.get(*self._split_key(key))

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.set(*self._split_key(key), value)

    def row(self, index: int) -> Vector:
        """Copy of one row as a Vector."""
        index = check_index(index, self._rows, "row")
        start = index * self._cols
        return Vector._wrap(self._data[start:start + self._cols].copy())

    def col(self, index: int) -> Vector:
        """Copy of one column as a Vector."""
        index = check_index(index, self._cols, "col")
        return Vector._wrap(self._data[index::self._cols].copy())

    # ── Shape manipulation ───────────────────────────────────────────

    def transposed(self) -> Matrix:
        """New (cols, rows) Matrix with result[i, j] == self[j, i]."""
        data = np.ascontiguousarray(self._data.reshape(self.shape).T).reshape(-1)
        return Matrix._wrap(data, self._cols, self._rows)

    def transpose(self) -> None:
        """Transpose in place: swap rows and cols and reorder the elements."""
        transposed = self.transposed()
        logger.debug("transpose %s -> %s", self.shape, transposed.shape)
        self._data = transposed._data
        self._rows, self._cols = transposed._rows, transposed._cols

    def reshape(self, rows: int, cols: int) -> None:
        """
        Change the declared shape in place, keeping element order.

        Raises:
            InvalidShapeError: If rows or cols is not positive
            DimensionMismatchError: If rows * cols differs from the current size
        """
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        if rows * cols != self.size:
            raise DimensionMismatchError(
                f"Cannot reshape {self.shape} to ({rows}, {cols}): "
                f"element count would change from {self.size} to {rows * cols}",
                expected=self.size,
                actual=rows * cols,
                operation='reshape',
            )
        logger.debug("reshape %s -> %s", self.shape, (rows, cols))
        self._rows, self._cols = rows, cols

    def trace(self) -> float:
        """
        Sum of the main diagonal.

        Raises:
            DimensionMismatchError: If the matrix is not square
        """
        if self._rows != self._cols:
            raise DimensionMismatchError(
                f"Matrix must be square to take its trace, got {self.shape}",
                expected=(self._rows, self._rows),
                actual=self.shape,
                operation='trace',
            )
        return float(np.sum(self._data[::self._cols + 1]))

    # ── Copying ──────────────────────────────────────────────────────

    def clone(self) -> Matrix:
        """Deep, independent copy."""
        return Matrix._wrap(self._data.copy(), self._rows, self._cols)

    def __copy__(self) -> Matrix:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.clone()

    # ── Capabilities ─────────────────────────────────────────────────

    def supports(self, capability: str) -> bool:
        """Whether this type implements the named capability."""
        if capability not in ALL_CAPABILITIES:
            raise ValidationError(f"Unknown capability: {capability!r}")
        return capability in MATRIX_CAPABILITIES

    # ── Arithmetic ───────────────────────────────────────────────────

    def _reject_vector(self, operation: str) -> None:
        raise UnsupportedOperationError(
            f"Cannot {operation} a Matrix and a Vector: elementwise "
            f"Vector/Matrix arithmetic is not implemented",
            capability=CAPABILITY_VECTOR_MATRIX_ELEMENTWISE,
        )

    def _binary(self, other: Any, operation: str) -> Matrix:
        if isinstance(other, Matrix):
            check_same_shape(self.shape, other.shape, operation)
            data = _elementwise.apply(operation, self._data, other._data)
            return Matrix._wrap(data, self._rows, self._cols)
        if is_scalar(other):
            scalar = check_scalar(other, "other")
            data = _elementwise.apply(operation, self._data, scalar)
            return Matrix._wrap(data, self._rows, self._cols)
        if isinstance(other, Vector):
            self._reject_vector(operation)
        return NotImplemented

    def _reflected(self, other: Any, operation: str) -> Matrix:
        if is_scalar(other):
            scalar = check_scalar(other, "other")
            data = _elementwise.apply(operation, scalar, self._data)
            return Matrix._wrap(data, self._rows, self._cols)
        if isinstance(other, Vector):
            self._reject_vector(operation)
        return NotImplemented

    def __add__(self, other: Matrix | float) -> Matrix:
        return self._binary(other, 'add')

    def __sub__(self, other: Matrix | float) -> Matrix:
        return self._binary(other, 'subtract')

    def __mul__(self, other: Matrix | float) -> Matrix:
        return self._binary(other, 'multiply')

    def __truediv__(self, other: Matrix | float) -> Matrix:
        return self._binary(other, 'divide')

    def __radd__(self, other: float) -> Matrix:
        return self._reflected(other, 'add')

    def __rsub__(self, other: float) -> Matrix:
        return self._reflected(other, 'subtract')

    def __rmul__(self, other: float) -> Matrix:
        return self._reflected(other, 'multiply')

    def __rtruediv__(self, other: float) -> Matrix:
        return self._reflected(other, 'divide')

    def __neg__(self) -> Matrix:
        return Matrix._wrap(np.negative(self._data), self._rows, self._cols)

    def power(self, exponent: float) -> Matrix:
        """Elementwise ``element ** exponent`` as a new Matrix."""
        exponent = check_scalar(exponent, "exponent")
        return Matrix._wrap(_elementwise.power(self._data, exponent), self._rows, self._cols)

    def __pow__(self, exponent: float) -> Matrix:
        if not is_scalar(exponent):
            return NotImplemented
        return self.power(exponent)

    # ── Comparison ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Elementwise comparison within tolerance.

        Raises:
            DimensionMismatchError: If shapes differ
        """
        if not isinstance(other, Matrix):
            raise ValidationError(f"other: expected Matrix, got {type(other).__name__}")
        check_same_shape(self.shape, other.shape, 'compare')
        return all_close(self._data, other._data, rtol=rtol, atol=atol)

    # ── Display ──────────────────────────────────────────────────────

    def __repr__(self) -> str:
        body = np.array2string(self._data, separator=', ', threshold=20)
        return f"Matrix(rows={self._rows}, cols={self._cols}, elements={body})"

    def __str__(self) -> str:
        return np.array2string(self._data.reshape(self.shape), separator=', ')
