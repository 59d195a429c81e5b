"""
Vector: fixed-length dense sequence of float64 values.

Arithmetic operators (+, -, *, /) work elementwise between two vectors of
equal length, or between a vector and a real scalar, and always return a
new Vector. A Vector has no public mutators; use clone() to obtain an
independent copy.

Construction:
    Vector(12, 6.0)                     twelve 6.0s
    Vector.from_array([1.0, 3.0, 3.0, 7.0])
    Vector.random(12)                   uniform on [0.0, 1.0)
    Vector.random(12, seed=42)          reproducible draw

Operations:
    product = foo * bar
    total   = foo + bar
    delta   = foo - bar
    frac    = foo / bar                 DivisionByZeroError on a zero in bar
    doubled = foo * 2
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylars.core import _elementwise
from pylars.core._elementwise import freeze, is_scalar, read_only
from pylars.core.capabilities import ALL_CAPABILITIES, VECTOR_CAPABILITIES
from pylars.core.compute.precision import DEFAULT_ATOL, DEFAULT_RTOL, all_close
from pylars.core.compute.random import DEFAULT_HIGH, DEFAULT_LOW, SeedLike, uniform
from pylars.core.exceptions import InvalidShapeError, ValidationError
from pylars.core.validation import (
    check_1d,
    check_array,
    check_dimension,
    check_index,
    check_same_shape,
    check_scalar,
)


class Vector:
    """
    Dense vector of float64 elements with value semantics.

    Every instance owns its storage: no two vectors share an element
    buffer, and arithmetic never modifies an operand.

    Attributes:
        length: Number of elements (always > 0)
        elements: Read-only numpy view of the elements
    """

    __slots__ = ('_data',)

    # Defer mixed numpy/Vector arithmetic to the reflected operators below
    __array_ufunc__ = None

    # Compared by value, never hashed
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, length: int, fill: float = 0.0):
        length = check_dimension(length, "length")
        fill = check_scalar(fill, "fill")
        self._data = freeze(np.full(length, fill, dtype=np.float64))

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Vector:
        """Adopt an already validated 1D float64 array as read-only storage."""
        vector = cls.__new__(cls)
        vector._data = freeze(data)
        return vector

    # ── Factories ────────────────────────────────────────────────────

    @classmethod
    def from_array(cls, elements: ArrayLike) -> Vector:
        """
        Build a Vector holding a copy of ``elements``.

        Args:
            elements: Non-empty 1D sequence of real numbers

        Raises:
            ValidationError: If elements are not real numbers
            DimensionMismatchError: If elements are not 1D
            InvalidShapeError: If elements are empty
        """
        data = check_array(elements, "elements")
        check_1d(data, "elements")
        if data.size == 0:
            raise InvalidShapeError(
                "elements: a Vector needs at least one element, got 0",
                shape=(0,),
            )
        return cls._wrap(data)

    @classmethod
    def random(
        cls,
        length: int,
        *,
        low: float = DEFAULT_LOW,
        high: float = DEFAULT_HIGH,
        seed: SeedLike = None,
    ) -> Vector:
        """
        Vector of ``length`` independent uniform draws on [low, high).

        Unseeded unless ``seed`` (int or numpy Generator) is given.
        """
        length = check_dimension(length, "length")
        return cls._wrap(uniform(length, low=low, high=high, seed=seed))

    # ── Shape and element access ─────────────────────────────────────

    @property
    def length(self) -> int:
        """Number of elements."""
        return int(self._data.shape[0])

    @property
    def shape(self) -> tuple[int]:
        """(length,) for symmetry with Matrix.shape."""
        return (self.length,)

    @property
    def elements(self) -> NDArray[np.float64]:
        """Read-only view of the elements; copy it before mutating."""
        return read_only(self._data)

    def tolist(self) -> list[float]:
        return self._data.tolist()

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __getitem__(self, index: int) -> float:
        index = check_index(index, self.length, "index")
        return float(self._data[index])

    def __array__(self, dtype=None, copy=None) -> NDArray[np.float64]:
        if copy:
            return np.array(self._data, dtype=dtype, copy=True)
        data = read_only(self._data)
        return data if dtype is None else data.astype(dtype)

    # ── Copying ──────────────────────────────────────────────────────

    def clone(self) -> Vector:
        """Deep, independent copy."""
        return Vector._wrap(self._data.copy())

    def __copy__(self) -> Vector:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Vector:
        return self.clone()

    # ── Capabilities ─────────────────────────────────────────────────

    def supports(self, capability: str) -> bool:
        """Whether this type implements the named capability."""
        if capability not in ALL_CAPABILITIES:
            raise ValidationError(f"Unknown capability: {capability!r}")
        return capability in VECTOR_CAPABILITIES

    # ── Arithmetic ───────────────────────────────────────────────────

    def _binary(self, other: Any, operation: str) -> Vector:
        if isinstance(other, Vector):
            check_same_shape(self.shape, other.shape, operation)
            return Vector._wrap(_elementwise.apply(operation, self._data, other._data))
        if is_scalar(other):
            scalar = check_scalar(other, "other")
            return Vector._wrap(_elementwise.apply(operation, self._data, scalar))
        return NotImplemented

    def _reflected(self, other: Any, operation: str) -> Vector:
        if is_scalar(other):
            scalar = check_scalar(other, "other")
            return Vector._wrap(_elementwise.apply(operation, scalar, self._data))
        return NotImplemented

    def __add__(self, other: Vector | float) -> Vector:
        return self._binary(other, 'add')

    def __sub__(self, other: Vector | float) -> Vector:
        return self._binary(other, 'subtract')

    def __mul__(self, other: Vector | float) -> Vector:
        return self._binary(other, 'multiply')

    def __truediv__(self, other: Vector | float) -> Vector:
        return self._binary(other, 'divide')

    def __radd__(self, other: float) -> Vector:
        return self._reflected(other, 'add')

    def __rsub__(self, other: float) -> Vector:
        return self._reflected(other, 'subtract')

    def __rmul__(self, other: float) -> Vector:
        return self._reflected(other, 'multiply')

    def __rtruediv__(self, other: float) -> Vector:
        return self._reflected(other, 'divide')

    def __neg__(self) -> Vector:
        return Vector._wrap(np.negative(self._data))

    def power(self, exponent: float) -> Vector:
        """Elementwise ``element ** exponent`` as a new Vector."""
        exponent = check_scalar(exponent, "exponent")
        return Vector._wrap(_elementwise.power(self._data, exponent))

    def __pow__(self, exponent: float) -> Vector:
        if not is_scalar(exponent):
            return NotImplemented
        return self.power(exponent)

    # ── Comparison ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(
        self,
        other: Vector,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Elementwise comparison within tolerance.

        Raises:
            DimensionMismatchError: If lengths differ
        """
        if not isinstance(other, Vector):
            raise ValidationError(f"other: expected Vector, got {type(other).__name__}")
        check_same_shape(self.shape, other.shape, 'compare')
        return all_close(self._data, other._data, rtol=rtol, atol=atol)

    # ── Display ──────────────────────────────────────────────────────

    def __repr__(self) -> str:
        body = np.array2string(self._data, separator=', ', threshold=20)
        return f"Vector(length={self.length}, elements={body})"

    def __str__(self) -> str:
        return np.array2string(self._data, separator=', ')
