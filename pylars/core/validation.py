"""
Input validation utilities for pylars.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except conversion of numeric input to float64)
    - No clamping or truncation of out-of-range values
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylars.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidShapeError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate input and copy it into a new float64 numpy array.

    Accepts any array-like of real numbers. Rejects inputs that result in
    object dtype (indicating mixed types or non-numeric data), and complex
    or non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64, never sharing memory with the input

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return np.array(result, dtype=np.float64, copy=True)


def check_1d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionMismatchError(
            f"{name}: expected 1D sequence, got {array.ndim}D with shape {array.shape}",
            expected=1,
            actual=array.ndim,
        )


def check_dimension(value, name: str) -> int:
    """
    Verify a dimension is a positive integer and return it as int.

    Args:
        value: Candidate dimension (rows, cols, length, n)
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer (bool included)
        InvalidShapeError: If value <= 0
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool {value!r}")
    try:
        dim = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e

    if dim <= 0:
        raise InvalidShapeError(
            f"{name}: must be positive, got {dim}",
            shape=(dim,),
        )
    return dim


def check_scalar(value, name: str) -> float:
    """
    Verify value is a real number and return it as float.

    Args:
        value: Candidate scalar
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number or lies outside
            the float64 range (very large Python ints)
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: {type(value).__name__} value too large to represent as float64"
        ) from e


def check_index(value, bound: int, name: str) -> int:
    """
    Verify value is an integer index in [0, bound).

    Negative indices are out of bounds; there is no wrap-around.

    Args:
        value: Candidate index
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If value is not an integer
        IndexOutOfBoundsError: If value < 0 or value >= bound
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer index, got bool {value!r}")
    try:
        idx = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer index, got {type(value).__name__} {value!r}"
        ) from e

    if idx < 0 or idx >= bound:
        raise IndexOutOfBoundsError(
            f"{name}: index {idx} out of bounds for size {bound}",
            index=idx,
            shape=(bound,),
        )
    return idx


def check_same_shape(
    lhs: tuple[int, ...],
    rhs: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operand shapes are identical.

    Args:
        lhs: Shape of the left operand
        rhs: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if lhs != rhs:
        raise DimensionMismatchError(
            f"Cannot {operation} operands of different dimensions: {lhs} vs {rhs}",
            expected=lhs,
            actual=rhs,
            operation=operation,
        )


def check_element_count(count: int, expected: int, name: str) -> None:
    """
    Verify an element count matches the count a shape requires.

    Args:
        count: Number of elements supplied
        expected: Number of elements the shape requires
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If count != expected
    """
    if count != expected:
        raise DimensionMismatchError(
            f"{name}: expected {expected} elements, got {count}",
            expected=expected,
            actual=count,
        )
