"""
Shared elementwise arithmetic for Vector and Matrix.

Both value types store their elements as a flat float64 array and delegate
the arithmetic itself here, so the zero-divisor policy is applied in one
place: an exact zero divisor raises DivisionByZeroError, for array and
scalar divisors alike. No inf/NaN is ever produced by a division here.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pylars.core.exceptions import DivisionByZeroError

BinaryKernel = Callable[[NDArray[np.float64] | float, NDArray[np.float64] | float], NDArray[np.float64]]

OPERATIONS: dict[str, BinaryKernel] = {
    'add': np.add,
    'subtract': np.subtract,
    'multiply': np.multiply,
    'divide': np.true_divide,
}


def is_scalar(value: Any) -> bool:
    """True for real numbers other than bool (Python and numpy scalars)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def read_only(data: NDArray[np.float64]) -> NDArray[np.float64]:
    """Non-writeable view sharing memory with ``data``."""
    view = data.view()
    view.flags.writeable = False
    return view


def freeze(data: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Make ``data`` a non-writeable array that owns its memory.

    Views are copied first, so every read_only() view taken from the
    result sits on a read-only owner and cannot be made writeable again.
    """
    if data.base is not None:
        data = data.copy()
    data.flags.writeable = False
    return data


def check_nonzero_divisor(divisor: NDArray[np.float64] | float) -> None:
    """
    Raise if any divisor element is exactly zero.

    Raises:
        DivisionByZeroError: With the flat positions of the zero elements
            (empty tuple for a scalar divisor)
    """
    if np.ndim(divisor) == 0:
        if divisor == 0.0:
            raise DivisionByZeroError("Division by zero scalar", positions=())
        return

    zeros = np.flatnonzero(divisor == 0.0)
    if zeros.size:
        positions = tuple(int(i) for i in zeros)
        raise DivisionByZeroError(
            f"Division by zero at {zeros.size} element(s), first at position {positions[0]}",
            positions=positions,
        )


def apply(
    operation: str,
    lhs: NDArray[np.float64] | float,
    rhs: NDArray[np.float64] | float,
) -> NDArray[np.float64]:
    """
    Apply an elementwise operation and return a new float64 array.

    Shapes must already be validated by the caller. At most one operand is
    a float (scalar arithmetic, either side); the others are same-shaped
    arrays.
    """
    kernel = OPERATIONS[operation]
    if operation == 'divide':
        check_nonzero_divisor(rhs)
    # Overflow saturates to inf per IEEE, without a RuntimeWarning
    with np.errstate(over='ignore', invalid='ignore'):
        return np.asarray(kernel(lhs, rhs), dtype=np.float64)


def power(values: NDArray[np.float64], exponent: float) -> NDArray[np.float64]:
    """Elementwise ``values ** exponent`` as a new float64 array."""
    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        return np.power(values, exponent, dtype=np.float64)
