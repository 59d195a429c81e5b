"""
pylars: dense float64 vectors and matrices with elementwise arithmetic.

Two value types with independent, owned storage:

    Vector: fixed-length sequence of float64
    Matrix: rows x cols grid of float64, row-major

Both support elementwise + - * / against a same-shaped operand or a real
scalar, cloning, read-only access to their raw elements, and the factory
classmethods from_array / random (plus zeros, zeros_like and identity for
Matrix). Errors derive from pylars.core.LarsError.

Example
-------
>>> from pylars import Matrix
>>> m = Matrix.from_array(2, 2, [1.0, 2.0, 3.0, 4.0])
>>> m.transposed().tolist()
[[1.0, 3.0], [2.0, 4.0]]
"""

import logging as _logging

__version__ = "0.1.0"

from pylars.core.exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    IndexOutOfBoundsError,
    InvalidShapeError,
    LarsError,
    NumericalError,
    UnsupportedOperationError,
    ValidationError,
)
from pylars.matrix import Matrix
from pylars.vector import Vector

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    # Exceptions
    "LarsError",
    "ValidationError",
    "InvalidShapeError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "DivisionByZeroError",
    "UnsupportedOperationError",
]

# Silent unless the application configures logging
_logging.getLogger(__name__).addHandler(_logging.NullHandler())
