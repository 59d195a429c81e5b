"""
Core infrastructure for pylars.

This module provides shared abstractions and utilities used by the
Vector and Matrix value types.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    capabilities: Capability string constants
    compute: Precision constants, tolerance comparison, random generation
"""

from pylars.core.exceptions import (
    LarsError,
    ValidationError,
    InvalidShapeError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    NumericalError,
    DivisionByZeroError,
    UnsupportedOperationError,
)

__all__ = [
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
