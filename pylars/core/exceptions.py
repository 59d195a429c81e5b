"""
Exception hierarchy for pylars.

All exceptions inherit from LarsError to allow catching any
library-specific error. The four error kinds of the value types map to:

    InvalidShapeError       non-positive or zero dimension
    DimensionMismatchError  incompatible operand shapes or element counts
    IndexOutOfBoundsError   accessor indices outside the declared shape
    DivisionByZeroError     elementwise division by a zero element

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LarsError(Exception):
    """Base exception for all pylars errors."""
    pass


class ValidationError(LarsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. a
    non-numeric element sequence or a non-integer dimension.
    """
    pass


class InvalidShapeError(ValidationError):
    """
    A dimension is zero or negative where a positive one is required.

    Attributes:
        shape: The rejected shape, as given by the caller
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.shape = shape


class DimensionMismatchError(ValidationError):
    """
    Operand shapes or element counts are incompatible.

    Raised when two operands of an elementwise operation differ in shape,
    or when an element count does not match the requested shape.

    Attributes:
        expected: Shape or count that was required
        actual: Shape or count that was supplied
        operation: Name of the operation that detected the mismatch
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.operation = operation


class IndexOutOfBoundsError(ValidationError):
    """
    Accessor index lies outside the declared shape.

    Attributes:
        index: The offending index (int or (row, col))
        shape: Shape of the value that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(LarsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError):
    """
    Elementwise division encountered a zero divisor.

    Attributes:
        positions: Flat (row-major) positions of the zero divisors
    """

    def __init__(
        self,
        message: str,
        positions: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.positions = positions


class UnsupportedOperationError(LarsError):
    """
    Operation is defined as an extension point but not implemented.

    Attributes:
        capability: Capability string the operation requires
    """

    def __init__(
        self,
        message: str,
        capability: str | None = None
    ):
        super().__init__(message)
        self.capability = capability
