"""
Exception hierarchy for PyAlgebra.

All exceptions inherit from PyAlgebraError to allow catching any
library-specific error. Module-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyAlgebraError(Exception):
    """Base exception for all PyAlgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.
    
    Raised when a matrix is degenerate or ragged, when two matrices have
    shapes that are incompatible for the requested operation, or when a
    square matrix is required but not given.
    
    Attributes:
        expected: Expected shape (or shape constraint), if known
        actual: Shape that was actually provided, if known
    """
    
    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidArgumentError(ValidationError):
    """
    An argument value is outside the accepted domain.
    
    Raised for missing or inverted Random bounds, unknown matrix kinds or
    sum/subtract selectors, and non-integer sizes.
    
    Attributes:
        argument: Name of the offending parameter
        value: The rejected value
    """
    
    def __init__(
        self,
        message: str,
        argument: str | None = None,
        value: Any = None
    ):
        super().__init__(message)
        self.argument = argument
        self.value = value


class ElementTypeError(ValidationError):
    """
    Element types are incompatible.
    
    Raised when two matrices with different dtypes are combined, or when a
    scalar cannot be represented in a matrix's element type. PyAlgebra never
    coerces between element types.
    
    Attributes:
        expected: Expected dtype name, if known
        actual: Provided dtype name, if known
    """
    
    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
