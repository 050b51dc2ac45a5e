"""
Core infrastructure for PyAlgebra.

This module provides shared abstractions and utilities used by the
matrix module.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pyalgebra.core.protocols import Backend
from pyalgebra.core.result import Result
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    InvalidArgumentError,
    ElementTypeError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "InvalidArgumentError",
    "ElementTypeError",
]
