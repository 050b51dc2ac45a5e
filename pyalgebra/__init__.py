"""
PyAlgebra: small dense-matrix utilities for Python.

Immutable dense matrices over a uniform integer or floating element type,
with canonical constructors, console display, and elementwise and matrix
arithmetic.

Submodules:
    matrix: Matrix container, construction, display and arithmetic
    core: Exceptions, validation and shared infrastructure
"""

__version__ = "0.1.0"

from pyalgebra import matrix
from pyalgebra.matrix import (
    Matrix,
    MatrixKind,
    SumSubOp,
    create,
    zeros_like,
    display,
    format_matrix,
    sum_sub,
    scalar_multiply,
    multiply,
    hadamard,
)
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    InvalidArgumentError,
    ElementTypeError,
)

__all__ = [
    "__version__",
    "matrix",
    "Matrix",
    "MatrixKind",
    "SumSubOp",
    "create",
    "zeros_like",
    "display",
    "format_matrix",
    "sum_sub",
    "scalar_multiply",
    "multiply",
    "hadamard",
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "InvalidArgumentError",
    "ElementTypeError",
]
