"""
Dense matrix module.

Construction, display and arithmetic over immutable dense matrices of a
single real numeric element type.

Public API:
    create(rows, columns, kind)   - Zeros, Ones, Identity or Random matrix
    zeros_like(matrix)            - All-zeros matrix of the same shape/dtype
    display(matrix)               - Print a matrix to a text stream
    format_matrix(matrix)         - Display text as a string
    sum_sub(a, b, op)             - Elementwise sum or difference
    scalar_multiply(matrix, s)    - Multiply every element by s
    multiply(a, b)                - Matrix product
    hadamard(a, b)                - Elementwise product
"""

from pyalgebra.matrix._common import MatrixKind, SumSubOp
from pyalgebra.matrix.design import Matrix
from pyalgebra.matrix.solution import MatrixParams
from pyalgebra.matrix.display import display, format_matrix
from pyalgebra.matrix.solvers import (
    create,
    zeros_like,
    sum_sub,
    scalar_multiply,
    multiply,
    hadamard,
)

__all__ = [
    "create",
    "zeros_like",
    "display",
    "format_matrix",
    "sum_sub",
    "scalar_multiply",
    "multiply",
    "hadamard",
    "Matrix",
    "MatrixKind",
    "SumSubOp",
    "MatrixParams",
]
