"""
Solver dispatch for matrix operations.

Provides create() for construction plus the arithmetic entry points:
sum_sub(), scalar_multiply(), multiply() and hadamard(). Every function
validates its inputs completely before the backend runs, and returns a
newly allocated Matrix.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from pyalgebra.core.exceptions import DimensionError, ValidationError
from pyalgebra.core.validation import (
    check_array,
    check_bounds,
    check_dtype,
    check_inner_dimensions,
    check_same_dtype,
    check_same_shape,
    check_scalar,
    check_size,
)
from pyalgebra.matrix._common import (
    DEFAULT_DTYPE,
    BackendChoice,
    MatrixKind,
    SumSubOp,
    as_kind,
    as_op,
)
from pyalgebra.matrix.design import Matrix
from pyalgebra.matrix.solution import to_matrix
from pyalgebra.matrix.backends.cpu import CPUMatrixBackend


MatrixLike = Matrix | ArrayLike


def _ensure_matrix(data: MatrixLike, name: str) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix._build(check_array(data, name), name)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUMatrixBackend()

    raise ValidationError(f"Unknown backend: {backend!r}. Must be 'auto' or 'cpu'")


def create(
    rows: int,
    columns: int,
    kind: MatrixKind | str = MatrixKind.ZEROS,
    lower_bound: float | None = None,
    upper_bound: float | None = None,
    *,
    dtype: DTypeLike = DEFAULT_DTYPE,
    seed: int | np.random.Generator | None = None,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Create a rows x columns matrix of the given kind.

    Parameters
    ----------
    rows, columns : int
        Matrix dimensions, both at least 1.
    kind : MatrixKind or str
        ZEROS (default), ONES, IDENTITY (square only) or RANDOM.
    lower_bound, upper_bound : number, optional
        Half-open range [lower_bound, upper_bound) for RANDOM. Required for
        RANDOM and ignored otherwise.
    dtype : dtype
        Element type, integer or floating. Default float64.
    seed : int or numpy.random.Generator, optional
        Source of randomness for RANDOM. None draws unseeded entropy.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    Matrix

    Raises
    ------
    DimensionError
        If a size is below 1, or IDENTITY is requested for a non-square shape.
    InvalidArgumentError
        If a size is not an integer, the kind is unknown, or RANDOM bounds
        are missing or not increasing.
    """
    n_rows = check_size(rows, "rows")
    n_columns = check_size(columns, "columns")
    kind = as_kind(kind)
    element_type = check_dtype(dtype, "dtype")

    options: dict[str, Any] = {
        'shape': (n_rows, n_columns),
        'kind': kind,
        'dtype': element_type,
    }

    if kind is MatrixKind.IDENTITY and n_rows != n_columns:
        raise DimensionError(
            f"Identity matrix must be square, got rows={n_rows}, columns={n_columns}",
            expected=(n_rows, n_rows),
            actual=(n_rows, n_columns),
        )

    if kind is MatrixKind.RANDOM:
        options['bounds'] = check_bounds(lower_bound, upper_bound, element_type)
        options['rng'] = np.random.default_rng(seed)

    be = _get_backend(backend)
    result = be.solve('create', **options)
    return to_matrix(result)


def zeros_like(matrix: MatrixLike, *, backend: BackendChoice = 'auto') -> Matrix:
    """All-zeros matrix with the shape and element type of ``matrix``."""
    m = _ensure_matrix(matrix, "matrix")
    return create(m.rows, m.columns, MatrixKind.ZEROS, dtype=m.dtype, backend=backend)


def sum_sub(
    a: MatrixLike,
    b: MatrixLike,
    op: SumSubOp | str = SumSubOp.SUM,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Elementwise sum or difference of two equal-shaped matrices.

    Parameters
    ----------
    a, b : Matrix or array-like
        Operands with identical shape and element type.
    op : SumSubOp or str
        SUM ('sum', default) for a + b, SUB ('sub') for a - b. Any other
        value raises InvalidArgumentError.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    Matrix
    """
    op = as_op(op)
    ma = _ensure_matrix(a, "a")
    mb = _ensure_matrix(b, "b")
    check_same_shape(ma._data, mb._data, names=("a", "b"))
    check_same_dtype(ma._data, mb._data, names=("a", "b"))

    be = _get_backend(backend)
    result = be.solve('sum_sub', ma._data, mb._data, op=op)
    return to_matrix(result)


def scalar_multiply(
    matrix: MatrixLike,
    scalar: float,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Multiply every element by a scalar.

    The scalar must be representable in the matrix's element type; a
    fractional scalar against an integer matrix raises ElementTypeError.
    """
    m = _ensure_matrix(matrix, "matrix")
    value = check_scalar(scalar, m.dtype, "scalar")

    be = _get_backend(backend)
    result = be.solve('scalar_multiply', m._data, scalar=value)
    return to_matrix(result)


def multiply(
    a: MatrixLike,
    b: MatrixLike,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Matrix product a @ b.

    Requires columns(a) == rows(b). The result has shape
    (rows(a), columns(b)) and is computed with the naive triple loop.
    """
    ma = _ensure_matrix(a, "a")
    mb = _ensure_matrix(b, "b")
    check_inner_dimensions(ma._data, mb._data, names=("a", "b"))
    check_same_dtype(ma._data, mb._data, names=("a", "b"))

    be = _get_backend(backend)
    result = be.solve('multiply', ma._data, mb._data)
    return to_matrix(result)


def hadamard(
    a: MatrixLike,
    b: MatrixLike,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """Elementwise (Hadamard) product of two equal-shaped matrices."""
    ma = _ensure_matrix(a, "a")
    mb = _ensure_matrix(b, "b")
    check_same_shape(ma._data, mb._data, names=("a", "b"))
    check_same_dtype(ma._data, mb._data, names=("a", "b"))

    be = _get_backend(backend)
    result = be.solve('hadamard', ma._data, mb._data)
    return to_matrix(result)
