"""
Tests for sum_sub(), scalar_multiply(), multiply() and hadamard().

Covers the worked 2x2 example, the algebraic laws (commutativity,
identity elements, distributivity), shape and element-type checks,
and input immutability.
"""

import warnings

import numpy as np
import pytest

from pyalgebra import (
    Matrix,
    MatrixKind,
    SumSubOp,
    create,
    hadamard,
    multiply,
    scalar_multiply,
    sum_sub,
    zeros_like,
)
from pyalgebra.core.exceptions import (
    DimensionError,
    ElementTypeError,
    InvalidArgumentError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Worked example: A = [[1, 2], [3, 4]], B = [[5, 6], [7, 8]]
# ═══════════════════════════════════════════════════════════════════════


class TestWorkedExample:

    def test_sum(self, mat_a, mat_b):
        assert sum_sub(mat_a, mat_b, SumSubOp.SUM).tolist() == [[6, 8], [10, 12]]

    def test_sub(self, mat_a, mat_b):
        assert sum_sub(mat_a, mat_b, SumSubOp.SUB).tolist() == [[-4, -4], [-4, -4]]

    def test_multiply(self, mat_a, mat_b):
        assert multiply(mat_a, mat_b).tolist() == [[19, 22], [43, 50]]

    def test_hadamard(self, mat_a, mat_b):
        assert hadamard(mat_a, mat_b).tolist() == [[5, 12], [21, 32]]

    def test_scalar_multiply(self, mat_a):
        assert scalar_multiply(mat_a, 2).tolist() == [[2, 4], [6, 8]]

    def test_results_keep_element_type(self, mat_a, mat_b):
        for result in (sum_sub(mat_a, mat_b), multiply(mat_a, mat_b),
                       hadamard(mat_a, mat_b), scalar_multiply(mat_a, 3)):
            assert result.dtype == np.int64

    def test_array_like_operands(self):
        c = multiply([[1.0, 2.0], [3.0, 4.0]], np.array([[5.0, 6.0], [7.0, 8.0]]))
        assert isinstance(c, Matrix)
        assert c.tolist() == [[19.0, 22.0], [43.0, 50.0]]


# ═══════════════════════════════════════════════════════════════════════
# sum_sub
# ═══════════════════════════════════════════════════════════════════════


class TestSumSub:

    def test_sum_is_default(self, mat_a, mat_b):
        assert sum_sub(mat_a, mat_b) == sum_sub(mat_a, mat_b, SumSubOp.SUM)

    def test_string_aliases(self, mat_a, mat_b):
        assert sum_sub(mat_a, mat_b, 'sum') == sum_sub(mat_a, mat_b, SumSubOp.SUM)
        assert sum_sub(mat_a, mat_b, 'sub') == sum_sub(mat_a, mat_b, SumSubOp.SUB)

    @pytest.mark.parametrize("op", ['add', 'SUM', '', None, 1])
    def test_unknown_op_rejected(self, mat_a, mat_b, op):
        with pytest.raises(InvalidArgumentError, match="unknown operation") as exc_info:
            sum_sub(mat_a, mat_b, op)
        assert exc_info.value.argument == "op"

    def test_commutative(self, rng):
        a = Matrix.from_array(rng.standard_normal((3, 4)))
        b = Matrix.from_array(rng.standard_normal((3, 4)))
        assert sum_sub(a, b) == sum_sub(b, a)

    def test_zero_is_identity(self, random_square):
        assert sum_sub(random_square, zeros_like(random_square)) == random_square

    def test_self_subtraction_is_zero(self, random_square):
        diff = sum_sub(random_square, random_square, 'sub')
        assert diff == zeros_like(random_square)

    @pytest.mark.parametrize("shape_b", [(2, 3), (3, 2), (1, 2)])
    def test_shape_mismatch(self, mat_a, shape_b):
        b = create(*shape_b, dtype=np.int64)
        with pytest.raises(DimensionError):
            sum_sub(mat_a, b)

    def test_dtype_mismatch(self, mat_a):
        b = create(2, 2, 'ones', dtype=np.float64)
        with pytest.raises(ElementTypeError):
            sum_sub(mat_a, b)


# ═══════════════════════════════════════════════════════════════════════
# scalar_multiply
# ═══════════════════════════════════════════════════════════════════════


class TestScalarMultiply:

    def test_float(self):
        m = Matrix.from_array([[1.0, -2.0], [0.5, 4.0]])
        np.testing.assert_allclose(scalar_multiply(m, 1.5).values, [[1.5, -3.0], [0.75, 6.0]])

    def test_zero(self, mat_a):
        assert scalar_multiply(mat_a, 0) == zeros_like(mat_a)

    def test_one_is_identity(self, random_square):
        assert scalar_multiply(random_square, 1.0) == random_square

    def test_non_square(self):
        m = Matrix.from_array([[1, 2, 3]])
        assert scalar_multiply(m, -1).tolist() == [[-1, -2, -3]]

    def test_integral_float_on_int_matrix(self, mat_a):
        assert scalar_multiply(mat_a, 2.0).tolist() == [[2, 4], [6, 8]]

    def test_fraction_on_int_matrix_rejected(self, mat_a):
        with pytest.raises(ElementTypeError):
            scalar_multiply(mat_a, 0.5)

    def test_non_numeric_scalar(self, mat_a):
        with pytest.raises(ValidationError, match="scalar"):
            scalar_multiply(mat_a, "2")

    def test_float32_preserved(self):
        m = create(2, 2, 'ones', dtype=np.float32)
        assert scalar_multiply(m, 3.0).dtype == np.float32


# ═══════════════════════════════════════════════════════════════════════
# multiply
# ═══════════════════════════════════════════════════════════════════════


class TestMultiply:

    def test_identity_law(self, random_square):
        eye = create(4, 4, MatrixKind.IDENTITY)
        assert multiply(random_square, eye) == random_square
        assert multiply(eye, random_square) == random_square

    def test_rectangular_shape(self):
        a = create(2, 3, 'ones')
        b = create(3, 4, 'ones')
        c = multiply(a, b)
        assert c.shape == (2, 4)
        np.testing.assert_array_equal(c.values, np.full((2, 4), 3.0))

    def test_matches_numpy(self, rng):
        a_raw = rng.standard_normal((3, 5))
        b_raw = rng.standard_normal((5, 2))
        c = multiply(Matrix.from_array(a_raw), Matrix.from_array(b_raw))
        np.testing.assert_allclose(c.values, a_raw @ b_raw, rtol=1e-12)

    def test_row_times_column(self):
        c = multiply([[1, 2, 3]], [[4], [5], [6]])
        assert c.shape == (1, 1)
        assert c[0, 0] == 32

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="Inner dimensions"):
            multiply(create(2, 3), create(2, 3))

    def test_dtype_mismatch(self, mat_a):
        with pytest.raises(ElementTypeError):
            multiply(mat_a, create(2, 2, 'identity'))


# ═══════════════════════════════════════════════════════════════════════
# hadamard
# ═══════════════════════════════════════════════════════════════════════


class TestHadamard:

    def test_commutative(self, rng):
        a = Matrix.from_array(rng.integers(-10, 10, size=(3, 3)))
        b = Matrix.from_array(rng.integers(-10, 10, size=(3, 3)))
        assert hadamard(a, b) == hadamard(b, a)

    def test_distributes_over_sum(self, rng):
        a, b, c = (Matrix.from_array(rng.integers(-10, 10, size=(3, 4))) for _ in range(3))
        left = hadamard(a, sum_sub(b, c))
        right = sum_sub(hadamard(a, b), hadamard(a, c))
        assert left == right

    def test_ones_is_identity(self, random_square):
        assert hadamard(random_square, create(4, 4, 'ones')) == random_square

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError):
            hadamard(create(2, 2), create(2, 3))


# ═══════════════════════════════════════════════════════════════════════
# Purity and diagnostics
# ═══════════════════════════════════════════════════════════════════════


class TestPurity:

    def test_inputs_unchanged(self, mat_a, mat_b):
        before_a, before_b = mat_a.copy(), mat_b.copy()
        sum_sub(mat_a, mat_b, 'sub')
        scalar_multiply(mat_a, 5)
        multiply(mat_a, mat_b)
        hadamard(mat_a, mat_b)
        assert mat_a == before_a
        assert mat_b == before_b

    def test_result_is_new_matrix(self, mat_a):
        result = scalar_multiply(mat_a, 1)
        assert result == mat_a
        assert result is not mat_a

    def test_validation_before_compute(self, mat_a):
        """A bad op is reported even when shapes are also wrong."""
        with pytest.raises(InvalidArgumentError):
            sum_sub(mat_a, create(3, 3), 'mul')

    def test_overflow_warns(self):
        big = Matrix.from_array([[1e308, 1.0]])
        with pytest.warns(RuntimeWarning, match="non-finite"):
            result = scalar_multiply(big, 10.0)
        assert np.isinf(result[0, 0])

    def test_finite_results_do_not_warn(self, mat_a, mat_b):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            multiply(mat_a, mat_b)


class TestScalarRange:
    """Scalars too large for the element type are rejected, not leaked as OverflowError."""

    def test_huge_int_on_int_matrix(self):
        with pytest.raises(ElementTypeError, match="outside the range"):
            scalar_multiply(Matrix.from_array([[1, 2]]), 10**400)

    def test_huge_int_on_float_matrix(self):
        with pytest.raises(ElementTypeError, match="outside the range"):
            scalar_multiply(Matrix.from_array([[1.0, 2.0]]), 10**400)

    def test_float_outside_float32(self):
        m = create(2, 2, 'ones', dtype=np.float32)
        with pytest.raises(ElementTypeError, match="outside the range"):
            scalar_multiply(m, 1e39)
