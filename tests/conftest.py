"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyalgebra import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def mat_a():
    """A = [[1, 2], [3, 4]] as int64."""
    return Matrix.from_array([[1, 2], [3, 4]], dtype=np.int64)


@pytest.fixture
def mat_b():
    """B = [[5, 6], [7, 8]] as int64."""
    return Matrix.from_array([[5, 6], [7, 8]], dtype=np.int64)


@pytest.fixture
def random_square(rng):
    """Random 4x4 float64 matrix."""
    return Matrix.from_array(rng.standard_normal((4, 4)))
