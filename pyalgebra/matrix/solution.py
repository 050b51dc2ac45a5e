"""
Matrix solution types.

Contains the parameter payload produced by matrix backends and the
conversion from a backend Result to the user-facing Matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyalgebra.core.result import Result
from pyalgebra.matrix.design import Matrix


@dataclass(frozen=True)
class MatrixParams:
    """
    Parameter payload for matrix operations.

    Attributes
    ----------
    values : ndarray
        Freshly allocated result array, shape (rows, columns).
    """
    values: NDArray[Any]

    @property
    def shape(self) -> tuple[int, ...]:
        return self.values.shape

    @property
    def dtype(self) -> np.dtype:
        return self.values.dtype


def to_matrix(result: Result[MatrixParams]) -> Matrix:
    """Unwrap a backend Result into a Matrix."""
    return Matrix._build(result.params.values, result.info.get('operation', 'result'))
