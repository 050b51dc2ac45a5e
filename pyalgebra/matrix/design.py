"""
Matrix: immutable dense matrix container.

Wraps a 2D numpy array of a single real numeric element type and provides
validation, metadata and value semantics for the matrix pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pyalgebra.core.validation import check_array, check_2d, check_nonempty


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense, row-major, rectangular matrix.

    The element type is carried as a numpy dtype (integer or floating).
    The stored array is a private read-only copy, so a Matrix never changes
    after construction. Arithmetic produces new matrices.

    Construction:
        Matrix.from_array([[1, 2], [3, 4]])
        Matrix.from_array(data, dtype=np.float32)
        pyalgebra.create(3, 3, 'identity')
    """
    _data: NDArray[Any]
    _rows: int
    _columns: int

    @classmethod
    def from_array(cls, data: ArrayLike | Matrix, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a Matrix from array-like data.

        Parameters
        ----------
        data : array-like or Matrix
            2D nested sequence or numpy array. Rows must all have the same
            length.
        dtype : dtype, optional
            Element type to cast to. If None, the inferred type is kept.
        """
        if isinstance(data, Matrix):
            data = data._data
        return cls._build(check_array(data, "data", dtype=dtype), "data")

    @classmethod
    def _build(cls, data: NDArray[Any], name: str) -> Matrix:
        """Internal builder with validation."""
        check_2d(data, name)
        check_nonempty(data, name)

        frozen = np.array(data, copy=True, order='C')
        frozen.setflags(write=False)

        rows, columns = frozen.shape
        return cls(_data=frozen, _rows=rows, _columns=columns)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._data.dtype

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    @property
    def values(self) -> NDArray[Any]:
        """Writeable copy of the matrix contents, shape (rows, columns)."""
        return self._data.copy()

    def tolist(self) -> list[list[Any]]:
        """Contents as nested Python lists, one list per row."""
        return self._data.tolist()

    def copy(self) -> Matrix:
        """Independent matrix with the same contents."""
        return Matrix._build(self._data, "matrix")

    def __getitem__(self, index: tuple[int, int]) -> Any:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(f"Matrix indices must be a (row, column) pair, got {index!r}")
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __str__(self) -> str:
        from pyalgebra.matrix.display import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, dtype={self.dtype})"
