"""
CPU reference backend for matrix operations.

Operands arrive already validated by the solvers: 2D, non-empty, same
dtype, and shape-compatible for the requested operation.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyalgebra.core.result import Result
from pyalgebra.core.compute.timing import Timer
from pyalgebra.core.exceptions import ValidationError
from pyalgebra.matrix._common import MatrixKind, SumSubOp
from pyalgebra.matrix.solution import MatrixParams


class CPUMatrixBackend:
    """CPU reference backend for matrix construction and arithmetic."""

    @property
    def name(self) -> str:
        return 'cpu_naive'

    def solve(self, operation: str, *operands: NDArray[Any], **options: Any) -> Result[MatrixParams]:
        """
        Run one matrix operation.

        Parameters
        ----------
        operation : str
            'create', 'sum_sub', 'scalar_multiply', 'multiply' or 'hadamard'.
        *operands : ndarray
            Input arrays. None for 'create', one for 'scalar_multiply',
            two otherwise.
        **options
            'create': shape, kind, dtype, bounds, rng.
            'sum_sub': op.
            'scalar_multiply': scalar.
        """
        kernels = {
            'create': self._create,
            'sum_sub': self._sum_sub,
            'scalar_multiply': self._scalar_multiply,
            'multiply': self._multiply,
            'hadamard': self._hadamard,
        }
        if operation not in kernels:
            raise ValidationError(
                f"Unknown operation: {operation!r}. Must be one of {sorted(kernels)}"
            )

        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('kernel'):
            with np.errstate(over='ignore', invalid='ignore'):
                values = kernels[operation](*operands, **options)

        with timer.section('finite_check'):
            if np.issubdtype(values.dtype, np.floating):
                n_bad = int(np.sum(~np.isfinite(values)))
                if n_bad:
                    msg = f"{operation} produced {n_bad} non-finite value(s)"
                    warnings_list.append(msg)
                    warnings.warn(msg, RuntimeWarning, stacklevel=3)

        timer.stop()

        info: dict[str, Any] = {
            'operation': operation,
            'shape': values.shape,
            'dtype': str(values.dtype),
        }
        if operation == 'create':
            info['kind'] = options['kind'].value
        elif operation == 'sum_sub':
            info['op'] = options['op'].value

        return Result(
            params=MatrixParams(values=values),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    # ------------------------------------------------------------------
    # Kernels
    # ------------------------------------------------------------------

    def _create(
        self,
        *,
        shape: tuple[int, int],
        kind: MatrixKind,
        dtype: np.dtype,
        bounds: tuple[Any, Any] | None = None,
        rng: np.random.Generator | None = None,
    ) -> NDArray[Any]:
        rows, columns = shape
        matrix = np.zeros(shape, dtype=dtype)

        if kind is MatrixKind.ONES:
            matrix.fill(1)
        elif kind is MatrixKind.IDENTITY:
            for i in range(min(rows, columns)):
                matrix[i, i] = 1
        elif kind is MatrixKind.RANDOM:
            low, high = bounds
            if rng is None:
                rng = np.random.default_rng()
            if np.issubdtype(dtype, np.integer):
                matrix[...] = rng.integers(low, high, size=shape, dtype=dtype)
            else:
                # low + u*high - u*low keeps every intermediate finite even when
                # high - low does not fit in the element type
                u = rng.random(size=shape)
                drawn = (low + u * high - u * low).astype(dtype)
                # Rounding (or narrowing to float32) can land outside [low, high)
                low_t, high_t = dtype.type(low), dtype.type(high)
                below = np.nextafter(high_t, low_t)
                matrix[...] = np.clip(drawn, low_t, below)

        return matrix

    def _sum_sub(self, a: NDArray[Any], b: NDArray[Any], *, op: SumSubOp) -> NDArray[Any]:
        if op is SumSubOp.SUB:
            return np.subtract(a, b, dtype=a.dtype)
        return np.add(a, b, dtype=a.dtype)

    def _scalar_multiply(self, matrix: NDArray[Any], *, scalar: np.generic) -> NDArray[Any]:
        return np.multiply(matrix, scalar, dtype=matrix.dtype)

    def _multiply(self, a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
        rows, inner = a.shape
        columns = b.shape[1]
        zero = a.dtype.type(0)

        result = np.zeros((rows, columns), dtype=a.dtype)
        for i in range(rows):
            for j in range(columns):
                acc = zero
                for k in range(inner):
                    acc += a[i, k] * b[k, j]
                result[i, j] = acc
        return result

    def _hadamard(self, a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
        return np.multiply(a, b, dtype=a.dtype)
