"""
Common types and constants for the matrix module.

Defines the construction modes (MatrixKind), the sum/subtract selector
(SumSubOp) and the defaults shared by construction, display and the
arithmetic solvers.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

import numpy as np

from pyalgebra.core.exceptions import InvalidArgumentError


DEFAULT_DTYPE = np.float64
DISPLAY_WIDTH = 7
VALID_BACKENDS = ('auto', 'cpu')

BackendChoice = Literal['auto', 'cpu']


class MatrixKind(Enum):
    """Initial contents of a newly created matrix."""
    ZEROS = 'zeros'
    ONES = 'ones'
    IDENTITY = 'identity'
    RANDOM = 'random'


class SumSubOp(Enum):
    """Elementwise operation applied by sum_sub()."""
    SUM = 'sum'
    SUB = 'sub'


def as_kind(kind: MatrixKind | str) -> MatrixKind:
    """Resolve a MatrixKind or its string value. Unknown values raise."""
    if isinstance(kind, MatrixKind):
        return kind
    try:
        return MatrixKind(kind)
    except ValueError:
        valid = ", ".join(repr(k.value) for k in MatrixKind)
        raise InvalidArgumentError(
            f"kind: unknown matrix kind {kind!r}, must be one of {valid}",
            argument="kind",
            value=kind,
        ) from None


def as_op(op: SumSubOp | str) -> SumSubOp:
    """Resolve a SumSubOp or its string value. Unknown values raise."""
    if isinstance(op, SumSubOp):
        return op
    try:
        return SumSubOp(op)
    except ValueError:
        raise InvalidArgumentError(
            f"op: unknown operation {op!r}, must be 'sum' or 'sub'",
            argument="op",
            value=op,
        ) from None
