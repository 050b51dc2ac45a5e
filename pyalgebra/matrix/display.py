"""
Console display of matrices.

Human-readable text for inspection and debugging; not a stable
machine-readable format.
"""

from __future__ import annotations

import sys
from typing import TextIO

from pyalgebra.core.exceptions import InvalidArgumentError
from pyalgebra.matrix._common import DISPLAY_WIDTH
from pyalgebra.matrix.design import Matrix


def format_matrix(matrix: Matrix, *, width: int = DISPLAY_WIDTH) -> str:
    """
    Render a matrix as text.

    Each element is centered in a field of ``width`` characters and
    followed by one space; each row ends with a newline and the whole
    matrix is followed by a blank line. Wider values are not truncated.
    """
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise InvalidArgumentError(
            f"width: expected a positive integer, got {width!r}",
            argument="width",
            value=width,
        )

    lines = []
    for row in matrix.tolist():
        lines.append("".join(f"{elem:^{width}} " for elem in row))
    return "\n".join(lines) + "\n\n"


def display(matrix: Matrix, *, file: TextIO | None = None, width: int = DISPLAY_WIDTH) -> None:
    """Write format_matrix(matrix) to ``file`` (default sys.stdout)."""
    text = format_matrix(matrix, width=width)
    (sys.stdout if file is None else file).write(text)
