"""
Shared compute infrastructure for PyAlgebra.

IMPORTANT: This is NOT where kernels live. Those go in
{module}/backends/. This module contains shared execution utilities.

Submodules:
    timing: Execution timing utilities
"""

from pyalgebra.core.compute.timing import Timer

__all__ = [
    "Timer",
]
