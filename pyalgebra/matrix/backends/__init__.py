"""
Matrix backends.

Available backends:
    cpu: Reference implementation (naive loops over numpy storage)
"""

from pyalgebra.matrix.backends.cpu import CPUMatrixBackend

__all__ = ["CPUMatrixBackend"]
