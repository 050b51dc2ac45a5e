"""
Generic result container for PyAlgebra backends.

Every backend kernel returns a Result envelope. Solvers unwrap the payload
into the user-facing type, while the envelope keeps timing, diagnostics and
warnings in one place.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (operation, shape, dtype)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.
    
    Type Parameters:
        P: The payload type produced by the backend
        
    Attributes:
        params: Backend payload (result values)
        info: Structured metadata (operation, shape, dtype)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=MatrixParams(values=c),
        ...     info={'operation': 'multiply', 'shape': (2, 2)},
        ...     timing={'total_seconds': 0.0001, 'kernel': 0.00008},
        ...     backend_name='cpu_naive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
