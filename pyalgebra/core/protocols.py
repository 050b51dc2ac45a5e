"""
Core protocols for PyAlgebra.

We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to provide the right attributes, not inherit from a base.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

from pyalgebra.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[P]):
    """
    Protocol for computational backends.
    
    Each backend knows how to run a named matrix operation over validated
    numpy operands and produce a payload wrapped in a Result.
    
    Backends are stateless: all configuration is passed per call or at
    construction time. This makes them easy to test and swap.
    
    Type Parameters:
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}'
        Examples: 'cpu_naive'
        """
        ...
    
    def solve(self, operation: str, *operands: Any, **options: Any) -> Result[P]:
        """
        Execute the matrix operation.
        
        Args:
            operation: Operation name ('create', 'sum_sub', 'multiply', ...)
            *operands: Validated 2D numpy arrays
            **options: Operation-specific options
            
        Returns:
            Result envelope containing the payload and metadata
            
        Raises:
            ValidationError: If the operation is unknown to this backend
        """
        ...
