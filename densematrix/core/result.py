"""
Generic result container for densematrix computations.

The Result class provides a standardized envelope for computations that
go beyond a single matrix value (currently the polynomial fit). This
keeps timing, method metadata and non-fatal warnings in one place while
allowing each computation to define its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, sizes, determinant)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The computation-specific parameter payload type

    Attributes:
        params: Computation-specific parameters (coefficients, etc.)
        info: Structured metadata (method, order, determinant)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PolyfitParams(...),
        ...     info={'method': 'normal_equations', 'order': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='gauss_jordan'
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
