"""
Computational infrastructure for densematrix.

Submodules:
    kernels: ndarray kernels behind the matrix algebra
    timing: Execution timing utilities
    tolerances: Named tolerance tiers for numeric comparison
"""

from densematrix.core.compute.timing import Timer, timed
from densematrix.core.compute.tolerances import (
    EXACT,
    GAUSS_JORDAN,
    POLYFIT,
    ToleranceTier,
    inverse_tolerance,
)

__all__ = [
    "Timer",
    "timed",
    "ToleranceTier",
    "EXACT",
    "GAUSS_JORDAN",
    "POLYFIT",
    "inverse_tolerance",
]
