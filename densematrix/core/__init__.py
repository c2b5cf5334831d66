"""
Core infrastructure for densematrix.

This module provides shared abstractions and utilities used by the
matrix library and the polynomial fit.

Key components:
    protocols: Rectangle read capability
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: ndarray kernels, timing, tolerance tiers
"""

from densematrix.core.protocols import Rectangle
from densematrix.core.result import Result
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    ShapeMismatchError,
    NonSquareError,
    OutOfRangeError,
    AddressError,
    NumericalError,
    SingularMatrixError,
    ZeroPivotWarning,
)

__all__ = [
    # Protocols
    "Rectangle",
    # Result
    "Result",
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "ShapeMismatchError",
    "NonSquareError",
    "OutOfRangeError",
    "AddressError",
    "NumericalError",
    "SingularMatrixError",
    "ZeroPivotWarning",
]
