"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Index and address errors additionally inherit
from the matching builtin (IndexError, ValueError) so callers that
only know Python's own exceptions still catch them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, for
    example non-numeric cell data.
    """
    pass


class ShapeMismatchError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent.

    Raised for ragged rows at construction or parse time, and when the
    operands of an operation have incompatible shapes (addition,
    multiplication, concatenation, view assignment).
    """
    pass


class NonSquareError(ValidationError):
    """
    A square matrix was required.

    Attributes:
        shape: The (height, width) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class OutOfRangeError(ValidationError, IndexError):
    """
    A coordinate lies outside a matrix or view.

    Raised for cell reads and writes, view bounds that exceed the
    source, and set_at overlays that do not fit.
    """
    pass


class AddressError(ValidationError, ValueError):
    """
    Row/column address string is malformed.

    Attributes:
        address: The address string as given
    """

    def __init__(self, message: str, address: str | None = None):
        super().__init__(message)
        self.address = address


class NumericalError(DenseMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but the
    determinant is zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class ZeroPivotWarning(RuntimeWarning):
    """
    Gauss-Jordan elimination met a zero on the diagonal.

    Elimination runs without pivoting, so a zero diagonal element of a
    non-singular matrix divides by zero and the result contains
    infinities or NaNs.
    """
    pass
