"""
Determinant and inverse.

determinant() uses recursive cofactor expansion along the first row. It
is O(n!) and meant for the small matrices this library works with (the
normal matrix of a low-order polynomial fit, for instance).

inverse() uses Gauss-Jordan elimination on a copy of the input and an
identity matrix in parallel, working row by row through views. There is
no pivot search: rows are used in their given order, so a zero reached
on the diagonal divides by zero even when the matrix is invertible. When
that happens a ZeroPivotWarning is issued and the result carries the
IEEE infinities and NaNs the division produced.
"""

import warnings

import numpy as np

from densematrix.core.exceptions import SingularMatrixError, ZeroPivotWarning
from densematrix.core.protocols import Rectangle
from densematrix.core.validation import check_square
from densematrix.matrix.algebra import hstack, identity
from densematrix.matrix.matrix import Matrix
from densematrix.matrix.view import MatrixView


def _as_viewable(matrix: Rectangle) -> Matrix | MatrixView:
    if isinstance(matrix, (Matrix, MatrixView)):
        return matrix
    return Matrix(matrix)


def _sign(column: int) -> int:
    """Cofactor sign along row 1: + for odd columns, - for even."""
    return 1 if column % 2 == 1 else -1


def _minor(matrix: Matrix | MatrixView, column: int) -> Matrix | MatrixView:
    """The matrix left after deleting row 1 and the given column."""
    n = matrix.width
    if column == 1:
        return MatrixView(matrix, 2, 2, n, n)
    if column == n:
        return MatrixView(matrix, 2, 1, n, n - 1)
    return hstack(
        MatrixView(matrix, 2, 1, n, column - 1),
        MatrixView(matrix, 2, column + 1, n, n),
    )


def _cofactor_expansion(matrix: Matrix | MatrixView) -> float:
    n = matrix.width
    if n == 0:
        return 1.0
    if n == 1:
        return matrix[1, 1]
    if n == 2:
        return matrix[1, 1] * matrix[2, 2] - matrix[1, 2] * matrix[2, 1]

    total = 0.0
    for column in range(1, n + 1):
        total += (
            _sign(column)
            * matrix[1, column]
            * _cofactor_expansion(_minor(matrix, column))
        )
    return total


def determinant(matrix: Rectangle) -> float:
    """
    Determinant by cofactor expansion along the first row.

    The empty (0x0) matrix has determinant 1.

    Raises:
        NonSquareError: If the matrix is not square
    """
    check_square(matrix, 'determinant')
    return _cofactor_expansion(_as_viewable(matrix))


def inverse(
    matrix: Rectangle,
    *,
    name: str = 'matrix',
    determinant: float | None = None,
) -> Matrix:
    """
    Inverse by Gauss-Jordan elimination without pivoting.

    For each pivot row r, row r of both the working copy L and the
    accumulating identity R is divided by L[r, r]; then every other row
    r' has L[r', r] times row r subtracted from it, in both L and R. After
    n rounds L is the identity and R the inverse. The input is never
    modified.

    Args:
        matrix: Square matrix to invert
        name: Description used in the SingularMatrixError message
        determinant: Determinant of matrix if the caller already has it;
            computed by cofactor expansion otherwise

    Raises:
        NonSquareError: If the matrix is not square
        SingularMatrixError: If the determinant is zero

    Warns:
        ZeroPivotWarning: If a zero lands on the diagonal during elimination
    """
    return _gauss_jordan(matrix, name, determinant, stacklevel=3)


def _gauss_jordan(
    matrix: Rectangle, name: str, det: float | None, *, stacklevel: int
) -> Matrix:
    """Body of inverse(); stacklevel reaches the public caller."""
    check_square(matrix, 'inverse')
    if det is None:
        det = determinant(matrix)
    if det == 0:
        raise SingularMatrixError(
            f"{name} is not invertible: determinant is 0",
            matrix_name=name,
            determinant=det,
        )

    n = matrix.height
    left = Matrix(matrix)
    right = identity(n)

    # After a zero pivot, inf - inf and inf * 0 are expected; the
    # ZeroPivotWarning already reports it
    with np.errstate(invalid='ignore'):
        for r in range(1, n + 1):
            pivot_address = f"R{r}"
            left_row = left[pivot_address]
            right_row = right[pivot_address]

            pivot = left[r, r]
            if pivot == 0:
                warnings.warn(
                    f"zero pivot at row {r} of {n}; elimination without pivoting "
                    f"divides by zero and the inverse will contain inf/NaN",
                    ZeroPivotWarning,
                    stacklevel=stacklevel,
                )
            left_row /= pivot
            right_row /= pivot

            for other in range(1, n + 1):
                if other == r:
                    continue
                other_address = f"R{other}"
                factor = left[other, r]
                left[other_address] -= factor * left_row
                right[other_address] -= factor * right_row

    return right
