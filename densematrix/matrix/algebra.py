"""
Matrix algebra.

Functional form of the operators on Matrix and MatrixView. Every function
accepts any Rectangle (Matrix or view) as a read-only operand, validates
shapes before computing, and returns a new Matrix that shares no storage
with its operands.

    Operator      Function
    k * A         scale(A, k)
    A / k         divide(A, k)
    -A            negate(A)
    A + B         add(A, B)
    A - B         subtract(A, B)
    A @ B         matmul(A, B)
    A.T           transpose(A)
    A / B         vstack(A, B)
    A | B         hstack(A, B)
"""

import numbers

from densematrix.core.compute import kernels
from densematrix.core.exceptions import ShapeMismatchError, ValidationError
from densematrix.core.protocols import Rectangle
from densematrix.core.validation import check_index, check_same_shape
from densematrix.matrix.matrix import Matrix


def _check_rectangle(value, name: str) -> None:
    if not isinstance(value, Rectangle):
        raise TypeError(
            f"{name}: expected a Matrix or MatrixView, got {type(value).__name__}"
        )


def _check_scalar(value, name: str) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name}: expected a real number, got {type(value).__name__}")
    return float(value)


def _check_dimension(value, name: str) -> int:
    value = check_index(value, name)
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value


# === Scalar operations ===

def scale(matrix: Rectangle, k: float) -> Matrix:
    """Multiply every cell by k."""
    _check_rectangle(matrix, 'matrix')
    return Matrix(kernels.scale(matrix.to_numpy(), _check_scalar(k, 'k')))


def divide(matrix: Rectangle, k: float) -> Matrix:
    """
    Divide every cell by k.

    k == 0 gives IEEE infinities (or NaN for 0 / 0); no error is raised.
    """
    _check_rectangle(matrix, 'matrix')
    return Matrix(kernels.divide(matrix.to_numpy(), _check_scalar(k, 'k')))


def negate(matrix: Rectangle) -> Matrix:
    """Same as scale(matrix, -1)."""
    return scale(matrix, -1.0)


# === Element-wise operations ===

def add(left: Rectangle, right: Rectangle) -> Matrix:
    """
    Element-wise sum.

    Raises:
        ShapeMismatchError: If the operands differ in either dimension
    """
    _check_rectangle(left, 'left')
    _check_rectangle(right, 'right')
    check_same_shape(left, right, 'addition')
    return Matrix(kernels.add(left.to_numpy(), right.to_numpy()))


def subtract(left: Rectangle, right: Rectangle) -> Matrix:
    """
    Element-wise difference.

    Raises:
        ShapeMismatchError: If the operands differ in either dimension
    """
    _check_rectangle(left, 'left')
    _check_rectangle(right, 'right')
    check_same_shape(left, right, 'subtraction')
    return Matrix(kernels.subtract(left.to_numpy(), right.to_numpy()))


# === Products and rearrangements ===

def matmul(left: Rectangle, right: Rectangle) -> Matrix:
    """
    Matrix product, of shape (left.height, right.width).

    Raises:
        ShapeMismatchError: If left.width != right.height
    """
    _check_rectangle(left, 'left')
    _check_rectangle(right, 'right')
    if left.width != right.height:
        raise ShapeMismatchError(
            f"matrix multiplication: right operand must have as many rows as "
            f"the left has columns, got {left.height}x{left.width} and "
            f"{right.height}x{right.width}"
        )
    return Matrix(kernels.matmul(left.to_numpy(), right.to_numpy()))


def transpose(matrix: Rectangle) -> Matrix:
    """New Matrix with swapped dimensions; cell (i, j) is matrix's (j, i)."""
    _check_rectangle(matrix, 'matrix')
    return Matrix(kernels.transpose(matrix.to_numpy()))


def vstack(top: Rectangle, bottom: Rectangle) -> Matrix:
    """
    Stack bottom under top.

    Raises:
        ShapeMismatchError: If the widths differ
    """
    _check_rectangle(top, 'top')
    _check_rectangle(bottom, 'bottom')
    if top.width != bottom.width:
        raise ShapeMismatchError(
            f"can't vertically concatenate matrices of different widths: "
            f"{top.width} and {bottom.width}"
        )
    return Matrix(kernels.vstack(top.to_numpy(), bottom.to_numpy()))


def hstack(left: Rectangle, right: Rectangle) -> Matrix:
    """
    Place right beside left.

    Raises:
        ShapeMismatchError: If the heights differ
    """
    _check_rectangle(left, 'left')
    _check_rectangle(right, 'right')
    if left.height != right.height:
        raise ShapeMismatchError(
            f"can't horizontally concatenate matrices of different heights: "
            f"{left.height} and {right.height}"
        )
    return Matrix(kernels.hstack(left.to_numpy(), right.to_numpy()))


# === Constructors ===

def identity(n: int) -> Matrix:
    """n x n matrix with 1 on the main diagonal and 0 elsewhere."""
    return Matrix(kernels.identity(_check_dimension(n, 'n')))


def zeros(height: int, width: int) -> Matrix:
    return Matrix(kernels.zeros(
        _check_dimension(height, 'height'),
        _check_dimension(width, 'width'),
    ))
