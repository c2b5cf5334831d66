"""
Dense matrices of real numbers.

Public API:
    Matrix: owned, fixed-shape matrix with 1-based (row, column) cells
    MatrixView: aliasing window onto a Matrix
    address(M, 'R3'), M['R3']: row/column views
    determinant, inverse: cofactor expansion and Gauss-Jordan elimination
    add, subtract, negate, scale, divide, matmul, transpose, vstack, hstack,
    identity, zeros: functional algebra
    parse_matrix, parse_text: textual input

Example:
    >>> from densematrix.matrix import Matrix
    >>> A = Matrix([[1, 2], [3, 4]])
    >>> A.determinant()
    -2.0
    >>> A['R2'] = [[0, 0]]
    >>> B = A | Matrix([5, 6])
"""

from densematrix.matrix.matrix import Matrix, RectangleBase
from densematrix.matrix.view import MatrixView
from densematrix.matrix.algebra import (
    add,
    divide,
    hstack,
    identity,
    matmul,
    negate,
    scale,
    subtract,
    transpose,
    vstack,
    zeros,
)
from densematrix.matrix.address import Address, address, parse_address
from densematrix.matrix.linalg import determinant, inverse
from densematrix.matrix.parser import parse_matrix, parse_text
from densematrix.matrix.formatting import format_matrix

__all__ = [
    "Matrix",
    "MatrixView",
    "RectangleBase",
    # Algebra
    "add",
    "subtract",
    "negate",
    "scale",
    "divide",
    "matmul",
    "transpose",
    "vstack",
    "hstack",
    "identity",
    "zeros",
    # Addressing
    "Address",
    "address",
    "parse_address",
    # Determinant / inverse
    "determinant",
    "inverse",
    # Text
    "parse_matrix",
    "parse_text",
    "format_matrix",
]
