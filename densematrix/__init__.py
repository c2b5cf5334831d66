"""
densematrix: small dense-matrix linear algebra for Python.

Matrices of real numbers with 1-based (row, column) cells, aliasing
views, algebra, cofactor determinants and Gauss-Jordan inverses, plus a
least-squares polynomial fit built on top of them.

Submodules:
    matrix: Matrix, MatrixView, algebra, determinant/inverse, text I/O
    polyfit: Polynomial fitting by the normal equations
    core: Exceptions, validation, protocols, result envelope, timing
"""

__version__ = "0.1.0"

from densematrix import matrix
from densematrix import polyfit
from densematrix.matrix import Matrix, MatrixView

__all__ = [
    "__version__",
    "matrix",
    "polyfit",
    "Matrix",
    "MatrixView",
]
