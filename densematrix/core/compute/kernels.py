"""
Array kernels for the matrix algebra.

Stateless functions on 2D float64 numpy arrays. They assume their inputs
were already validated by the caller (shape checks live at the public
boundary in densematrix.matrix) and always return freshly allocated
arrays, never views of their inputs.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

Array = NDArray[np.floating[Any]]


def scale(a: Array, k: float) -> Array:
    """Element-wise a * k."""
    return a * k


def divide(a: Array, k: float) -> Array:
    """
    Element-wise a / k.

    Division by zero yields IEEE inf or NaN without a RuntimeWarning.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return a / k


def add(a: Array, b: Array) -> Array:
    return a + b


def subtract(a: Array, b: Array) -> Array:
    return a - b


def matmul(a: Array, b: Array) -> Array:
    """
    C[r, c] = sum_k A[r, k] * B[k, c].

    An inner dimension of zero gives a zero-filled (a.height, b.width) result.
    """
    return a @ b


def transpose(a: Array) -> Array:
    return np.ascontiguousarray(a.T)


def vstack(top: Array, bottom: Array) -> Array:
    """Stack rows of bottom under top (equal widths)."""
    return np.concatenate([top, bottom], axis=0)


def hstack(left: Array, right: Array) -> Array:
    """
    Stack columns of right beside left (equal heights).

    Equivalent to transpose(vstack(transpose(left), transpose(right))).
    """
    return np.concatenate([left, right], axis=1)


def identity(n: int) -> Array:
    return np.eye(n, dtype=np.float64)


def zeros(height: int, width: int) -> Array:
    return np.zeros((height, width), dtype=np.float64)
