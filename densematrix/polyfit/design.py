"""
Polynomial fit design.

A PolyfitDesign holds validated (x, y) samples and the polynomial order,
and knows how to build the matrices of the normal equations: the
Vandermonde matrix V (row i is xᵢⁿ … xᵢ 1) and the response column y.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import ShapeMismatchError, ValidationError
from densematrix.core.protocols import Rectangle
from densematrix.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_index,
    check_min_samples,
)
from densematrix.matrix import Matrix, hstack


@dataclass(frozen=True)
class PolyfitDesign:
    """
    Samples and order for a least-squares polynomial fit.

    Immutable after construction.

    Construction:
        PolyfitDesign.from_arrays(x, y, order=2)
        PolyfitDesign.from_pairs([(0, 1), (1, 2), (2, 5)], order=2)
        PolyfitDesign.from_matrix(data, order=2)     # n x 2 Matrix of (x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _order: int

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike, order: int) -> PolyfitDesign:
        """Build from separate x and y sequences."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr, order)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]], order: int) -> PolyfitDesign:
        """Build from (x, y) pairs."""
        data = check_array(list(pairs), 'pairs')
        if data.size == 0:
            data = data.reshape(0, 2)
        if data.ndim != 2 or data.shape[1] != 2:
            raise ShapeMismatchError(
                f"pairs: expected (x, y) pairs, got array of shape {data.shape}"
            )
        return cls._build(data[:, 0], data[:, 1], order)

    @classmethod
    def from_matrix(cls, data: Rectangle, order: int) -> PolyfitDesign:
        """Build from an n x 2 matrix whose columns are x and y."""
        if data.height > 0 and data.width != 2:
            raise ShapeMismatchError(
                f"data: expected 2 columns (x, y), got {data.width}"
            )
        values = data.to_numpy().reshape(-1, 2)
        return cls._build(values[:, 0], values[:, 1], order)

    @classmethod
    def _build(
        cls,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        order: int,
    ) -> PolyfitDesign:
        """Internal builder with validation."""
        order = check_index(order, 'order')
        if order < 0:
            raise ValidationError(f"order: must be non-negative, got {order}")

        check_1d(x, 'x')
        check_1d(y, 'y')
        check_finite(x, 'x')
        check_finite(y, 'y')
        if x.shape[0] != y.shape[0]:
            raise ShapeMismatchError(
                f"Inconsistent lengths: x={x.shape[0]}, y={y.shape[0]}"
            )
        check_min_samples(x, order + 1, 'x')

        return cls(_x=x.copy(), _y=y.copy(), _order=order)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def order(self) -> int:
        """Degree of the fitted polynomial."""
        return self._order

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._x.shape[0]

    @property
    def p(self) -> int:
        """Number of coefficients (order + 1)."""
        return self._order + 1

    # === Matrices ===

    def data(self) -> Matrix:
        """The samples as an n x 2 matrix of (x, y) rows."""
        return hstack(Matrix.column(self._x), Matrix.column(self._y))

    def vandermonde(self) -> Matrix:
        """
        n x (order + 1) matrix with columns xⁿ … x¹ x⁰.

        Powers 1 and 0 are the samples themselves and ones, not x ** k.
        """
        V = Matrix.zeros(self.n, self.p)
        for i, x in enumerate(self._x, start=1):
            for j in range(1, self.p + 1):
                power = self._order - j + 1
                if power == 0:
                    V[i, j] = 1.0
                elif power == 1:
                    V[i, j] = x
                else:
                    V[i, j] = x ** power
        return V

    def response(self) -> Matrix:
        """The y samples as an n x 1 column."""
        return Matrix.column(self._y)
