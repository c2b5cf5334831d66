"""
Views onto a Matrix.

A MatrixView is a fixed rectangular window onto a source Matrix. It owns
no cells: reads and writes go straight through to the source, and writes
to the source are visible through the view. The window itself cannot be
moved or resized.

Views are never nested. A view of a view is resolved at construction to
a view of the underlying Matrix with composed bounds.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from densematrix.core.protocols import Rectangle
from densematrix.core.validation import check_bounds, check_index, check_same_shape
from densematrix.matrix.matrix import Matrix, RectangleBase


class MatrixView(RectangleBase):
    """
    Window from (r1, c1) to (r2, c2), inclusive and 1-based, of a Matrix.

    Local cell (r, c) is source cell (r1 + r - 1, c1 + c - 1).

    Args:
        source: Matrix (or MatrixView) to look into
        r1, c1: Top-left corner in source coordinates
        r2, c2: Bottom-right corner in source coordinates

    Raises:
        OutOfRangeError: Unless 1 <= r1 <= r2 <= source.height and
            1 <= c1 <= c2 <= source.width
    """

    def __init__(self, source: Matrix | MatrixView, r1: int, c1: int, r2: int, c2: int):
        r1 = check_index(r1, 'r1')
        c1 = check_index(c1, 'c1')
        r2 = check_index(r2, 'r2')
        c2 = check_index(c2, 'c2')

        if not isinstance(source, (Matrix, MatrixView)):
            raise TypeError(
                f"MatrixView source must be a Matrix or MatrixView, got {type(source).__name__}"
            )
        check_bounds(r1, c1, r2, c2, source.height, source.width)

        if isinstance(source, MatrixView):
            row_offset = source._r1 - 1
            column_offset = source._c1 - 1
            source = source._source
            r1, r2 = r1 + row_offset, r2 + row_offset
            c1, c2 = c1 + column_offset, c2 + column_offset

        self._source: Matrix = source
        self._r1 = r1
        self._c1 = c1
        self._r2 = r2
        self._c2 = c2

    def _cells(self) -> NDArray[np.floating[Any]]:
        return self._source._cells()[self._r1 - 1:self._r2, self._c1 - 1:self._c2]

    @property
    def height(self) -> int:
        return self._r2 - self._r1 + 1

    @property
    def width(self) -> int:
        return self._c2 - self._c1 + 1

    @property
    def source(self) -> Matrix:
        """The Matrix this view writes into."""
        return self._source

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """(r1, c1, r2, c2) in source coordinates."""
        return (self._r1, self._c1, self._r2, self._c2)

    def assign(self, other: Rectangle | Any) -> MatrixView:
        """
        Overwrite the viewed cells with other's cells.

        other may be a Matrix, another view (even one overlapping this
        one) or anything Matrix() accepts, such as a list of rows.

        Raises:
            ShapeMismatchError: If other's dimensions differ from the view's
        """
        if not isinstance(other, Rectangle):
            other = Matrix(other)
        check_same_shape(self, other, 'view assignment')
        self.set_at(1, 1, other)
        return self

    def materialize(self) -> Matrix:
        """Owning copy of the viewed cells."""
        return Matrix(self)

    def __repr__(self) -> str:
        return (
            f"MatrixView(<Matrix {self._source.height}x{self._source.width}>, "
            f"{self._r1}, {self._c1}, {self._r2}, {self._c2})"
        )
