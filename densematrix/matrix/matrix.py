"""
Dense matrix value.

A Matrix owns a (height, width) float64 array and is addressed with
1-based (row, column) coordinates. Its shape is fixed at construction;
cells change only through direct writes or through a MatrixView onto it.

RectangleBase holds everything Matrix and MatrixView have in common:
cell access, overlaying, formatting and the algebra operators. A view is
deliberately not a Matrix. It owns no storage and cannot be reshaped, so
the two are siblings under RectangleBase rather than parent and child.

Operators always return a new Matrix. Compound assignments (+=, -=,
*= and /= by a scalar) write in place, which for a view means writing
into its source.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, TextIO, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from densematrix.core.compute import kernels
from densematrix.core.exceptions import OutOfRangeError
from densematrix.core.protocols import Rectangle
from densematrix.core.validation import (
    check_2d,
    check_array,
    check_coordinate,
    check_index,
    check_rows,
    check_same_shape,
)

if TYPE_CHECKING:
    from densematrix.matrix.view import MatrixView


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


class RectangleBase(ABC):
    """
    Shared behaviour of Matrix and MatrixView.

    Subclasses provide _cells(), a live numpy window onto the storage:
    writes to the returned array are writes to the rectangle.
    """

    # numpy scalars on the left of an operator defer to our reflected ops
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def _cells(self) -> NDArray[np.floating[Any]]:
        ...

    # === Shape ===

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._cells().shape[0]

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._cells().shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width)."""
        return (self.height, self.width)

    def is_same_shape(self, other: Rectangle) -> bool:
        """Check if this and another rectangle have the same dimensions."""
        return self.height == other.height and self.width == other.width

    # === Cell access ===

    def _coordinate(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"cells are addressed as m[row, column], got {key!r}"
            )
        r = check_index(key[0], 'row')
        c = check_index(key[1], 'column')
        check_coordinate(r, c, self.height, self.width)
        return r, c

    def __getitem__(self, key):
        """
        m[r, c] reads a cell; m['R3'] / m['C5'] returns a row/column view.
        """
        if isinstance(key, str):
            from densematrix.matrix.address import address
            return address(self, key)
        r, c = self._coordinate(key)
        return float(self._cells()[r - 1, c - 1])

    def __setitem__(self, key, value) -> None:
        """
        m[r, c] = v writes a cell; m['R3'] = other overwrites a row.
        """
        if isinstance(key, str):
            from densematrix.matrix.address import address
            address(self, key).assign(value)
            return
        r, c = self._coordinate(key)
        if not _is_scalar(value):
            raise TypeError(
                f"cell value must be a real number, got {type(value).__name__}"
            )
        self._cells()[r - 1, c - 1] = float(value)

    def set_at(self, r: int, c: int, sub: Rectangle) -> None:
        """
        Overlay sub onto this rectangle with sub's (1, 1) at (r, c).

        The whole target range is checked before any cell is written.

        Raises:
            OutOfRangeError: If any target cell lies outside this rectangle
        """
        r = check_index(r, 'row')
        c = check_index(c, 'column')
        if not isinstance(sub, Rectangle):
            raise TypeError(
                f"set_at: expected a Matrix or MatrixView, got {type(sub).__name__}"
            )
        if sub.height == 0 or sub.width == 0:
            return
        r_end = r + sub.height - 1
        c_end = c + sub.width - 1
        if not (1 <= r and r_end <= self.height and 1 <= c and c_end <= self.width):
            raise OutOfRangeError(
                f"set_at: a {sub.height}x{sub.width} overlay at ({r}, {c}) "
                f"does not fit the {self.height}x{self.width} matrix"
            )
        # Read first: sub may alias the target region
        values = sub.to_numpy()
        self._cells()[r - 1:r_end, c - 1:c_end] = values

    def view(self, r1: int, c1: int, r2: int, c2: int) -> MatrixView:
        """View of rows r1..r2 and columns c1..c2 (inclusive, 1-based)."""
        from densematrix.matrix.view import MatrixView
        return MatrixView(self, r1, c1, r2, c2)

    def rows(self) -> Iterator[MatrixView]:
        """Iterate over row views, top to bottom."""
        for r in range(1, self.height + 1):
            yield self[f"R{r}"]

    def columns(self) -> Iterator[MatrixView]:
        """Iterate over column views, left to right."""
        for c in range(1, self.width + 1):
            yield self[f"C{c}"]

    # === Conversion ===

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the cells as a (height, width) float64 array."""
        return self._cells().copy()

    def tolist(self) -> list[list[float]]:
        return self._cells().tolist()

    def __array__(self, dtype=None, copy=None):
        values = self.to_numpy()
        return values if dtype is None else values.astype(dtype)

    def transposed(self) -> Matrix:
        """A new Matrix with cell (i, j) equal to this one's (j, i)."""
        from densematrix.matrix.algebra import transpose
        return transpose(self)

    @property
    def T(self) -> Matrix:
        return self.transposed()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        from densematrix.matrix.linalg import determinant
        return determinant(self)

    def inverse(self) -> Matrix:
        """Inverse by Gauss-Jordan elimination."""
        from densematrix.matrix.linalg import _gauss_jordan
        return _gauss_jordan(self, 'matrix', None, stacklevel=3)

    def __str__(self) -> str:
        from densematrix.matrix.formatting import format_matrix
        return format_matrix(self)

    def __eq__(self, other):
        if not isinstance(other, RectangleBase):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._cells(), other._cells())
        )

    # === Algebra (new Matrix) ===

    def __add__(self, other):
        if not isinstance(other, RectangleBase):
            return NotImplemented
        from densematrix.matrix.algebra import add
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, RectangleBase):
            return NotImplemented
        from densematrix.matrix.algebra import subtract
        return subtract(self, other)

    def __neg__(self) -> Matrix:
        from densematrix.matrix.algebra import negate
        return negate(self)

    def __mul__(self, other):
        # Matrix products use @
        if not _is_scalar(other):
            return NotImplemented
        from densematrix.matrix.algebra import scale
        return scale(self, other)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, RectangleBase):
            return NotImplemented
        from densematrix.matrix.algebra import matmul
        return matmul(self, other)

    def __truediv__(self, other):
        """A / k divides every cell; A / B stacks B under A."""
        if _is_scalar(other):
            from densematrix.matrix.algebra import divide
            return divide(self, other)
        if isinstance(other, RectangleBase):
            from densematrix.matrix.algebra import vstack
            return vstack(self, other)
        return NotImplemented

    def __or__(self, other):
        """A | B places B to the right of A."""
        if not isinstance(other, RectangleBase):
            return NotImplemented
        from densematrix.matrix.algebra import hstack
        return hstack(self, other)

    # === Compound assignment (in place) ===

    def __iadd__(self, other):
        if not isinstance(other, RectangleBase):
            return NotImplemented
        check_same_shape(self, other, 'addition')
        values = other.to_numpy()
        cells = self._cells()
        cells += values
        return self

    def __isub__(self, other):
        if not isinstance(other, RectangleBase):
            return NotImplemented
        check_same_shape(self, other, 'subtraction')
        values = other.to_numpy()
        cells = self._cells()
        cells -= values
        return self

    def __imul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        cells = self._cells()
        cells *= float(other)
        return self

    def __itruediv__(self, other):
        # A /= B concatenates, which reshapes: fall back to __truediv__
        if not _is_scalar(other):
            return NotImplemented
        cells = self._cells()
        with np.errstate(divide='ignore', invalid='ignore'):
            cells /= float(other)
        return self


class Matrix(RectangleBase):
    """
    Owned, fixed-shape 2D array of real numbers with 1-based coordinates.

    Construction:
        Matrix()                        # empty, 0x0
        Matrix([[1, 2], [3, 4]])        # list of rows, must be rectangular
        Matrix([1, 2, 3])               # list of numbers: a 3x1 column
        Matrix(other)                   # deep copy of a Matrix or view
        Matrix.from_text("1 2\\n3 4\\n")  # textual format
        Matrix.identity(3), Matrix.zeros(2, 3)

    Raises:
        ShapeMismatchError: If rows have different lengths
        ValidationError: If cells are not real numbers
    """

    def __init__(self, data: Iterable[Any] | Rectangle | np.ndarray | None = None):
        if data is None:
            values = kernels.zeros(0, 0)
        elif isinstance(data, Rectangle):
            values = data.to_numpy()
        elif isinstance(data, np.ndarray):
            values = check_array(data, 'data')
            if values.ndim == 1:
                values = values.reshape(-1, 1)
            check_2d(values, 'data')
        else:
            items = list(data)
            if items and all(_is_scalar(v) for v in items):
                values = check_array(items, 'data').reshape(-1, 1)
            else:
                values = check_rows(items, 'data')
        self._data: NDArray[np.floating[Any]] = values

    def _cells(self) -> NDArray[np.floating[Any]]:
        return self._data

    # === Alternate constructors ===

    @classmethod
    def column(cls, values: Iterable[float]) -> Matrix:
        """Column vector from a sequence of numbers."""
        values = check_array(list(values), 'values')
        return cls(values.reshape(-1, 1))

    @classmethod
    def from_array(cls, array: Any) -> Matrix:
        """Copy of a 2D array-like."""
        values = check_array(array, 'array')
        check_2d(values, 'array')
        return cls(values)

    @classmethod
    def from_stream(cls, stream: TextIO) -> Matrix:
        """Read a matrix in the textual format; see densematrix.matrix.parser."""
        from densematrix.matrix.parser import parse_matrix
        return parse_matrix(stream)

    @classmethod
    def from_text(cls, text: str) -> Matrix:
        from densematrix.matrix.parser import parse_text
        return parse_text(text)

    @staticmethod
    def identity(n: int) -> Matrix:
        """n x n matrix with ones on the main diagonal."""
        from densematrix.matrix.algebra import identity
        return identity(n)

    @staticmethod
    def zeros(height: int, width: int) -> Matrix:
        from densematrix.matrix.algebra import zeros
        return zeros(height, width)

    # === Copying ===

    def copy(self) -> Matrix:
        """Deep copy; shares no storage with this matrix or its views."""
        return Matrix(self)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo) -> Matrix:
        return self.copy()

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r})"
