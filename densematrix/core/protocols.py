"""
Core protocols for densematrix.

These define the structural interfaces that algebra, determinant and
inverse code relies on. We use Protocol (structural typing) rather than
ABC (nominal typing) so that anything exposing the read capability can
take part in algebra as a read-only operand, whether it owns storage
(Matrix) or aliases someone else's (MatrixView).

Design Principles:
    - Minimal contract: read a cell, know your shape, hand out a copy
    - Writing stays on the concrete classes, which know their storage
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Rectangle(Protocol):
    """
    Read-only rectangle of real numbers with 1-based coordinates.

    Implemented by Matrix and MatrixView.
    """

    @property
    def height(self) -> int:
        """Number of rows."""
        ...

    @property
    def width(self) -> int:
        """Number of columns."""
        ...

    def __getitem__(self, key: Any) -> Any:
        """Read cell (r, c), 1-based."""
        ...

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """
        Copy of the cells as a (height, width) float64 array.

        Kernels operate on this; the copy never aliases the rectangle.
        """
        ...

