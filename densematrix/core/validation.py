"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every public operation that
mutates a matrix validates first, so a failure never leaves a matrix
half written.

Design principles:
    - No silent type coercion (except float conversion of numeric data)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in error messages where there are any
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    NonSquareError,
    OutOfRangeError,
    ShapeMismatchError,
    ValidationError,
)
from densematrix.core.protocols import Rectangle


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (indicating mixed types,
    ragged nesting or non-numeric data) and non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64)


def check_rows(rows: Any, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a list of rows and convert it to a 2D float64 array.

    Every row must have the same length as the first one. An empty
    sequence of rows yields a (0, 0) array.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        2D numpy array of shape (len(rows), len(rows[0]))

    Raises:
        ShapeMismatchError: If rows have different lengths
        ValidationError: If a cell is not a real number
    """
    try:
        rows = [list(row) for row in rows]
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence of rows: {e}") from e
    if not rows:
        return np.zeros((0, 0), dtype=np.float64)

    width = len(rows[0])
    for i, row in enumerate(rows, start=1):
        if len(row) != width:
            raise ShapeMismatchError(
                f"{name}: matrix must have uniform width: row 1 has {width} "
                f"columns, row {i} has {len(row)}"
            )

    if width == 0:
        return np.zeros((len(rows), 0), dtype=np.float64)
    return check_array(rows, name)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        ShapeMismatchError: If array is not 1D
    """
    if array.ndim != 1:
        raise ShapeMismatchError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        ShapeMismatchError: If array is not 2D
    """
    if array.ndim != 2:
        raise ShapeMismatchError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_index(value: Any, name: str) -> int:
    """
    Convert a row or column number to int.

    Accepts anything implementing __index__ (int, numpy integers) and
    rejects floats, strings and bools.

    Raises:
        TypeError: If value is not an integer
    """
    if isinstance(value, bool):
        raise TypeError(f"{name}: expected an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from None


def check_coordinate(r: int, c: int, height: int, width: int) -> None:
    """
    Verify a 1-based (row, column) coordinate lies inside a rectangle.

    Raises:
        OutOfRangeError: If r is outside [1, height] or c outside [1, width]
    """
    if not (1 <= r <= height and 1 <= c <= width):
        raise OutOfRangeError(
            f"cell ({r}, {c}) is outside the {height}x{width} matrix"
        )


def check_bounds(
    r1: int, c1: int, r2: int, c2: int, height: int, width: int
) -> None:
    """
    Verify view bounds satisfy 1 <= r1 <= r2 <= height, 1 <= c1 <= c2 <= width.

    Raises:
        OutOfRangeError: If the rectangle is empty, inverted, or leaves the source
    """
    if not (1 <= r1 <= r2 <= height and 1 <= c1 <= c2 <= width):
        raise OutOfRangeError(
            f"view ({r1}, {c1})-({r2}, {c2}) extends outside the "
            f"{height}x{width} matrix"
        )


def check_same_shape(left: Rectangle, right: Rectangle, operation: str) -> None:
    """
    Verify two rectangles share both dimensions.

    Raises:
        ShapeMismatchError: If (height, width) differ
    """
    if left.height != right.height or left.width != right.width:
        raise ShapeMismatchError(
            f"{operation}: operands must have like dimensions, got "
            f"{left.height}x{left.width} and {right.height}x{right.width}"
        )


def check_square(rect: Rectangle, operation: str) -> None:
    """
    Verify a rectangle is square.

    Raises:
        NonSquareError: If height != width
    """
    if rect.height != rect.width:
        raise NonSquareError(
            f"can't compute {operation} of nonsquare matrix: "
            f"{rect.height}x{rect.width}",
            shape=(rect.height, rect.width),
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )
