"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/string/complex rejection
    - check_rows: rectangularity of lists of rows
    - check_finite, check_1d, check_2d
    - check_index, check_coordinate, check_bounds
    - check_same_shape, check_square, check_min_samples
"""

import numpy as np
import pytest

from densematrix.core.exceptions import (
    NonSquareError,
    OutOfRangeError,
    ShapeMismatchError,
    ValidationError,
)
from densematrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_bounds,
    check_coordinate,
    check_finite,
    check_index,
    check_min_samples,
    check_rows,
    check_same_shape,
    check_square,
)
from densematrix.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.5], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        source = np.array([1.0, 2.0])
        result = check_array(source, "x")
        result[0] = 99.0
        assert source[0] == 1.0

    def test_rejects_object_dtype(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="real numbers"):
            check_array([1 + 2j], "x")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_rows
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRows:
    """check_rows builds a rectangular 2D array or fails."""

    def test_rectangular(self):
        result = check_rows([[1, 2], [3, 4], [5, 6]], "data")
        assert result.shape == (3, 2)

    def test_empty(self):
        assert check_rows([], "data").shape == (0, 0)

    def test_rows_of_zero_width(self):
        assert check_rows([[], []], "data").shape == (2, 0)

    def test_ragged_rejected(self):
        with pytest.raises(ShapeMismatchError, match="row 2 has 1"):
            check_rows([[1, 2], [3]], "data")

    def test_non_sequence_row_rejected(self):
        with pytest.raises(ValidationError, match="sequence of rows"):
            check_rows([[1, 2], 3], "data")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestArrayChecks:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match="2 NaN.*1 Inf"):
            check_finite(np.array([np.nan, np.inf, np.nan]), "x")

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_1d_rejects_2d(self):
        with pytest.raises(ShapeMismatchError, match="expected 1D"):
            check_1d(np.zeros((3, 1)), "x")

    def test_2d_rejects_3d(self):
        with pytest.raises(ShapeMismatchError, match="expected 2D"):
            check_2d(np.zeros((2, 2, 2)), "x")


# ═══════════════════════════════════════════════════════════════════════
# Coordinates and bounds
# ═══════════════════════════════════════════════════════════════════════


class TestCoordinates:

    def test_index_accepts_numpy_integer(self):
        assert check_index(np.int64(3), "row") == 3

    def test_index_rejects_float(self):
        with pytest.raises(TypeError, match="row"):
            check_index(1.0, "row")

    def test_index_rejects_bool(self):
        with pytest.raises(TypeError):
            check_index(True, "row")

    @pytest.mark.parametrize("r, c", [(1, 1), (2, 3)])
    def test_coordinate_inside(self, r, c):
        check_coordinate(r, c, 2, 3)

    @pytest.mark.parametrize("r, c", [(0, 1), (1, 0), (3, 1), (1, 4), (-1, 1)])
    def test_coordinate_outside(self, r, c):
        with pytest.raises(OutOfRangeError, match="2x3"):
            check_coordinate(r, c, 2, 3)

    def test_bounds_inside(self):
        check_bounds(1, 1, 2, 3, 2, 3)

    @pytest.mark.parametrize("bounds", [
        (0, 1, 1, 1),   # r1 below 1
        (2, 1, 1, 1),   # r1 > r2
        (1, 2, 1, 1),   # c1 > c2
        (1, 1, 3, 1),   # r2 past height
        (1, 1, 1, 4),   # c2 past width
    ])
    def test_bounds_outside(self, bounds):
        with pytest.raises(OutOfRangeError):
            check_bounds(*bounds, 2, 3)


# ═══════════════════════════════════════════════════════════════════════
# Shapes
# ═══════════════════════════════════════════════════════════════════════


class TestShapes:

    def test_same_shape_passes(self):
        check_same_shape(Matrix.zeros(2, 3), Matrix.zeros(2, 3), "addition")

    def test_same_shape_reports_both(self):
        with pytest.raises(ShapeMismatchError, match="addition.*2x3 and 3x2"):
            check_same_shape(Matrix.zeros(2, 3), Matrix.zeros(3, 2), "addition")

    def test_square_passes(self):
        check_square(Matrix.identity(3), "determinant")

    def test_square_rejects(self):
        with pytest.raises(NonSquareError, match="nonsquare matrix: 2x3") as exc_info:
            check_square(Matrix.zeros(2, 3), "determinant")
        assert exc_info.value.shape == (2, 3)

    def test_min_samples(self):
        with pytest.raises(ValidationError, match="at least 3 samples, got 2"):
            check_min_samples(np.zeros(2), 3, "x")
