"""
Tests for PolyfitDesign.

Validates:
    - Construction from arrays, pairs and an n x 2 matrix
    - Order and sample-count validation
    - Vandermonde and response matrices
"""

import numpy as np
import pytest

from densematrix.core.exceptions import ShapeMismatchError, ValidationError
from densematrix.matrix import Matrix
from densematrix.polyfit import PolyfitDesign


class TestConstruction:

    def test_from_arrays(self, quadratic_points):
        x, y = quadratic_points
        design = PolyfitDesign.from_arrays(x, y, order=2)
        assert design.n == 4
        assert design.p == 3
        assert design.order == 2
        np.testing.assert_array_equal(design.x, x)

    def test_copies_input(self, quadratic_points):
        x, y = quadratic_points
        design = PolyfitDesign.from_arrays(x, y, order=1)
        x[0] = 99.0
        assert design.x[0] == 0.0

    def test_from_pairs(self):
        design = PolyfitDesign.from_pairs([(0, 1), (1, 3)], order=1)
        np.testing.assert_array_equal(design.y, [1.0, 3.0])

    def test_from_pairs_wrong_shape(self):
        with pytest.raises(ShapeMismatchError, match="pairs"):
            PolyfitDesign.from_pairs([(0, 1, 2)], order=0)

    def test_from_matrix(self):
        data = Matrix([[0, 1], [1, 2], [2, 5]])
        design = PolyfitDesign.from_matrix(data, order=2)
        assert design.data() == data

    def test_from_matrix_wrong_width(self):
        with pytest.raises(ShapeMismatchError, match="2 columns"):
            PolyfitDesign.from_matrix(Matrix([[1, 2, 3]]), order=0)

    def test_from_empty_matrix(self):
        with pytest.raises(ValidationError, match="at least 1 samples"):
            PolyfitDesign.from_matrix(Matrix(), order=0)


class TestValidation:

    def test_length_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="x=3, y=2"):
            PolyfitDesign.from_arrays([1, 2, 3], [1, 2], order=1)

    def test_too_few_samples(self):
        with pytest.raises(ValidationError, match="at least 3 samples, got 2"):
            PolyfitDesign.from_arrays([1, 2], [1, 2], order=2)

    def test_negative_order(self):
        with pytest.raises(ValidationError, match="non-negative"):
            PolyfitDesign.from_arrays([1, 2], [1, 2], order=-1)

    def test_float_order(self):
        with pytest.raises(TypeError, match="order"):
            PolyfitDesign.from_arrays([1, 2], [1, 2], order=1.5)

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            PolyfitDesign.from_arrays([1, np.nan], [1, 2], order=0)

    def test_2d_x(self):
        with pytest.raises(ShapeMismatchError, match="1D"):
            PolyfitDesign.from_arrays([[1, 2]], [1], order=0)

    def test_frozen(self, quadratic_points):
        design = PolyfitDesign.from_arrays(*quadratic_points, order=2)
        with pytest.raises(AttributeError):
            design._order = 3


class TestMatrices:

    def test_vandermonde(self):
        design = PolyfitDesign.from_arrays([2, 3], [0, 0], order=1)
        assert design.vandermonde() == Matrix([[2, 1], [3, 1]])

    def test_vandermonde_powers(self, quadratic_points):
        design = PolyfitDesign.from_arrays(*quadratic_points, order=3)
        x = quadratic_points[0]
        np.testing.assert_array_equal(
            design.vandermonde().to_numpy(), np.vander(x, 4)
        )

    def test_order_zero(self):
        design = PolyfitDesign.from_arrays([5, 6], [1, 2], order=0)
        assert design.vandermonde() == Matrix([1, 1])

    def test_zero_to_the_zero_is_one(self):
        design = PolyfitDesign.from_arrays([0, 1], [0, 0], order=1)
        assert design.vandermonde()[1, 2] == 1.0

    def test_response(self, quadratic_points):
        design = PolyfitDesign.from_arrays(*quadratic_points, order=2)
        assert design.response() == Matrix([1, 2, 5, 10])
