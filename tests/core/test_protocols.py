"""
Tests for the Rectangle protocol.

Validates:
    - Matrix and MatrixView satisfy Rectangle
    - Plain sequences and arrays do not
"""

import numpy as np

from densematrix.core.protocols import Rectangle
from densematrix.matrix import Matrix


class TestRectangle:

    def test_matrix(self):
        assert isinstance(Matrix([[1, 2]]), Rectangle)

    def test_view(self):
        assert isinstance(Matrix([[1, 2], [3, 4]])["R1"], Rectangle)

    def test_non_rectangles(self):
        for value in ([[1, 2]], np.zeros((2, 2)), 3.0):
            assert not isinstance(value, Rectangle)
