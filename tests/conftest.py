"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def three_by_three():
    """The 3x3 matrix 1..9 in row-major order."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def random_pair(rng):
    """Two random 3x4 matrices of the same shape."""
    return (
        Matrix(rng.standard_normal((3, 4))),
        Matrix(rng.standard_normal((3, 4))),
    )


@pytest.fixture
def near_identity(rng):
    """
    5x5 matrix with unit diagonal and small off-diagonal entries.

    Safe for elimination without pivoting.
    """
    n = 5
    values = 0.1 * rng.uniform(-1.0, 1.0, (n, n))
    np.fill_diagonal(values, 1.0)
    return Matrix(values)
