"""
Fixtures for polynomial fit tests.
"""

import pytest
import numpy as np


@pytest.fixture
def quadratic_points():
    """Four points on y = x^2 + 1."""
    return np.array([0.0, 1.0, 2.0, 3.0]), np.array([1.0, 2.0, 5.0, 10.0])


@pytest.fixture
def noisy_cubic(rng):
    """y = 2x^3 - x + 0.5 plus Gaussian noise, 30 points on [-1, 1]."""
    x = np.linspace(-1.0, 1.0, 30)
    y = 2.0 * x ** 3 - x + 0.5 + 0.05 * rng.standard_normal(30)
    return x, y
