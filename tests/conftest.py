"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinear import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def integer_matrix():
    """3x3 integer matrix with determinant -2244."""
    return Matrix.from_rows([[1, 22, 3], [30, 51, 16], [7, -8, 5]])


@pytest.fixture
def singular_matrix():
    """3x3 matrix of rank 2 (third row = first + second)."""
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [5.0, 7.0, 9.0]])


@pytest.fixture
def random_square(rng):
    """Random 5x5 float matrix and its numpy counterpart."""
    data = rng.standard_normal((5, 5))
    return Matrix.from_array(data), data
