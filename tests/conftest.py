"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_matrix(rng):
    """Random 4x4 matrix, nonsingular with probability one."""
    return Matrix(rng.standard_normal((4, 4)))


@pytest.fixture
def rectangular_matrix(rng):
    """Random 3x5 matrix."""
    return Matrix(rng.standard_normal((3, 5)))


@pytest.fixture
def singular_matrix():
    """Second row is twice the first."""
    return Matrix([[1, 2], [2, 4]])
