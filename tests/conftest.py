"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylars import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def asymmetric_matrix():
    """2x2 matrix whose transpose differs from itself."""
    return Matrix.from_array(2, 2, [1.0, 2.0, 3.0, 4.0])


@pytest.fixture
def rectangular_matrix():
    """2x3 matrix with distinct elements 1..6."""
    return Matrix.from_array(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])


@pytest.fixture
def vector_pair(rng):
    """Two random vectors of equal length with no zero elements."""
    a = Vector.from_array(rng.uniform(1.0, 10.0, 8))
    b = Vector.from_array(rng.uniform(1.0, 10.0, 8))
    return a, b
