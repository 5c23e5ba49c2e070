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
def int_pair(rng):
    """Two random 3x4 int64 matrices of equal shape."""
    a = Matrix.from_rows(rng.integers(-100, 100, size=(3, 4)), dtype=np.int64)
    b = Matrix.from_rows(rng.integers(-100, 100, size=(3, 4)), dtype=np.int64)
    return a, b


@pytest.fixture
def float_pair(rng):
    """Two random 5x2 float64 matrices of equal shape."""
    a = Matrix.from_rows(rng.standard_normal((5, 2)))
    b = Matrix.from_rows(rng.standard_normal((5, 2)))
    return a, b
