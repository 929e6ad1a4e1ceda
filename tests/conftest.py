"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_matrix():
    """3 x 3 nonsingular matrix with a hand-checked inverse (det = -12)."""
    return np.array([
        [1.0, 2.0, 4.0],
        [4.0, 5.0, 6.0],
        [7.0, 8.0, 12.0],
    ])


@pytest.fixture
def four_by_four():
    """4 x 4 nonsingular matrix (det = -8629346)."""
    return np.array([
        [22.0, 33.0, 44.0, 55.0],
        [7.0, -11.0, 101.0, 12.0],
        [0.0, 77.0, 14.0, 123.0],
        [11.0, -11.0, 34.0, 45.0],
    ])


@pytest.fixture
def zero_row_matrix():
    """Singular: the middle row is all zeros."""
    return np.array([
        [6.0, 2.0, 3.0],
        [0.0, 0.0, 0.0],
        [0.0, 4.0, 9.0],
    ])


@pytest.fixture
def permutation_5x5():
    """Permutation matrix whose rows form a 4-cycle (odd parity)."""
    return np.array([
        [1.0, 0.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 0.0, 0.0, 1.0],
        [0.0, 1.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, 0.0, 1.0, 0.0],
    ])


@pytest.fixture
def spd_matrix(rng):
    """Random 6 x 6 symmetric positive-definite matrix."""
    g = rng.standard_normal((6, 6))
    return g @ g.T + 6.0 * np.eye(6)


@pytest.fixture
def random_square(rng):
    """Random well-conditioned 8 x 8 matrix."""
    return rng.standard_normal((8, 8)) + 8.0 * np.eye(8)
