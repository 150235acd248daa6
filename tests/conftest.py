"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from regressionlab.core.points import PointSet


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def perfect_points():
    """Points exactly on y = 2x."""
    return [{'x': 1, 'y': 2}, {'x': 2, 'y': 4}, {'x': 3, 'y': 6}, {'x': 4, 'y': 8}]


@pytest.fixture
def uncorrelated_points():
    """Points with no linear relationship."""
    return [{'x': 1, 'y': 5}, {'x': 2, 'y': 2}, {'x': 3, 'y': 8}, {'x': 4, 'y': 3}]


@pytest.fixture
def noisy_line(rng):
    """50 points around y = 1.5x - 2 with small Gaussian noise."""
    x = rng.uniform(0, 10, 50)
    y = 1.5 * x - 2 + rng.standard_normal(50) * 0.5
    return PointSet.from_arrays(x, y)


@pytest.fixture
def points_with_outlier():
    """Ten points near y = 2x with one planted outlier at index 4."""
    base = [
        (1, 2.1), (2, 4.2), (3, 5.8), (4, 8.1), (5, 35.0),
        (6, 12.0), (7, 13.9), (8, 16.1), (9, 18.0), (10, 20.2),
    ]
    return [{'x': x, 'y': y} for x, y in base]
