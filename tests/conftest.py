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
def sequential_data():
    """The integers 0..999 as floats; true mean 499.5."""
    return np.arange(1000, dtype=np.float64)


@pytest.fixture
def normal_data(rng):
    """Small normal sample for cross-strategy comparisons."""
    return rng.normal(10.0, 2.0, 200)
