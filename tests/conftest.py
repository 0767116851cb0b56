#!/usr/bin/env python3
"""
Pytest configuration and fixtures for the robust statistics tests.

This file contains shared test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import numpy as np
import math
from fractions import Fraction
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from robstat.sampling import make_generator, normal_sample


@pytest.fixture
def rng():
    """Seeded Mersenne-twister generator."""
    return make_generator(20210501)


@pytest.fixture
def simple_data():
    """Simple test data for basic functionality tests."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def pathological_cancellation():
    """Large value, many small terms, then the large value cancelled."""
    return [1e16] + [1.0] * 1000 + [-1e16]


@pytest.fixture
def nan_data():
    """Data with NaN entries scattered among finite values."""
    nan = float('nan')
    return [3.0, nan, -1.0, 7.5, nan, 0.0, 2.0, -4.25, nan, 7.5]


@pytest.fixture
def gaussian_sample(rng):
    """Clean N(10, 2) sample."""
    return normal_sample(2001, loc=10.0, scale=2.0, rng=rng)


@pytest.fixture
def contaminated_sample(gaussian_sample, rng):
    """Gaussian sample with 5% gross outliers appended."""
    outliers = normal_sample(100, loc=1000.0, scale=50.0, rng=rng)
    return np.concatenate([gaussian_sample, outliers])


@pytest.fixture
def point_cloud(rng):
    """Random 3-D points around (1, -2, 3)."""
    return rng.normal(0.0, 1.0, size=(200, 3)) + np.array([1.0, -2.0, 3.0])


class AccuracyChecker:
    """Utility class for checking numerical accuracy."""

    @staticmethod
    def relative_error(computed: float, reference: float) -> float:
        """Calculate relative error."""
        if reference == 0:
            return abs(computed)
        return abs(computed - reference) / abs(reference)

    @staticmethod
    def exact_sum(values) -> float:
        """Correctly rounded sum for reference."""
        return math.fsum(float(v) for v in values)

    @staticmethod
    def exact_dot(a, b) -> float:
        """Correctly rounded dot product via rational arithmetic."""
        total = sum(Fraction(float(x)) * Fraction(float(y)) for x, y in zip(a, b))
        return float(total)


@pytest.fixture
def accuracy_checker():
    """Fixture providing accuracy checking utilities."""
    return AccuracyChecker()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark tests that take long time as slow
        if "large" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)
