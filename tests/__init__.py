"""
Test suite for the Robust Statistics Library.

Test Structure:
- test_core.py: Error-free transformations and the accumulator
- test_algorithms.py: Compensated sums and dot products
- test_selection.py: NaN-aware Floyd-Rivest selection
- test_medians.py: Medians, MAD and the five-number summary
- test_tau.py: Robust tau-estimators
- test_geometry.py: Geometric median of 3-D points
- test_sampling.py: Random sampling helpers
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run tests with coverage
    pytest --cov=robstat

    # Run only fast tests
    pytest -m "not slow"
"""

__version__ = "1.0.0"
