"""
Robust Statistics Library

Order-statistic selection and compensated summation, and the robust
estimators built on them.

This library provides:
- Error-free transformations and compensated sums and dot products
- NaN-aware Floyd-Rivest selection
- Medians, median absolute deviation and Tukey's five-number summary
- Robust tau-estimators of location and dispersion
- The geometric median of 3-D point sets
"""

import logging

from .constants import (
    EPSILON,
    SQRT_EPS,
    FACTOR_MAD,
    FACTOR_TAU,
    MAX_ITERATIONS
)
from .core import CompensatedAccumulator, two_sum, two_product
from .algorithms import (
    accu_sum,
    accu_sum2,
    accu_dot,
    accu_dot2,
    compensated_sum,
    compensated_dot,
    compensated_mean
)
from .selection import nan_eq, nan_lt, select, nan_sorted
from .medians import medians, median_mad, scaled_mad, summary5
from .tau import tau_estim
from .geometry import geometric_median3d, vmean3

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__author__ = "Robstat Contributors"

__all__ = [
    "EPSILON",
    "SQRT_EPS",
    "FACTOR_MAD",
    "FACTOR_TAU",
    "MAX_ITERATIONS",
    "CompensatedAccumulator",
    "two_sum",
    "two_product",
    "accu_sum",
    "accu_sum2",
    "accu_dot",
    "accu_dot2",
    "compensated_sum",
    "compensated_dot",
    "compensated_mean",
    "nan_eq",
    "nan_lt",
    "select",
    "nan_sorted",
    "medians",
    "median_mad",
    "scaled_mad",
    "summary5",
    "tau_estim",
    "geometric_median3d",
    "vmean3"
]
