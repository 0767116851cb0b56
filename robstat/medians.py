"""
Median and spread estimators built on NaN-aware selection.

Every public function copies its input into one scratch buffer that it owns
for the duration of the call and runs all of its selections sequentially on
that buffer, so later selections start from the partial order left by the
earlier ones.
"""

import math
from typing import List, Tuple

from .constants import FACTOR_MAD
from .core import ArrayLike, as_float64_array
from .selection import select

NAN = float("nan")


def _work_copy(sample: ArrayLike) -> List[float]:
    return as_float64_array(sample).ravel().tolist()


def _medians(work: List[float]) -> Tuple[float, float]:
    """
    Low and high medians of a non-empty buffer, reordering it in place.
    """
    n = len(work)
    if n % 2 == 1:
        m = (n + 1) // 2
        select(work, 0, n - 1, m - 1)
        lo = work[m - 1]
        hi = lo
    else:
        m = n // 2
        select(work, 0, n - 1, m - 1)
        lo = work[m - 1]
        select(work, 0, n - 1, m)
        hi = work[m]
    return lo, hi


def _midpoint(lo: float, hi: float) -> float:
    return lo + (hi - lo) / 2


def medians(sample: ArrayLike) -> Tuple[float, float]:
    """
    Compute the low and high medians of a sample.

    For an odd count both are the middle order statistic; for an even count
    they are the two central order statistics.

    Args:
        sample: Sequence of values, NaN allowed (NaN sorts last)

    Returns:
        Tuple of (low_median, high_median), (nan, nan) for an empty sample
    """
    work = _work_copy(sample)
    if len(work) == 0:
        return NAN, NAN
    return _medians(work)


def median_mad(sample: ArrayLike) -> Tuple[float, float]:
    """
    Compute the median and the median absolute deviation (MAD).

    The MAD is returned unscaled; multiply by ``FACTOR_MAD`` for a
    consistent estimate of the standard deviation under Gaussian data.

    Args:
        sample: Sequence of values

    Returns:
        Tuple of (median, mad), (nan, nan) for an empty sample
    """
    work = _work_copy(sample)
    if len(work) == 0:
        return NAN, NAN

    lo, hi = _medians(work)
    med = _midpoint(lo, hi)

    for k, value in enumerate(work):
        work[k] = math.fabs(value - med)
    lo, hi = _medians(work)
    return med, _midpoint(lo, hi)


def scaled_mad(sample: ArrayLike) -> Tuple[float, float]:
    """Median and MAD scaled by ``FACTOR_MAD``."""
    med, mad = median_mad(sample)
    return med, FACTOR_MAD * mad


def summary5(sample: ArrayLike) -> Tuple[float, float, float, float, float]:
    """
    Compute Tukey's five-number summary.

    The hinges are the medians of the lower and upper halves, where each
    half holds the ``m`` smallest (largest) values and ``m`` is the depth
    of the median. The depth of the hinges follows from ``m`` by the same
    odd/even rule that gave ``m`` from the sample size.

    Args:
        sample: Sequence of values

    Returns:
        Tuple of (min, lower_hinge, median, upper_hinge, max); all NaN when
        the sample has fewer than 5 values
    """
    work = _work_copy(sample)
    n = len(work)
    if n < 5:
        return NAN, NAN, NAN, NAN, NAN

    last = n - 1

    if n % 2 == 1:
        m = (n + 1) // 2
        select(work, 0, last, m - 1)
        med = work[m - 1]
    else:
        m = n // 2
        select(work, 0, last, m - 1)
        lo = work[m - 1]
        select(work, 0, last, m)
        med = _midpoint(lo, work[m])

    if m % 2 == 1:
        k = (m + 1) // 2
        select(work, 0, last, k - 1)
        lower = work[k - 1]
        select(work, 0, last, n - k)
        upper = work[n - k]
    else:
        k = m // 2
        select(work, 0, last, k - 1)
        lo = work[k - 1]
        select(work, 0, last, k)
        lower = _midpoint(lo, work[k])
        select(work, 0, last, n - k - 1)
        lo = work[n - k - 1]
        select(work, 0, last, n - k)
        upper = _midpoint(lo, work[n - k])

    select(work, 0, last, 0)
    smallest = work[0]
    select(work, 0, last, last)
    largest = work[last]

    return smallest, lower, med, upper, largest
