"""
Robust tau-estimators of location and dispersion.

Reference: Maronna and Zamar, Robust Estimates of Location and Dispersion
for High-Dimensional Datasets, Technometrics 44(4), 307-317 (2002).
"""

import logging
import math
from typing import Tuple

from .algorithms import accu_dot, accu_sum
from .constants import EPSILON
from .core import ArrayLike, as_float64_array
from .medians import median_mad

logger = logging.getLogger(__name__)

# Tuning constants of the weight and rho functions
C1 = 4.5
C2 = 3.0


def biweight(c: float, t: float) -> float:
    """Tukey biweight (1 - (t/c)^2)^2 on |t| <= c, zero outside."""
    if math.fabs(t) <= c:
        u = t / c
        return (1.0 - u * u) ** 2
    return 0.0


def clipped_square(c: float, t: float) -> float:
    """min(c^2, t^2)."""
    return min(c * c, t * t)


def tau_estim(sample: ArrayLike) -> Tuple[float, float]:
    """
    Compute the tau-estimates of location and dispersion.

    Starting from the median and the MAD, the location is the biweight
    weighted mean and the dispersion is the MAD rescaled by the root mean
    clipped square of the standardized residuals. Both sums are
    compensated. The dispersion is returned unscaled; multiply by
    ``FACTOR_TAU`` for consistency at the Gaussian.

    Args:
        sample: Sequence of values

    Returns:
        Tuple of (location, scale). A sample whose MAD is not above
        ``EPSILON`` (including an empty one) yields (median, MAD) as is.
    """
    x = as_float64_array(sample).ravel().tolist()
    mu0, sigma0 = median_mad(x)
    if not (sigma0 > EPSILON):
        logger.debug("degenerate dispersion %r, skipping tau weighting", sigma0)
        return mu0, sigma0

    n = len(x)
    w = [biweight(C1, (xi - mu0) / sigma0) for xi in x]
    mu = accu_dot(n, x.__getitem__, w.__getitem__)
    mu /= accu_sum(n, w.__getitem__)

    sigma = accu_sum(n, lambda i: clipped_square(C2, (x[i] - mu) / sigma0))
    sigma = sigma0 * math.sqrt(sigma / n)

    return mu, sigma
