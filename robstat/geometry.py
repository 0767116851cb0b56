"""
Geometric median of 3-D point sets.

The solver is the Weiszfeld fixed-point iteration as modified by Vardi and
Zhang (The multivariate L1-median and associated data depth, PNAS 97(4),
1423-1426, 2000), which stays well defined when an iterate lands on one or
more data points.
"""

import logging

import numpy as np

from .algorithms import accu_sum
from .constants import EPSILON, MAX_ITERATIONS, SQRT_EPS
from .core import ArrayLike, as_float64_array

logger = logging.getLogger(__name__)


def _as_points(points: ArrayLike) -> np.ndarray:
    u = as_float64_array(points)
    if u.ndim == 1 and u.size == 0:
        return u.reshape(0, 3)
    if u.ndim != 2 or u.shape[1] != 3:
        raise ValueError(f"Expected an (n, 3) array of points, got shape {u.shape}")
    return u


def vnorm3(u: np.ndarray) -> float:
    """Euclidean norm of a 3-vector, hypot-based to avoid overflow."""
    return float(np.hypot(np.hypot(u[0], u[1]), u[2]))


def l1_norm3(u: np.ndarray) -> float:
    """Compensated |u0| + |u1| + |u2|."""
    a = np.abs(u)
    return accu_sum(3, lambda i: float(a[i]))


def vmean3(points: ArrayLike) -> np.ndarray:
    """
    Component-wise mean of a set of 3-D points.

    Args:
        points: Array-like of shape (n, 3)

    Returns:
        Mean point, the zero vector for an empty set
    """
    u = _as_points(points)
    n = u.shape[0]
    if n == 0:
        return np.zeros(3)
    return np.array([
        accu_sum(n, lambda i, c=c: float(u[i, c])) / n
        for c in range(3)
    ])


def _converged(mu1: np.ndarray, mu2: np.ndarray) -> bool:
    # relative change of the iterate in the L1 norm
    t1 = l1_norm3(mu1)
    t2 = l1_norm3(mu2)
    return l1_norm3(mu1 - mu2) <= SQRT_EPS * max(t1, t2)


def geometric_median3d(points: ArrayLike, max_iter: int = MAX_ITERATIONS) -> np.ndarray:
    """
    Compute the geometric median of a set of 3-D points.

    The geometric median minimizes the sum of Euclidean distances to the
    points. Iteration starts at the mean and stops once the relative L1
    change of the iterate drops to ``SQRT_EPS``. If ``max_iter`` iterations
    pass without convergence, the last iterate is returned.

    Args:
        points: Array-like of shape (n, 3); duplicates are allowed
        max_iter: Iteration cap

    Returns:
        Geometric median as a float64 array of shape (3,); the zero vector
        for an empty set

    Raises:
        ValueError: If ``points`` is not shaped (n, 3)
    """
    u = _as_points(points)
    if u.shape[0] == 0:
        return np.zeros(3)

    mu = vmean3(u)

    for iteration in range(1, max_iter + 1):
        w = u - mu
        d = np.hypot(np.hypot(w[:, 0], w[:, 1]), w[:, 2])

        coincident = d < EPSILON
        eta = float(np.count_nonzero(coincident))
        regular = ~coincident
        if not regular.any():
            # every point sits on the iterate
            return mu

        inv = 1.0 / d[regular]
        s1 = (u[regular] * inv[:, None]).sum(axis=0)
        s2 = inv.sum()
        r = (w[regular] * inv[:, None]).sum(axis=0)

        t = s1 / s2
        r_norm = vnorm3(r)
        if r_norm > 0.0:
            gamma = min(1.0, eta / r_norm)
        else:
            gamma = 1.0 if eta > 0 else 0.0
        mu_new = (1.0 - gamma) * t + gamma * mu

        if _converged(mu, mu_new):
            logger.debug("geometric median converged after %d iterations", iteration)
            return mu_new

        mu = mu_new

    logger.debug("geometric median stopped at the %d iteration cap", max_iter)
    return mu
