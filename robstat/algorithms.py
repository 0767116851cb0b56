"""
High-level compensated summation algorithms.

This module provides the index-callback forms ``accu_sum``/``accu_dot``
(and their row-major 2-D variants) together with value-based helpers for
arrays. All of them chain error-free transformations through a
``CompensatedAccumulator`` owned by the call.
"""

from typing import Callable

import numpy as np

from .core import ArrayLike, CompensatedAccumulator, as_float64_array


def accu_sum(n: int, f: Callable[[int], float]) -> float:
    """
    Compute f(0) + f(1) + ... + f(n-1) with compensated summation.

    Args:
        n: Number of terms
        f: Callable returning the i-th term

    Returns:
        Compensated sum, 0.0 when n <= 0
    """
    acc = CompensatedAccumulator()
    for i in range(n):
        acc.add(f(i))
    return acc.get()


def accu_sum2(m: int, n: int, f: Callable[[int, int], float]) -> float:
    """
    Compute the sum of f(i, j) over the row-major range [0,m) x [0,n).

    Args:
        m: Number of rows
        n: Number of columns
        f: Callable returning the (i, j) term

    Returns:
        Compensated sum
    """
    acc = CompensatedAccumulator()
    for i in range(m):
        for j in range(n):
            acc.add(f(i, j))
    return acc.get()


def accu_dot(n: int, f: Callable[[int], float], g: Callable[[int], float]) -> float:
    """
    Compute f(0)g(0) + f(1)g(1) + ... + f(n-1)g(n-1).

    Each product is formed exactly as a head and a tail before both enter
    the compensated sum.

    Args:
        n: Number of terms
        f: Callable returning the i-th left factor
        g: Callable returning the i-th right factor

    Returns:
        Compensated dot product
    """
    acc = CompensatedAccumulator()
    for i in range(n):
        acc.add_product(f(i), g(i))
    return acc.get()


def accu_dot2(m: int, n: int,
              f: Callable[[int, int], float],
              g: Callable[[int, int], float]) -> float:
    """Row-major 2-D form of ``accu_dot``."""
    acc = CompensatedAccumulator()
    for i in range(m):
        for j in range(n):
            acc.add_product(f(i, j), g(i, j))
    return acc.get()


def compensated_sum(values: ArrayLike) -> float:
    """
    Sum a sequence of values with compensated summation.

    Args:
        values: Sequence of values to sum

    Returns:
        Compensated sum of the flattened input
    """
    data = as_float64_array(values).ravel().tolist()
    return accu_sum(len(data), data.__getitem__)


def compensated_dot(a: ArrayLike, b: ArrayLike) -> float:
    """
    Compute the dot product of two vectors with compensated summation.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Compensated dot product

    Raises:
        ValueError: If the vectors differ in length
    """
    x = as_float64_array(a).ravel().tolist()
    y = as_float64_array(b).ravel().tolist()
    if len(x) != len(y):
        raise ValueError(f"Vectors must have same length: {len(x)} vs {len(y)}")
    return accu_dot(len(x), x.__getitem__, y.__getitem__)


def compensated_mean(values: ArrayLike) -> float:
    """
    Compute mean using compensated summation.

    Returns NaN for an empty input.
    """
    data = as_float64_array(values).ravel().tolist()
    if len(data) == 0:
        return float(np.nan)
    return accu_sum(len(data), data.__getitem__) / len(data)
