"""
Core compensated arithmetic primitives.

This module contains the error-free transformations of a sum and a product
and the accumulator that chains them into the accurate summation scheme of
Ogita, Rump and Oishi (Accurate sum and dot product, SIAM J. Sci. Comput.
26(6), 2005).
"""

from typing import Tuple, Union, Sequence

import numpy as np
import torch

ArrayLike = Union[Sequence[float], np.ndarray, torch.Tensor]

# Dekker splitter for IEEE-754 double precision, 2^27 + 1
_SPLITTER = 134217729.0


def two_sum(a: float, b: float) -> Tuple[float, float]:
    """
    Error-free addition (Knuth, Seminumerical Algorithms, 3rd ed).

    Args:
        a: First addend
        b: Second addend

    Returns:
        Tuple of (fl(a + b), rounding_error) with a + b == sum + error exactly
    """
    x = a + b
    up = x - b
    vpp = x - up
    y = (a - up) + (b - vpp)
    return x, y


def two_product(a: float, b: float) -> Tuple[float, float]:
    """
    Error-free multiplication using Dekker's splitting.

    Args:
        a: First factor
        b: Second factor

    Returns:
        Tuple of (fl(a * b), rounding_error) with a * b == product + error
        exactly, barring overflow in the split
    """
    up = a * _SPLITTER
    vp = b * _SPLITTER
    a1 = (a - up) + up
    b1 = (b - vp) + vp
    a2 = a - a1
    b2 = b - b1
    x = a * b
    y = ((((a1 * b1) - x) + (a1 * b2)) + (a2 * b1)) + (a2 * b2)
    return x, y


class CompensatedAccumulator:
    """
    Accumulator for compensated sums and dot products.

    The running sum ``p`` is advanced with an error-free addition and every
    rounding error is collected into a separate total ``s``. The two are
    combined only when the result is read, which keeps the error of the
    final value close to one unit in the last place independent of the
    number of terms.

    Attributes:
        p: Running (rounded) sum
        s: Running total of the rounding errors
        count: Number of terms added since the last reset
    """

    def __init__(self):
        self.p = 0.0
        self.s = 0.0
        self.count = 0

    def add(self, value: float):
        """
        Add a single term.

        Args:
            value: Term to add
        """
        self.p, q = two_sum(self.p, float(value))
        self.s += q
        self.count += 1

    def add_product(self, a: float, b: float):
        """
        Add the exact product ``a * b``.

        Both the rounded head of the product and its rounding error are
        folded into the same compensation chain.
        """
        h, r = two_product(float(a), float(b))
        self.p, q = two_sum(self.p, h)
        self.s += q + r
        self.count += 1

    def get(self) -> float:
        """Get compensated sum."""
        return self.p + self.s

    def reset(self):
        """Reset the accumulator to zero."""
        self.p = 0.0
        self.s = 0.0
        self.count = 0


def as_float64_array(values: ArrayLike) -> np.ndarray:
    """
    Copy a sample into a fresh contiguous float64 array.

    Args:
        values: List, tuple, NumPy array or PyTorch tensor

    Returns:
        New float64 ndarray that never aliases the caller's memory
    """
    if isinstance(values, torch.Tensor):
        values = values.detach().cpu().numpy()
    return np.array(values, dtype=np.float64, copy=True)
