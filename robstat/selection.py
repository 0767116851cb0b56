"""
NaN-aware order-statistic selection.

Implements Algorithm 489 SELECT (Floyd and Rivest, CACM 18(3), 1975) over
a total order in which NaN compares equal to NaN and greater than every
other double. Native float comparisons are false whenever NaN is involved,
so every comparison inside the partitioning goes through ``nan_eq`` and
``nan_lt``.
"""

import functools
import math
from typing import Iterable, List, MutableSequence


def nan_eq(x: float, y: float) -> bool:
    """x == y, or both are NaN."""
    return (x == y) or (math.isnan(x) and math.isnan(y))


def nan_lt(x: float, y: float) -> bool:
    """x < y, or y is NaN and x is not."""
    return (x < y) or (math.isnan(y) and not math.isnan(x))


def select(x: MutableSequence[float], left: int, right: int, k: int):
    """
    Partially order ``x[left:right+1]`` in place around its k-th element.

    On return ``x[k]`` holds the value a full ascending sort would put
    there; elements in ``[left, k)`` are not greater and elements in
    ``(k, right]`` are not less, all under the NaN-as-maximum order.
    Expected running time is linear in ``right - left``.

    Args:
        x: Mutable sequence of floats (list or 1-D ndarray)
        left: Inclusive lower bound of the range
        right: Inclusive upper bound of the range
        k: Target index, ``left <= k <= right``

    Raises:
        IndexError: If the bounds are outside ``x`` or ``k`` is outside
            ``[left, right]``
    """
    if not (0 <= left <= k <= right < len(x)):
        raise IndexError(
            f"select bounds out of range: left={left}, k={k}, right={right}, len={len(x)}"
        )

    while left < right:
        t = x[k]
        i, j = left, right
        x[left], x[k] = x[k], x[left]
        if nan_lt(t, x[right]):
            x[right], x[left] = x[left], x[right]
        while i < j:
            x[i], x[j] = x[j], x[i]
            i += 1
            j -= 1
            while nan_lt(x[i], t):
                i += 1
            while nan_lt(t, x[j]):
                j -= 1
        if nan_eq(x[left], t):
            x[left], x[j] = x[j], x[left]
        else:
            j += 1
            x[j], x[right] = x[right], x[j]
        # narrow to the side holding k
        if j <= k:
            left = j + 1
        if k <= j:
            right = j - 1


def _nan_cmp(x: float, y: float) -> int:
    if nan_lt(x, y):
        return -1
    if nan_lt(y, x):
        return 1
    return 0


def nan_sorted(values: Iterable[float]) -> List[float]:
    """Return a new list sorted ascending with NaN entries last."""
    return sorted((float(v) for v in values), key=functools.cmp_to_key(_nan_cmp))
