"""
Random sampling helpers for synthetic data.

Generators are explicit ``numpy.random.Generator`` objects backed by the
MT19937 Mersenne twister and are handed to the callers that need them. A
lazily created default instance exists only for convenience.
"""

import math
import secrets
from typing import Optional

import numpy as np

_TWO53_INT = 1 << 53
_TWO53 = float(_TWO53_INT)

# sqrt(8/e) and 4*e^(1/4)
_C1 = 1.71552776992141359296037928255754495624159721550514
_C2 = 5.13610166675096593629368227224974583334512346112585

_default: Optional[np.random.Generator] = None


def make_generator(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create a Mersenne-twister backed generator.

    Args:
        seed: Seed for reproducible streams; a 64-bit seed is drawn from
            the operating system's secure entropy source when omitted

    Returns:
        New ``numpy.random.Generator``
    """
    if seed is None:
        seed = secrets.randbits(64)
    return np.random.Generator(np.random.MT19937(seed))


def default_generator() -> np.random.Generator:
    """Return the module's generator, creating it on first use."""
    global _default
    if _default is None:
        _default = make_generator()
    return _default


def u01(rng: Optional[np.random.Generator] = None) -> float:
    """
    Uniform deviate in [2^-53, 1 - 2^-53] with 53 random bits.

    The integer draw excludes zero, so the result lies in the open
    interval (0, 1).
    """
    rng = rng or default_generator()
    n = int(rng.integers(1, _TWO53_INT))
    return n / _TWO53


def n01(rng: Optional[np.random.Generator] = None) -> float:
    """
    Standard normal deviate.

    Ratio-of-uniforms method with the quick acceptance and rejection tests
    of Knuth, Seminumerical Algorithms, 3rd ed, pp 131-132.
    """
    rng = rng or default_generator()
    while True:
        u = u01(rng)
        v = u01(rng)
        x = _C1 * (v - 0.5) / u
        x2 = x * x
        if x2 <= 5.0 - _C2 * u:
            return x
        if x2 <= -4.0 * math.log(u):
            return x


def normal_sample(n: int, loc: float = 0.0, scale: float = 1.0,
                  rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Draw ``n`` normal deviates with the given location and scale.

    Args:
        n: Sample size
        loc: Location (mean)
        scale: Scale (standard deviation)
        rng: Generator to draw from

    Returns:
        float64 array of shape (n,)
    """
    rng = rng or default_generator()
    return np.array([loc + scale * n01(rng) for _ in range(n)], dtype=np.float64)
