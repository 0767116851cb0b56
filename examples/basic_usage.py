#!/usr/bin/env python3
"""
Basic usage examples for the Robust Statistics Library.

This script demonstrates compensated summation, NaN-aware selection and
the robust estimators on synthetic data.
"""

import numpy as np

# Import the robust statistics library
import sys
sys.path.append('..')

from robstat import (
    accu_sum,
    compensated_sum,
    select,
    medians,
    median_mad,
    summary5,
    tau_estim,
    geometric_median3d,
    FACTOR_MAD,
    FACTOR_TAU
)
from robstat.sampling import make_generator, normal_sample


def demonstrate_compensated_summation():
    """Show how naive summation loses small terms."""
    print("=" * 60)
    print("DEMONSTRATION: Compensated Summation")
    print("=" * 60)

    data = [1e16] + [1.0] * 1000 + [-1e16]

    naive = 0.0
    for v in data:
        naive += v

    print("Test data: [1e16, 1.0 x 1000, -1e16]")
    print("Expected result: 1000.0")
    print()
    print(f"Naive loop result:     {naive}")
    print(f"accu_sum result:       {accu_sum(len(data), data.__getitem__)}")
    print(f"compensated_sum:       {compensated_sum(np.array(data))}")
    print()


def demonstrate_selection():
    """Show NaN-aware selection and medians."""
    print("=" * 60)
    print("DEMONSTRATION: NaN-aware Selection")
    print("=" * 60)

    x = [3.0, float('nan'), -1.0, 7.5, 0.0, 2.0]
    print(f"Input:                 {x}")
    select(x, 0, len(x) - 1, 2)
    print(f"After select(k=2):     {x}")
    print(f"Third smallest:        {x[2]}")
    print(f"Low/high medians:      {medians([3.0, float('nan'), -1.0, 7.5, 0.0, 2.0])}")
    print()


def demonstrate_robust_estimators():
    """Compare classical and robust estimates on contaminated data."""
    print("=" * 60)
    print("DEMONSTRATION: Robust Location and Scale")
    print("=" * 60)

    rng = make_generator(42)
    clean = normal_sample(1000, loc=10.0, scale=2.0, rng=rng)
    dirty = np.concatenate([clean, normal_sample(50, loc=500.0, scale=10.0, rng=rng)])

    for name, data in (("clean", clean), ("contaminated", dirty)):
        med, mad = median_mad(data)
        mu, sigma = tau_estim(data)
        print(f"{name}:")
        print(f"  mean / std:          {data.mean():10.4f} {data.std():10.4f}")
        print(f"  median / MAD:        {med:10.4f} {FACTOR_MAD * mad:10.4f}")
        print(f"  tau location/scale:  {mu:10.4f} {FACTOR_TAU * sigma:10.4f}")
        print(f"  five numbers:        {np.round(summary5(data), 4)}")
    print()


def demonstrate_geometric_median():
    """Show the geometric median with a coincident majority."""
    print("=" * 60)
    print("DEMONSTRATION: Geometric Median")
    print("=" * 60)

    points = [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [10.0, 0.0, 0.0]]
    print(f"Points:                {points}")
    print(f"Mean:                  {np.mean(points, axis=0)}")
    print(f"Geometric median:      {geometric_median3d(points)}")
    print()


def main():
    """Run all demonstrations."""
    demonstrate_compensated_summation()
    demonstrate_selection()
    demonstrate_robust_estimators()
    demonstrate_geometric_median()


if __name__ == "__main__":
    main()
