#!/usr/bin/env python3
"""
Unit tests for the robust tau-estimators.
"""

import pytest
import numpy as np
import torch
import math
import sys
sys.path.append('..')

from robstat.constants import FACTOR_MAD, FACTOR_TAU
from robstat.medians import median_mad
from robstat.tau import tau_estim, biweight, clipped_square, C1, C2


class TestWeightFunctions:
    """Test cases for biweight and clipped_square."""

    def test_biweight(self):
        """Test the redescending weight."""
        assert biweight(C1, 0.0) == 1.0
        assert biweight(C1, C1) == 0.0
        assert biweight(C1, -C1) == 0.0
        assert biweight(C1, 10.0) == 0.0
        assert biweight(2.0, 1.0) == pytest.approx(0.5625)
        assert biweight(2.0, -1.0) == biweight(2.0, 1.0)

    def test_clipped_square(self):
        """Test the bounded rho function."""
        assert clipped_square(C2, 2.0) == 4.0
        assert clipped_square(C2, -5.0) == 9.0
        assert clipped_square(C2, 3.0) == 9.0


class TestTauEstim:
    """Test cases for tau_estim."""

    def test_empty_input(self):
        """Test that an empty sample yields NaN sentinels."""
        mu, sigma = tau_estim([])
        assert math.isnan(mu)
        assert math.isnan(sigma)

    def test_constant_sample(self):
        """Test that zero dispersion returns the median and MAD as is."""
        assert tau_estim([5.0] * 10) == (5.0, 0.0)

    def test_degenerate_majority(self):
        """Test the shortcut when more than half the values coincide."""
        values = [2.0] * 7 + [1.0, 50.0, -3.0]
        assert tau_estim(values) == median_mad(values)

    def test_all_nan(self):
        """Test that a NaN dispersion takes the shortcut."""
        mu, sigma = tau_estim([float('nan')] * 4)
        assert math.isnan(mu)
        assert math.isnan(sigma)

    def test_symmetric_sample(self):
        """Test that a symmetric sample keeps its center."""
        values = [-3.0, -2.0, -1.0, 0.0, 1.0, 2.0, 3.0]
        mu, sigma = tau_estim(values)
        assert mu == pytest.approx(0.0, abs=1e-15)
        assert sigma > 0.0

    def test_hand_computed(self):
        """Test a small sample against a direct evaluation."""
        values = [1.0, 2.0, 4.0, 7.0, 11.0, 16.0]
        mu0, s0 = median_mad(values)
        w = [biweight(C1, (v - mu0) / s0) for v in values]
        mu_expected = sum(v * wi for v, wi in zip(values, w)) / sum(w)
        rho = [clipped_square(C2, (v - mu_expected) / s0) for v in values]
        sigma_expected = s0 * math.sqrt(sum(rho) / len(values))

        mu, sigma = tau_estim(values)
        assert mu == pytest.approx(mu_expected, rel=1e-14)
        assert sigma == pytest.approx(sigma_expected, rel=1e-14)

    def test_translation_equivariance(self, gaussian_sample):
        """Test that shifting the sample shifts only the location."""
        mu, sigma = tau_estim(gaussian_sample)
        mu_shifted, sigma_shifted = tau_estim(gaussian_sample + 100.0)
        assert mu_shifted == pytest.approx(mu + 100.0, rel=1e-12)
        assert sigma_shifted == pytest.approx(sigma, rel=1e-9)

    def test_gaussian_consistency(self, gaussian_sample):
        """Test agreement with the median and scaled MAD on clean data."""
        med, mad = median_mad(gaussian_sample)
        mu, sigma = tau_estim(gaussian_sample)

        assert mu == pytest.approx(med, abs=0.15)
        assert sigma == pytest.approx(mad * FACTOR_MAD, rel=0.15)
        assert sigma * FACTOR_TAU == pytest.approx(2.0, rel=0.1)

    def test_bounded_influence(self, gaussian_sample, contaminated_sample):
        """Test that gross outliers barely move the estimates."""
        mu_clean, sigma_clean = tau_estim(gaussian_sample)
        mu_dirty, sigma_dirty = tau_estim(contaminated_sample)

        assert abs(mu_dirty - mu_clean) < 0.3
        assert 1.0 <= sigma_dirty / sigma_clean < 1.3

        # the classical estimates are ruined by the same contamination
        assert abs(np.mean(contaminated_sample) - mu_clean) > 40.0
        assert np.std(contaminated_sample) > 100.0

    def test_input_not_mutated(self):
        """Test that caller-visible memory is left alone."""
        values = np.array([3.0, 9.0, -1.0, 4.0, 4.5, 100.0])
        tau_estim(values)
        assert np.array_equal(values, np.array([3.0, 9.0, -1.0, 4.0, 4.5, 100.0]))

    def test_different_input_types(self):
        """Test with different input types."""
        values = [1.0, 2.0, 4.0, 7.0, 11.0, 16.0]
        expected = tau_estim(values)
        assert tau_estim(np.array(values)) == expected
        assert tau_estim(torch.tensor(values, dtype=torch.float64)) == expected
