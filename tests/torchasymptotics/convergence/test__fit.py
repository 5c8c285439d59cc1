"""Tests for fit_power_law."""

import math

import pytest
import torch
from hypothesis import given, settings
from hypothesis import strategies as st

from torchasymptotics import AsymptoticValidationError
from torchasymptotics.convergence import (
    ConvergenceRecord,
    DegenerateFitInput,
    FitResult,
    fit_power_law,
)

EPSILON = [1e-1, 1e-2, 1e-3, 1e-4]


class TestFitPowerLaw:
    def test_exact_power_law(self):
        l1 = [2.0 * epsilon**1.5 for epsilon in EPSILON]

        fit = fit_power_law(EPSILON, l1)

        assert isinstance(fit, FitResult)
        assert float(fit.rate) == pytest.approx(1.5, abs=1e-6)
        assert fit.prefactor() == pytest.approx(2.0, abs=1e-6)

    def test_accepts_tensors(self):
        epsilon = torch.tensor(EPSILON, dtype=torch.float64)

        fit = fit_power_law(epsilon, 3.0 * epsilon**0.5)

        assert fit.rate.dtype == torch.float64
        assert float(fit.rate) == pytest.approx(0.5, abs=1e-9)
        assert float(fit.intercept) == pytest.approx(math.log(3.0), abs=1e-9)

    def test_two_points_are_enough(self):
        fit = fit_power_law([1e-2, 1e-4], [1e-2, 1e-4])

        assert float(fit.rate) == pytest.approx(1.0, abs=1e-9)

    def test_order_insensitive(self):
        l1 = [0.3, 0.02, 0.005, 0.0001]

        forward = fit_power_law(EPSILON, l1)
        backward = fit_power_law(EPSILON[::-1], l1[::-1])

        assert float(forward.rate) == pytest.approx(float(backward.rate))
        assert float(forward.intercept) == pytest.approx(
            float(backward.intercept)
        )

    def test_least_squares_on_noisy_data(self):
        """Symmetric log-noise does not move the slope."""
        epsilon = [1e-1, 1e-2, 1e-3, 1e-4]
        noise = [1.1, 1 / 1.1, 1 / 1.1, 1.1]
        l1 = [e * n for e, n in zip(epsilon, noise)]

        fit = fit_power_law(epsilon, l1)

        assert float(fit.rate) == pytest.approx(1.0, abs=1e-9)

    def test_predict(self):
        fit = fit_power_law(EPSILON, [2.0 * e**1.5 for e in EPSILON])

        assert float(fit.predict(1e-6)) == pytest.approx(2e-9, rel=1e-6)

    def test_record_fields(self):
        record = ConvergenceRecord(epsilon=1e-3, l1_error=4e-4)

        assert record.epsilon == 1e-3
        assert record.l1_error == 4e-4

    @settings(max_examples=50, deadline=None)
    @given(
        rate=st.floats(min_value=-3.0, max_value=3.0),
        prefactor=st.floats(min_value=1e-3, max_value=1e3),
    )
    def test_recovers_any_power_law(self, rate, prefactor):
        l1 = [prefactor * epsilon**rate for epsilon in EPSILON]

        fit = fit_power_law(EPSILON, l1)

        assert float(fit.rate) == pytest.approx(rate, abs=1e-6)
        assert fit.prefactor() == pytest.approx(prefactor, rel=1e-6)


class TestDegenerateFitInput:
    def test_single_pair(self):
        with pytest.raises(DegenerateFitInput, match="at least 2"):
            fit_power_law([1e-2], [1e-3])

    def test_no_pairs(self):
        with pytest.raises(DegenerateFitInput):
            fit_power_law([], [])

    def test_zero_error(self):
        with pytest.raises(DegenerateFitInput, match="L1 error") as info:
            fit_power_law(EPSILON, [1e-1, 0.0, 1e-3, 1e-4])

        assert info.value.epsilon == 1e-2

    @pytest.mark.parametrize("value", [-1e-3, math.nan, math.inf])
    def test_invalid_error(self, value):
        with pytest.raises(DegenerateFitInput):
            fit_power_law(EPSILON, [1e-1, 1e-2, value, 1e-4])

    def test_non_positive_epsilon(self):
        with pytest.raises(DegenerateFitInput, match="epsilon"):
            fit_power_law([1e-1, 0.0], [1e-1, 1e-2])

    def test_repeated_epsilon(self):
        with pytest.raises(DegenerateFitInput, match="distinct"):
            fit_power_law([1e-2, 1e-2, 1e-2], [1e-1, 2e-1, 3e-1])

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="same length"):
            fit_power_law(EPSILON, [1e-1, 1e-2])

    def test_is_validation_error(self):
        assert issubclass(DegenerateFitInput, AsymptoticValidationError)
