"""Tests for l1_error."""

import math

import pytest
import scipy.integrate
import torch

from torchasymptotics.error_metric import InsufficientValidSamples, l1_error
from torchasymptotics.sampling import SampleSet


def _samples(x, y_asymptotic, y_numerical, valid=None):
    if valid is None:
        valid = torch.ones_like(x, dtype=torch.bool)
    return SampleSet(
        x=x,
        y_asymptotic=y_asymptotic,
        y_numerical=y_numerical,
        valid=valid,
        batch_size=[x.shape[0]],
    )


class TestL1Error:
    @pytest.mark.parametrize("n", [3, 4, 100])
    def test_constant_curves(self, n):
        x = torch.linspace(0, 1, n, dtype=torch.float64)

        result = l1_error(_samples(x, torch.ones_like(x), torch.zeros_like(x)))

        assert float(result) == pytest.approx(1.0, abs=1e-9)

    def test_identical_curves(self):
        x = torch.linspace(0, 1, 10, dtype=torch.float64)

        assert float(l1_error(_samples(x, x, x))) == 0.0

    def test_absolute_value(self):
        """Sign changes do not cancel."""
        x = torch.linspace(-1, 1, 1001, dtype=torch.float64)

        result = l1_error(_samples(x, x, torch.zeros_like(x)))

        assert float(result) == pytest.approx(1.0, rel=1e-6)

    def test_matches_scipy_trapezoid_on_non_uniform_grid(self):
        x = torch.linspace(0, 1, 200, dtype=torch.float64) ** 3
        y_asymptotic = torch.exp(x)
        y_numerical = torch.cos(x)

        result = l1_error(_samples(x, y_asymptotic, y_numerical))
        expected = scipy.integrate.trapezoid(
            (y_asymptotic - y_numerical).abs().numpy(), x.numpy()
        )

        assert float(result) == pytest.approx(expected, rel=1e-12)

    def test_converges_to_integral(self):
        x = torch.linspace(0, math.pi, 10001, dtype=torch.float64)

        result = l1_error(_samples(x, torch.sin(x), torch.zeros_like(x)))

        assert float(result) == pytest.approx(2.0, rel=1e-7)

    def test_integrates_valid_points_only(self):
        x = torch.tensor([0.0, 0.05, 0.1, 0.55, 1.0], dtype=torch.float64)
        nan = float("nan")
        y_asymptotic = torch.tensor([nan, nan, 1.0, 1.0, 1.0])
        y_numerical = torch.tensor([nan, nan, 0.0, 0.0, 0.0])
        valid = torch.tensor([False, False, True, True, True])

        result = l1_error(
            _samples(
                x,
                y_asymptotic.double(),
                y_numerical.double(),
                valid,
            )
        )

        assert float(result) == pytest.approx(0.9, abs=1e-12)

    def test_non_negative(self):
        x = torch.linspace(0, 1, 50, dtype=torch.float64)
        generator = torch.Generator().manual_seed(0)
        y = torch.randn(50, dtype=torch.float64, generator=generator)

        assert float(l1_error(_samples(x, y, -y))) >= 0.0


class TestInsufficientValidSamples:
    @pytest.mark.parametrize("n_valid", [0, 1])
    def test_raises(self, n_valid):
        x = torch.linspace(0, 1, 4, dtype=torch.float64)
        valid = torch.arange(4) < n_valid

        with pytest.raises(InsufficientValidSamples) as info:
            l1_error(
                _samples(x, torch.ones_like(x), torch.zeros_like(x), valid),
                epsilon=0.1,
            )

        assert info.value.n_valid == n_valid
        assert info.value.epsilon == 0.1

    def test_never_defaults_to_zero(self):
        x = torch.tensor([0.5], dtype=torch.float64)

        with pytest.raises(InsufficientValidSamples):
            l1_error(_samples(x, x, x))
