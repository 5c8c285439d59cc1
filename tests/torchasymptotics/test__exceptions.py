"""Tests for the exception hierarchy."""

import pytest

from torchasymptotics import AsymptoticValidationError
from torchasymptotics.asymptotic import FormulaEvaluationError
from torchasymptotics.boundary_value_problem import (
    DegenerateMeshError,
    InterpolantDomainError,
    SolverError,
    SolverNonConvergence,
)
from torchasymptotics.convergence import DegenerateFitInput
from torchasymptotics.error_metric import InsufficientValidSamples
from torchasymptotics.problem import EmptyDomainError
from torchasymptotics.sweep import SweepWarning


class TestExceptions:
    @pytest.mark.parametrize(
        "error",
        [
            EmptyDomainError,
            FormulaEvaluationError,
            SolverError,
            SolverNonConvergence,
            DegenerateMeshError,
            InterpolantDomainError,
            InsufficientValidSamples,
            DegenerateFitInput,
        ],
    )
    def test_is_validation_error(self, error):
        assert issubclass(error, AsymptoticValidationError)

    def test_sweep_warning_is_user_warning(self):
        assert issubclass(SweepWarning, UserWarning)

    def test_context_defaults(self):
        error = AsymptoticValidationError("failed")

        assert error.epsilon is None
        assert error.stage is None
        assert str(error) == "failed"

    def test_context_attributes(self):
        error = DegenerateMeshError("bad mesh", epsilon=1e-3, stage="solve")

        assert error.epsilon == 1e-3
        assert error.stage == "solve"

    def test_non_convergence_message(self):
        error = SolverNonConvergence(
            2, "singular Jacobian", epsilon=1e-6, n_nodes=40
        )

        assert error.status == 2
        assert error.n_nodes == 40
        assert "1.000e-06" in str(error)
        assert "status 2" in str(error)
        assert "singular Jacobian" in str(error)

    def test_sweep_warning_can_be_raised(self):
        with pytest.warns(SweepWarning, match="skipped"):
            import warnings

            warnings.warn("point skipped", SweepWarning)
