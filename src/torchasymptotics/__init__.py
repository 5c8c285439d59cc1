"""torchasymptotics: validation of matched asymptotic approximations."""

from . import (
    asymptotic,
    boundary_value_problem,
    convergence,
    error_metric,
    problem,
    sampling,
    sweep,
    testing,
)
from ._exceptions import AsymptoticValidationError

__all__ = [
    "AsymptoticValidationError",
    "asymptotic",
    "boundary_value_problem",
    "convergence",
    "error_metric",
    "problem",
    "sampling",
    "sweep",
    "testing",
]

__version__ = "0.1.0"
