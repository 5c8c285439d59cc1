"""Convergence-order estimation.

ConvergenceRecord
    (epsilon, L1 error) pair from one sweep point.
FitResult
    Slope and intercept of the log-log fit.
fit_power_law
    Least-squares fit of log L1 against log epsilon.
DegenerateFitInput
    No meaningful order can be fitted.
"""

from torchasymptotics.convergence._exceptions import DegenerateFitInput
from torchasymptotics.convergence._fit import (
    ConvergenceRecord,
    FitResult,
    fit_power_law,
)

__all__ = [
    "ConvergenceRecord",
    "DegenerateFitInput",
    "FitResult",
    "fit_power_law",
]
