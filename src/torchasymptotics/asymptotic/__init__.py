"""Closed-form matched asymptotic approximations.

evaluate_uniform
    Evaluate a problem's composite approximation on a point set.
FormulaEvaluationError
    The approximation is non-finite at the requested epsilon.
"""

from torchasymptotics.asymptotic._evaluate import evaluate_uniform
from torchasymptotics.asymptotic._exceptions import FormulaEvaluationError

__all__ = [
    "FormulaEvaluationError",
    "evaluate_uniform",
]
