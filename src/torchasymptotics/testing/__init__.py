"""Test support for the validation harness.

exact_solver
    Solver stand-in returning a known analytic solution.
"""

from torchasymptotics.testing._exact_solver import exact_solver

__all__ = [
    "exact_solver",
]
