"""Error functionals between asymptotic and numerical solutions.

l1_error
    Trapezoidal L1 distance over the valid domain.
InsufficientValidSamples
    Too few valid samples to integrate.
"""

from torchasymptotics.error_metric._exceptions import (
    InsufficientValidSamples,
)
from torchasymptotics.error_metric._l1_error import l1_error

__all__ = [
    "InsufficientValidSamples",
    "l1_error",
]
