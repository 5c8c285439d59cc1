"""Exceptions for convergence-rate fitting."""

from torchasymptotics._exceptions import AsymptoticValidationError


class DegenerateFitInput(AsymptoticValidationError):
    """Raised when no meaningful convergence order can be fitted.

    This happens with fewer than 2 records, fewer than 2 distinct epsilon
    values, or any non-positive or non-finite epsilon or L1 error.
    """

    pass
