"""Exceptions for error metrics."""

from typing import Optional

from torchasymptotics._exceptions import AsymptoticValidationError


class InsufficientValidSamples(AsymptoticValidationError):
    """Raised when fewer than 2 samples lie in the valid domain."""

    def __init__(self, n_valid: int, *, epsilon: Optional[float] = None):
        self.n_valid = n_valid

        where = "" if epsilon is None else f" at epsilon={epsilon:.3e}"
        super().__init__(
            f"Need at least 2 valid samples to integrate, got "
            f"{n_valid}{where}",
            epsilon=epsilon,
        )
