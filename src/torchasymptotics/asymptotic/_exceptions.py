"""Exceptions for asymptotic formula evaluation."""

from torchasymptotics._exceptions import AsymptoticValidationError


class FormulaEvaluationError(AsymptoticValidationError):
    """Raised when the composite formula produces non-finite values.

    This marks the breakdown regime of the formula itself (overflow or
    underflow at extreme epsilon). Values are never clamped.
    """

    def __init__(self, epsilon: float, n_nonfinite: int, n_points: int):
        self.n_nonfinite = n_nonfinite
        self.n_points = n_points
        super().__init__(
            f"Asymptotic formula is non-finite at {n_nonfinite} of "
            f"{n_points} points for epsilon={epsilon:.3e}",
            epsilon=epsilon,
        )
