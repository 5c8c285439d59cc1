"""Exceptions for problem formulation."""

from torchasymptotics._exceptions import AsymptoticValidationError


class EmptyDomainError(AsymptoticValidationError):
    """Raised when the epsilon-dependent domain ``[a(eps), b]`` is empty."""

    def __init__(self, a: float, b: float, *, name: str, epsilon: float):
        self.a = a
        self.b = b
        super().__init__(
            f"Empty domain [{a}, {b}] for problem '{name}' "
            f"at epsilon={epsilon}",
            epsilon=epsilon,
        )
