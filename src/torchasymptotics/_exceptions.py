"""Base exception for the asymptotic validation harness."""

from typing import Optional


class AsymptoticValidationError(Exception):
    """Base exception for all harness errors.

    Attributes
    ----------
    epsilon : float, optional
        Perturbation parameter the error occurred at, if known.
    stage : str, optional
        Sweep stage the error occurred in. Filled in by ``run_sweep``.
    """

    def __init__(
        self,
        message: str = "",
        *,
        epsilon: Optional[float] = None,
        stage: Optional[str] = None,
    ):
        self.epsilon = epsilon
        self.stage = stage
        super().__init__(message)
