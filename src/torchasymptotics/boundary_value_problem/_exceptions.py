"""Exceptions for the collocation solver adapter."""

from typing import Optional

from torchasymptotics._exceptions import AsymptoticValidationError


class SolverError(AsymptoticValidationError):
    """Base exception for solver adapter errors."""

    pass


class SolverNonConvergence(SolverError):
    """Raised when the collocation solver fails to converge.

    Attributes
    ----------
    status : int
        Solver termination status. ``1`` means the node limit was exceeded,
        ``2`` a singular Jacobian, ``3`` unmet boundary tolerance.
    message : str
        Solver termination message.
    """

    def __init__(
        self,
        status: int,
        message: str,
        *,
        epsilon: Optional[float] = None,
        n_nodes: Optional[int] = None,
    ):
        self.status = status
        self.message = message
        self.n_nodes = n_nodes

        where = "" if epsilon is None else f" at epsilon={epsilon:.3e}"
        nodes = "" if n_nodes is None else f" ({n_nodes} nodes)"
        super().__init__(
            f"Collocation solver failed{where} with status {status}{nodes}: "
            f"{message}",
            epsilon=epsilon,
        )


class DegenerateMeshError(SolverError):
    """Raised when the initial mesh cannot seed the solver."""

    pass


class InterpolantDomainError(SolverError):
    """Raised when an interpolant is queried outside its domain."""

    def __init__(self, a: float, b: float, n_outside: int):
        self.a = a
        self.b = b
        self.n_outside = n_outside
        super().__init__(
            f"{n_outside} query points lie outside the solved domain "
            f"[{a:.6g}, {b:.6g}]"
        )
