"""Sweep configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class SweepConfig:
    """Parameters of one epsilon sweep.

    Passed explicitly to :func:`run_sweep`, so concurrent runs with different
    configurations do not interact.

    Attributes
    ----------
    epsilons : tuple of float
        Perturbation parameters, strictly positive and strictly decreasing.
    grid_points : int
        Resolution of the evaluation grid shared by every epsilon.
    mesh_points : int
        Size of the initial solver mesh.
    output_dir : Path
        Where the sink should persist artifacts. Never created here.
    tol : float
        Collocation residual tolerance of the solver.
    max_nodes : int
        Maximum number of solver mesh nodes.
    fail_fast : bool
        If True, the first failed sweep point aborts the sweep. Otherwise it
        is reported with a ``SweepWarning`` and skipped.
    """

    epsilons: Tuple[float, ...] = (1e-3, 1e-4, 1e-6, 1e-8, 1e-10)
    grid_points: int = 1000
    mesh_points: int = 1000
    output_dir: Path = field(default_factory=lambda: Path("fig"))
    tol: float = 1e-3
    max_nodes: int = 100000
    fail_fast: bool = False

    def __post_init__(self):
        epsilons = tuple(float(epsilon) for epsilon in self.epsilons)
        object.__setattr__(self, "epsilons", epsilons)
        object.__setattr__(self, "output_dir", Path(self.output_dir))

        if len(epsilons) == 0:
            raise ValueError("epsilons must not be empty")

        if any(not epsilon > 0 for epsilon in epsilons):
            raise ValueError(f"epsilons must be positive, got {epsilons}")

        if any(a <= b for a, b in zip(epsilons, epsilons[1:])):
            raise ValueError(
                f"epsilons must be strictly decreasing, got {epsilons}"
            )

        if self.grid_points < 2:
            raise ValueError(
                f"grid_points must be >= 2, got {self.grid_points}"
            )

        if self.mesh_points < 2:
            raise ValueError(
                f"mesh_points must be >= 2, got {self.mesh_points}"
            )

        if not self.tol > 0:
            raise ValueError(f"tol must be positive, got {self.tol}")

        if self.max_nodes < self.mesh_points:
            raise ValueError(
                f"max_nodes ({self.max_nodes}) must be >= mesh_points "
                f"({self.mesh_points})"
            )
