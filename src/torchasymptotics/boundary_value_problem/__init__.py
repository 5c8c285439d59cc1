"""Two-point boundary value problem solver adapter.

The collocation solver itself is external (``scipy.integrate.solve_bvp``).
This module only defines its inputs and wraps its continuous output.

Main API
--------
solve_bvp : Solve a formulated problem on an initial mesh
validate_mesh : Reject meshes that cannot seed the solver

Data Structures
---------------
Interpolant : Cubic Hermite solution, evaluable inside its domain only

Exceptions
----------
SolverError : Base exception for solver adapter errors
SolverNonConvergence : Solver terminated unsuccessfully
DegenerateMeshError : Initial mesh is degenerate
InterpolantDomainError : Interpolant queried outside its domain
"""

from torchasymptotics.boundary_value_problem._exceptions import (
    DegenerateMeshError,
    InterpolantDomainError,
    SolverError,
    SolverNonConvergence,
)
from torchasymptotics.boundary_value_problem._interpolant import (
    Interpolant,
    hermite_interpolate,
)
from torchasymptotics.boundary_value_problem._mesh import validate_mesh
from torchasymptotics.boundary_value_problem._solve_bvp import solve_bvp

__all__ = [
    # Exceptions
    "DegenerateMeshError",
    "InterpolantDomainError",
    "SolverError",
    "SolverNonConvergence",
    # Solution
    "Interpolant",
    "hermite_interpolate",
    # Solver
    "solve_bvp",
    "validate_mesh",
]
