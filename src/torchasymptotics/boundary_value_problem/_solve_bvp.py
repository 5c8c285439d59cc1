"""Adapter around the external collocation solver."""

import numpy as np
import scipy.integrate
import torch
from torch import Tensor

from torchasymptotics.boundary_value_problem._exceptions import (
    SolverNonConvergence,
)
from torchasymptotics.boundary_value_problem._interpolant import Interpolant
from torchasymptotics.boundary_value_problem._mesh import validate_mesh
from torchasymptotics.problem import BVPFormulation


def solve_bvp(
    formulation: BVPFormulation,
    mesh: Tensor,
    *,
    tol: float = 1e-3,
    max_nodes: int = 1000,
) -> Interpolant:
    """Solve a formulated BVP with ``scipy.integrate.solve_bvp``.

    The solver uses 4th-order Lobatto collocation with residual-driven mesh
    refinement. Torch tensors are converted to NumPy arrays at the call
    boundary only; the problem callables always see float64 tensors.

    Parameters
    ----------
    formulation : BVPFormulation
        Problem bound to one epsilon.
    mesh : Tensor
        Initial mesh, shape (m,). Must be strictly increasing and span
        ``[formulation.a, formulation.b]`` exactly.
    tol : float
        Collocation residual tolerance. Default is 1e-3.
    max_nodes : int
        Maximum number of mesh nodes. Default is 1000.

    Returns
    -------
    Interpolant
        Continuous solution on ``[a, b]``.

    Raises
    ------
    DegenerateMeshError
        If the mesh is degenerate. Checked before the solver is called.
    SolverNonConvergence
        If the solver terminates unsuccessfully. The adapter never retries
        with a different mesh.

    Examples
    --------
    >>> from torchasymptotics.problem import third_order_layer
    >>> formulation = third_order_layer().formulate(1e-2)
    >>> sol = solve_bvp(formulation, formulation.mesh(100), max_nodes=100000)
    >>> x = torch.tensor([0.0, 1.0], dtype=torch.float64)
    >>> torch.round(sol(x)[0], decimals=4)
    tensor([1., 1.], dtype=torch.float64)
    """
    validate_mesh(mesh, formulation.a, formulation.b)

    def fun(x: np.ndarray, y: np.ndarray) -> np.ndarray:
        dydx = formulation.rhs(torch.tensor(x), torch.tensor(y))
        return dydx.detach().numpy()

    def bc(ya: np.ndarray, yb: np.ndarray) -> np.ndarray:
        residual = formulation.boundary_residual(
            torch.tensor(ya), torch.tensor(yb)
        )
        return residual.detach().numpy()

    mesh = mesh.detach().to(dtype=torch.float64, device="cpu")
    guess = formulation.initial_guess(mesh)

    if guess.shape != (formulation.n_components, mesh.shape[0]):
        raise ValueError(
            f"Initial guess must have shape "
            f"{(formulation.n_components, mesh.shape[0])}, "
            f"got {tuple(guess.shape)}"
        )

    result = scipy.integrate.solve_bvp(
        fun,
        bc,
        mesh.numpy(),
        guess.detach().numpy(),
        tol=tol,
        max_nodes=max_nodes,
    )

    if not result.success:
        raise SolverNonConvergence(
            result.status,
            result.message,
            epsilon=formulation.epsilon,
            n_nodes=result.x.shape[0],
        )

    return Interpolant(
        x=torch.from_numpy(np.ascontiguousarray(result.x)),
        y=torch.from_numpy(np.ascontiguousarray(result.y)),
        yp=torch.from_numpy(np.ascontiguousarray(result.yp)),
        max_rms_residual=torch.from_numpy(result.rms_residuals).max(),
    )
