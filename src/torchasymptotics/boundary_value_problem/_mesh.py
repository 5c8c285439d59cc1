"""Initial mesh validation."""

import math
from typing import Optional

import torch
from torch import Tensor

from torchasymptotics.boundary_value_problem._exceptions import (
    DegenerateMeshError,
)


def validate_mesh(
    mesh: Tensor,
    a: Optional[float] = None,
    b: Optional[float] = None,
) -> Tensor:
    """Check that ``mesh`` can seed the collocation solver.

    Parameters
    ----------
    mesh : Tensor
        Candidate mesh, shape ``(m,)``.
    a, b : float, optional
        If given, the mesh must start at ``a`` and end at ``b``.

    Returns
    -------
    Tensor
        The mesh, unchanged.

    Raises
    ------
    DegenerateMeshError
        If the mesh is not one-dimensional, has fewer than 2 points, contains
        non-finite values, is not strictly increasing, or does not span
        ``[a, b]``.
    """
    if mesh.dim() != 1:
        raise DegenerateMeshError(
            f"Mesh must be one-dimensional, got shape {tuple(mesh.shape)}"
        )

    if mesh.shape[0] < 2:
        raise DegenerateMeshError(
            f"Mesh needs at least 2 points, got {mesh.shape[0]}"
        )

    if not bool(torch.isfinite(mesh).all()):
        raise DegenerateMeshError("Mesh contains non-finite values")

    steps = torch.diff(mesh)
    if not bool((steps > 0).all()):
        index = int(torch.nonzero(steps <= 0)[0])
        raise DegenerateMeshError(
            f"Mesh must be strictly increasing, "
            f"x[{index}]={float(mesh[index]):.6g} >= "
            f"x[{index + 1}]={float(mesh[index + 1]):.6g}"
        )

    if a is not None and not math.isclose(float(mesh[0]), a, rel_tol=1e-12):
        raise DegenerateMeshError(
            f"Mesh starts at {float(mesh[0]):.6g}, expected {a:.6g}"
        )

    if b is not None and not math.isclose(float(mesh[-1]), b, rel_tol=1e-12):
        raise DegenerateMeshError(
            f"Mesh ends at {float(mesh[-1]):.6g}, expected {b:.6g}"
        )

    return mesh
