"""Domain-safe sampling of the asymptotic and numerical solutions."""

import torch
from torch import Tensor

from torchasymptotics.asymptotic import evaluate_uniform
from torchasymptotics.boundary_value_problem import Interpolant
from torchasymptotics.problem import ProblemSpec
from torchasymptotics.sampling._sample_set import SampleSet


def sample_on_domain(
    problem: ProblemSpec,
    epsilon: float,
    interpolant: Interpolant,
    x: Tensor,
) -> SampleSet:
    """Sample both solutions on a grid that may extend past the solved domain.

    Points outside the interpolant's domain ``[a, b]`` are filtered out
    before the interpolant is called, and both curves are left undefined
    (``nan``) there. The asymptotic curve uses the same mask so the two can
    be compared pointwise.

    Parameters
    ----------
    problem : ProblemSpec
        Problem supplying the composite approximation.
    epsilon : float
        Perturbation parameter.
    interpolant : Interpolant
        Numerical solution for ``epsilon``.
    x : Tensor
        Shared evaluation grid, shape (m,). Typically reused across a sweep.

    Returns
    -------
    SampleSet
        Samples with ``valid = (a <= x) & (x <= b)``.

    Raises
    ------
    FormulaEvaluationError
        If the approximation is non-finite at a valid point.

    Examples
    --------
    For a domain starting at ``eps = 0.1`` the grid point ``0.05`` is masked:

    >>> from torchasymptotics.boundary_value_problem import solve_bvp
    >>> from torchasymptotics.problem import truncated_layer
    >>> formulation = truncated_layer().formulate(0.1)
    >>> sol = solve_bvp(formulation, formulation.mesh(50))
    >>> x = torch.tensor([0.05, 0.1, 0.5, 1.0], dtype=torch.float64)
    >>> samples = sample_on_domain(truncated_layer(), 0.1, sol, x)
    >>> samples.valid
    tensor([False,  True,  True,  True])
    """
    if x.dim() != 1:
        raise ValueError(
            f"x must be one-dimensional, got shape {tuple(x.shape)}"
        )

    a, b = interpolant.domain()
    valid = (x >= a) & (x <= b)

    y_asymptotic = torch.full_like(x, float("nan"))
    y_numerical = torch.full_like(x, float("nan"))

    if bool(valid.any()):
        x_valid = x[valid]
        y_asymptotic[valid] = evaluate_uniform(problem, x_valid, epsilon)
        y_numerical[valid] = interpolant(x_valid)[0].to(x.dtype)

    return SampleSet(
        x=x,
        y_asymptotic=y_asymptotic,
        y_numerical=y_numerical,
        valid=valid,
        batch_size=[x.shape[0]],
    )
