"""Evaluation of the composite (uniform) approximation."""

import torch
from torch import Tensor

from torchasymptotics.asymptotic._exceptions import FormulaEvaluationError
from torchasymptotics.problem import ProblemSpec


def evaluate_uniform(
    problem: ProblemSpec, x: Tensor, epsilon: float
) -> Tensor:
    """Evaluate ``y_uniform(x; epsilon)`` of ``problem`` on a point set.

    Parameters
    ----------
    problem : ProblemSpec
        Problem supplying the closed-form approximation.
    x : Tensor
        Evaluation points, shape ``(m,)``.
    epsilon : float
        Perturbation parameter, must be positive.

    Returns
    -------
    Tensor
        Values of the approximation, shape ``(m,)``.

    Raises
    ------
    ValueError
        If ``epsilon <= 0`` or ``x`` is not one-dimensional.
    FormulaEvaluationError
        If any value is ``inf`` or ``nan``.

    Examples
    --------
    >>> from torchasymptotics.problem import third_order_layer
    >>> x = torch.linspace(0, 1, 5, dtype=torch.float64)
    >>> y = evaluate_uniform(third_order_layer(), x, 1e-4)
    >>> round(float(y[0]), 6)
    1.0
    """
    if not epsilon > 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")

    if x.dim() != 1:
        raise ValueError(
            f"x must be one-dimensional, got shape {tuple(x.shape)}"
        )

    y = problem.uniform(x, epsilon)

    finite = torch.isfinite(y)
    if not bool(finite.all()):
        raise FormulaEvaluationError(
            epsilon, int((~finite).sum()), y.shape[-1]
        )

    return y
