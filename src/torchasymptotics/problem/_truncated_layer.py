r"""Second-order problem posed on an epsilon-truncated domain.

.. math::

    \varepsilon y'' + y' = \frac{1}{2\sqrt{x}}, \quad x \in [\varepsilon, 1],

    y(\varepsilon) = 0, \quad y(1) = 2.

The forcing is singular at the origin, so the domain starts at
:math:`x = \varepsilon` and the layer sits at the truncated left end.
"""

import math

import torch
from torch import Tensor

from torchasymptotics.problem._problem_spec import ProblemSpec


def _uniform(x: Tensor, epsilon: float) -> Tensor:
    outer = torch.sqrt(x) + 1.0
    inner = (1.0 + math.sqrt(epsilon)) * torch.exp(-(x - epsilon) / epsilon)

    return outer - inner


def _rhs(x: Tensor, y: Tensor, epsilon: float) -> Tensor:
    forcing = 0.5 / torch.sqrt(x)

    return torch.stack([y[1], (forcing - y[1]) / epsilon])


def _boundary_residual(ya: Tensor, yb: Tensor) -> Tensor:
    return torch.stack([ya[0], yb[0] - 2.0])


def _initial_guess(x: Tensor) -> Tensor:
    return torch.stack([2.0 * x, torch.full_like(x, 2.0)])


def _lower_bound(epsilon: float) -> float:
    return epsilon


def truncated_layer() -> ProblemSpec:
    """Model problem on the truncated domain ``[eps, 1]``.

    Returns
    -------
    ProblemSpec
        Two-component problem with lower bound ``a(eps) = eps`` and the
        composite approximation

        .. math::

            y_u = \\sqrt{x} + 1 - (1 + \\sqrt{\\varepsilon})
                e^{-(x - \\varepsilon)/\\varepsilon}.
    """
    return ProblemSpec(
        name="truncated_layer",
        n_components=2,
        lower_bound=_lower_bound,
        upper_bound=1.0,
        uniform=_uniform,
        rhs=_rhs,
        boundary_residual=_boundary_residual,
        initial_guess=_initial_guess,
    )
