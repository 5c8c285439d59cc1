r"""Third-order problem with boundary layers at both ends.

.. math::

    \varepsilon y''' - y' + x y = 0, \quad x \in [0, 1],

    y(0) = 1, \quad y'(0) = 1, \quad y(1) = 1.

The outer solution :math:`C e^{x^2/2}` cannot satisfy all three conditions,
so layers of width :math:`\sqrt{\varepsilon}` form at :math:`x = 0` and
:math:`x = 1`.
"""

import math

import torch
from torch import Tensor

from torchasymptotics.problem._problem_spec import ProblemSpec


def _uniform(x: Tensor, epsilon: float) -> Tensor:
    delta = math.sqrt(epsilon)

    outer = (delta + 1.0) * torch.exp(x**2 / 2)
    left = -delta * torch.exp(-x / delta)
    right = (1.0 - math.sqrt(math.e) * (delta + 1.0)) * torch.exp(
        (x - 1.0) / delta
    )

    return outer + left + right


def _rhs(x: Tensor, y: Tensor, epsilon: float) -> Tensor:
    # Y = (y, y', y'')
    return torch.stack([y[1], y[2], (y[1] - x * y[0]) / epsilon])


def _boundary_residual(ya: Tensor, yb: Tensor) -> Tensor:
    return torch.stack([ya[0] - 1.0, ya[1] - 1.0, yb[0] - 1.0])


def _initial_guess(x: Tensor) -> Tensor:
    return torch.stack(
        [torch.ones_like(x), torch.ones_like(x), torch.zeros_like(x)]
    )


def _lower_bound(epsilon: float) -> float:
    return 0.0


def third_order_layer() -> ProblemSpec:
    """Model problem :math:`\\varepsilon y''' - y' + x y = 0` on ``[0, 1]``.

    Returns
    -------
    ProblemSpec
        Three-component problem with the composite approximation

        .. math::

            y_u = (\\sqrt{\\varepsilon} + 1) e^{x^2/2}
                - \\sqrt{\\varepsilon} e^{-x/\\sqrt{\\varepsilon}}
                + (1 - \\sqrt{e}(\\sqrt{\\varepsilon} + 1))
                  e^{(x - 1)/\\sqrt{\\varepsilon}}.
    """
    return ProblemSpec(
        name="third_order_layer",
        n_components=3,
        lower_bound=_lower_bound,
        upper_bound=1.0,
        uniform=_uniform,
        rhs=_rhs,
        boundary_residual=_boundary_residual,
        initial_guess=_initial_guess,
    )
