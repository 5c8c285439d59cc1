"""Continuous solution returned by the solver adapter."""

from typing import Tuple

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchasymptotics.boundary_value_problem._exceptions import (
    InterpolantDomainError,
)


def hermite_interpolate(
    x_nodes: Tensor,
    y_nodes: Tensor,
    yp_nodes: Tensor,
    x_query: Tensor,
) -> Tensor:
    """Evaluate the piecewise cubic Hermite interpolant at query points.

    Parameters
    ----------
    x_nodes : Tensor
        Mesh nodes, shape (n_nodes,). Strictly increasing.
    y_nodes : Tensor
        Function values, shape (n_components, n_nodes).
    yp_nodes : Tensor
        Derivative values, shape (n_components, n_nodes).
    x_query : Tensor
        Query points, shape (n_query,).

    Returns
    -------
    Tensor
        Interpolated values, shape (n_components, n_query).

    Notes
    -----
    On the interval ``[x_i, x_i + h]`` containing ``x`` and with
    ``s = x - x_i`` the interpolant is

        y(x) = y_i + s (y'_i + s (c2 + s c3))

    where, with ``m = (y_{i+1} - y_i) / h``,

        c2 = (3 m - 2 y'_i - y'_{i+1}) / h
        c3 = (y'_i + y'_{i+1} - 2 m) / h^2

    These are the coefficients of the piecewise polynomial that
    ``scipy.integrate.solve_bvp`` returns as ``result.sol``, so for the
    solver's final nodes, values and derivatives this reproduces its
    continuous solution.
    """
    interval = torch.searchsorted(x_nodes, x_query, right=True) - 1
    interval = interval.clamp(0, x_nodes.shape[0] - 2)

    left = x_nodes[interval]
    h = x_nodes[interval + 1] - left
    s = x_query - left

    y0 = y_nodes[:, interval]
    y1 = y_nodes[:, interval + 1]
    yp0 = yp_nodes[:, interval]
    yp1 = yp_nodes[:, interval + 1]

    slope = (y1 - y0) / h
    c2 = (3.0 * slope - 2.0 * yp0 - yp1) / h
    c3 = (yp0 + yp1 - 2.0 * slope) / (h * h)

    return y0 + s * (yp0 + s * (c2 + s * c3))


@tensorclass
class Interpolant:
    """Numerical solution of a BVP on its solved domain.

    Attributes
    ----------
    x : Tensor
        Final solver mesh, shape (n_nodes,). Spans exactly ``[a, b]``.
    y : Tensor
        State at the nodes, shape (n_components, n_nodes).
    yp : Tensor
        dY/dx at the nodes, shape (n_components, n_nodes).
    max_rms_residual : Tensor
        Largest RMS collocation residual over the mesh intervals.
    """

    x: Tensor
    y: Tensor
    yp: Tensor
    max_rms_residual: Tensor

    def domain(self) -> Tuple[float, float]:
        """Solved domain ``(a, b)``."""
        return float(self.x[0]), float(self.x[-1])

    def __call__(self, x_query: Tensor) -> Tensor:
        """Evaluate the full state vector at query points.

        Parameters
        ----------
        x_query : Tensor
            Points inside the solved domain, shape (m,).

        Returns
        -------
        Tensor
            State values, shape (n_components, m).

        Raises
        ------
        InterpolantDomainError
            If any query point lies outside ``[a, b]``. The interpolant is
            never extrapolated.
        """
        a, b = self.domain()
        outside = (x_query < a) | (x_query > b)
        if bool(outside.any()):
            raise InterpolantDomainError(a, b, int(outside.sum()))

        return hermite_interpolate(self.x, self.y, self.yp, x_query)
