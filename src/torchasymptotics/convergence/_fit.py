"""Power-law fit of the L1 error against epsilon."""

import math
from typing import NamedTuple, Sequence, Union

import torch
from torch import Tensor

from torchasymptotics.convergence._exceptions import DegenerateFitInput


class ConvergenceRecord(NamedTuple):
    """L1 error measured at one epsilon of a sweep."""

    epsilon: float
    l1_error: float


class FitResult(NamedTuple):
    r"""Least-squares fit :math:`\log L_1 \approx p \log\varepsilon + C`.

    Parameters
    ----------
    rate : Tensor
        Slope ``p``, the observed convergence order. Scalar.
    intercept : Tensor
        Intercept ``C``. Scalar.
    """

    rate: Tensor
    intercept: Tensor

    def prefactor(self) -> float:
        """``exp(C)``, so that ``L1 ~ exp(C) * eps**p``."""
        return math.exp(float(self.intercept))

    def predict(self, epsilon: Union[float, Tensor]) -> Tensor:
        """Fitted L1 error at ``epsilon``."""
        epsilon = torch.as_tensor(epsilon, dtype=self.rate.dtype)
        return torch.exp(self.intercept + self.rate * torch.log(epsilon))


def fit_power_law(
    epsilon: Union[Sequence[float], Tensor],
    l1_error: Union[Sequence[float], Tensor],
) -> FitResult:
    r"""Fit the observed convergence order by log-log linear regression.

    Solves the ordinary least-squares problem

    .. math::

        \min_{p, C} \sum_i (\log L_{1,i} - p \log\varepsilon_i - C)^2.

    The fit depends only on the set of pairs, not on their order.

    Parameters
    ----------
    epsilon : sequence of float or Tensor
        Perturbation parameters, shape (n,). All positive.
    l1_error : sequence of float or Tensor
        L1 errors, shape (n,). All positive.

    Returns
    -------
    FitResult
        Slope and intercept as float64 scalars.

    Raises
    ------
    ValueError
        If the inputs are not one-dimensional sequences of equal length.
    DegenerateFitInput
        If fewer than 2 pairs (or distinct epsilon values) are given, or any
        value is non-positive or non-finite. Zero errors are reported, never
        skipped.

    Examples
    --------
    >>> eps = [1e-1, 1e-2, 1e-3, 1e-4]
    >>> fit = fit_power_law(eps, [2.0 * e**1.5 for e in eps])
    >>> round(float(fit.rate), 6)
    1.5
    >>> round(fit.prefactor(), 6)
    2.0
    """
    epsilon = torch.as_tensor(epsilon, dtype=torch.float64)
    l1_error = torch.as_tensor(l1_error, dtype=torch.float64)

    if epsilon.dim() != 1 or l1_error.dim() != 1:
        raise ValueError("epsilon and l1_error must be one-dimensional")

    if epsilon.shape != l1_error.shape:
        raise ValueError(
            f"epsilon and l1_error must have the same length, got "
            f"{epsilon.shape[0]} and {l1_error.shape[0]}"
        )

    n = epsilon.shape[0]
    if n < 2:
        raise DegenerateFitInput(
            f"Need at least 2 (epsilon, L1) pairs to fit a rate, got {n}"
        )

    for name, values in (("epsilon", epsilon), ("L1 error", l1_error)):
        bad = ~(torch.isfinite(values) & (values > 0))
        if bool(bad.any()):
            index = int(torch.nonzero(bad)[0])
            raise DegenerateFitInput(
                f"{name} must be finite and positive, got "
                f"{float(values[index])} at index {index} "
                f"(epsilon={float(epsilon[index]):.3e})",
                epsilon=float(epsilon[index]),
            )

    if torch.unique(epsilon).shape[0] < 2:
        raise DegenerateFitInput(
            "Need at least 2 distinct epsilon values to fit a rate"
        )

    log_epsilon = torch.log(epsilon)
    design = torch.stack([log_epsilon, torch.ones_like(log_epsilon)], dim=-1)
    target = torch.log(l1_error).unsqueeze(-1)

    solution = torch.linalg.lstsq(design, target).solution.squeeze(-1)

    return FitResult(rate=solution[0], intercept=solution[1])
