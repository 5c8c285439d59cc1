"""L1 distance between the asymptotic and numerical solutions."""

from typing import Optional

import torch
from torch import Tensor

from torchasymptotics.error_metric._exceptions import (
    InsufficientValidSamples,
)
from torchasymptotics.sampling import SampleSet


def l1_error(
    samples: SampleSet, *, epsilon: Optional[float] = None
) -> Tensor:
    r"""Integrate :math:`|y_{asym} - y_{num}|` over the valid domain.

    .. math::

        L_1 = \int_a^b |y_{asym}(x) - y_{num}(x)| \, dx

    The composite trapezoidal rule is applied to the valid sub-sequence of
    the grid only, so truncated and non-uniform grids are handled exactly.

    Parameters
    ----------
    samples : SampleSet
        Paired samples.
    epsilon : float, optional
        Reported in the error message if integration fails.

    Returns
    -------
    Tensor
        Scalar, non-negative.

    Raises
    ------
    InsufficientValidSamples
        If fewer than 2 samples are valid. Never defaults to zero.
    """
    n_valid = int(samples.valid.sum())
    if n_valid < 2:
        raise InsufficientValidSamples(n_valid, epsilon=epsilon)

    valid = samples[samples.valid]

    return torch.trapezoid(
        torch.abs(valid.y_asymptotic - valid.y_numerical), valid.x
    )
