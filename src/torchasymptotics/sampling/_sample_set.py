"""Paired samples of both solutions on a shared grid."""

from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class SampleSet:
    """Asymptotic and numerical values on one evaluation grid.

    The batch size is the grid length, so all four fields always have the
    same length and boolean indexing (``samples[samples.valid]``) selects
    the valid sub-sequence of every field at once.

    Attributes
    ----------
    x : Tensor
        Evaluation grid, shape (m,).
    y_asymptotic : Tensor
        Composite approximation, shape (m,). ``nan`` where invalid.
    y_numerical : Tensor
        First state component of the numerical solution, shape (m,).
        ``nan`` where invalid; never extrapolated.
    valid : Tensor
        Boolean mask, shape (m,). True exactly where ``x`` lies inside the
        solved domain.
    """

    x: Tensor
    y_asymptotic: Tensor
    y_numerical: Tensor
    valid: Tensor
