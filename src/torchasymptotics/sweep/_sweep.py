"""Epsilon sweep comparing asymptotic and numerical solutions."""

import warnings
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Tuple

from torch import Tensor

from torchasymptotics._exceptions import AsymptoticValidationError
from torchasymptotics.boundary_value_problem import Interpolant, solve_bvp
from torchasymptotics.convergence import (
    ConvergenceRecord,
    FitResult,
    fit_power_law,
)
from torchasymptotics.error_metric import l1_error
from torchasymptotics.problem import ProblemSpec
from torchasymptotics.sampling import SampleSet, sample_on_domain
from torchasymptotics.sweep._config import SweepConfig
from torchasymptotics.sweep._exceptions import SweepWarning
from torchasymptotics.sweep._sink import SweepSink

Solver = Callable[..., Interpolant]


class SweepFailure(NamedTuple):
    """A sweep point that produced no record."""

    epsilon: float
    stage: str
    error: AsymptoticValidationError


@dataclass(frozen=True)
class SweepResult:
    """Everything a sweep produced.

    Attributes
    ----------
    records : tuple of ConvergenceRecord
        One record per successful epsilon, in sweep order.
    samples : tuple of (float, SampleSet)
        Samples per successful epsilon, in sweep order.
    failures : tuple of SweepFailure
        Skipped sweep points, in sweep order.
    fit : FitResult
        Convergence fit over ``records``.
    """

    records: Tuple[ConvergenceRecord, ...]
    samples: Tuple[Tuple[float, SampleSet], ...]
    failures: Tuple[SweepFailure, ...]
    fit: FitResult


def _measure(
    problem: ProblemSpec,
    epsilon: float,
    grid: Tensor,
    config: SweepConfig,
    solver: Solver,
    verbose: int,
) -> Tuple[SampleSet, ConvergenceRecord]:
    stage = "formulate"
    try:
        formulation = problem.formulate(epsilon)
        mesh = formulation.mesh(config.mesh_points, dtype=grid.dtype)

        stage = "solve"
        interpolant = solver(
            formulation, mesh, tol=config.tol, max_nodes=config.max_nodes
        )

        if verbose > 1:
            warnings.warn(
                f"epsilon={epsilon:.3e}: solver mesh has "
                f"{interpolant.x.shape[0]} nodes, max residual = "
                f"{float(interpolant.max_rms_residual):.2e}",
                RuntimeWarning,
                stacklevel=3,
            )

        stage = "sample"
        samples = sample_on_domain(problem, epsilon, interpolant, grid)

        stage = "integrate"
        error = l1_error(samples, epsilon=epsilon)
    except AsymptoticValidationError as e:
        if e.epsilon is None:
            e.epsilon = epsilon
        e.stage = stage
        raise

    return samples, ConvergenceRecord(epsilon=epsilon, l1_error=float(error))


def run_sweep(
    problem: ProblemSpec,
    config: Optional[SweepConfig] = None,
    *,
    solver: Solver = solve_bvp,
    sink: Optional[SweepSink] = None,
    verbose: int = 0,
) -> SweepResult:
    """Measure the L1 error of the composite approximation across epsilon.

    For each epsilon the problem is formulated on ``[a(eps), b]``, solved
    numerically, sampled on the shared grid together with the approximation,
    and the L1 distance is integrated. The observed convergence order is
    then fitted over all successful points.

    Each epsilon is independent: nothing but the output lists is shared
    between iterations, and points are visited in configuration order.

    Parameters
    ----------
    problem : ProblemSpec
        Problem to validate.
    config : SweepConfig, optional
        Sweep parameters. Default is ``SweepConfig()``.
    solver : callable
        ``solver(formulation, mesh, *, tol, max_nodes) -> Interpolant``.
        Default is :func:`solve_bvp`. Tests substitute an analytic solver.
    sink : SweepSink, optional
        Receives samples per epsilon and the final fit.
    verbose : int
        Verbosity level. 0 = failures only, 1 = per-epsilon L1 and fit,
        2 = also solver mesh statistics. Uses ``warnings.warn()``.

    Returns
    -------
    SweepResult
        Records, samples, failures and fit.

    Raises
    ------
    DegenerateFitInput
        If fewer than 2 sweep points succeeded. This is fatal for the run.
    AsymptoticValidationError
        The first per-epsilon failure, only when ``config.fail_fast``.

    Warns
    -----
    SweepWarning
        For each sweep point that failed and was skipped.

    Examples
    --------
    >>> from torchasymptotics.problem import third_order_layer
    >>> config = SweepConfig(epsilons=(1e-1, 1e-2, 1e-3), tol=1e-6)
    >>> result = run_sweep(third_order_layer(), config)
    >>> len(result.records), result.failures
    (3, ())
    """
    if config is None:
        config = SweepConfig()

    grid = problem.common_grid(config.grid_points)

    records = []
    samples = []
    failures = []

    for epsilon in config.epsilons:
        try:
            sample_set, record = _measure(
                problem, epsilon, grid, config, solver, verbose
            )
        except AsymptoticValidationError as e:
            if config.fail_fast:
                raise

            warnings.warn(
                f"Skipping epsilon={epsilon:.3e} of problem "
                f"'{problem.name}', {e.stage} stage failed: {e}",
                SweepWarning,
                stacklevel=2,
            )
            failures.append(SweepFailure(epsilon, e.stage, e))
            continue

        if verbose > 0:
            warnings.warn(
                f"epsilon={epsilon:.3e}: L1 error = {record.l1_error:.3e}",
                RuntimeWarning,
                stacklevel=2,
            )

        records.append(record)
        samples.append((epsilon, sample_set))

        if sink is not None:
            sink.emit_samples(epsilon, sample_set)

    try:
        fit = fit_power_law(
            [record.epsilon for record in records],
            [record.l1_error for record in records],
        )
    except AsymptoticValidationError as e:
        e.stage = "fit"
        raise

    if verbose > 0:
        warnings.warn(
            f"Observed fit: log(L1) = {float(fit.rate):.2f} log(eps) + "
            f"{float(fit.intercept):.2f}",
            RuntimeWarning,
            stacklevel=2,
        )

    if sink is not None:
        sink.emit_fit(fit, tuple(records), config.output_dir)

    return SweepResult(
        records=tuple(records),
        samples=tuple(samples),
        failures=tuple(failures),
        fit=fit,
    )
