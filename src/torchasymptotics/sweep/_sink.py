"""Interface of the plotting and reporting collaborator."""

from pathlib import Path
from typing import Protocol, Sequence

from torchasymptotics.convergence import ConvergenceRecord, FitResult
from torchasymptotics.sampling import SampleSet


class SweepSink(Protocol):
    """Receives sweep output for plotting and reporting.

    Directory creation under ``output_dir`` is the sink's responsibility.
    """

    def emit_samples(self, epsilon: float, samples: SampleSet) -> None:
        """Both curves for one successful epsilon, in sweep order."""
        ...

    def emit_fit(
        self,
        fit: FitResult,
        records: Sequence[ConvergenceRecord],
        output_dir: Path,
    ) -> None:
        """Final fit and the records it was computed from."""
        ...
