"""Epsilon sweep orchestration.

Main API
--------
run_sweep : Validate a composite approximation across epsilon

Data Structures
---------------
SweepConfig : Sweep parameters
SweepResult : Records, samples, failures and fit of one sweep
SweepFailure : A skipped sweep point with its stage and cause
SweepSink : Interface of the plotting and reporting collaborator

Warnings
--------
SweepWarning : A sweep point failed and was skipped
"""

from torchasymptotics.sweep._config import SweepConfig
from torchasymptotics.sweep._exceptions import SweepWarning
from torchasymptotics.sweep._sink import SweepSink
from torchasymptotics.sweep._sweep import (
    SweepFailure,
    SweepResult,
    run_sweep,
)

__all__ = [
    "SweepConfig",
    "SweepFailure",
    "SweepResult",
    "SweepSink",
    "SweepWarning",
    "run_sweep",
]
