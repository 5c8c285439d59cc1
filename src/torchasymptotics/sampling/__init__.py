"""Sampling of asymptotic and numerical solutions on a shared grid.

SampleSet
    Paired samples with a validity mask.
sample_on_domain
    Sample both solutions, masking points outside the solved domain.
"""

from torchasymptotics.sampling._sample import sample_on_domain
from torchasymptotics.sampling._sample_set import SampleSet

__all__ = [
    "SampleSet",
    "sample_on_domain",
]
