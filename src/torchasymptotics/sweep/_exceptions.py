"""Warnings for the epsilon sweep."""


class SweepWarning(UserWarning):
    """Warning for a sweep point that failed and was skipped."""

    pass
