"""Helpers for reading optional monetary inputs."""

from typing import Optional


def non_negative(value: Optional[float]) -> float:
    """Read an optional amount, treating missing or negative values as zero."""
    if value is None:
        return 0.0
    return max(0.0, float(value))
