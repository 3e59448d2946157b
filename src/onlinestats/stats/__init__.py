"""Basic single-pass estimators."""

from .moments import Mean, Variance

__all__ = [
    "Mean",
    "Variance",
]
