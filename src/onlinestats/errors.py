"""Exceptions raised by onlinestats."""

from __future__ import annotations


class OnlineStatsError(Exception):
    """Base class for all onlinestats errors."""


class InvalidConfiguration(OnlineStatsError, ValueError):
    """Raised when an estimator is constructed with bad parameters."""


class IncompatibleOperation(OnlineStatsError, TypeError):
    """Raised when merging or combining estimators that do not fit together."""


class UnsupportedMethod(OnlineStatsError, ValueError):
    """Raised for an unknown confidence interval method."""


class InvalidArgument(OnlineStatsError, ValueError):
    """Raised for an out-of-range argument, e.g. a confidence level of 1.5."""


class InsufficientData(OnlineStatsError, ValueError):
    """Raised when a statistic is queried before any observation was seen."""
