"""Confidence intervals from a bootstrap replicate distribution."""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

import numpy as np
from scipy.stats import norm

from onlinestats.errors import InvalidArgument, UnsupportedMethod


class CIMethod(StrEnum):
    """Supported interval constructions."""

    NORMAL = "normal"
    PERCENTILE = "percentile"


class ConfidenceInterval(NamedTuple):
    """Lower and upper bounds of a confidence interval."""

    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, x: float) -> bool:
        return self.lower <= x <= self.upper


def resolve_method(method: str | CIMethod) -> CIMethod:
    """
    Map a method name to a CIMethod.

    Raises:
        UnsupportedMethod: If the name is not a known method
    """
    try:
        return CIMethod(str(method).lower())
    except ValueError:
        choices = ", ".join(m.value for m in CIMethod)
        raise UnsupportedMethod(
            f"Unknown confidence interval method: {method!r} (expected one of: {choices})"
        ) from None


def validate_level(level: float) -> float:
    """
    Check that a confidence level lies strictly between 0 and 1.

    Raises:
        InvalidArgument: If it does not
    """
    if not 0 < level < 1:
        raise InvalidArgument(f"Confidence level must be in (0, 1), got {level}")
    return float(level)


def normal_quantile(level: float) -> float:
    """Two-sided standard normal quantile, e.g. 0.95 -> 1.959964."""
    return float(norm.ppf(1 - (1 - level) / 2))


def compute_interval(
    values: np.ndarray,
    center: float,
    std: float,
    level: float = 0.95,
    method: str | CIMethod = CIMethod.PERCENTILE,
) -> ConfidenceInterval:
    """
    Compute a confidence interval from bootstrap replicates.

    Args:
        values: Replicate values
        center: Point estimate the normal interval is centred on
        std: Standard deviation of the replicate values
        level: Confidence level in (0, 1)
        method: "normal" (center +/- z * std) or "percentile" (linearly
            interpolated replicate quantiles)

    Returns:
        ConfidenceInterval with lower and upper bounds
    """
    method = resolve_method(method)
    level = validate_level(level)

    match method:
        case CIMethod.NORMAL:
            z = normal_quantile(level)
            return ConfidenceInterval(lower=center - z * std, upper=center + z * std)
        case CIMethod.PERCENTILE:
            alpha = 1 - level
            lower, upper = np.percentile(
                np.asarray(values, dtype=float),
                [100 * alpha / 2, 100 * (1 - alpha / 2)],
                method="linear",
            )
            return ConfidenceInterval(lower=float(lower), upper=float(upper))
