"""Mean and variance estimators."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import cast

import numpy as np

from onlinestats.base import OnlineStat


def _combine(
    n_a: int, mean_a: float, m2_a: float, n_b: int, mean_b: float, m2_b: float
) -> tuple[int, float, float]:
    """Combine two (count, mean, sum of squared deviations) triples."""
    n = n_a + n_b
    if n == 0:
        return 0, 0.0, 0.0
    delta = mean_b - mean_a
    mean = mean_a + delta * n_b / n
    m2 = m2_a + m2_b + delta * delta * n_a * n_b / n
    return n, mean, m2


class Mean(OnlineStat):
    """Running arithmetic mean. Reports 0.0 before the first observation."""

    def __init__(self) -> None:
        self._n = 0
        self._mean = 0.0

    def update(self, x: float) -> None:
        self._n += 1
        self._mean += (float(x) - self._mean) / self._n

    def update_batch(self, xs: Iterable[float]) -> None:
        arr = np.asarray(xs, dtype=float).ravel()
        if arr.size == 0:
            return
        self._n, self._mean, _ = _combine(
            self._n, self._mean, 0.0, arr.size, float(arr.mean()), 0.0
        )

    def merge_into(self, other: OnlineStat) -> None:
        self._check_same_kind(other)
        other = cast(Mean, other)
        self._n, self._mean, _ = _combine(
            self._n, self._mean, 0.0, other._n, other._mean, 0.0
        )

    def value(self) -> float:
        return self._mean

    def mean(self) -> float:
        return self._mean

    def nobs(self) -> int:
        return self._n

    def statenames(self) -> list[str]:
        return ["mean", "nobs"]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mean):
            return NotImplemented
        return self._n == other._n and self._mean == other._mean

    def __repr__(self) -> str:
        return f"Mean(mean={self._mean!r}, nobs={self._n})"


class Variance(OnlineStat):
    """
    Running sample variance using Welford's algorithm.

    The variance uses the ``n - 1`` denominator and is 0.0 until two
    observations have been seen. Batches and merges are combined with the
    pairwise update of Chan et al., which gives the same result as feeding the
    observations one at a time (up to rounding).
    """

    def __init__(self) -> None:
        self._n = 0
        self._mean = 0.0
        self._m2 = 0.0

    def update(self, x: float) -> None:
        x = float(x)
        self._n += 1
        delta = x - self._mean
        self._mean += delta / self._n
        self._m2 += delta * (x - self._mean)

    def update_batch(self, xs: Iterable[float]) -> None:
        arr = np.asarray(xs, dtype=float).ravel()
        if arr.size == 0:
            return
        batch_mean = float(arr.mean())
        batch_m2 = float(np.sum((arr - batch_mean) ** 2))
        self._n, self._mean, self._m2 = _combine(
            self._n, self._mean, self._m2, arr.size, batch_mean, batch_m2
        )

    def merge_into(self, other: OnlineStat) -> None:
        self._check_same_kind(other)
        other = cast(Variance, other)
        self._n, self._mean, self._m2 = _combine(
            self._n, self._mean, self._m2, other._n, other._mean, other._m2
        )

    def value(self) -> float:
        if self._n < 2:
            return 0.0
        return self._m2 / (self._n - 1)

    def mean(self) -> float:
        return self._mean

    def std(self) -> float:
        return math.sqrt(self.value())

    def nobs(self) -> int:
        return self._n

    def statenames(self) -> list[str]:
        return ["var", "mean", "nobs"]

    def state(self) -> list[float | int]:
        return [self.value(), self._mean, self._n]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variance):
            return NotImplemented
        return self._n == other._n and self._mean == other._mean and self._m2 == other._m2

    def __repr__(self) -> str:
        return f"Variance(var={self.value()!r}, mean={self._mean!r}, nobs={self._n})"
