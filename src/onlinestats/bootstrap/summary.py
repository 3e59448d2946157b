"""Cached summary of the bootstrap replicate distribution."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import numpy as np

from .replicates import ReplicateSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplicateSummary:
    """
    Mean, variance and standard deviation of the replicate values.

    ``values`` keeps the read-only replicate values the summary was computed
    from, so percentile intervals need no second pass over the replicates.
    """

    mean: float
    variance: float
    std: float
    values: np.ndarray = field(default_factory=lambda: np.empty(0), repr=False, compare=False)

    @classmethod
    def from_values(cls, values: np.ndarray) -> ReplicateSummary:
        """
        Summarize replicate values.

        The variance uses the ``n - 1`` denominator and is 0.0 for a single
        replicate.
        """
        arr = np.array(values, dtype=float)
        arr.flags.writeable = False
        mean = float(np.mean(arr))
        variance = float(np.var(arr, ddof=1)) if arr.size > 1 else 0.0
        return cls(mean=mean, variance=variance, std=math.sqrt(variance), values=arr)


class CachedReplicateSummary:
    """
    Lazily recomputed ReplicateSummary.

    Updates mark the cache dirty; the next read recomputes it once and every
    read after that is served from the cache until the next invalidation.
    """

    def __init__(self) -> None:
        self._summary: ReplicateSummary | None = None
        self._dirty = True
        self.refresh_count = 0

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def invalidate(self) -> None:
        self._dirty = True

    def refresh(self, replicates: ReplicateSet) -> ReplicateSummary:
        """Recompute the summary from the current replicate values and clear the dirty flag."""
        self._summary = ReplicateSummary.from_values(replicates.values())
        self._dirty = False
        self.refresh_count += 1
        logger.debug(f"Refreshed replicate summary over {len(replicates)} replicates")
        return self._summary

    def get(self, replicates: ReplicateSet) -> ReplicateSummary:
        """Return the summary, refreshing it only if it is dirty."""
        if self._dirty or self._summary is None:
            return self.refresh(replicates)
        return self._summary
