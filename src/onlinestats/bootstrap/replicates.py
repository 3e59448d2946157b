"""Replicate storage for the streaming bootstrap."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

import numpy as np

from onlinestats.base import UpdatableStat
from onlinestats.errors import IncompatibleOperation, InvalidArgument, InvalidConfiguration


def update_many(stat: UpdatableStat, values: Any) -> None:
    """Feed a batch to ``stat``, using its ``update_batch`` when it has one."""
    update_batch = getattr(stat, "update_batch", None)
    if callable(update_batch):
        update_batch(values)
    else:
        for x in values:
            stat.update(x)


class ReplicateSet:
    """
    N independent copies of a statistic, one per bootstrap replicate.

    Replicates are deep copies of ``template`` made at construction; the
    number of replicates never changes afterwards.
    """

    def __init__(self, template: UpdatableStat, n_replicates: int) -> None:
        if n_replicates < 1:
            raise InvalidConfiguration(f"n_replicates must be >= 1, got {n_replicates}")
        self._replicates = [copy.deepcopy(template) for _ in range(n_replicates)]

    def apply_to_replicate(self, index: int, value: Any, times: int = 1) -> None:
        """
        Update a single replicate with one observation.

        Args:
            index: Replicate index in [0, N)
            value: Observation
            times: How many times the replicate receives the observation
        """
        replicate = self._replicates[index]
        for _ in range(int(times)):
            replicate.update(value)

    def apply_counts(self, values: Any, counts: np.ndarray) -> None:
        """
        Apply a batch of observations with per-replicate multiplicities.

        Replicate ``j`` receives ``values[i]`` exactly ``counts[i, j]`` times,
        in observation order.

        Args:
            values: Sequence of n observations
            counts: Integer array of shape (n, N)
        """
        values = np.asarray(values)
        counts = np.asarray(counts)
        expected = (len(values), len(self))
        if counts.shape != expected:
            raise InvalidArgument(f"counts must have shape {expected}, got {counts.shape}")

        for j, replicate in enumerate(self._replicates):
            column = counts[:, j]
            if not column.any():
                continue
            update_many(replicate, np.repeat(values, column, axis=0))

    def values(self) -> np.ndarray:
        """Return a freshly computed array of every replicate's current value."""
        return np.asarray([replicate.value() for replicate in self._replicates], dtype=float)

    def nobs(self) -> np.ndarray:
        """Return the observation count of every replicate."""
        return np.asarray([replicate.nobs() for replicate in self._replicates], dtype=np.int64)

    def merge(self, other: ReplicateSet) -> None:
        raise IncompatibleOperation("Replicate sets cannot be merged")

    def __len__(self) -> int:
        return len(self._replicates)

    def __iter__(self) -> Iterator[UpdatableStat]:
        return iter(self._replicates)

    def __getitem__(self, index: int) -> UpdatableStat:
        return self._replicates[index]
