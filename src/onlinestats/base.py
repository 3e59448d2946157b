"""Abstract online statistic interface."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from .display import format_state
from .errors import IncompatibleOperation


@runtime_checkable
class UpdatableStat(Protocol):
    """
    Structural interface required from a statistic wrapped by a bootstrap.

    Any object with these methods works; subclassing OnlineStat is not needed.
    Replicates are cloned with ``copy.deepcopy``. An ``update_batch`` method is
    used when present.
    """

    def update(self, x: Any) -> None: ...

    def value(self) -> Any: ...

    def nobs(self) -> int: ...


class OnlineStat(ABC):
    """Abstract base class for single-pass statistics."""

    @abstractmethod
    def update(self, x: float) -> None:
        """
        Incorporate one observation.

        Args:
            x: Observation to add
        """
        ...

    def update_batch(self, xs: Iterable[float]) -> None:
        """
        Incorporate a batch of observations.

        The default loops over ``update``; subclasses override it with a
        vectorized version where the statistic allows.
        """
        for x in xs:
            self.update(x)

    @abstractmethod
    def value(self) -> float:
        """Return the current value of the statistic."""
        ...

    @abstractmethod
    def nobs(self) -> int:
        """Return the number of observations incorporated."""
        ...

    @abstractmethod
    def merge_into(self, other: OnlineStat) -> None:
        """
        Fold the observations summarized by ``other`` into this statistic.

        Raises:
            IncompatibleOperation: If ``other`` is a different kind of statistic
        """
        ...

    def merge(self, other: OnlineStat) -> OnlineStat:
        """Return a new statistic summarizing both ``self`` and ``other``."""
        merged = self.copy()
        merged.merge_into(other)
        return merged

    def copy(self) -> OnlineStat:
        return copy.deepcopy(self)

    def statenames(self) -> list[str]:
        return ["value", "nobs"]

    def state(self) -> list[Any]:
        return [self.value(), self.nobs()]

    @property
    def name(self) -> str:
        return type(self).__name__

    def _check_same_kind(self, other: object) -> None:
        if type(other) is not type(self):
            raise IncompatibleOperation(
                f"Cannot merge {type(other).__name__} into {self.name}"
            )

    def __str__(self) -> str:
        return format_state(self)
