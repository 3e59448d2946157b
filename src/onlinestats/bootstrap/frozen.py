"""Immutable arithmetic combinations of bootstrap replicate distributions."""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

import numpy as np

from onlinestats.display import format_state
from onlinestats.errors import IncompatibleOperation, InvalidConfiguration

from .confidence import CIMethod, ConfidenceInterval, compute_interval, resolve_method
from .summary import ReplicateSummary

logger = logging.getLogger(__name__)


@runtime_checkable
class ReplicateSource(Protocol):
    """Anything that can hand out a snapshot of its replicate distribution."""

    @property
    def n_replicates(self) -> int: ...

    def snapshot(self) -> tuple[Any, np.ndarray]: ...


def combine(
    left: ReplicateSource,
    right: ReplicateSource,
    op: Callable[[Any, Any], Any],
) -> FrozenBootstrap:
    """
    Combine two replicate distributions elementwise into a FrozenBootstrap.

    Replicate ``i`` of the result is ``op(left[i], right[i])`` and the point
    estimate is ``op`` applied to both point estimates.

    Raises:
        IncompatibleOperation: If the replicate counts or the statistic kinds differ
        InsufficientData: If either operand has not seen any observation
    """
    if left.n_replicates != right.n_replicates:
        raise IncompatibleOperation(
            f"Cannot combine bootstraps with {left.n_replicates} and "
            f"{right.n_replicates} replicates"
        )
    left_kind = getattr(left, "stat_kind", None)
    right_kind = getattr(right, "stat_kind", None)
    if left_kind is not None and right_kind is not None and left_kind is not right_kind:
        raise IncompatibleOperation(
            f"Cannot combine bootstraps of {left_kind.__name__} and {right_kind.__name__}"
        )
    left_value, left_replicates = left.snapshot()
    right_value, right_replicates = right.snapshot()
    return FrozenBootstrap(
        op(left_value, right_value),
        op(left_replicates, right_replicates),
        confidence_level=getattr(left, "confidence_level", 0.95),
        ci_method=getattr(left, "ci_method", CIMethod.PERCENTILE),
        stat_kind=left_kind or right_kind,
    )


class ReplicateArithmetic:
    """Mixin giving replicate sources +, -, * and / producing FrozenBootstrap."""

    def _combine(self, other: object, op: Callable[[Any, Any], Any]) -> Any:
        if not isinstance(other, ReplicateSource):
            return NotImplemented
        return combine(self, other, op)  # type: ignore[arg-type]

    def __add__(self, other: object) -> FrozenBootstrap:
        return self._combine(other, operator.add)

    def __sub__(self, other: object) -> FrozenBootstrap:
        return self._combine(other, operator.sub)

    def __mul__(self, other: object) -> FrozenBootstrap:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: object) -> FrozenBootstrap:
        return self._combine(other, operator.truediv)


class FrozenBootstrap(ReplicateArithmetic):
    """
    Read-only bootstrap distribution, e.g. the difference of two bootstraps.

    Built with ``a - b`` (or ``+``, ``*``, ``/``) on two bootstraps with the
    same number of replicates. The replicate values are copied at
    construction, so later updates to the parents do not show up here, and
    the summary is computed eagerly.
    ``stat_kind`` records the wrapped statistic type so snapshots of
    different statistics cannot be combined later.
    """

    def __init__(
        self,
        value: Any,
        replicate_values: Any,
        confidence_level: float = 0.95,
        ci_method: str | CIMethod = CIMethod.PERCENTILE,
        stat_kind: type | None = None,
    ) -> None:
        values = np.array(replicate_values, dtype=float)
        if values.ndim != 1 or values.size == 0:
            raise InvalidConfiguration(
                f"replicate_values must be a non-empty 1-D sequence, got shape {values.shape}"
            )
        values.flags.writeable = False

        self._value = value
        self.stat_kind = stat_kind
        self._replicate_values = values
        self._summary = ReplicateSummary.from_values(values)
        self.confidence_level = confidence_level
        self.ci_method = resolve_method(ci_method)
        logger.debug(f"Froze bootstrap distribution over {values.size} replicates")

    @property
    def n_replicates(self) -> int:
        return self._replicate_values.size

    @property
    def name(self) -> str:
        return type(self).__name__

    def snapshot(self) -> tuple[Any, np.ndarray]:
        return self._value, self._replicate_values

    def value(self) -> Any:
        """Point estimate combined from the parents' own (unresampled) values."""
        return self._value

    def mean(self) -> float:
        return self._summary.mean

    def variance(self) -> float:
        return self._summary.variance

    def std(self) -> float:
        return self._summary.std

    def cached_state(self) -> ReplicateSummary:
        return self._summary

    def replicate_values(self) -> np.ndarray:
        return self._replicate_values

    def confidence_interval(
        self,
        level: float | None = None,
        method: str | CIMethod | None = None,
    ) -> ConfidenceInterval:
        """
        Confidence interval over the frozen replicate values.

        Args:
            level: Confidence level in (0, 1); defaults to ``confidence_level``
            method: "normal" or "percentile"; defaults to ``ci_method``
        """
        return compute_interval(
            self._replicate_values,
            center=self._summary.mean,
            std=self._summary.std,
            level=self.confidence_level if level is None else level,
            method=self.ci_method if method is None else method,
        )

    def statenames(self) -> list[str]:
        return ["value", "mean", "std", "ci"]

    def state(self) -> list[Any]:
        return [self._value, self.mean(), self.std(), tuple(self.confidence_interval())]

    def __str__(self) -> str:
        return format_state(self)
