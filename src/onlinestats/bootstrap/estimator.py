"""Streaming bootstrap estimators."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import numpy as np

from onlinestats.base import UpdatableStat
from onlinestats.display import format_state
from onlinestats.errors import (
    IncompatibleOperation,
    InsufficientData,
    InvalidArgument,
    InvalidConfiguration,
)

from .confidence import (
    CIMethod,
    ConfidenceInterval,
    compute_interval,
    resolve_method,
    validate_level,
)
from .frozen import ReplicateArithmetic
from .policy import BernoulliPolicy, PoissonPolicy, ResamplingPolicy, SeedLike
from .replicates import ReplicateSet, update_many
from .summary import CachedReplicateSummary, ReplicateSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_RECOMMENDED_REPLICATES = 100


def _is_scalar(data: Any) -> bool:
    if isinstance(data, (str, bytes)):
        return True
    return np.ndim(data) == 0 and not isinstance(data, Iterable)


def _as_observations(values: Any) -> np.ndarray:
    """Convert one observation or an iterable of them to a 1-D float array."""
    if _is_scalar(values):
        values = [values]
    elif not isinstance(values, np.ndarray):
        values = list(values)
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Observations must be numbers: {e}") from e
    return arr.reshape(-1)


class Bootstrap(ReplicateArithmetic):
    """
    Streaming bootstrap around any online statistic.

    Keeps the statistic itself (the base estimator, which sees every
    observation exactly once) next to N replicates that each see a random
    multiplicity of every observation, as decided by the resampling policy.
    The spread of the replicate values estimates the sampling distribution of
    the statistic without ever storing the data.

    ``mean()`` is the base statistic's own value, while ``variance()`` and
    ``std()`` always describe the spread of the replicate values (the
    bootstrap standard error), even when the base statistic has a variance of
    its own, as ``Variance`` does. Use ``base`` to reach the latter.

    Subtracting two bootstraps of the same statistic kind with the same
    number of replicates gives a FrozenBootstrap of the replicate-wise
    differences; ``+``, ``*`` and ``/`` work the same way.
    """

    # Observations per multiplicity draw in ingest_batch; bounds the size of
    # the (chunk, N) count matrix.
    CHUNK_SIZE = 1024

    def __init__(
        self,
        stat: UpdatableStat,
        policy: ResamplingPolicy,
        confidence_level: float = 0.95,
        ci_method: str | CIMethod = CIMethod.PERCENTILE,
    ) -> None:
        """
        Initialize bootstrap.

        Args:
            stat: Statistic to bootstrap; must not have seen any observations.
                It is copied, so the caller's object is left untouched.
            policy: Resampling policy deciding replicate multiplicities
            confidence_level: Default level for confidence_interval()
            ci_method: Default method for confidence_interval()

        Raises:
            InvalidConfiguration: If the statistic or the defaults are unusable
        """
        if not isinstance(stat, UpdatableStat):
            raise InvalidConfiguration(
                f"{type(stat).__name__} does not provide update(), value() and nobs()"
            )
        if stat.nobs() != 0:
            raise InvalidConfiguration(
                f"Bootstrapped statistic must be empty, got one with {stat.nobs()} observations"
            )
        if not 0 < confidence_level < 1:
            raise InvalidConfiguration(
                f"confidence_level must be in (0, 1), got {confidence_level}"
            )
        try:
            self.ci_method = resolve_method(ci_method)
        except ValueError as e:
            raise InvalidConfiguration(str(e)) from e

        self.confidence_level = confidence_level
        self.policy = policy
        self._base = copy.deepcopy(stat)
        self._replicates = ReplicateSet(stat, policy.n_replicates)
        self._summary = CachedReplicateSummary()

        if policy.n_replicates < MIN_RECOMMENDED_REPLICATES:
            logger.warning(
                f"Bootstrap with only {policy.n_replicates} replicates; "
                f"intervals will be noisy (>= {MIN_RECOMMENDED_REPLICATES} recommended)"
            )
        logger.debug(
            f"Created {self.name} over {type(stat).__name__} "
            f"with {policy.n_replicates} replicates"
        )

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def n_replicates(self) -> int:
        return len(self._replicates)

    @property
    def base(self) -> UpdatableStat:
        """The unresampled statistic."""
        return self._base

    @property
    def replicates(self) -> ReplicateSet:
        return self._replicates

    @property
    def stat_kind(self) -> type:
        return type(self._base)

    # ------------------------------------------------------------------ updates

    def ingest(self, x: Any) -> None:
        """
        Add one observation.

        The base statistic is updated once; each replicate is updated as many
        times as the policy draws for it (possibly zero).

        Raises:
            InvalidArgument: If ``x`` is not a number; nothing is updated
        """
        arr = _as_observations(x)
        if arr.size != 1:
            raise InvalidArgument(f"ingest() takes one observation, got {arr.size}")
        x = arr[0]
        counts = self.policy.multiplicities(1)[0]
        try:
            for index in np.flatnonzero(counts):
                self._replicates.apply_to_replicate(index, x, counts[index])
            self._base.update(x)
        finally:
            self._summary.invalidate()

    def ingest_batch(self, values: Iterable[Any]) -> None:
        """
        Add a batch of observations.

        Equivalent to calling ingest() for each value in order, but draws the
        multiplicities for a whole chunk at once and invalidates the summary
        once. The whole batch is converted before any replicate is touched.

        Raises:
            InvalidArgument: If any value is not a number; nothing is updated
        """
        arr = _as_observations(values)
        n = len(arr)
        if n == 0:
            return

        try:
            for start in range(0, n, self.CHUNK_SIZE):
                chunk = arr[start : start + self.CHUNK_SIZE]
                self._replicates.apply_counts(chunk, self.policy.multiplicities(len(chunk)))
            update_many(self._base, arr)
        finally:
            self._summary.invalidate()
        logger.debug(f"{self.name} ingested {n} observations (total {self.nobs()})")

    def update(self, data: Any, callback: Callable[[Bootstrap], T] | None = None) -> T | None:
        """
        Add a scalar observation or a 1-D batch of observations.

        Args:
            data: A single observation or an array-like of observations
            callback: Called with this bootstrap after the update

        Returns:
            The callback's result, or None without a callback
        """
        if _is_scalar(data):
            self.ingest(data)
        else:
            self.ingest_batch(data)
        if callback is not None:
            return callback(self)
        return None

    # ------------------------------------------------------------------ queries

    def nobs(self) -> int:
        return self._base.nobs()

    def observation_count(self) -> int:
        return self.nobs()

    def value(self) -> Any:
        """Current value of the unresampled statistic."""
        return self._base.value()

    def _require_data(self) -> None:
        if self.nobs() == 0:
            raise InsufficientData(f"{self.name} has not seen any observations")

    def mean(self) -> Any:
        """
        Point estimate: the unresampled statistic's current value.

        Raises:
            InsufficientData: Before the first observation
        """
        self._require_data()
        return self._base.value()

    def cached_state(self) -> ReplicateSummary:
        """Mean, variance and std of the replicate values, recomputed only after updates."""
        self._require_data()
        return self._summary.get(self._replicates)

    def variance(self) -> float:
        """Variance of the replicate values, i.e. the squared bootstrap standard error."""
        return self.cached_state().variance

    def std(self) -> float:
        """Standard deviation of the replicate values (bootstrap standard error)."""
        return self.cached_state().std

    def replicate_values(self) -> np.ndarray:
        """Current value of every replicate, recomputed on each call."""
        return self._replicates.values()

    def snapshot(self) -> tuple[Any, np.ndarray]:
        self._require_data()
        return self._base.value(), self._replicates.values()

    def confidence_interval(
        self,
        level: float | None = None,
        method: str | CIMethod | None = None,
    ) -> ConfidenceInterval:
        """
        Bootstrap confidence interval for the statistic.

        Args:
            level: Confidence level in (0, 1); defaults to ``confidence_level``
            method: "normal" (mean() +/- z * std()) or "percentile"
                (replicate quantiles); defaults to ``ci_method``

        Returns:
            ConfidenceInterval, unpackable as ``(lower, upper)``

        Raises:
            UnsupportedMethod: For an unknown method name
            InvalidArgument: For a level outside (0, 1)
            InsufficientData: Before the first observation
        """
        method = resolve_method(self.ci_method if method is None else method)
        level = validate_level(self.confidence_level if level is None else level)
        self._require_data()

        summary = self._summary.get(self._replicates)
        return compute_interval(
            summary.values,
            center=float(self.mean()),
            std=summary.std,
            level=level,
            method=method,
        )

    # ------------------------------------------------------------------ misc

    def merge(self, other: Bootstrap) -> Bootstrap:
        raise IncompatibleOperation("Bootstraps cannot be merged")

    def copy(self) -> Bootstrap:
        return copy.deepcopy(self)

    def statenames(self) -> list[str]:
        return ["value", "std", "ci", "nobs"]

    def state(self) -> list[Any]:
        if self.nobs() == 0:
            return [self.value(), None, None, 0]
        return [self.value(), self.std(), tuple(self.confidence_interval()), self.nobs()]

    def __str__(self) -> str:
        return format_state(self)

    def __repr__(self) -> str:
        return (
            f"{self.name}({type(self._base).__name__}, n_replicates={self.n_replicates}, "
            f"nobs={self.nobs()})"
        )


class BernoulliBootstrap(Bootstrap):
    """Bootstrap using double-or-nothing (Bernoulli) resampling."""

    def __init__(
        self,
        stat: UpdatableStat,
        n_replicates: int = 1000,
        seed: SeedLike = None,
        confidence_level: float = 0.95,
        ci_method: str | CIMethod = CIMethod.PERCENTILE,
    ) -> None:
        super().__init__(
            stat,
            BernoulliPolicy(n_replicates=n_replicates, seed=seed),
            confidence_level=confidence_level,
            ci_method=ci_method,
        )


class PoissonBootstrap(Bootstrap):
    """Bootstrap using Poisson(rate) resampling multiplicities."""

    def __init__(
        self,
        stat: UpdatableStat,
        n_replicates: int = 1000,
        rate: float = 1.0,
        seed: SeedLike = None,
        confidence_level: float = 0.95,
        ci_method: str | CIMethod = CIMethod.PERCENTILE,
    ) -> None:
        super().__init__(
            stat,
            PoissonPolicy(n_replicates=n_replicates, rate=rate, seed=seed),
            confidence_level=confidence_level,
            ci_method=ci_method,
        )
