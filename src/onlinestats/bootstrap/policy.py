"""Resampling policies for the streaming bootstrap.

A policy decides, for every incoming observation and every replicate, how many
times that replicate receives the observation. Drawing these multiplicities
instead of resampling stored data is what lets the bootstrap run in one pass.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from onlinestats.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

SeedLike = int | np.random.Generator | None


@dataclass(frozen=True, kw_only=True)
class ResamplingPolicy(ABC):
    """
    Immutable resampling configuration plus its random generator.

    Args:
        n_replicates: Number of bootstrap replicates (N >= 1)
        seed: Seed or numpy Generator for reproducible draws
    """

    name: ClassVar[str]

    n_replicates: int
    seed: SeedLike = field(default=None, repr=False, compare=False)
    rng: np.random.Generator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.n_replicates, bool) or not isinstance(
            self.n_replicates, (int, np.integer)
        ):
            raise InvalidConfiguration(
                f"n_replicates must be an integer, got {self.n_replicates!r}"
            )
        if self.n_replicates < 1:
            raise InvalidConfiguration(f"n_replicates must be >= 1, got {self.n_replicates}")
        object.__setattr__(self, "rng", np.random.default_rng(self.seed))

    @abstractmethod
    def multiplicities(self, n_observations: int) -> np.ndarray:
        """
        Draw how often each replicate receives each observation.

        Args:
            n_observations: Number of incoming observations

        Returns:
            Non-negative integer array of shape (n_observations, n_replicates)
        """
        ...


@dataclass(frozen=True, kw_only=True)
class BernoulliPolicy(ResamplingPolicy):
    """
    Double-or-nothing resampling.

    Each replicate independently takes an observation with probability 1/2 and
    counts it twice when it does, so the number of replicates receiving a given
    observation is Binomial(N, 1/2) with the receivers chosen uniformly at
    random. Weights have mean 1 and variance 1, matching multinomial
    resampling. With a single replicate every observation passes through once.
    """

    name: ClassVar[str] = "bernoulli"

    INCLUDE_PROBABILITY: ClassVar[float] = 0.5
    WEIGHT: ClassVar[int] = 2

    def multiplicities(self, n_observations: int) -> np.ndarray:
        shape = (n_observations, self.n_replicates)
        if self.n_replicates == 1:
            return np.ones(shape, dtype=np.int64)
        included = self.rng.random(shape) < self.INCLUDE_PROBABILITY
        return included.astype(np.int64) * self.WEIGHT


@dataclass(frozen=True, kw_only=True)
class PoissonPolicy(ResamplingPolicy):
    """
    Poisson resampling: each replicate receives each observation m ~ Poisson(rate) times.

    With the default rate of 1 this is the standard Poisson approximation to
    multinomial resampling.
    """

    name: ClassVar[str] = "poisson"

    rate: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        if not math.isfinite(self.rate) or self.rate <= 0:
            raise InvalidConfiguration(f"rate must be a positive finite number, got {self.rate}")

    def multiplicities(self, n_observations: int) -> np.ndarray:
        return self.rng.poisson(self.rate, size=(n_observations, self.n_replicates))
