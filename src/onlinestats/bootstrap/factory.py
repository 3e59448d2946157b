"""Bootstrap factory for creating bootstraps from configuration."""

from __future__ import annotations

import logging

from onlinestats.base import UpdatableStat
from onlinestats.config import BootstrapConfig
from onlinestats.errors import InvalidConfiguration

from .estimator import BernoulliBootstrap, Bootstrap, PoissonBootstrap

logger = logging.getLogger(__name__)


def get_bootstrap(stat: UpdatableStat, config: BootstrapConfig | None = None) -> Bootstrap:
    """
    Create a bootstrap around ``stat`` from configuration.

    Args:
        stat: Empty statistic to bootstrap
        config: Bootstrap configuration (defaults to BootstrapConfig())

    Returns:
        Initialized bootstrap instance
    """
    if config is None:
        config = BootstrapConfig()

    logger.debug(f"Building {config.policy} bootstrap with {config.n_replicates} replicates")

    match config.policy:
        case "bernoulli":
            return BernoulliBootstrap(
                stat,
                n_replicates=config.n_replicates,
                seed=config.seed,
                confidence_level=config.confidence_level,
                ci_method=config.ci_method,
            )

        case "poisson":
            return PoissonBootstrap(
                stat,
                n_replicates=config.n_replicates,
                rate=config.rate,
                seed=config.seed,
                confidence_level=config.confidence_level,
                ci_method=config.ci_method,
            )

        case _:
            raise InvalidConfiguration(f"Unknown resampling policy: {config.policy}")
