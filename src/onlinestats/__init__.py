"""Online statistics with a streaming bootstrap for confidence intervals."""

from .base import OnlineStat, UpdatableStat
from .bootstrap import (
    BernoulliBootstrap,
    Bootstrap,
    CIMethod,
    ConfidenceInterval,
    FrozenBootstrap,
    PoissonBootstrap,
    get_bootstrap,
)
from .config import BootstrapConfig
from .display import format_state, print_state
from .errors import (
    IncompatibleOperation,
    InsufficientData,
    InvalidArgument,
    InvalidConfiguration,
    OnlineStatsError,
    UnsupportedMethod,
)
from .stats import Mean, Variance

__version__ = "0.1.0"

__all__ = [
    "BernoulliBootstrap",
    "Bootstrap",
    "BootstrapConfig",
    "CIMethod",
    "ConfidenceInterval",
    "FrozenBootstrap",
    "IncompatibleOperation",
    "InsufficientData",
    "InvalidArgument",
    "InvalidConfiguration",
    "Mean",
    "OnlineStat",
    "OnlineStatsError",
    "PoissonBootstrap",
    "UnsupportedMethod",
    "UpdatableStat",
    "Variance",
    "format_state",
    "get_bootstrap",
    "print_state",
]
