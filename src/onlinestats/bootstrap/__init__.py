"""Streaming bootstrap: replicate resampling and confidence intervals."""

from .confidence import CIMethod, ConfidenceInterval, compute_interval
from .estimator import BernoulliBootstrap, Bootstrap, PoissonBootstrap
from .factory import get_bootstrap
from .frozen import FrozenBootstrap
from .policy import BernoulliPolicy, PoissonPolicy, ResamplingPolicy
from .replicates import ReplicateSet
from .summary import CachedReplicateSummary, ReplicateSummary

__all__ = [
    "BernoulliBootstrap",
    "BernoulliPolicy",
    "Bootstrap",
    "CIMethod",
    "CachedReplicateSummary",
    "ConfidenceInterval",
    "FrozenBootstrap",
    "PoissonBootstrap",
    "PoissonPolicy",
    "ReplicateSet",
    "ReplicateSummary",
    "ResamplingPolicy",
    "compute_interval",
    "get_bootstrap",
]
