"""Configuration models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class BootstrapConfig(BaseModel):
    """Settings for building a streaming bootstrap with get_bootstrap()."""

    policy: Literal["bernoulli", "poisson"] = Field(
        default="bernoulli", description="Resampling policy"
    )
    n_replicates: int = Field(default=1000, ge=1, description="Number of bootstrap replicates")
    rate: float = Field(default=1.0, gt=0, description="Poisson rate (poisson policy only)")
    seed: int | None = Field(default=None, description="Seed for reproducible resampling")
    confidence_level: float = Field(
        default=0.95, gt=0, lt=1, description="Default confidence level"
    )
    ci_method: Literal["normal", "percentile"] = Field(
        default="percentile", description="Default confidence interval method"
    )
