"""Tests for bootstrap configuration and factory."""

import pytest
from pydantic import ValidationError

from onlinestats import BernoulliBootstrap, BootstrapConfig, Mean, PoissonBootstrap, get_bootstrap


class TestBootstrapConfig:
    """Tests for BootstrapConfig."""

    def test_defaults(self):
        """Test default configuration."""
        config = BootstrapConfig()
        assert config.policy == "bernoulli"
        assert config.n_replicates == 1000
        assert config.confidence_level == 0.95
        assert config.ci_method == "percentile"

    def test_from_dict(self):
        """Test validating a plain dict."""
        config = BootstrapConfig.model_validate({"policy": "poisson", "rate": 2.0, "seed": 3})
        assert config.policy == "poisson"
        assert config.rate == 2.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n_replicates": 0},
            {"rate": -1.0},
            {"confidence_level": 1.5},
            {"policy": "uniform"},
            {"ci_method": "bca"},
        ],
    )
    def test_invalid(self, kwargs):
        """Test that invalid settings are rejected."""
        with pytest.raises(ValidationError):
            BootstrapConfig(**kwargs)


class TestGetBootstrap:
    """Tests for get_bootstrap factory function."""

    def test_default(self):
        """Test that no config gives a Bernoulli bootstrap."""
        b = get_bootstrap(Mean())
        assert isinstance(b, BernoulliBootstrap)
        assert b.n_replicates == 1000

    def test_poisson(self):
        """Test building a Poisson bootstrap."""
        config = BootstrapConfig(policy="poisson", n_replicates=200, rate=2.0, seed=1)
        b = get_bootstrap(Mean(), config)
        assert isinstance(b, PoissonBootstrap)
        assert b.n_replicates == 200
        assert b.policy.rate == 2.0

    def test_interval_defaults(self):
        """Test that interval defaults are carried over."""
        config = BootstrapConfig(n_replicates=100, confidence_level=0.9, ci_method="normal")
        b = get_bootstrap(Mean(), config)
        assert b.confidence_level == 0.9
        assert b.ci_method == "normal"

    def test_seed_reproducible(self):
        """Test that the configured seed makes runs repeatable."""
        config = BootstrapConfig(n_replicates=100, seed=123)
        a, b = get_bootstrap(Mean(), config), get_bootstrap(Mean(), config)
        a.ingest_batch(range(100))
        b.ingest_batch(range(100))
        assert (a.replicate_values() == b.replicate_values()).all()
