"""Tests for resampling policies."""

import dataclasses

import numpy as np
import pytest

from onlinestats import InvalidConfiguration
from onlinestats.bootstrap import BernoulliPolicy, PoissonPolicy


class TestBernoulliPolicy:
    """Tests for BernoulliPolicy."""

    def test_shape_and_values(self):
        """Test multiplicities are 0 or 2 with the right shape."""
        policy = BernoulliPolicy(n_replicates=50, seed=1)
        counts = policy.multiplicities(200)
        assert counts.shape == (200, 50)
        assert np.issubdtype(counts.dtype, np.integer)
        assert set(np.unique(counts)) <= {0, 2}

    def test_expected_weight_is_one(self):
        """Test that the average multiplicity is close to one."""
        counts = BernoulliPolicy(n_replicates=1000, seed=2).multiplicities(1000)
        assert counts.mean() == pytest.approx(1.0, abs=0.01)

    def test_single_replicate_passes_through(self):
        """Test that one replicate sees every observation once."""
        counts = BernoulliPolicy(n_replicates=1, seed=3).multiplicities(10)
        assert counts.shape == (10, 1)
        assert (counts == 1).all()

    def test_seed_reproducible(self):
        """Test that equal seeds give equal draws."""
        a = BernoulliPolicy(n_replicates=20, seed=42).multiplicities(30)
        b = BernoulliPolicy(n_replicates=20, seed=42).multiplicities(30)
        np.testing.assert_array_equal(a, b)

    def test_accepts_generator(self):
        """Test that a numpy Generator can be passed as seed."""
        policy = BernoulliPolicy(n_replicates=5, seed=np.random.default_rng(0))
        assert policy.multiplicities(3).shape == (3, 5)

    @pytest.mark.parametrize("n_replicates", [0, -3, 2.5, True])
    def test_invalid_replicates(self, n_replicates):
        """Test that bad replicate counts fail at construction."""
        with pytest.raises(InvalidConfiguration):
            BernoulliPolicy(n_replicates=n_replicates)

    def test_immutable(self):
        """Test that the policy cannot be reconfigured."""
        policy = BernoulliPolicy(n_replicates=5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.n_replicates = 10  # type: ignore[misc]

    def test_equality_ignores_seed(self):
        """Test that policies compare by configuration."""
        assert BernoulliPolicy(n_replicates=5, seed=1) == BernoulliPolicy(n_replicates=5, seed=2)
        assert BernoulliPolicy(n_replicates=5) != BernoulliPolicy(n_replicates=6)


class TestPoissonPolicy:
    """Tests for PoissonPolicy."""

    def test_non_negative_integers(self):
        """Test multiplicities are non-negative integers."""
        counts = PoissonPolicy(n_replicates=100, seed=4).multiplicities(500)
        assert counts.shape == (500, 100)
        assert np.issubdtype(counts.dtype, np.integer)
        assert (counts >= 0).all()

    def test_mean_matches_rate(self):
        """Test that multiplicities average to the rate."""
        counts = PoissonPolicy(n_replicates=500, rate=2.0, seed=5).multiplicities(1000)
        assert counts.mean() == pytest.approx(2.0, abs=0.02)

    def test_default_rate(self):
        """Test that the default rate is one."""
        assert PoissonPolicy(n_replicates=3).rate == 1.0

    @pytest.mark.parametrize("rate", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_rate(self, rate):
        """Test that bad rates fail at construction."""
        with pytest.raises(InvalidConfiguration):
            PoissonPolicy(n_replicates=10, rate=rate)

    def test_invalid_replicates(self):
        """Test that zero replicates fail at construction."""
        with pytest.raises(InvalidConfiguration):
            PoissonPolicy(n_replicates=0)
