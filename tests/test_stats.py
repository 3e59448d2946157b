"""Tests for the basic online estimators."""

import numpy as np
import pytest

from onlinestats import IncompatibleOperation, Mean, OnlineStat, Variance


@pytest.fixture
def data():
    return np.random.default_rng(7).normal(loc=2.0, scale=3.0, size=500)


class TestMean:
    """Tests for Mean."""

    def test_empty(self):
        """Test that an empty mean reports zero."""
        m = Mean()
        assert m.nobs() == 0
        assert m.value() == 0.0

    def test_matches_numpy(self, data):
        """Test running mean against numpy."""
        m = Mean()
        for x in data:
            m.update(x)
        assert m.nobs() == len(data)
        assert m.value() == pytest.approx(np.mean(data))

    def test_update_batch_matches_loop(self, data):
        """Test that the vectorized batch update agrees with single updates."""
        looped = Mean()
        for x in data:
            looped.update(x)
        batched = Mean()
        batched.update_batch(data[:100])
        batched.update_batch(data[100:])
        assert batched.nobs() == looped.nobs()
        assert batched.value() == pytest.approx(looped.value())

    def test_update_batch_empty(self):
        """Test that an empty batch is a no-op."""
        m = Mean()
        m.update_batch([])
        assert m.nobs() == 0

    def test_merge(self, data):
        """Test merging two means."""
        a, b = Mean(), Mean()
        a.update_batch(data[:200])
        b.update_batch(data[200:])
        merged = a.merge(b)
        assert merged.nobs() == len(data)
        assert merged.value() == pytest.approx(np.mean(data))
        # merge() leaves the operands alone
        assert a.nobs() == 200

    def test_merge_different_kind(self):
        """Test that merging different statistics fails."""
        with pytest.raises(IncompatibleOperation):
            Mean().merge_into(Variance())

    def test_equality(self):
        """Test field-by-field equality."""
        a, b = Mean(), Mean()
        assert a == b
        a.update(1.0)
        assert a != b
        b.update(1.0)
        assert a == b
        assert a != Variance()

    def test_copy_is_independent(self):
        """Test that copies do not share state."""
        a = Mean()
        a.update(1.0)
        b = a.copy()
        b.update(3.0)
        assert a.value() == 1.0
        assert b.value() == 2.0

    def test_state(self):
        """Test state report."""
        m = Mean()
        m.update_batch([1.0, 2.0, 3.0])
        assert m.statenames() == ["mean", "nobs"]
        assert m.state() == [2.0, 3]
        assert isinstance(m, OnlineStat)


class TestVariance:
    """Tests for Variance."""

    def test_fewer_than_two_observations(self):
        """Test that variance is zero before two observations."""
        v = Variance()
        assert v.value() == 0.0
        v.update(5.0)
        assert v.value() == 0.0
        assert v.mean() == 5.0

    def test_matches_numpy(self, data):
        """Test Welford updates against numpy."""
        v = Variance()
        for x in data:
            v.update(x)
        assert v.value() == pytest.approx(np.var(data, ddof=1))
        assert v.std() == pytest.approx(np.std(data, ddof=1))
        assert v.mean() == pytest.approx(np.mean(data))

    def test_update_batch(self, data):
        """Test batched updates against numpy."""
        v = Variance()
        v.update(data[0])
        v.update_batch(data[1:300])
        v.update_batch(data[300:])
        assert v.nobs() == len(data)
        assert v.value() == pytest.approx(np.var(data, ddof=1))

    def test_merge(self, data):
        """Test merging two variances."""
        a, b = Variance(), Variance()
        a.update_batch(data[:123])
        b.update_batch(data[123:])
        merged = a.merge(b)
        assert merged.value() == pytest.approx(np.var(data, ddof=1))
        assert merged.nobs() == len(data)

    def test_merge_into_empty(self, data):
        """Test merging into an empty variance copies the other side."""
        a, b = Variance(), Variance()
        b.update_batch(data)
        a.merge_into(b)
        assert a.value() == pytest.approx(b.value())

    def test_state(self):
        """Test state report."""
        v = Variance()
        v.update_batch([1.0, 3.0])
        assert v.statenames() == ["var", "mean", "nobs"]
        assert v.state() == [2.0, 2.0, 2]
