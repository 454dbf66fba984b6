"""Tests for Poisson goal sampling."""

from __future__ import annotations

import math
import random
import statistics

import pytest
from hypothesis import given, settings, strategies as st

from xgsim.poisson import InvalidLambdaError, poisson_sample


class CountingRandom(random.Random):
    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return super().random()


def test_zero_lambda_always_returns_zero():
    rng = CountingRandom(3)
    assert all(poisson_sample(0.0, rng) == 0 for _ in range(100))
    assert rng.calls == 0


@pytest.mark.parametrize("lam", [-0.0001, -1.0, -1e9, float("-inf"), float("nan")])
def test_negative_or_nan_lambda_is_rejected(lam: float):
    with pytest.raises(InvalidLambdaError):
        poisson_sample(lam)


def test_invalid_lambda_is_a_value_error():
    with pytest.raises(ValueError, match="non-negative"):
        poisson_sample(-2.0)


def test_infinite_lambda_is_rejected():
    with pytest.raises(InvalidLambdaError, match="finite"):
        poisson_sample(float("inf"))


@pytest.mark.parametrize("lam", [0.3, 1.1, 2.5, 6.0])
def test_knuth_mean_and_variance_converge(lam: float, rng: random.Random):
    samples = [poisson_sample(lam, rng) for _ in range(40_000)]
    assert statistics.fmean(samples) == pytest.approx(lam, rel=0.03, abs=0.01)
    assert statistics.pvariance(samples) == pytest.approx(lam, rel=0.05, abs=0.01)


@pytest.mark.parametrize("lam", [45.0, 250.0, 1500.0])
def test_rejection_sampler_mean_and_variance_converge(lam: float, rng: random.Random):
    samples = [poisson_sample(lam, rng) for _ in range(20_000)]
    assert statistics.fmean(samples) == pytest.approx(lam, rel=0.01)
    assert statistics.pvariance(samples) == pytest.approx(lam, rel=0.06)


def test_zero_probability_matches_exp_minus_lambda(rng: random.Random):
    lam = 1.4
    draws = 60_000
    zeros = sum(1 for _ in range(draws) if poisson_sample(lam, rng) == 0)
    assert zeros / draws == pytest.approx(math.exp(-lam), abs=0.01)


def test_threshold_controls_algorithm_choice():
    knuth = CountingRandom(11)
    rejection = CountingRandom(11)
    poisson_sample(40.0, knuth, large_lambda_threshold=100.0)
    poisson_sample(40.0, rejection, large_lambda_threshold=30.0)
    assert knuth.calls > 20
    assert rejection.calls < knuth.calls


def test_large_lambda_terminates_quickly():
    rng = CountingRandom(5)
    result = poisson_sample(1e7, rng)
    assert result > 0
    assert rng.calls < 100


def test_seeded_draws_are_reproducible():
    first = [poisson_sample(2.0, random.Random(99)) for _ in range(5)]
    second = [poisson_sample(2.0, random.Random(99)) for _ in range(5)]
    assert first == second


@settings(max_examples=200)
@given(
    lam=st.floats(min_value=0.0, max_value=5_000.0, allow_nan=False),
    seed=st.integers(min_value=0, max_value=2**32),
)
def test_always_returns_non_negative_int(lam: float, seed: int) -> None:
    value = poisson_sample(lam, random.Random(seed))
    assert isinstance(value, int)
    assert value >= 0
