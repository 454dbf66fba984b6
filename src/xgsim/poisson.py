"""Poisson goal-count sampling."""

from __future__ import annotations

import logging
import math
import random

from .rng import resolve_rng

LARGE_LAMBDA_THRESHOLD = 30.0

logger = logging.getLogger(__name__)


class InvalidLambdaError(ValueError):
    """Raised when a Poisson mean is negative or not finite."""


def _knuth(lam: float, rng: random.Random) -> int:
    limit = math.exp(-lam)
    k = 0
    p = 1.0
    while True:
        k += 1
        p *= rng.random()
        if p <= limit:
            return k - 1


def _transformed_rejection(lam: float, rng: random.Random) -> int:
    # Hormann's PTRS sampler; valid for lam >= 10.
    log_lam = math.log(lam)
    b = 0.931 + 2.53 * math.sqrt(lam)
    a = -0.059 + 0.02483 * b
    inv_alpha = 1.1239 + 1.1328 / (b - 3.4)
    v_r = 0.9277 - 3.6224 / (b - 2.0)
    while True:
        u = rng.random() - 0.5
        v = rng.random()
        us = 0.5 - abs(u)
        if us <= 0.0:
            continue
        k = math.floor((2.0 * a / us + b) * u + lam + 0.43)
        if us >= 0.07 and v <= v_r:
            return int(k)
        if k < 0 or (us < 0.013 and v > us):
            continue
        if v <= 0.0:
            continue
        lhs = math.log(v) + math.log(inv_alpha) - math.log(a / (us * us) + b)
        rhs = -lam + k * log_lam - math.lgamma(k + 1)
        if lhs <= rhs:
            return int(k)


def poisson_sample(
    lam: float,
    rng: random.Random | None = None,
    *,
    large_lambda_threshold: float = LARGE_LAMBDA_THRESHOLD,
) -> int:
    """Draw a goal count from ``Poisson(lam)``.

    Small means use Knuth's multiplicative method, which needs about
    ``lam + 1`` uniform draws.  From ``large_lambda_threshold`` upwards the
    sampler switches to transformed rejection so that ``exp(-lam)`` never
    underflows.

    Raises:
        InvalidLambdaError: if ``lam`` is negative, NaN or infinite.
    """

    lam = float(lam)
    if math.isnan(lam) or lam < 0:
        raise InvalidLambdaError(f"Lambda must be non-negative, got {lam!r}")
    if math.isinf(lam):
        raise InvalidLambdaError("Lambda must be finite")
    if lam == 0:
        return 0
    generator = resolve_rng(rng)
    # The rejection constants are only valid from lam = 10.
    if lam >= max(large_lambda_threshold, 10.0):
        logger.debug("Using transformed rejection sampler for lambda %.2f", lam)
        return _transformed_rejection(lam, generator)
    return _knuth(lam, generator)


__all__ = ["InvalidLambdaError", "LARGE_LAMBDA_THRESHOLD", "poisson_sample"]
