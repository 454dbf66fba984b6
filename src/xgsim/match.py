"""Single-match composition of the xG, variance and Poisson primitives."""

from __future__ import annotations

import dataclasses
import logging
import random
from typing import Iterable, Sequence

from .config import SimulatorConfig, get_config
from .form import Form, Result, form_score
from .poisson import poisson_sample
from .rng import resolve_rng
from .variance import (
    PERFORMANCE_LEVELS,
    PerformanceLevel,
    performance_modifier,
    validate_levels,
)
from .xg import XGParameters, base_xg

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class MatchScore:
    """Final scoreline of a match."""

    home_goals: int
    away_goals: int

    def __post_init__(self) -> None:
        for field_name in ("home_goals", "away_goals"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError("Goals must be non-negative integers")

    @property
    def is_home_win(self) -> bool:
        return self.home_goals > self.away_goals

    @property
    def is_draw(self) -> bool:
        return self.home_goals == self.away_goals

    @property
    def is_away_win(self) -> bool:
        return self.away_goals > self.home_goals

    @property
    def home_result(self) -> Result:
        return Result.from_goals(self.home_goals, self.away_goals)

    @property
    def away_result(self) -> Result:
        return Result.from_goals(self.away_goals, self.home_goals)

    def __str__(self) -> str:
        return f"{self.home_goals}-{self.away_goals}"


@dataclasses.dataclass(frozen=True, slots=True)
class SimulatedMatch:
    """Intermediate values and final score of one simulated match."""

    home_xg: float
    away_xg: float
    home_modifier: float
    away_modifier: float
    score: MatchScore

    @property
    def home_lambda(self) -> float:
        return self.home_xg * self.home_modifier

    @property
    def away_lambda(self) -> float:
        return self.away_xg * self.away_modifier


class MatchSimulator:
    """Simulates single matches from team strengths and recent form.

    Each side gets a logistic xG (the home side with its logit boost), an
    independent performance modifier, and a Poisson goal count with mean
    ``xg * modifier``.
    """

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        rng: random.Random | None = None,
        levels: Sequence[PerformanceLevel] = PERFORMANCE_LEVELS,
    ) -> None:
        self.config = config if config is not None else get_config()
        self.params = XGParameters.from_config(self.config)
        self.levels = tuple(levels)
        validate_levels(self.levels)
        self._rng = rng

    @property
    def rng(self) -> random.Random:
        return resolve_rng(self._rng)

    def simulate(
        self,
        home_strength: float,
        away_strength: float,
        home_form: Form | Iterable[Result | str] | None = None,
        away_form: Form | Iterable[Result | str] | None = None,
    ) -> SimulatedMatch:
        rng = self.rng
        home_xg = base_xg(
            home_strength, True, form_score(home_form), params=self.params
        )
        away_xg = base_xg(
            away_strength, False, form_score(away_form), params=self.params
        )
        home_modifier = performance_modifier(rng, self.levels)
        away_modifier = performance_modifier(rng, self.levels)
        threshold = self.config.large_lambda_threshold
        score = MatchScore(
            home_goals=poisson_sample(
                home_xg * home_modifier, rng, large_lambda_threshold=threshold
            ),
            away_goals=poisson_sample(
                away_xg * away_modifier, rng, large_lambda_threshold=threshold
            ),
        )
        result = SimulatedMatch(
            home_xg=home_xg,
            away_xg=away_xg,
            home_modifier=home_modifier,
            away_modifier=away_modifier,
            score=score,
        )
        logger.debug(
            "Simulated %.1f vs %.1f -> xG %.2f/%.2f modifiers %.2f/%.2f score %s",
            home_strength,
            away_strength,
            home_xg,
            away_xg,
            home_modifier,
            away_modifier,
            score,
        )
        return result


__all__ = ["MatchScore", "MatchSimulator", "SimulatedMatch"]
