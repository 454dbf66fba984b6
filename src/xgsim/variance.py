"""Match-day performance variance drawn from a weighted band table."""

from __future__ import annotations

import dataclasses
import random
from typing import Sequence, Tuple

from .rng import resolve_rng


@dataclasses.dataclass(frozen=True, slots=True)
class PerformanceLevel:
    """A band of performance modifiers and its relative likelihood."""

    name: str
    weight: int
    minimum: float
    maximum: float

    def contains(self, value: float) -> bool:
        return self.minimum <= value < self.maximum


PERFORMANCE_LEVELS: Tuple[PerformanceLevel, ...] = (
    PerformanceLevel("disaster", 1, 0.2, 0.6),
    PerformanceLevel("poor", 10, 0.6, 0.85),
    PerformanceLevel("normal", 70, 0.85, 1.15),
    PerformanceLevel("good", 12, 1.15, 1.4),
    PerformanceLevel("great", 5, 1.4, 1.8),
    PerformanceLevel("miracle", 2, 1.8, 2.3),
)


def validate_levels(levels: Sequence[PerformanceLevel]) -> int:
    """Check a band table and return its total weight."""

    if not levels:
        raise ValueError("performance table must contain at least one level")
    for level in levels:
        if level.weight <= 0:
            raise ValueError(f"level {level.name!r} must have a positive weight")
        if not level.minimum < level.maximum:
            raise ValueError(
                f"level {level.name!r} minimum must be below its maximum"
            )
    return sum(level.weight for level in levels)


def select_level(
    draw: float, levels: Sequence[PerformanceLevel] = PERFORMANCE_LEVELS
) -> PerformanceLevel:
    """Return the band whose cumulative weight first exceeds ``draw``.

    ``draw`` must lie in ``[0, total_weight]``.  The final band covers
    everything the earlier bands do not, so a valid draw always selects a
    level.
    """

    total = validate_levels(levels)
    if not 0 <= draw <= total:
        raise ValueError(f"draw {draw!r} outside [0, {total}]")
    cumulative = 0
    for level in levels[:-1]:
        cumulative += level.weight
        if draw < cumulative:
            return level
    return levels[-1]


def level_for_modifier(
    value: float, levels: Sequence[PerformanceLevel] = PERFORMANCE_LEVELS
) -> PerformanceLevel:
    """Classify a modifier back into its band."""

    for level in levels:
        if level.contains(value):
            return level
    last = levels[-1]
    if value == last.maximum:
        return last
    raise ValueError(f"modifier {value!r} is outside every performance level")


def performance_modifier(
    rng: random.Random | None = None,
    levels: Sequence[PerformanceLevel] = PERFORMANCE_LEVELS,
) -> float:
    """Draw a multiplicative performance modifier for one side.

    The band is picked with probability ``weight / total_weight`` and the
    modifier is uniform within it.  With the default table the result lies
    in ``[0.2, 2.3]`` and about 70% of draws fall in ``[0.85, 1.15)``.
    """

    generator = resolve_rng(rng)
    total = validate_levels(levels)
    level = select_level(generator.random() * total, levels)
    return level.minimum + generator.random() * (level.maximum - level.minimum)


__all__ = [
    "PERFORMANCE_LEVELS",
    "PerformanceLevel",
    "level_for_modifier",
    "performance_modifier",
    "select_level",
    "validate_levels",
]
