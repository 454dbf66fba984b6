"""Logistic expected-goals model mapping team strength to a scoring rate."""

from __future__ import annotations

import dataclasses
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .config import SimulatorConfig


@dataclasses.dataclass(frozen=True, slots=True)
class XGParameters:
    """Shape of the strength to xG S-curve.

    ``max_xg`` is the asymptotic ceiling, ``midpoint`` the strength that yields
    half of it and ``steepness`` the logistic growth rate.  ``min_xg`` is a
    floor so that even the weakest side keeps some scoring chance.  The home
    and form coefficients are additive terms on the logit.
    """

    max_xg: float = 2.2
    midpoint: float = 50.0
    steepness: float = 0.06
    min_xg: float = 0.15
    home_coefficient: float = 0.5
    form_coefficient: float = 0.3

    def __post_init__(self) -> None:
        if self.max_xg <= 0:
            raise ValueError("max_xg must be greater than zero")
        if self.min_xg < 0:
            raise ValueError("min_xg must be non-negative")
        if self.steepness <= 0:
            raise ValueError("steepness must be greater than zero")

    @classmethod
    def from_config(cls, config: "SimulatorConfig") -> "XGParameters":
        return cls(
            max_xg=config.max_xg,
            midpoint=config.midpoint,
            steepness=config.steepness,
            min_xg=config.min_xg,
            home_coefficient=config.home_coefficient,
            form_coefficient=config.form_coefficient,
        )

    def logit(self, strength: float, is_home: bool = False, form_score: float = 0.0) -> float:
        z = self.steepness * (strength - self.midpoint)
        if is_home:
            z += self.home_coefficient
        if form_score:
            z += self.form_coefficient * form_score
        return z


DEFAULT_XG_PARAMETERS = XGParameters()


def _logistic(z: float) -> float:
    # math.exp overflows past ~709; far in the tail the curve equals exp(z).
    if z < -700.0:
        return math.exp(z)
    return 1.0 / (1.0 + math.exp(-z))


def base_xg(
    strength: float,
    is_home: bool = False,
    form_score: float = 0.0,
    *,
    params: XGParameters = DEFAULT_XG_PARAMETERS,
) -> float:
    """Return the expected goals for a side of the given ``strength``.

    Strength is conventionally in ``[0, 100]`` but any finite value is
    accepted; the curve saturates at ``params.min_xg`` below and approaches
    ``params.max_xg`` above.  With ``is_home=False`` and a neutral
    ``form_score`` the result is
    ``max(max_xg / (1 + exp(-steepness * (strength - midpoint))), min_xg)``.

    The value stays strictly below ``max_xg`` only while ``exp(-z)`` is still
    visible next to ``1.0`` in double precision, i.e. a logit below roughly
    37 (strength up to about 650 with the defaults).  Beyond that the float
    result rounds to exactly ``max_xg``; it never exceeds it.
    """

    z = params.logit(float(strength), is_home, float(form_score))
    return max(params.max_xg * _logistic(z), params.min_xg)


__all__ = ["DEFAULT_XG_PARAMETERS", "XGParameters", "base_xg"]
