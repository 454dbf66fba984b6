"""Recent-results form tracking and the momentum score derived from it."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable, Iterator, Tuple

FORM_LENGTH = 5


class Result(str, Enum):
    """Outcome of a single match from one team's point of view."""

    WIN = "W"
    DRAW = "D"
    LOSS = "L"

    @classmethod
    def from_goals(cls, scored: int, conceded: int) -> "Result":
        if scored > conceded:
            return cls.WIN
        if scored < conceded:
            return cls.LOSS
        return cls.DRAW

    @property
    def score(self) -> int:
        if self is Result.WIN:
            return 1
        if self is Result.LOSS:
            return -1
        return 0

    @property
    def points(self) -> int:
        if self is Result.WIN:
            return 3
        if self is Result.DRAW:
            return 1
        return 0


def _coerce_result(value: Result | str) -> Result:
    if isinstance(value, Result):
        return value
    try:
        return Result(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Invalid match result: {value!r}") from None


@dataclasses.dataclass(frozen=True, slots=True)
class Form:
    """The last :data:`FORM_LENGTH` results of a team, oldest first."""

    results: Tuple[Result, ...] = ()

    def __post_init__(self) -> None:
        coerced = tuple(_coerce_result(value) for value in self.results)
        object.__setattr__(self, "results", coerced[-FORM_LENGTH:])

    @classmethod
    def parse(cls, text: str) -> "Form":
        """Build a form from a compact string such as ``"WDLWW"``."""

        return cls(tuple(char for char in text if not char.isspace()))

    def add_result(self, result: Result | str) -> "Form":
        return Form(self.results + (_coerce_result(result),))

    @property
    def wins(self) -> int:
        return self.results.count(Result.WIN)

    @property
    def draws(self) -> int:
        return self.results.count(Result.DRAW)

    @property
    def losses(self) -> int:
        return self.results.count(Result.LOSS)

    @property
    def points(self) -> int:
        return sum(result.points for result in self.results)

    def is_empty(self) -> bool:
        return not self.results

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __str__(self) -> str:
        return "".join(result.value for result in self.results)


def form_score(form: Form | Iterable[Result | str] | None) -> float:
    """Return the mean result value of ``form`` in ``[-1.0, 1.0]``.

    Wins count ``+1``, losses ``-1`` and draws ``0``.  A missing or empty
    history is neutral and scores ``0.0``.
    """

    if form is None:
        return 0.0
    if isinstance(form, Form):
        results = form.results
    else:
        results = tuple(_coerce_result(value) for value in form)
    if not results:
        return 0.0
    total = sum(result.score for result in results)
    return total / len(results)


__all__ = ["FORM_LENGTH", "Form", "Result", "form_score"]
