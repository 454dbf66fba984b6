"""Command line interface for the xgsim match primitives."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import random
import sys
from typing import Any, Callable, Dict, List, Sequence

from .config import ConfigurationError, SimulatorConfig, get_config, load_config_file
from .form import Form, form_score
from .logging import configure_logging
from .match import MatchSimulator
from .poisson import InvalidLambdaError, poisson_sample
from .variance import level_for_modifier, performance_modifier
from .xg import XGParameters, base_xg

logger = logging.getLogger(__name__)

CommandHandler = Callable[[SimulatorConfig, argparse.Namespace], Dict[str, Any]]


@dataclasses.dataclass(slots=True)
class Subcommand:
    """Container describing a CLI sub-command."""

    name: str
    help: str
    configure: Callable[[argparse.ArgumentParser], None]
    handler: CommandHandler

    def add_to_parser(
        self,
        subparsers,
        parent: argparse.ArgumentParser,
    ) -> argparse.ArgumentParser:
        """Create the parser for this subcommand."""

        parser = subparsers.add_parser(self.name, parents=[parent], help=self.help)
        self.configure(parser)
        parser.set_defaults(handler=self.handler, command=self.name)
        return parser


class SubcommandApp:
    """Registry that wires handlers into an :class:`argparse` parser."""

    def __init__(self, description: str | None = None) -> None:
        self._commands: list[Subcommand] = []
        self._description = description

    def command(
        self,
        name: str,
        *,
        help: str,
        configure: Callable[[argparse.ArgumentParser], None],
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Register ``handler`` as a sub-command with configuration callback."""

        def _decorator(handler: CommandHandler) -> CommandHandler:
            self._commands.append(
                Subcommand(name=name, help=help, configure=configure, handler=handler)
            )
            return handler

        return _decorator

    @property
    def commands(self) -> Sequence[Subcommand]:
        return tuple(self._commands)

    def build_parser(self) -> argparse.ArgumentParser:
        parent = argparse.ArgumentParser(add_help=False)
        parent.add_argument("--config", dest="config_file")
        parent.add_argument("--log-level")

        parser = argparse.ArgumentParser(description=self._description)
        subparsers = parser.add_subparsers(dest="command", required=True)
        for command in self._commands:
            command.add_to_parser(subparsers, parent)
        return parser


APP = SubcommandApp(description=__doc__)


def _parse_form(text: str | None) -> Form | None:
    if text is None:
        return None
    try:
        return Form.parse(text)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


def _generator(args: argparse.Namespace, config: SimulatorConfig) -> random.Random:
    seed = args.seed if args.seed is not None else config.seed
    return random.Random(seed)


def _configure_xg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("strength", type=float)
    parser.add_argument("--home", action="store_true", default=False)
    parser.add_argument("--form")


@APP.command("xg", help="Expected goals for a team strength", configure=_configure_xg)
def _handle_xg(config: SimulatorConfig, args: argparse.Namespace) -> Dict[str, Any]:
    form = _parse_form(args.form)
    score = form_score(form)
    params = XGParameters.from_config(config)
    xg = base_xg(args.strength, args.home, score, params=params)
    return {
        "strength": args.strength,
        "home": args.home,
        "form_score": score,
        "xg": xg,
    }


def _configure_form(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("results", help="Recent results such as WWDLW")


@APP.command("form", help="Form score for recent results", configure=_configure_form)
def _handle_form(config: SimulatorConfig, args: argparse.Namespace) -> Dict[str, Any]:
    del config
    form = _parse_form(args.results)
    assert form is not None
    return {
        "form": str(form),
        "wins": form.wins,
        "draws": form.draws,
        "losses": form.losses,
        "points": form.points,
        "form_score": form_score(form),
    }


def _configure_sampling(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--count", type=int, default=1)
    parser.add_argument("--seed", type=int)


@APP.command(
    "modifier", help="Draw performance modifiers", configure=_configure_sampling
)
def _handle_modifier(config: SimulatorConfig, args: argparse.Namespace) -> Dict[str, Any]:
    rng = _generator(args, config)
    draws: List[Dict[str, Any]] = []
    for _ in range(max(0, args.count)):
        value = performance_modifier(rng)
        draws.append({"modifier": value, "level": level_for_modifier(value).name})
    return {"draws": draws}


def _configure_poisson(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("lam", type=float, metavar="LAMBDA")
    _configure_sampling(parser)


@APP.command("poisson", help="Sample Poisson goal counts", configure=_configure_poisson)
def _handle_poisson(config: SimulatorConfig, args: argparse.Namespace) -> Dict[str, Any]:
    rng = _generator(args, config)
    try:
        goals = [
            poisson_sample(
                args.lam, rng, large_lambda_threshold=config.large_lambda_threshold
            )
            for _ in range(max(0, args.count))
        ]
    except InvalidLambdaError as exc:
        raise SystemExit(str(exc)) from exc
    return {"lambda": args.lam, "goals": goals}


def _configure_simulate(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("home_strength", type=float)
    parser.add_argument("away_strength", type=float)
    parser.add_argument("--home-form")
    parser.add_argument("--away-form")
    parser.add_argument("--seed", type=int)


@APP.command("simulate", help="Simulate a single match", configure=_configure_simulate)
def _handle_simulate(config: SimulatorConfig, args: argparse.Namespace) -> Dict[str, Any]:
    simulator = MatchSimulator(config, rng=_generator(args, config))
    match = simulator.simulate(
        args.home_strength,
        args.away_strength,
        _parse_form(args.home_form),
        _parse_form(args.away_form),
    )
    return {
        "home_xg": match.home_xg,
        "away_xg": match.away_xg,
        "home_modifier": match.home_modifier,
        "away_modifier": match.away_modifier,
        "home_goals": match.score.home_goals,
        "away_goals": match.score.away_goals,
        "score": str(match.score),
    }


def _build_parser() -> argparse.ArgumentParser:
    return APP.build_parser()


def _load_config(args: argparse.Namespace) -> SimulatorConfig:
    if not args.config_file:
        return get_config()
    try:
        return load_config_file(args.config_file)
    except (ConfigurationError, FileNotFoundError) as exc:
        raise SystemExit(f"Could not load configuration: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _load_config(args)
    configure_logging(
        args.log_level or config.log_level, [logging.StreamHandler(sys.stderr)]
    )
    handler: CommandHandler = args.handler
    logger.debug("Running %s command", args.command)
    payload = handler(config, args)
    print(json.dumps(payload, indent=2))


__all__ = ["main"]


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
