"""Logging helpers for xgsim."""

from __future__ import annotations

import logging
from typing import Iterable

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int | str = logging.INFO, handlers: Iterable[logging.Handler] | None = None
) -> None:
    """Configure root logging for scripts and the command line interface.

    The library itself only emits through module loggers; applications
    embedding it can call this helper to get a consistent format.  Passing
    ``handlers`` replaces whatever is already installed on the root logger,
    so the requested level applies even after an earlier configuration.
    """

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    installed = list(handlers) if handlers is not None else []
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=installed or None,
        force=bool(installed),
    )


__all__ = ["LOG_FORMAT", "configure_logging"]
