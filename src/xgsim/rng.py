"""Random source management for the sampling functions.

Every sampling function takes an optional :class:`random.Random`.  Passing
one explicitly makes a draw reproducible; omitting it falls back to a shared
process-wide generator seeded from :class:`~xgsim.config.SimulatorConfig`.
Concurrent workers should each own a generator from :func:`spawn_generators`
rather than sharing the default one.
"""

from __future__ import annotations

import random
import threading
from typing import List

from .config import get_config

_default_rng: random.Random | None = None
_lock = threading.Lock()


def get_default_rng() -> random.Random:
    """Return the shared generator, creating it on first use."""

    global _default_rng
    if _default_rng is None:
        with _lock:
            if _default_rng is None:
                _default_rng = random.Random(get_config().seed)
    return _default_rng


def reset_default_rng(seed: int | None = None) -> random.Random:
    """Replace the shared generator.

    Without ``seed`` the new generator takes the configured seed.
    """

    global _default_rng
    with _lock:
        _default_rng = random.Random(seed if seed is not None else get_config().seed)
    return _default_rng


def resolve_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else get_default_rng()


def spawn_generators(count: int, seed: int | None = None) -> List[random.Random]:
    """Return ``count`` independently seeded generators.

    Child seeds are 64-bit draws from a master generator, so a fixed ``seed``
    reproduces the whole family.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    master = random.Random(seed)
    return [random.Random(master.getrandbits(64)) for _ in range(count)]


__all__ = [
    "get_default_rng",
    "reset_default_rng",
    "resolve_rng",
    "spawn_generators",
]
