from __future__ import annotations

import contextlib
import logging
import random
from typing import Callable, ContextManager, Iterator

import pytest

from xgsim.config import reset_config
from xgsim.rng import reset_default_rng


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(20240817)


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "XGSIM_SEED",
        "XGSIM_LOG_LEVEL",
        "XGSIM_MAX_XG",
        "XGSIM_MIDPOINT",
        "XGSIM_STEEPNESS",
        "XGSIM_MIN_XG",
        "XGSIM_HOME_COEFFICIENT",
        "XGSIM_FORM_COEFFICIENT",
        "XGSIM_LARGE_LAMBDA_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_default_rng()
    with _preserve_root_logger():
        yield
    reset_config()
    reset_default_rng()


@contextlib.contextmanager
def _preserve_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            if handler not in saved_handlers:
                root.removeHandler(handler)
        for handler in saved_handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(saved_level)


@pytest.fixture()
def preserved_root_logger() -> Callable[[], ContextManager[logging.Logger]]:
    return _preserve_root_logger
