"""
xgsim: statistical primitives for simulating football matches.

The package turns team strength and recent results into an expected-goals
value, a match-day performance modifier, a Poisson goal count and a form
score.  Callers compose them into simulated scorelines.
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover - exercised in packaging workflows
    __version__ = version("xgsim")
except PackageNotFoundError:  # pragma: no cover - local editable installs
    __version__ = "0.0.0"

_EXPORTS = {
    # Core primitives
    "form_score": ".form",
    "base_xg": ".xg",
    "performance_modifier": ".variance",
    "poisson_sample": ".poisson",
    # Value objects and tables
    "Form": ".form",
    "Result": ".form",
    "XGParameters": ".xg",
    "PerformanceLevel": ".variance",
    "PERFORMANCE_LEVELS": ".variance",
    "InvalidLambdaError": ".poisson",
    # Match composition
    "MatchScore": ".match",
    "MatchSimulator": ".match",
    "SimulatedMatch": ".match",
    # Utility functions
    "get_default_rng": ".rng",
    "reset_default_rng": ".rng",
    "spawn_generators": ".rng",
    "get_config": ".config",
    "configure_logging": ".logging",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:  # pragma: no cover - thin lazy importer
    from importlib import import_module

    target_module = _EXPORTS.get(name)
    if not target_module:
        raise AttributeError(f"module {__name__} has no attribute {name}")
    module = import_module(target_module, __name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


def __dir__() -> list[str]:  # pragma: no cover - trivial
    return sorted(list(globals().keys()) + __all__)
