"""Configuration management for xgsim."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(ValueError):
    """Raised when a configuration file cannot be loaded or validated."""


class SimulatorConfig(BaseSettings):
    """Configuration settings for xgsim."""

    # Randomness
    seed: int | None = Field(
        default=None,
        description="Seed for the shared default random generator",
        alias="XGSIM_SEED",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the command line interface",
        alias="XGSIM_LOG_LEVEL",
    )

    # Expected goals curve
    max_xg: float = Field(
        default=2.2,
        gt=0,
        description="Asymptotic ceiling of the xG curve",
        alias="XGSIM_MAX_XG",
    )

    midpoint: float = Field(
        default=50.0,
        description="Strength that yields half of max_xg",
        alias="XGSIM_MIDPOINT",
    )

    steepness: float = Field(
        default=0.06,
        gt=0,
        description="Logistic growth rate per strength point",
        alias="XGSIM_STEEPNESS",
    )

    min_xg: float = Field(
        default=0.15,
        ge=0,
        description="Floor applied to every xG value",
        alias="XGSIM_MIN_XG",
    )

    home_coefficient: float = Field(
        default=0.5,
        description="Logit boost for the home side",
        alias="XGSIM_HOME_COEFFICIENT",
    )

    form_coefficient: float = Field(
        default=0.3,
        description="Logit weight applied to the form score",
        alias="XGSIM_FORM_COEFFICIENT",
    )

    # Poisson sampling
    large_lambda_threshold: float = Field(
        default=30.0,
        ge=10,
        description="Mean from which goal sampling switches to rejection sampling",
        alias="XGSIM_LARGE_LAMBDA_THRESHOLD",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Global configuration instance
config = SimulatorConfig()


def get_config() -> SimulatorConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> None:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if key in SimulatorConfig.model_fields:
            setattr(config, key, value)
        else:
            raise ValueError(f"Unknown configuration option: {key}")


def reset_config() -> None:
    """Reset configuration to defaults."""
    global config
    config = SimulatorConfig()


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration at {path} must be a mapping")
    return dict(data)


def load_config_file(path: str | os.PathLike[str]) -> SimulatorConfig:
    """Load settings from a YAML file.

    Keys use the field names (``max_xg``, ``seed`` ...).  Values set through
    ``XGSIM_*`` environment variables take precedence over the file.
    """

    data = _load_yaml(Path(path))
    env_values = SimulatorConfig().model_dump(exclude_unset=True)
    data.update(env_values)
    try:
        return SimulatorConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {path}:\n{exc}") from exc
