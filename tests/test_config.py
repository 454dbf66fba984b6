"""Test configuration functionality."""

from pathlib import Path

import pytest

from xgsim.config import (
    ConfigurationError,
    SimulatorConfig,
    get_config,
    load_config_file,
    reset_config,
    update_config,
)


def test_config_defaults():
    """Test default configuration values."""
    config = SimulatorConfig()

    assert config.seed is None
    assert config.log_level == "WARNING"
    assert config.max_xg == 2.2
    assert config.midpoint == 50.0
    assert config.steepness == 0.06
    assert config.min_xg == 0.15
    assert config.large_lambda_threshold == 30.0


def test_config_from_env(monkeypatch):
    """Test configuration from environment variables."""
    monkeypatch.setenv("XGSIM_SEED", "42")
    monkeypatch.setenv("XGSIM_MAX_XG", "2.5")
    monkeypatch.setenv("XGSIM_LOG_LEVEL", "debug")

    config = SimulatorConfig()

    assert config.seed == 42
    assert config.max_xg == 2.5
    assert config.log_level == "debug"


def test_invalid_values_are_rejected():
    """Test field constraints."""
    with pytest.raises(ValueError):
        SimulatorConfig(steepness=0)
    with pytest.raises(ValueError):
        SimulatorConfig(large_lambda_threshold=5)


def test_get_config():
    """Test getting global configuration."""
    config = get_config()
    assert isinstance(config, SimulatorConfig)


def test_update_config():
    """Test updating configuration."""
    update_config(seed=7)
    assert get_config().seed == 7

    # Reset for other tests
    reset_config()
    assert get_config().seed is None


def test_update_config_invalid_key():
    """Test updating configuration with invalid key."""
    with pytest.raises(ValueError, match="Unknown configuration option"):
        update_config(invalid_key="value")


def test_load_config_file(tmp_path: Path):
    """Test loading settings from YAML."""
    path = tmp_path / "xgsim.yaml"
    path.write_text(
        """
seed: 11
max_xg: 2.8
home_coefficient: 0.4
"""
    )

    config = load_config_file(path)

    assert config.seed == 11
    assert config.max_xg == 2.8
    assert config.home_coefficient == 0.4
    assert config.min_xg == 0.15


def test_environment_overrides_file(tmp_path: Path, monkeypatch):
    """Test that environment variables take precedence over the file."""
    path = tmp_path / "xgsim.yaml"
    path.write_text("seed: 11\nmidpoint: 45\n")
    monkeypatch.setenv("XGSIM_SEED", "99")

    config = load_config_file(path)

    assert config.seed == 99
    assert config.midpoint == 45.0


def test_load_config_file_errors(tmp_path: Path):
    """Test error reporting for bad configuration files."""
    with pytest.raises(FileNotFoundError):
        load_config_file(tmp_path / "missing.yaml")

    not_mapping = tmp_path / "list.yaml"
    not_mapping.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigurationError, match="must be a mapping"):
        load_config_file(not_mapping)

    invalid = tmp_path / "invalid.yaml"
    invalid.write_text("steepness: -1\n")
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_config_file(invalid)
