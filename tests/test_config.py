"""Configuration loading tests."""

from pathlib import Path

import pytest

from shared.config import GlobalConfig, ValidationConfig, WardenConfig, get_config

SAMPLE_TOML = """
[global]
log_level = "DEBUG"
log_json = true
output_format = "json"
unknown_key = "ignored"

[validation]
extended_ssid_charset = true
extended_max_ssid_bytes = 40
"""


def test_defaults() -> None:
    """Ensure the defaults match the 802.11 SSID limit."""
    config = WardenConfig()
    assert config.global_settings.log_level == "INFO"
    assert config.global_settings.output_format == "table"
    assert config.validation.ssid_utf8_max_bytes == 32


def test_load_from_toml(tmp_path: Path) -> None:
    """Ensure both tables are read and unknown keys are ignored."""
    path = tmp_path / "netwarden.toml"
    path.write_text(SAMPLE_TOML, encoding="utf-8")
    config = WardenConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.global_settings.log_json is True
    assert config.global_settings.output_format == "json"
    assert config.validation.ssid_utf8_max_bytes == 40


def test_missing_tables_fall_back_to_defaults(tmp_path: Path) -> None:
    """Ensure an empty file yields the default configuration."""
    path = tmp_path / "empty.toml"
    path.write_text("", encoding="utf-8")
    assert WardenConfig.load(path) == WardenConfig()


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    """Ensure a caller-provided path must exist."""
    with pytest.raises(FileNotFoundError):
        WardenConfig.load(tmp_path / "absent.toml")


def test_extended_limit_only_when_enabled() -> None:
    """Ensure the extended limit applies only with the extended charset."""
    assert ValidationConfig(extended_max_ssid_bytes=48).ssid_utf8_max_bytes == 32
    assert ValidationConfig(extended_ssid_charset=True).ssid_utf8_max_bytes == 48


def test_to_dict() -> None:
    """Ensure the configuration serialises to nested dictionaries."""
    data = WardenConfig(global_settings=GlobalConfig(log_level="ERROR")).to_dict()
    assert data["global_settings"]["log_level"] == "ERROR"
    assert data["validation"]["max_ssid_bytes"] == 32


def test_get_config_caches(tmp_path: Path) -> None:
    """Ensure get_config reloads for an explicit path and caches afterwards."""
    path = tmp_path / "netwarden.toml"
    path.write_text(SAMPLE_TOML, encoding="utf-8")
    loaded = get_config(path)
    assert get_config() is loaded
    assert loaded.validation.extended_ssid_charset is True
