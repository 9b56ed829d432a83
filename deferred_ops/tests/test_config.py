"""Settings merge order: defaults -> file -> environment -> overrides."""
from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from deferred_ops.base.logging import get_logger
from deferred_ops.config import DriveSettings, configure_logging, get_settings, reset_settings_cache


def test_defaults_without_any_source(clean_settings_env):
    settings = get_settings()
    assert settings == DriveSettings()
    assert settings.idle_backoff_seconds == 0.01
    assert settings.timeout_seconds is None
    assert settings.log_level == "INFO"


def test_json_file_then_env_then_overrides(clean_settings_env, tmp_path):
    path = tmp_path / "ops.json"
    path.write_text(
        json.dumps({"idle_backoff_seconds": 0.5, "timeout_seconds": 10, "log_level": "warning"}),
        encoding="utf-8",
    )
    clean_settings_env.setenv("DEFERRED_OPS_CONFIG_FILE", str(path))
    clean_settings_env.setenv("DEFERRED_OPS_TIMEOUT_SECONDS", "20")

    settings = get_settings({"log_level": "debug", "idle_backoff_seconds": None})

    assert settings.idle_backoff_seconds == 0.5
    assert settings.timeout_seconds == 20.0
    assert settings.log_level == "DEBUG"


def test_yaml_file_is_accepted(clean_settings_env, tmp_path):
    path = tmp_path / "ops.yaml"
    path.write_text("idle_backoff_seconds: 0.25\nlog_json: false\n", encoding="utf-8")
    clean_settings_env.setenv("DEFERRED_OPS_CONFIG_FILE", str(path))

    settings = get_settings()
    assert settings.idle_backoff_seconds == 0.25
    assert settings.log_json is False


def test_config_file_is_cached_until_reset(clean_settings_env, tmp_path):
    path = tmp_path / "ops.json"
    path.write_text(json.dumps({"timeout_seconds": 1}), encoding="utf-8")
    clean_settings_env.setenv("DEFERRED_OPS_CONFIG_FILE", str(path))
    assert get_settings().timeout_seconds == 1.0

    path.write_text(json.dumps({"timeout_seconds": 2}), encoding="utf-8")
    assert get_settings().timeout_seconds == 1.0
    reset_settings_cache()
    assert get_settings().timeout_seconds == 2.0


def test_invalid_values_are_rejected(clean_settings_env):
    clean_settings_env.setenv("DEFERRED_OPS_IDLE_BACKOFF_SECONDS", "0")
    with pytest.raises(ValidationError):
        get_settings()


def test_configure_logging_applies_level(clean_settings_env):
    logger = get_logger()
    previous = logger.level
    try:
        configured = configure_logging(DriveSettings(log_level="debug"))
        assert configured is logger
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
