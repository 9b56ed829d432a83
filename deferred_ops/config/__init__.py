"""Unified configuration layer for deferred operations.

Merge order (later wins)
------------------------
1. Built-in defaults (``defaults.py``)
2. Optional external config file (JSON or YAML) pointed to by
   ``DEFERRED_OPS_CONFIG_FILE``
3. Environment variables ``DEFERRED_OPS_<FIELD>`` (e.g.
   ``DEFERRED_OPS_IDLE_BACKOFF_SECONDS``)
4. In-code overrides passed to ``get_settings``

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Keys are ``DriveSettings`` field names:

```
idle_backoff_seconds: 0.05
timeout_seconds: 30
log_level: DEBUG
```

Public API
----------
* get_settings(overrides: dict | None = None) -> DriveSettings
* configure_logging(settings: DriveSettings | None = None) -> logging.Logger
* reset_settings_cache() -> None
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.logging import configure_logger
from .defaults import CONFIG_FILE_ENV, ENV_PREFIX
from .settings import DriveSettings

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE  # noqa: PLW0603 - documented module cache
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in DriveSettings.model_fields:
        val = os.getenv(f"{ENV_PREFIX}{field.upper()}")
        if val is not None and val.strip():
            out[field] = val
    return out


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> DriveSettings:
    """Return merged settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = {}
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return DriveSettings(**cfg)


def configure_logging(settings: Optional[DriveSettings] = None) -> logging.Logger:
    """Apply ``log_level``/``log_json`` from settings to the base logger."""
    settings = settings or get_settings()
    return configure_logger(level=settings.log_level, json_mode=settings.log_json)


def reset_settings_cache() -> None:
    """Forget the cached config file contents (tests and reloads)."""
    global _FILE_CACHE  # noqa: PLW0603 - documented module cache
    _FILE_CACHE = None


__all__ = [
    "DriveSettings",
    "get_settings",
    "configure_logging",
    "reset_settings_cache",
]
