"""Centralized defaults for drive loops and logging.

Values here are the lowest-precedence source in ``get_settings``.
"""

from __future__ import annotations

DEFAULT_IDLE_BACKOFF_SECONDS = 0.01
DEFAULT_TIMEOUT_SECONDS = None
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_JSON = True

ENV_PREFIX = "DEFERRED_OPS_"
CONFIG_FILE_ENV = "DEFERRED_OPS_CONFIG_FILE"

__all__ = [
    "DEFAULT_IDLE_BACKOFF_SECONDS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
    "ENV_PREFIX",
    "CONFIG_FILE_ENV",
]
