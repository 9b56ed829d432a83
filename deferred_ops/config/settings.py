"""Typed settings object for drive loops.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and coercion of values that arrive
  as strings from the environment or from config files.

Failure modes
-------------
- ``pydantic.ValidationError`` when a source supplies an out-of-range value
  (e.g. a non-positive backoff).
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import (
    DEFAULT_IDLE_BACKOFF_SECONDS,
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
)


class DriveSettings(BaseModel):
    """Settings consumed by ``drive`` and logging setup.

    Attributes
    ----------
    idle_backoff_seconds:
        Longest pause between drive steps that made no progress. A pause ends
        early when cancellation is requested.
    timeout_seconds:
        When set, ``drive`` arms an external timer that requests cancellation
        after this many seconds.
    log_level:
        Level name applied to the ``deferred_ops`` logger.
    log_json:
        Emit JSON lines (``True``) or plain text.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    idle_backoff_seconds: float = Field(default=DEFAULT_IDLE_BACKOFF_SECONDS, gt=0)
    timeout_seconds: Optional[float] = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = DEFAULT_LOG_JSON

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()


__all__ = ["DriveSettings"]
