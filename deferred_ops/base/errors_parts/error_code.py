"""
Normalized operation error codes (taxonomy).

No code exists for cancellation: a cancelled operation ends as
``Cancelled``, never as an error.

Defines the `ErrorCode` enumeration used by running operations, transports and
counters. Values are lowercase snake_case and are considered a stable public
contract for logging and metrics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    MISUSE = "misuse"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
