"""
Structured operation error exception type.

Wraps domain failures with a normalized `ErrorCode` for consistent handling
and structured logging. Cancellation never produces one of these.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class OperationError(Exception):
    """Represents a domain failure with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        operation: Name of the operation where the error originated.
        retryable: Hint for the caller's own retry policy (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    operation: str
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining operation, code, and message."""
        return f"{self.operation} {self.code.value}: {self.message}"


__all__ = ["OperationError"]
