"""Transport failure type.

A device or transport failure is a domain failure: it ends the operation as
``Completed`` with this error, never as ``Cancelled``.
"""
from __future__ import annotations

from typing import Optional

from ..base.errors import ErrorCode, OperationError


class TransportError(OperationError):
    """Raised by transports (or the read primitive) when a transfer fails."""

    def __init__(
        self,
        message: str,
        *,
        operation: str = "bounded_read",
        retryable: bool = False,
        raw: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.TRANSPORT,
            message=message,
            operation=operation,
            retryable=retryable,
            raw=raw,
        )


__all__ = ["TransportError"]
