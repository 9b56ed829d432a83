"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Used when logging and counting failed operations so transports can raise
their own exception types and still land in a stable category.
"""
from __future__ import annotations

import asyncio

from .contract_violation import ContractViolation
from .error_code import ErrorCode
from .operation_error import OperationError


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. OperationError passthrough.
        2. Contract violations (misuse).
        3. Timeout exceptions (sync/async).
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, OperationError):
        return exc.code
    if isinstance(exc, ContractViolation):
        return ErrorCode.MISUSE
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    return ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
