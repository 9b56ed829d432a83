"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `deferred_ops.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .operation_error import OperationError
from .contract_violation import ContractViolation
from .already_started_error import AlreadyStartedError
from .operation_finished_error import OperationFinishedError
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "OperationError",
    "ContractViolation",
    "AlreadyStartedError",
    "OperationFinishedError",
    "classify_exception",
]
