"""Unified operation error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``deferred_ops.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.

Taxonomy
--------
- Domain failures: ``OperationError`` (and subclasses such as the transfer
  package's ``TransportError``); surfaced inside ``Completed``.
- Misuse: ``ContractViolation`` and its subclasses; raised immediately.
- Cancellation: not an error; a terminal ``Cancelled`` outcome.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.operation_error import OperationError
from .errors_parts.contract_violation import ContractViolation
from .errors_parts.already_started_error import AlreadyStartedError
from .errors_parts.operation_finished_error import OperationFinishedError
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "OperationError",
    "ContractViolation",
    "AlreadyStartedError",
    "OperationFinishedError",
    "classify_exception",
]
