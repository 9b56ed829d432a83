"""Deferred and running operations (public API facade).

Purpose
-------
Expose the construction and drive protocol via the canonical
``deferred_ops.base.operation`` import path while the implementations live
under ``operation_parts``.

Notes
-----
- ``DeferredOperation`` describes work and starts it at most once, either
  without cancellation (``start_default``) or bound to a token
  (``start_with``).
- ``RunningOperation.step`` is one drive step; it returns ``Completed`` or
  ``Cancelled`` once terminal, ``None`` while running.
- ``OperationWork`` is the contract interruptible primitives implement;
  ``deferrable`` builds deferred operations from plain functions.
"""

from .operation_parts.deferrable import deferrable
from .operation_parts.deferred_operation import DeferredOperation, WorkFactory
from .operation_parts.generator_work import GeneratorWork
from .operation_parts.outcome import (
    Cancelled,
    Completed,
    OperationResult,
    Outcome,
    OutcomeKind,
)
from .operation_parts.running_operation import RunningOperation
from .operation_parts.step_report import StepReport
from .operation_parts.work import OperationWork

__all__ = [
    "Cancelled",
    "Completed",
    "DeferredOperation",
    "GeneratorWork",
    "OperationResult",
    "OperationWork",
    "Outcome",
    "OutcomeKind",
    "RunningOperation",
    "StepReport",
    "WorkFactory",
    "deferrable",
]
