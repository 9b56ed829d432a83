"""
Deferred Operations Base Package

Exports the cancellation protocol, the deferred/running operation contract,
drive loops and the ambient error, logging and metrics helpers.

Layering:
- Cancellation: tokens and wait outcomes (no dependencies)
- Operation: deferred operations, running handles, outcomes, work protocol
- Scheduler: drive loops over running handles
- Errors / logging / tracing / metrics: ambient concerns shared by all
"""

from .cancellation import CancellationToken, NoOpCancellationToken, WaitOutcome
from .errors import (
    AlreadyStartedError,
    ContractViolation,
    ErrorCode,
    OperationError,
    OperationFinishedError,
    classify_exception,
)
from .operation import (
    Cancelled,
    Completed,
    DeferredOperation,
    GeneratorWork,
    OperationResult,
    OperationWork,
    Outcome,
    OutcomeKind,
    RunningOperation,
    StepReport,
    deferrable,
)
from .scheduler import drive, run_to_completion
from .timeouts import cancel_after, cancel_after_async

__all__ = [
    # Cancellation
    "CancellationToken",
    "NoOpCancellationToken",
    "WaitOutcome",
    # Errors
    "AlreadyStartedError",
    "ContractViolation",
    "ErrorCode",
    "OperationError",
    "OperationFinishedError",
    "classify_exception",
    # Operations
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
    "deferrable",
    # Drive loops & timeouts
    "drive",
    "run_to_completion",
    "cancel_after",
    "cancel_after_async",
]
