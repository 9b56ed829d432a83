"""deferred_ops package

Cooperative cancellation for step-driven operations that keep their partial
progress when interrupted.

Public API (re-exported):
    - Tokens: :class:`CancellationToken`, :class:`NoOpCancellationToken`,
      :class:`WaitOutcome`
    - Operations: :class:`DeferredOperation`, :class:`RunningOperation`,
      :func:`deferrable`, :class:`Completed`, :class:`Cancelled`
    - Drive loops: :func:`run_to_completion`, :func:`drive`
    - Reference primitive: :func:`bounded_read`, :class:`MemoryTransport`
    - Errors: :class:`ContractViolation`, :class:`OperationError`,
      :class:`TransportError`, :class:`ErrorCode`

Example:
    token = CancellationToken()
    handle = bounded_read(transport, bytearray(100)).start_with(token)
    outcome = await drive(handle)
"""

from .base import (
    AlreadyStartedError,
    CancellationToken,
    Cancelled,
    Completed,
    ContractViolation,
    DeferredOperation,
    ErrorCode,
    NoOpCancellationToken,
    OperationError,
    OperationFinishedError,
    OperationResult,
    OperationWork,
    Outcome,
    OutcomeKind,
    RunningOperation,
    StepReport,
    WaitOutcome,
    cancel_after,
    cancel_after_async,
    deferrable,
    drive,
    run_to_completion,
)
from .config import DriveSettings, get_settings
from .transfer import BoundedReadWork, MemoryTransport, Transport, TransportError, bounded_read

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AlreadyStartedError",
    "BoundedReadWork",
    "CancellationToken",
    "Cancelled",
    "Completed",
    "ContractViolation",
    "DeferredOperation",
    "DriveSettings",
    "ErrorCode",
    "MemoryTransport",
    "NoOpCancellationToken",
    "OperationError",
    "OperationFinishedError",
    "OperationResult",
    "OperationWork",
    "Outcome",
    "OutcomeKind",
    "RunningOperation",
    "StepReport",
    "Transport",
    "TransportError",
    "WaitOutcome",
    "bounded_read",
    "cancel_after",
    "cancel_after_async",
    "deferrable",
    "drive",
    "get_settings",
    "run_to_completion",
]
