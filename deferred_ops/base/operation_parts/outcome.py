"""Terminal outcomes of a running operation.

``Completed`` and ``Cancelled`` both expose ``progress`` in the same unit, so
code that handles one path handles partial natural completion and partial
cancellation alike. Domain failures ride inside ``Completed`` as an
``OperationResult`` error; cancellation is never an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class OutcomeKind(str, Enum):
    """Terminal outcome categories."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OperationResult:
    """Success value or the original domain exception, never both."""

    value: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, value: Any) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "OperationResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or re-raise the original exception unchanged."""
        if self.error is not None:
            raise self.error
        return self.value


@dataclass(frozen=True)
class Completed:
    """The described work ran to its end, successfully or with a domain failure."""

    result: OperationResult
    progress: int
    kind: OutcomeKind = OutcomeKind.COMPLETED

    @property
    def cancelled(self) -> bool:
        return False


@dataclass(frozen=True)
class Cancelled:
    """Cancellation was honoured; ``progress`` is the work kept so far."""

    progress: int
    reason: Optional[str] = None
    kind: OutcomeKind = OutcomeKind.CANCELLED

    @property
    def cancelled(self) -> bool:
        return True


Outcome = Union[Completed, Cancelled]


__all__ = ["OutcomeKind", "OperationResult", "Completed", "Cancelled", "Outcome"]
