"""Interruptible work protocol.

Any concrete operation driven by a ``RunningOperation`` implements this
protocol. The handle checks the cancellation token between ``advance`` calls,
so one ``advance`` call is one atomic unit: it either completes a unit and
reports it, or leaves nothing half-written.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .step_report import StepReport


@runtime_checkable
class OperationWork(Protocol):
    """Contract for work executed by a running operation.

    - ``advance`` performs at most one bounded unit and returns cumulative
      progress. Progress must never decrease and must only count units that
      are durably complete. Domain failures are raised as exceptions.
    - ``close`` releases any resources the work acquired; called exactly once
      by the handle when it reaches a terminal outcome.
    """

    def advance(self) -> StepReport: ...

    def close(self) -> None: ...


__all__ = ["OperationWork"]
