"""Running operation handle and its drive step.

State machine: running -> ``Completed`` or running -> ``Cancelled``. Only
``step`` mutates progress and outcome; once an outcome is set the handle is
immutable and further steps are a contract violation.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from ..cancellation import CancellationToken, NoOpCancellationToken, WaitOutcome
from ..errors import ContractViolation, OperationFinishedError, classify_exception
from ..logging import LogContext, get_logger, log_event
from ..metrics import OperationCounters, get_operation_counters
from .outcome import Cancelled, Completed, OperationResult, Outcome
from .work import OperationWork

logger = get_logger(__name__)


class RunningOperation:
    """Handle for one started operation, driven by an external scheduler.

    Exactly one scheduler drives a handle at a time. The bound token is shared
    with the caller, who may request cancellation from any thread; the handle
    only reads it, at step boundaries.

    A cancellable handle observes the caller's token through a private child
    scope. ``expire`` requests that scope only, so a drive-local deadline
    stops this handle and leaves the shared token and its other holders alone.
    """

    def __init__(
        self,
        work: OperationWork,
        token: CancellationToken,
        *,
        name: str = "operation",
        counters: OperationCounters | None = None,
    ) -> None:
        self._work = work
        self._token = token
        self._cancellable = not isinstance(token, NoOpCancellationToken)
        self._scope = token.make_child() if self._cancellable else token
        self._name = name
        self._progress = 0
        self._steps = 0
        self._outcome: Optional[Outcome] = None
        self._counters = counters or get_operation_counters(name)
        self._started_ms = OperationCounters.monotonic_ms()
        self.operation_id = uuid.uuid4().hex[:12]
        self._ctx = LogContext(operation=name, operation_id=self.operation_id)
        self._counters.record_start()
        log_event(logger, "operation.start", self._ctx, cancellable=self._cancellable)

    @property
    def name(self) -> str:
        return self._name

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def cancellable(self) -> bool:
        return self._cancellable

    @property
    def progress(self) -> int:
        return self._progress

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    @property
    def done(self) -> bool:
        return self._outcome is not None

    def expire(self, reason: str | None = None) -> None:
        """Ask this handle alone to stop at its next step boundary.

        Ignored by handles started without cancellation support and by
        handles that are already terminal.
        """
        if self._cancellable and self._outcome is None:
            self._scope.request(reason)

    async def wait_until_requested(self) -> WaitOutcome:
        """Suspend until the caller's token or ``expire`` asks this handle to stop."""
        return await self._scope.wait_until_requested()

    def step(self) -> Optional[Outcome]:
        """Run one drive step.

        Returns the terminal outcome when one is reached, otherwise ``None``.
        A cancellation request is honoured only at the step boundary, before a
        new unit of work begins, so no unit is ever left half-done.

        Raises:
            OperationFinishedError: if the handle is already terminal.
            ContractViolation: if the work reports decreasing progress. The
                handle is left exactly as it was before the step.
        """
        if self._outcome is not None:
            raise OperationFinishedError(
                f"{self._name} ({self.operation_id}) already finished as {self._outcome.kind.value}"
            )
        if self._scope.is_requested():
            self._steps += 1
            return self._finish(Cancelled(progress=self._progress, reason=self._scope.reason))
        try:
            report = self._work.advance()
        except ContractViolation:
            raise
        except Exception as exc:
            self._steps += 1
            return self._finish(
                Completed(result=OperationResult.failure(exc), progress=self._progress)
            )
        if report.progress < self._progress:
            raise ContractViolation(
                f"{self._name} reported progress {report.progress} after {self._progress}"
            )
        self._steps += 1
        self._progress = report.progress
        if report.done:
            value = self._progress if report.value is None else report.value
            return self._finish(
                Completed(result=OperationResult.success(value), progress=self._progress)
            )
        return None

    def _close_work(self) -> None:
        try:
            self._work.close()
        except Exception as exc:
            # The outcome is already decided; a cleanup error must not replace it.
            log_event(
                logger,
                "operation.close_failed",
                self._ctx,
                level=logging.WARNING,
                error_code=classify_exception(exc).value,
                error=repr(exc),
            )

    def _finish(self, outcome: Outcome) -> Outcome:
        self._outcome = outcome
        self._close_work()
        if self._scope is not self._token:
            self._scope.close()
        latency_ms = OperationCounters.monotonic_ms() - self._started_ms
        if isinstance(outcome, Cancelled):
            self._counters.record_cancelled(outcome.progress, latency_ms)
            log_event(
                logger,
                "operation.cancelled",
                self._ctx,
                progress=outcome.progress,
                reason=outcome.reason,
                steps=self._steps,
            )
        elif outcome.result.ok:
            self._counters.record_completed(latency_ms)
            log_event(
                logger,
                "operation.completed",
                self._ctx,
                progress=outcome.progress,
                steps=self._steps,
            )
        else:
            code = classify_exception(outcome.result.error).value
            self._counters.record_failure(code, latency_ms)
            log_event(
                logger,
                "operation.failed",
                self._ctx,
                progress=outcome.progress,
                steps=self._steps,
                error_code=code,
                error=str(outcome.result.error),
            )
        return outcome

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        state = self._outcome.kind.value if self._outcome else "running"
        return f"RunningOperation(name={self._name!r}, state={state}, progress={self._progress})"


__all__ = ["RunningOperation"]
