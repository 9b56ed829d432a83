"""Drive loops for running operations.

A ``RunningOperation`` does nothing on its own; something has to call
``step`` until a terminal outcome appears. Two loops are provided:

run_to_completion(handle)
    Synchronous loop for threads and scripts. Steps back to back.

drive(handle, settings=None)
    Cooperative asyncio loop. Yields to the event loop after each step. When a
    step made no progress (e.g. the transport was not ready) it pauses for up
    to ``idle_backoff_seconds``, waking early if cancellation is requested.
    With ``timeout_seconds`` set, a deadline timer expires this handle only;
    the caller's token, and every other handle bound to it, is left alone.

Neither loop retries failures; a ``Completed`` outcome carrying an error is
returned to the caller as is.
"""
from __future__ import annotations

import asyncio
from contextlib import suppress
from typing import TYPE_CHECKING, Optional

from .cancellation import WaitOutcome
from .logging import get_logger, log_event, LogContext
from .operation import Completed, Outcome, RunningOperation
from .timeouts import TIMEOUT_REASON
from .tracing import start_span

if TYPE_CHECKING:
    from ..config.settings import DriveSettings

logger = get_logger(__name__)


def _record_outcome(span, handle: RunningOperation, outcome: Outcome) -> None:
    with suppress(Exception):
        span.set_attribute("operation", handle.name)
        span.set_attribute("outcome", outcome.kind.value)
        span.set_attribute("progress", outcome.progress)
        span.set_attribute("steps", handle.steps)
        if isinstance(outcome, Completed) and outcome.result.error is not None:
            span.record_exception(outcome.result.error)


def run_to_completion(handle: RunningOperation) -> Outcome:
    """Step ``handle`` until it is terminal and return the outcome."""
    with start_span("deferred_ops.run") as span:
        while True:
            outcome = handle.step()
            if outcome is not None:
                _record_outcome(span, handle, outcome)
                return outcome


async def _idle(handle: RunningOperation, seconds: float) -> None:
    try:
        result = await asyncio.wait_for(handle.wait_until_requested(), timeout=seconds)
    except asyncio.TimeoutError:
        return
    if result is WaitOutcome.CLOSED:
        # Nothing can wake a closed token; fall back to a plain pause.
        await asyncio.sleep(seconds)


async def drive(
    handle: RunningOperation, settings: Optional["DriveSettings"] = None
) -> Outcome:
    """Drive ``handle`` on the running event loop until it is terminal."""
    if settings is None:
        # Local import: config depends on base.logging
        from ..config import get_settings

        settings = get_settings()
    timer = None
    with start_span("deferred_ops.drive") as span:
        if settings.timeout_seconds is not None:
            loop = asyncio.get_running_loop()
            timer = loop.call_later(settings.timeout_seconds, handle.expire, TIMEOUT_REASON)
            log_event(
                logger,
                "drive.timeout_armed",
                LogContext(operation=handle.name, operation_id=handle.operation_id),
                timeout_seconds=settings.timeout_seconds,
            )
        try:
            while True:
                before = handle.progress
                outcome = handle.step()
                if outcome is not None:
                    _record_outcome(span, handle, outcome)
                    return outcome
                if handle.progress == before:
                    await _idle(handle, settings.idle_backoff_seconds)
                else:
                    await asyncio.sleep(0)
        finally:
            if timer is not None:
                timer.cancel()


__all__ = ["run_to_completion", "drive"]
