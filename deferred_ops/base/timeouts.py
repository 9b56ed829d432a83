"""External deadline timers for cancellation tokens.

Tokens carry no timer logic. A timeout is an external timer that calls
``request`` on a token once a deadline passes; the operation observes it at
its next step boundary like any other request.

Key Components
--------------
cancel_after(token, seconds)
    Thread-based timer (``threading.Timer``); works without an event loop.
    Returns the started timer so callers can ``cancel()`` it once the
    operation finishes first.

cancel_after_async(token, seconds)
    Schedules the request on the running asyncio loop (``loop.call_later``)
    and returns the ``TimerHandle``.

Failure Modes
-------------
``ValueError`` for a non-positive ``seconds`` value.
"""
from __future__ import annotations

import asyncio
import threading

from .cancellation import CancellationToken

TIMEOUT_REASON = "timeout"


def _check_seconds(seconds: float) -> None:
    if seconds <= 0:
        raise ValueError(f"timeout must be positive, got {seconds}")


def cancel_after(
    token: CancellationToken, seconds: float, *, reason: str = TIMEOUT_REASON
) -> threading.Timer:
    """Request cancellation of ``token`` from a daemon timer thread."""
    _check_seconds(seconds)
    timer = threading.Timer(seconds, token.request, kwargs={"reason": reason})
    timer.daemon = True
    timer.start()
    return timer


def cancel_after_async(
    token: CancellationToken, seconds: float, *, reason: str = TIMEOUT_REASON
) -> asyncio.TimerHandle:
    """Request cancellation of ``token`` after ``seconds`` on the running loop."""
    _check_seconds(seconds)
    loop = asyncio.get_running_loop()
    return loop.call_later(seconds, lambda: token.request(reason=reason))


__all__ = ["TIMEOUT_REASON", "cancel_after", "cancel_after_async"]
