"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class shared between the caller that may
request cancellation and the running operations that observe it at their own
step boundaries.
"""

from __future__ import annotations

import asyncio
from contextlib import suppress
from threading import Lock
from typing import List, Optional, Tuple
from weakref import WeakSet

from .state import State
from .wait_outcome import WaitOutcome

_Waiter = Tuple[asyncio.AbstractEventLoop, "asyncio.Future[WaitOutcome]"]


def _resolve(future: "asyncio.Future[WaitOutcome]", outcome: WaitOutcome) -> None:
    if not future.done():
        future.set_result(outcome)


def _wake(waiters: List[_Waiter], outcome: WaitOutcome) -> None:
    for loop, future in waiters:
        # A waiter whose loop already shut down has nobody left to wake.
        with suppress(RuntimeError):
            loop.call_soon_threadsafe(_resolve, future, outcome)


class CancellationToken:
    """A cooperative cancellation token with optional parent composition.

    Thread-safe: ``request`` may be called from any thread while operations
    poll ``is_requested`` from another. A child token's effective state is its
    own flag OR its parent's effective state; the child only ever reads the
    parent, and cancelling a child never touches the parent.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._parent = parent
        self._children: "WeakSet[CancellationToken]" = WeakSet()
        self._waiters: List[_Waiter] = []
        if parent is not None:
            parent._adopt(self)

    @property
    def parent(self) -> "CancellationToken | None":  # noqa: D401 - short form
        """Parent token, if this token was created by ``make_child``."""
        return self._parent

    @property
    def closed(self) -> bool:  # noqa: D401 - short form
        """Whether ``close`` has been called."""
        with self._lock:
            return self._state.closed

    @property
    def reason(self) -> Optional[str]:
        """Reason supplied at request time, inherited from the parent if unset."""
        with self._lock:
            if self._state.requested:
                return self._state.reason
        if self._parent is not None:
            return self._parent.reason
        return None

    def is_requested(self) -> bool:
        """Return the effective requested state. Never blocks on I/O."""
        with self._lock:
            if self._state.requested:
                return True
        return self._parent is not None and self._parent.is_requested()

    def request(self, reason: str | None = None) -> None:
        """Request cooperative cancellation (idempotent).

        Wakes pending waiters on this token and on every descendant.
        """
        with self._lock:
            if self._state.requested:
                return
            self._state.requested = True
            self._state.reason = reason
            waiters = self._drain_waiters()
            children = list(self._children)
        _wake(waiters, WaitOutcome.REQUESTED)
        for child in children:
            child._on_ancestor_requested()

    def make_child(self) -> "CancellationToken":
        """Create a child token observing this token's requests."""
        return CancellationToken(parent=self)

    def close(self) -> None:
        """Mark the token discarded and release waiters with ``CLOSED``.

        Waiters that can already observe a request are released with
        ``REQUESTED`` instead.
        """
        with self._lock:
            if self._state.closed:
                return
            self._state.closed = True
            waiters = self._drain_waiters()
        outcome = WaitOutcome.REQUESTED if self.is_requested() else WaitOutcome.CLOSED
        _wake(waiters, outcome)

    async def wait_until_requested(self) -> WaitOutcome:
        """Suspend until cancellation is requested or the token is closed."""
        loop = asyncio.get_running_loop()
        with self._lock:
            if self._state.requested or (
                self._parent is not None and self._parent.is_requested()
            ):
                return WaitOutcome.REQUESTED
            if self._state.closed:
                return WaitOutcome.CLOSED
            future: "asyncio.Future[WaitOutcome]" = loop.create_future()
            waiter = (loop, future)
            self._waiters.append(waiter)
        try:
            return await future
        finally:
            with self._lock:
                with suppress(ValueError):
                    self._waiters.remove(waiter)

    # Internal ----------------------------------------------------------------
    def _adopt(self, child: "CancellationToken") -> None:
        with self._lock:
            self._children.add(child)

    def _drain_waiters(self) -> List[_Waiter]:
        waiters = self._waiters
        self._waiters = []
        return waiters

    def _on_ancestor_requested(self) -> None:
        with self._lock:
            waiters = self._drain_waiters()
            children = list(self._children)
        _wake(waiters, WaitOutcome.REQUESTED)
        for child in children:
            child._on_ancestor_requested()

    def __enter__(self) -> "CancellationToken":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"{type(self).__name__}(requested={self._state.requested}, "
            f"reason={self._state.reason!r}, closed={self._state.closed}, "
            f"children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
