"""Deferred operation: an inert, single-shot description of work.

Building a ``DeferredOperation`` performs none of the work it describes. The
caller decides afterwards whether cancellation matters: ``start_default``
binds a no-op token, ``start_with`` binds the caller's token.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable

from ..cancellation import CancellationToken, NoOpCancellationToken
from ..errors import AlreadyStartedError
from .failed_work import FailedWork
from .running_operation import RunningOperation
from .work import OperationWork

WorkFactory = Callable[[], OperationWork]


class DeferredOperation:
    """Describe a unit of work now, start it (at most once) later.

    The work factory is only invoked inside a start method, so constructing
    or discarding an unstarted instance touches no resource and needs no
    scheduler cooperation.
    """

    def __init__(self, factory: WorkFactory, *, name: str = "operation") -> None:
        self._factory = factory
        self._name = name
        self._started = False
        self._lock = Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def started(self) -> bool:
        return self._started

    def start_default(self) -> RunningOperation:
        """Start without cancellation support (binds a fresh no-op token)."""
        return self.start_with(NoOpCancellationToken())

    def start_with(self, token: CancellationToken) -> RunningOperation:
        """Start bound to ``token``; the caller keeps its own reference.

        Raises:
            AlreadyStartedError: if this operation was started before.
        """
        if not isinstance(token, CancellationToken):
            raise TypeError(f"expected a CancellationToken, got {type(token).__name__}")
        with self._lock:
            if self._started:
                raise AlreadyStartedError(f"{self._name} has already been started")
            self._started = True
        try:
            work = self._factory()
        except Exception as exc:
            work = FailedWork(exc)
        return RunningOperation(work, token, name=self._name)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"DeferredOperation(name={self._name!r}, started={self._started})"


__all__ = ["DeferredOperation", "WorkFactory"]
