"""Thread-safe in-memory counters for running operations.

Aggregates lifecycle outcomes per operation name. Separated into its own file
to comply with one-class-per-file governance.
"""

from __future__ import annotations

import time
from threading import RLock
from typing import Dict, Optional

from .operation_counters_snapshot import OperationCountersSnapshot


class OperationCounters:
    """Thread-safe lifecycle counters for one operation name.

    Every ``record_start`` is balanced by exactly one of ``record_completed``,
    ``record_failure`` or ``record_cancelled`` once the handle is terminal.
    """

    __slots__ = (
        "_operation",
        "_lock",
        "_started",
        "_completed",
        "_failed",
        "_cancelled",
        "_in_flight",
        "_failure_by_code",
        "_units_on_cancel",
        "_latency_count",
        "_latency_total",
        "_latency_min",
        "_latency_max",
    )

    def __init__(self, operation: str):
        self._operation = operation
        self._lock = RLock()
        self._started = 0
        self._completed = 0
        self._failed = 0
        self._cancelled = 0
        self._in_flight = 0
        self._failure_by_code: Dict[str, int] = {}
        self._units_on_cancel = 0
        self._latency_count = 0
        self._latency_total = 0
        self._latency_min: Optional[int] = None
        self._latency_max: Optional[int] = None

    @staticmethod
    def monotonic_ms() -> int:
        """Return current monotonic time in milliseconds for latency measurement."""
        return int(time.monotonic() * 1000)

    def record_start(self) -> None:
        with self._lock:
            self._started += 1
            self._in_flight += 1

    def record_completed(self, latency_ms: int) -> None:
        with self._lock:
            self._completed += 1
            self._in_flight = max(0, self._in_flight - 1)
            self._update_latency(latency_ms)

    def record_failure(self, error_code: str, latency_ms: int) -> None:
        with self._lock:
            self._failed += 1
            self._failure_by_code[error_code] = self._failure_by_code.get(error_code, 0) + 1
            self._in_flight = max(0, self._in_flight - 1)
            self._update_latency(latency_ms)

    def record_cancelled(self, progress: int, latency_ms: int) -> None:
        """Record a cooperative cancellation along with the progress it kept."""
        with self._lock:
            self._cancelled += 1
            self._units_on_cancel += progress
            self._in_flight = max(0, self._in_flight - 1)
            self._update_latency(latency_ms)

    def _update_latency(self, latency_ms: int) -> None:
        latency_ms = max(0, int(latency_ms))
        self._latency_count += 1
        self._latency_total += latency_ms
        if self._latency_min is None or latency_ms < self._latency_min:
            self._latency_min = latency_ms
        if self._latency_max is None or latency_ms > self._latency_max:
            self._latency_max = latency_ms

    def snapshot(self) -> OperationCountersSnapshot:
        """Return an immutable snapshot of the current counters."""
        with self._lock:
            avg = (self._latency_total / self._latency_count) if self._latency_count else None
            return OperationCountersSnapshot(
                operation=self._operation,
                started=self._started,
                completed=self._completed,
                failed=self._failed,
                cancelled=self._cancelled,
                in_flight=self._in_flight,
                failure_by_code=dict(self._failure_by_code),
                units_on_cancel=self._units_on_cancel,
                latency_count=self._latency_count,
                latency_min_ms=self._latency_min,
                latency_max_ms=self._latency_max,
                latency_avg_ms=avg,
            )


__all__ = ["OperationCounters"]
