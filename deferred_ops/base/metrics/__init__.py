"""Metrics package: in-memory operation lifecycle counters."""

from .counters import (
    OperationCounters,
    OperationCountersSnapshot,
    get_operation_counters,
    reset_operation_counters,
    snapshot_all,
)

__all__ = [
    "OperationCounters",
    "OperationCountersSnapshot",
    "get_operation_counters",
    "reset_operation_counters",
    "snapshot_all",
]
