"""Operation lifecycle counters and process-wide registry.

Re-exports the one-class-per-file implementations from ``counters_parts`` and
keeps one ``OperationCounters`` instance per operation name so every handle of
the same operation aggregates into the same place.
"""

from __future__ import annotations

from threading import Lock
from typing import Dict

from .counters_parts import OperationCounters, OperationCountersSnapshot

_REGISTRY: Dict[str, OperationCounters] = {}
_REGISTRY_LOCK = Lock()


def get_operation_counters(operation: str) -> OperationCounters:
    """Return (creating on first use) the counters for ``operation``."""
    with _REGISTRY_LOCK:
        counters = _REGISTRY.get(operation)
        if counters is None:
            counters = OperationCounters(operation)
            _REGISTRY[operation] = counters
        return counters


def snapshot_all() -> Dict[str, OperationCountersSnapshot]:
    """Return snapshots for every registered operation name."""
    with _REGISTRY_LOCK:
        items = list(_REGISTRY.items())
    return {name: counters.snapshot() for name, counters in items}


def reset_operation_counters() -> None:
    """Drop every registered counter (test isolation helper)."""
    with _REGISTRY_LOCK:
        _REGISTRY.clear()


__all__ = [
    "OperationCounters",
    "OperationCountersSnapshot",
    "get_operation_counters",
    "snapshot_all",
    "reset_operation_counters",
]
