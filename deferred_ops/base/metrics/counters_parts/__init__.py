"""One-class-per-file parts for operation lifecycle counters."""

from .operation_counters import OperationCounters
from .operation_counters_snapshot import OperationCountersSnapshot

__all__ = ["OperationCounters", "OperationCountersSnapshot"]
