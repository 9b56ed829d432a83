"""Operation counters snapshot dataclass.

Immutable snapshot of per-operation counters, designed for serialization and
logging. Split into its own file to satisfy one-class-per-file governance.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class OperationCountersSnapshot:
    """Immutable point-in-time snapshot of operation counters.

    ``units_on_cancel`` sums the partial progress preserved by cancelled runs.
    Latency fields cover terminal outcomes only and are ``None`` with no samples.
    """

    operation: str
    started: int
    completed: int
    failed: int
    cancelled: int
    in_flight: int
    failure_by_code: Dict[str, int]
    units_on_cancel: int
    latency_count: int
    latency_min_ms: Optional[int]
    latency_max_ms: Optional[int]
    latency_avg_ms: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation suitable for JSON serialization."""
        return asdict(self)


__all__ = ["OperationCountersSnapshot"]
