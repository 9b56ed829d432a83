"""Per-step report returned by operation work."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StepReport:
    """What one ``advance`` call achieved.

    Attributes:
        progress: Cumulative units of work fully completed so far.
        done: True once the described work is exhausted.
        value: Result value when ``done``; ``None`` means "use progress".
    """

    progress: int
    done: bool = False
    value: Any = None


__all__ = ["StepReport"]
