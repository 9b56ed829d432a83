"""Structured logging context object for operations.

Defines :class:`LogContext`, a dataclass carrying the fields common to every
operation event (operation name and id plus extra metadata). ``to_dict``
merges the ``extra`` mapping and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for operation logging events."""

    operation: Optional[str] = None
    operation_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
