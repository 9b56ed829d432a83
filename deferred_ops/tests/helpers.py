"""Helpers shared by the deferred_ops tests.

Small builders for the canonical transfer scenario (100-element buffer fed
10 elements per drive step) and a decoder for structured log lines.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from deferred_ops.base.operation import StepReport
from deferred_ops.transfer import MemoryTransport, bounded_read

SOURCE = bytes(range(100))


def ten_per_step(**kwargs: Any) -> Tuple[MemoryTransport, bytearray, Any]:
    """Return ``(transport, buffer, deferred_op)`` for the 100/10 scenario."""
    transport = MemoryTransport(SOURCE, chunk_size=10, **kwargs)
    buffer = bytearray(100)
    return transport, buffer, bounded_read(transport, buffer)


def events(records: Iterable[logging.LogRecord]) -> List[Dict[str, Any]]:
    """Decode the JSON payloads written by ``log_event``."""
    out: List[Dict[str, Any]] = []
    for record in records:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            continue
        if isinstance(payload, dict) and "event" in payload:
            out.append(payload)
    return out


class ScriptedWork:
    """Work that replays a fixed list of step reports (or exceptions)."""

    def __init__(self, script: List[Any], close_error: Optional[BaseException] = None) -> None:
        self._script = list(script)
        self._close_error = close_error
        self.advanced = 0
        self.closed = 0

    def advance(self) -> StepReport:
        self.advanced += 1
        item = self._script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self) -> None:
        self.closed += 1
        if self._close_error is not None:
            raise self._close_error
