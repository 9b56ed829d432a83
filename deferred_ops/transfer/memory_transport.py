"""Deterministic in-memory transport for tests and examples.

Purpose
-------
Implement the :class:`Transport` contract over a plain sequence without any
device or network access, so higher layers (drive loops, cancellation,
logging) can be exercised offline.

Knobs
-----
- ``chunk_size`` caps elements delivered per call (a slow device).
- ``stalls`` lists call numbers (1-based) that deliver nothing (not ready).
- ``fail_on_call`` makes that call raise ``TransportError``.
- ``calls`` counts every ``read_into`` invocation.
"""

from __future__ import annotations

from typing import Iterable, MutableSequence, Optional, Sequence

from .transport_error import TransportError


class MemoryTransport:
    """Transport serving elements from an in-memory sequence."""

    def __init__(
        self,
        source: Sequence,
        *,
        chunk_size: Optional[int] = None,
        stalls: Iterable[int] = (),
        fail_on_call: Optional[int] = None,
    ) -> None:
        if chunk_size is not None and chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._source = source
        self._offset = 0
        self._chunk_size = chunk_size
        self._stalls = frozenset(stalls)
        self._fail_on_call = fail_on_call
        self.calls = 0

    @property
    def at_eof(self) -> bool:
        return self._offset >= len(self._source)

    @property
    def delivered(self) -> int:
        return self._offset

    def read_into(self, buffer: MutableSequence, start: int, limit: int) -> int:
        self.calls += 1
        if self._fail_on_call is not None and self.calls == self._fail_on_call:
            raise TransportError(f"simulated transport failure on call {self.calls}")
        if self.calls in self._stalls:
            return 0
        count = min(limit, len(self._source) - self._offset)
        if self._chunk_size is not None:
            count = min(count, self._chunk_size)
        if count <= 0:
            return 0
        buffer[start:start + count] = self._source[self._offset:self._offset + count]
        self._offset += count
        return count


__all__ = ["MemoryTransport"]
