"""Bounded read: the reference interruptible primitive.

"Read up to N elements into a caller buffer", expressed as ``OperationWork``.
The atomic unit is one ``read_into`` call: the handle checks its token only
between calls, so a reported element count always matches elements that are
already in the buffer.

Outcomes
--------
- ``Completed(Ok(n))`` at capacity, or earlier when the transport hits EOF.
- ``Completed(Err(TransportError))`` when the transport fails; ``progress``
  still reports the elements already delivered.
- ``Cancelled(n)`` when the bound token is requested; ``n`` elements are kept.
"""

from __future__ import annotations

from typing import MutableSequence, Optional

from ..base.logging import get_logger
from ..base.operation import StepReport, deferrable
from .transport import Transport
from .transport_error import TransportError

logger = get_logger(__name__)


class BoundedReadWork:
    """Fill ``buffer[0:limit]`` from ``transport`` one attempt per step.

    Parameters
    ----------
    transport:
        Collaborator implementing :class:`Transport`.
    buffer:
        Caller-owned mutable sequence (``bytearray``, ``list``...).
    limit:
        Capacity in elements; defaults to ``len(buffer)``.
    max_chunk:
        Optional cap on elements requested per attempt, which bounds the work
        done in a single drive step.

    Construction only stores references; the transport is first touched by
    ``advance``.
    """

    def __init__(
        self,
        transport: Transport,
        buffer: MutableSequence,
        *,
        limit: Optional[int] = None,
        max_chunk: Optional[int] = None,
    ) -> None:
        capacity = len(buffer) if limit is None else limit
        if capacity < 0 or capacity > len(buffer):
            raise ValueError(f"limit {capacity} outside buffer of {len(buffer)} elements")
        if max_chunk is not None and max_chunk <= 0:
            raise ValueError(f"max_chunk must be positive, got {max_chunk}")
        self._transport = transport
        self._buffer = buffer
        self._capacity = capacity
        self._max_chunk = max_chunk
        self._filled = 0

    @property
    def filled(self) -> int:
        return self._filled

    def advance(self) -> StepReport:
        remaining = self._capacity - self._filled
        if remaining == 0:
            return StepReport(progress=self._filled, done=True)
        request = remaining if self._max_chunk is None else min(remaining, self._max_chunk)
        moved = self._transport.read_into(self._buffer, self._filled, request)
        if moved < 0 or moved > request:
            raise TransportError(f"transport reported {moved} elements for a request of {request}")
        self._filled += moved
        if self._filled == self._capacity:
            return StepReport(progress=self._filled, done=True)
        if moved == 0 and self._transport.at_eof:
            logger.debug("bounded read reached eof after %d of %d elements", self._filled, self._capacity)
            return StepReport(progress=self._filled, done=True)
        return StepReport(progress=self._filled)

    def close(self) -> None:
        # The buffer belongs to the caller and keeps every reported element.
        return None


@deferrable(name="bounded_read")
def bounded_read(
    transport: Transport,
    buffer: MutableSequence,
    *,
    limit: Optional[int] = None,
    max_chunk: Optional[int] = None,
) -> BoundedReadWork:
    """Describe a bounded read; returns a ``DeferredOperation``.

    Example:
        op = bounded_read(transport, bytearray(100))
        handle = op.start_with(token)      # or op.start_default()
        outcome = run_to_completion(handle)
    """
    return BoundedReadWork(transport, buffer, limit=limit, max_chunk=max_chunk)


__all__ = ["BoundedReadWork", "bounded_read"]
