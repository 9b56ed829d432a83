"""Transport collaborator contract for bounded transfers.

A transport moves elements into a caller-owned buffer one bounded attempt at
a time. It knows nothing about cancellation tokens: the running operation
decides between attempts whether to continue.
"""

from __future__ import annotations

from typing import MutableSequence, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Source of elements polled by ``BoundedReadWork``.

    ``read_into`` writes at most ``limit`` elements into ``buffer`` starting at
    index ``start`` and returns how many it wrote. Returning 0 means "not
    ready yet" unless ``at_eof`` is true. Failures raise ``TransportError``.
    """

    @property
    def at_eof(self) -> bool: ...

    def read_into(self, buffer: MutableSequence, start: int, limit: int) -> int: ...


__all__ = ["Transport"]
