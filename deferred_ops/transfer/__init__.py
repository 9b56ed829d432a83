"""Bounded transfer primitives built on the deferred operation protocol.

Exposes the transport contract, the reference interruptible primitive
(``bounded_read``) and an in-memory transport for offline use.
"""

from .bounded_read import BoundedReadWork, bounded_read
from .memory_transport import MemoryTransport
from .transport import Transport
from .transport_error import TransportError

__all__ = [
    "BoundedReadWork",
    "MemoryTransport",
    "Transport",
    "TransportError",
    "bounded_read",
]
