"""Result of waiting on a cancellation token."""

from __future__ import annotations

from enum import Enum


class WaitOutcome(str, Enum):
    """How a ``wait_until_requested`` call resolved.

    ``CLOSED`` means the token was discarded before anyone requested
    cancellation; waiters are released instead of hanging forever.
    """

    REQUESTED = "requested"
    CLOSED = "closed"


__all__ = ["WaitOutcome"]
