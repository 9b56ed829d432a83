"""Internal state holder for cancellation tokens.

Dataclass used by ``CancellationToken`` to track the request flag, the
optional reason and whether the token has been closed. Module scoped to keep
the token class focused and to comply with one-class-per-file policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    """Internal state for cooperative cancellation tokens.

    Mutated only while the owning token's lock is held.
    """

    requested: bool = False
    reason: Optional[str] = None
    closed: bool = False


__all__ = ["State"]
