"""Error raised when a deferred operation is started twice."""
from __future__ import annotations

from .contract_violation import ContractViolation


class AlreadyStartedError(ContractViolation):
    """A ``DeferredOperation`` is single-shot; the second start fails."""


__all__ = ["AlreadyStartedError"]
