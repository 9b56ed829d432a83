"""Error raised when a handle is driven past its terminal outcome."""
from __future__ import annotations

from .contract_violation import ContractViolation


class OperationFinishedError(ContractViolation):
    """A terminal ``RunningOperation`` accepts no further drive steps."""


__all__ = ["OperationFinishedError"]
