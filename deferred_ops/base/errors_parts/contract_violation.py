"""Base exception for programmer contract violations (misuse)."""
from __future__ import annotations


class ContractViolation(RuntimeError):
    """Raised when a caller breaks the operation protocol.

    Misuse fails loudly at the point of detection and never alters token or
    handle state.
    """


__all__ = ["ContractViolation"]
