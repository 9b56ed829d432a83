"""No-op cancellation token.

Bound by ``DeferredOperation.start_default`` when the caller declines
cancellation support: nobody will ever cancel an operation holding it.
"""

from __future__ import annotations

from .cancellation_token import CancellationToken


class NoOpCancellationToken(CancellationToken):
    """Token whose requested state is permanently false.

    ``request`` is ignored and ``wait_until_requested`` only resolves when the
    token is closed.
    """

    def __init__(self) -> None:
        super().__init__(parent=None)

    def is_requested(self) -> bool:
        return False

    def request(self, reason: str | None = None) -> None:  # noqa: ARG002 - no-op token
        return None


__all__ = ["NoOpCancellationToken"]
