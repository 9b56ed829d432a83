from __future__ import annotations

from typing import Any, Dict


class _NoOpSpan:
    """Span stand-in that records attributes locally and exports nothing."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.attributes: Dict[str, Any] = {}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def set_attribute(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def record_exception(self, exc: BaseException) -> None:  # pragma: no cover - trivial
        pass


__all__ = ["_NoOpSpan"]
