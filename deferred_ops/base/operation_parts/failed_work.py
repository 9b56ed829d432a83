"""Work stand-in for a factory that failed while starting."""

from __future__ import annotations

from .step_report import StepReport


class FailedWork:
    """Re-raises the factory's exception on the first drive step.

    Keeps start-time domain failures on the same path as any other failure:
    ``Completed`` carrying the original exception.
    """

    def __init__(self, error: Exception) -> None:
        self._error = error

    def advance(self) -> StepReport:
        raise self._error

    def close(self) -> None:
        return None


__all__ = ["FailedWork"]
