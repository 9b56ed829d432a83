"""Adapter turning a progress-yielding generator into ``OperationWork``.

Each ``yield`` marks an atomic-unit boundary and carries cumulative progress;
the generator's return value becomes the operation result. Closing the work
closes the generator, so ``finally`` blocks run at the boundary where the
generator is suspended.
"""

from __future__ import annotations

from typing import Any, Generator

from ..errors import ContractViolation
from .step_report import StepReport


class GeneratorWork:
    """``OperationWork`` backed by a generator of cumulative progress values."""

    def __init__(self, generator: Generator[int, None, Any]) -> None:
        self._generator = generator
        self._progress = 0

    def advance(self) -> StepReport:
        try:
            progress = next(self._generator)
        except StopIteration as stop:
            return StepReport(progress=self._progress, done=True, value=stop.value)
        progress = int(progress)
        if progress < self._progress:
            raise ContractViolation(f"generator yielded progress {progress} after {self._progress}")
        self._progress = progress
        return StepReport(progress=self._progress)

    def close(self) -> None:
        self._generator.close()


__all__ = ["GeneratorWork"]
