"""Pytest configuration for the deferred_ops test suite.

Fixtures keep tests hermetic: counters are reset between tests, settings
sources are isolated from the developer's environment, and log records
emitted on the ``deferred_ops`` logger can be captured directly (the base
logger does not propagate to the root logger, so ``caplog`` misses them).
"""

from __future__ import annotations

import logging
import os
from typing import Iterator, List

import pytest

from deferred_ops.base.logging import get_logger
from deferred_ops.base.metrics import reset_operation_counters
from deferred_ops.config import reset_settings_cache


@pytest.fixture(autouse=True)
def _fresh_counters() -> Iterator[None]:
    reset_operation_counters()
    yield
    reset_operation_counters()


@pytest.fixture()
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Remove DEFERRED_OPS_* variables and the cached config file."""
    for key in list(os.environ):
        if key.startswith("DEFERRED_OPS_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    yield monkeypatch
    reset_settings_cache()


class _ListHandler(logging.Handler):
    def __init__(self, sink: List[logging.LogRecord]) -> None:
        super().__init__(level=logging.DEBUG)
        self._sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        self._sink.append(record)


@pytest.fixture()
def log_capture() -> Iterator[List[logging.LogRecord]]:
    """Collect records reaching the base ``deferred_ops`` logger at INFO."""
    records: List[logging.LogRecord] = []
    handler = _ListHandler(records)
    logger = get_logger()
    previous = logger.level
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    try:
        yield records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
