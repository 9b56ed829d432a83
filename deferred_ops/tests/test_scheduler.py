"""Synchronous and asyncio drive loops."""
from __future__ import annotations

import asyncio
import threading

from deferred_ops.base.cancellation import CancellationToken
from deferred_ops.base.operation import Cancelled, Completed
from deferred_ops.base.scheduler import drive, run_to_completion
from deferred_ops.config import DriveSettings
from deferred_ops.transfer import MemoryTransport, bounded_read
from deferred_ops.tests.helpers import SOURCE, events, ten_per_step

FAST = DriveSettings(idle_backoff_seconds=0.005)


def _stalls_after(delivering_calls: int) -> range:
    return range(delivering_calls + 1, 1_000_000)


def test_run_to_completion_drives_until_terminal():
    _, buffer, op = ten_per_step()
    outcome = run_to_completion(op.start_default())
    assert isinstance(outcome, Completed)
    assert bytes(buffer) == SOURCE


def test_drive_completes_on_the_event_loop():
    _, buffer, op = ten_per_step()
    outcome = asyncio.run(drive(op.start_with(CancellationToken()), FAST))
    assert outcome.progress == 100
    assert bytes(buffer) == SOURCE


def test_request_from_another_thread_wakes_an_idle_operation():
    token = CancellationToken()
    transport = MemoryTransport(SOURCE, chunk_size=10, stalls=_stalls_after(3))
    handle = bounded_read(transport, bytearray(100)).start_with(token)
    slow = DriveSettings(idle_backoff_seconds=30)

    async def scenario():
        timer = threading.Timer(0.05, token.request, kwargs={"reason": "operator"})
        timer.start()
        try:
            return await asyncio.wait_for(drive(handle, slow), timeout=5)
        finally:
            timer.join()

    outcome = asyncio.run(scenario())
    assert isinstance(outcome, Cancelled)
    assert outcome.progress == 30
    assert outcome.reason == "operator"


def test_timeout_setting_expires_the_driven_handle(log_capture):
    token = CancellationToken()
    transport = MemoryTransport(SOURCE, chunk_size=10, stalls=_stalls_after(2))
    handle = bounded_read(transport, bytearray(100)).start_with(token)
    settings = DriveSettings(idle_backoff_seconds=0.005, timeout_seconds=0.05)

    outcome = asyncio.run(drive(handle, settings))

    assert isinstance(outcome, Cancelled)
    assert outcome.progress == 20
    assert outcome.reason == "timeout"
    assert "drive.timeout_armed" in [p["event"] for p in events(log_capture)]


def test_timeout_cannot_cancel_a_default_started_operation():
    transport = MemoryTransport(SOURCE, chunk_size=50, stalls=range(1, 6))
    handle = bounded_read(transport, bytearray(100)).start_default()
    settings = DriveSettings(idle_backoff_seconds=0.01, timeout_seconds=0.001)

    outcome = asyncio.run(drive(handle, settings))

    assert isinstance(outcome, Completed)
    assert outcome.progress == 100


def test_closed_token_does_not_spin_the_idle_loop():
    token = CancellationToken()
    token.close()
    transport = MemoryTransport(SOURCE, chunk_size=50, stalls=[1, 2])
    handle = bounded_read(transport, bytearray(100)).start_with(token)

    outcome = asyncio.run(drive(handle, FAST))
    assert outcome.progress == 100
    assert handle.steps == 4


def test_drive_reads_settings_when_none_given(clean_settings_env):
    clean_settings_env.setenv("DEFERRED_OPS_IDLE_BACKOFF_SECONDS", "0.001")
    _, _, op = ten_per_step()
    outcome = asyncio.run(drive(op.start_default()))
    assert outcome.progress == 100


def test_drive_timeout_leaves_sibling_handles_on_the_shared_token():
    token = CancellationToken()
    stalled = MemoryTransport(SOURCE, chunk_size=10, stalls=_stalls_after(2))
    timed = bounded_read(stalled, bytearray(100)).start_with(token)
    _, buffer, sibling_op = ten_per_step()
    sibling = sibling_op.start_with(token)
    child = token.make_child()
    settings = DriveSettings(idle_backoff_seconds=0.005, timeout_seconds=0.03)

    outcome = asyncio.run(drive(timed, settings))

    assert outcome == Cancelled(progress=20, reason="timeout")
    assert token.is_requested() is False
    assert child.is_requested() is False
    sibling_outcome = run_to_completion(sibling)
    assert isinstance(sibling_outcome, Completed)
    assert bytes(buffer) == SOURCE
