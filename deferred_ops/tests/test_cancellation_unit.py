"""Unit tests for cooperative cancellation tokens.

Covers idempotent request, cross-thread visibility, parent/child composition
in both creation orders, waiting (request, close, descendants) and the no-op
token.
"""
from __future__ import annotations

import asyncio
import threading

import pytest

from deferred_ops.base.cancellation import (
    CancellationToken,
    NoOpCancellationToken,
    WaitOutcome,
)


def test_request_is_idempotent_and_keeps_first_reason():
    token = CancellationToken()
    assert token.is_requested() is False

    token.request(reason="stop")
    token.request(reason="ignored")

    assert token.is_requested() is True
    assert token.reason == "stop"


def test_request_is_visible_to_other_threads():
    token = CancellationToken()
    writer = threading.Thread(target=token.request)
    writer.start()
    writer.join()

    seen = []
    readers = [threading.Thread(target=lambda: seen.append(token.is_requested())) for _ in range(8)]
    for reader in readers:
        reader.start()
    for reader in readers:
        reader.join()

    assert token.is_requested() is True
    assert seen == [True] * 8


def test_concurrent_requests_behave_like_one():
    token = CancellationToken()
    barrier = threading.Barrier(16)

    def hammer():
        barrier.wait()
        token.request("race")

    threads = [threading.Thread(target=hammer) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert token.is_requested() is True
    assert token.reason == "race"


@pytest.mark.parametrize("request_before_child", [True, False])
def test_child_observes_parent_request_in_either_order(request_before_child):
    parent = CancellationToken()
    if request_before_child:
        parent.request("done")
        child = parent.make_child()
    else:
        child = parent.make_child()
        parent.request("done")

    assert child.is_requested() is True
    assert child.reason == "done"
    assert child.parent is parent


def test_child_request_does_not_reach_parent_or_siblings():
    parent = CancellationToken()
    child = parent.make_child()
    sibling = parent.make_child()

    child.request("child only")

    assert child.is_requested() is True
    assert parent.is_requested() is False
    assert sibling.is_requested() is False


def test_grandchild_follows_root():
    root = CancellationToken()
    grandchild = root.make_child().make_child()
    root.request()
    assert grandchild.is_requested() is True


def test_wait_returns_immediately_when_already_requested():
    token = CancellationToken()
    token.request()
    assert asyncio.run(token.wait_until_requested()) is WaitOutcome.REQUESTED


def test_wait_is_woken_by_request_from_another_thread():
    async def scenario():
        token = CancellationToken()
        timer = threading.Timer(0.05, token.request)
        timer.start()
        try:
            return await asyncio.wait_for(token.wait_until_requested(), timeout=2)
        finally:
            timer.join()

    assert asyncio.run(scenario()) is WaitOutcome.REQUESTED


def test_child_waiter_is_woken_by_parent_request():
    async def scenario():
        parent = CancellationToken()
        child = parent.make_child()
        waiter = asyncio.ensure_future(child.wait_until_requested())
        await asyncio.sleep(0)
        parent.request("stop")
        return await asyncio.wait_for(waiter, timeout=2), child

    outcome, child = asyncio.run(scenario())
    assert outcome is WaitOutcome.REQUESTED
    assert child.reason == "stop"


def test_close_releases_waiters_with_closed_outcome():
    async def scenario():
        token = CancellationToken()
        waiter = asyncio.ensure_future(token.wait_until_requested())
        await asyncio.sleep(0)
        token.close()
        first = await asyncio.wait_for(waiter, timeout=2)
        later = await token.wait_until_requested()
        return first, later, token

    first, later, token = asyncio.run(scenario())
    assert first is WaitOutcome.CLOSED
    assert later is WaitOutcome.CLOSED
    assert token.closed is True
    assert token.is_requested() is False


def test_request_after_close_still_sets_flag():
    token = CancellationToken()
    token.close()
    token.request()
    assert token.is_requested() is True
    assert asyncio.run(token.wait_until_requested()) is WaitOutcome.REQUESTED


def test_context_manager_closes_token():
    with CancellationToken() as token:
        assert token.closed is False
    assert token.closed is True


def test_abandoned_wait_leaves_no_waiter_behind():
    async def scenario():
        token = CancellationToken()
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(token.wait_until_requested(), timeout=0.01)
        return token

    token = asyncio.run(scenario())
    assert token._waiters == []


def test_noop_token_ignores_requests():
    token = NoOpCancellationToken()
    token.request("nobody listens")
    assert token.is_requested() is False
    assert token.reason is None


def test_noop_wait_only_resolves_on_close():
    async def scenario():
        token = NoOpCancellationToken()
        waiter = asyncio.ensure_future(token.wait_until_requested())
        await asyncio.sleep(0.02)
        pending = not waiter.done()
        token.close()
        return pending, await asyncio.wait_for(waiter, timeout=2)

    pending, outcome = asyncio.run(scenario())
    assert pending is True
    assert outcome is WaitOutcome.CLOSED


def test_noop_child_can_still_be_requested_directly():
    child = NoOpCancellationToken().make_child()
    child.request()
    assert child.is_requested() is True
