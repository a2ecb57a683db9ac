"""Tests for AsyncioScheduler."""

import asyncio


def test_call_later_fires_once():
    from listing.core.scheduler import AsyncioScheduler

    async def scenario():
        scheduler = AsyncioScheduler()
        fired = []
        scheduler.call_later(10, lambda: fired.append("done"))
        await asyncio.sleep(0.05)
        return fired

    assert asyncio.run(scenario()) == ["done"]


def test_cancelled_timer_does_not_fire():
    from listing.core.scheduler import AsyncioScheduler

    async def scenario():
        scheduler = AsyncioScheduler()
        fired = []
        handle = scheduler.call_later(10, lambda: fired.append("done"))
        handle.cancel()
        await asyncio.sleep(0.05)
        return fired

    assert asyncio.run(scenario()) == []


def test_spawn_delivers_result():
    from listing.core.scheduler import AsyncioScheduler

    async def fetch():
        await asyncio.sleep(0)
        return 42

    async def scenario():
        scheduler = AsyncioScheduler()
        outcomes = []
        scheduler.spawn(fetch(), lambda result, error: outcomes.append((result, error)))
        await asyncio.sleep(0.01)
        return outcomes, scheduler.pending_tasks

    outcomes, pending = asyncio.run(scenario())

    assert outcomes == [(42, None)]
    assert pending == 0


def test_spawn_delivers_error():
    from listing.core.scheduler import AsyncioScheduler

    async def fetch():
        raise ValueError("bad page")

    async def scenario():
        scheduler = AsyncioScheduler()
        outcomes = []
        scheduler.spawn(fetch(), lambda result, error: outcomes.append((result, error)))
        await asyncio.sleep(0.01)
        return outcomes

    outcomes = asyncio.run(scenario())

    assert len(outcomes) == 1
    result, error = outcomes[0]
    assert result is None
    assert isinstance(error, ValueError)


def test_shutdown_cancels_without_delivery():
    from listing.core.scheduler import AsyncioScheduler

    async def fetch():
        await asyncio.sleep(10)

    async def scenario():
        scheduler = AsyncioScheduler()
        outcomes = []
        scheduler.spawn(fetch(), lambda result, error: outcomes.append((result, error)))
        await asyncio.sleep(0)
        scheduler.shutdown()
        await asyncio.sleep(0.01)
        return outcomes, scheduler.pending_tasks

    outcomes, pending = asyncio.run(scenario())

    assert outcomes == []
    assert pending == 0
