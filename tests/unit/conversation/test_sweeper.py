"""Tests for SweepScheduler."""

import asyncio

import pytest
from prometheus_client import REGISTRY

from nexus.context import InMemoryContextStore
from nexus.conversation.manager import SessionManager
from nexus.conversation.stores import InMemorySessionStore
from nexus.conversation.sweeper import SweepScheduler


@pytest.fixture
def manager(clock) -> SessionManager:
    return SessionManager(InMemorySessionStore(), timeout_seconds=100, clock=clock)


@pytest.fixture
def context(clock) -> InMemoryContextStore:
    return InMemoryContextStore(default_ttl_seconds=10, clock=clock)


def evictions(kind: str) -> float:
    return REGISTRY.get_sample_value("nexus_sweep_evictions_total", {"kind": kind}) or 0.0


class TestRunOnce:
    @pytest.mark.asyncio
    async def test_sweeps_both_stores(self, manager, context, clock) -> None:
        await manager.get_or_create("zalo:a")
        await context.set("k", "v")
        clock.advance(101)
        sessions_before = evictions("session")
        context_before = evictions("context")

        result = await SweepScheduler(manager, context).run_once()

        assert result == (1, 1)
        assert await manager.count() == 0
        assert await context.count() == 0
        assert evictions("session") == sessions_before + 1
        assert evictions("context") == context_before + 1

    @pytest.mark.asyncio
    async def test_nothing_to_sweep(self, manager, context) -> None:
        await manager.get_or_create("zalo:a")
        assert await SweepScheduler(manager, context).run_once() == (0, 0)


class TestLoop:
    @pytest.mark.asyncio
    async def test_start_and_stop(self, manager, context, clock) -> None:
        sweeper = SweepScheduler(manager, context, interval_seconds=0.01)
        await manager.get_or_create("zalo:a")
        clock.advance(101)

        await sweeper.start()
        assert sweeper.running
        for _ in range(50):
            if await manager.count() == 0:
                break
            await asyncio.sleep(0.01)
        await sweeper.stop()

        assert not sweeper.running
        assert await manager.count() == 0

    @pytest.mark.asyncio
    async def test_loop_survives_errors(self, manager, context) -> None:
        calls = 0

        async def failing_sweep(now=None):
            nonlocal calls
            calls += 1
            raise RuntimeError("store down")

        context.sweep = failing_sweep  # type: ignore[method-assign]
        sweeper = SweepScheduler(manager, context, interval_seconds=0.01)

        await sweeper.start()
        for _ in range(50):
            if calls >= 2:
                break
            await asyncio.sleep(0.01)
        await sweeper.stop()

        assert calls >= 2

    @pytest.mark.asyncio
    async def test_double_start_and_stop_are_harmless(self, manager, context) -> None:
        sweeper = SweepScheduler(manager, context, interval_seconds=60)
        await sweeper.start()
        await sweeper.start()
        await sweeper.stop()
        await sweeper.stop()
        assert not sweeper.running

    def test_rejects_non_positive_interval(self, manager, context) -> None:
        with pytest.raises(ValueError):
            SweepScheduler(manager, context, interval_seconds=0)
