"""Tests for InMemoryContextStore."""

import pytest

from nexus.context import DEFAULT_NAMESPACE, InMemoryContextStore


@pytest.fixture
def store(clock) -> InMemoryContextStore:
    """Create a fresh store on a fake clock."""
    return InMemoryContextStore(default_ttl_seconds=300, clock=clock)


class TestSetAndGet:
    """Tests for basic reads and writes."""

    @pytest.mark.asyncio
    async def test_set_then_get(self, store) -> None:
        """Should return the stored value."""
        await store.set("greeting", {"text": "hello"})
        assert await store.get("greeting") == {"text": "hello"}

    @pytest.mark.asyncio
    async def test_get_missing_returns_default(self, store) -> None:
        assert await store.get("missing") is None
        assert await store.get("missing", default=0) == 0

    @pytest.mark.asyncio
    async def test_overwrite_replaces_value_and_expiry(self, store, clock) -> None:
        """A second set restarts the lifetime."""
        await store.set("k", 1, ttl_seconds=10)
        clock.advance(8)
        await store.set("k", 2, ttl_seconds=10)
        clock.advance(8)
        assert await store.get("k") == 2

    @pytest.mark.asyncio
    async def test_namespaces_are_isolated(self, store) -> None:
        """The same key in two namespaces holds two values."""
        await store.set("u1", "a")
        await store.set("u1", "b", namespace="analytics")

        assert await store.get("u1") == "a"
        assert await store.get("u1", namespace=DEFAULT_NAMESPACE) == "a"
        assert await store.get("u1", namespace="analytics") == "b"

    @pytest.mark.asyncio
    async def test_delete(self, store) -> None:
        await store.set("k", 1)
        assert await store.delete("k") is True
        assert await store.delete("k") is False
        assert await store.get("k") is None


class TestExpiry:
    """Tests for fixed, non-sliding expiry."""

    @pytest.mark.asyncio
    async def test_value_present_before_ttl(self, store, clock) -> None:
        await store.set("k", "v", ttl_seconds=1)
        clock.advance(0.5)
        assert await store.get("k") == "v"

    @pytest.mark.asyncio
    async def test_value_absent_at_ttl(self, store, clock) -> None:
        """An entry expires once now reaches expires_at."""
        await store.set("k", "v", ttl_seconds=1)
        clock.advance(1)
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_reads_do_not_extend_lifetime(self, store, clock) -> None:
        """Reading before expiry must not slide the deadline."""
        await store.set("k", "v", ttl_seconds=1)
        clock.advance(0.9)
        assert await store.get("k") == "v"
        clock.advance(0.2)
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_default_ttl_applied(self, store, clock) -> None:
        await store.set("k", "v")
        clock.advance(299)
        assert await store.get("k") == "v"
        clock.advance(1)
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_expired_read_deletes_entry(self, store, clock) -> None:
        """Reading an expired entry removes it."""
        await store.set("k", "v", ttl_seconds=1)
        clock.advance(2)
        assert await store.count() == 1

        await store.get("k")
        assert await store.count() == 0


class TestSweep:
    """Tests for periodic sweeping."""

    @pytest.mark.asyncio
    async def test_sweep_removes_only_expired(self, store, clock) -> None:
        await store.set("short", 1, ttl_seconds=10)
        await store.set("long", 2, ttl_seconds=100, namespace="analytics")
        clock.advance(50)

        assert await store.sweep() == 1
        assert await store.count() == 1
        assert await store.get("long", namespace="analytics") == 2

    @pytest.mark.asyncio
    async def test_sweep_with_explicit_now(self, store, clock) -> None:
        await store.set("k", 1, ttl_seconds=10)
        assert await store.sweep(now=clock() + 5) == 0
        assert await store.sweep(now=clock() + 10) == 1


class TestConstruction:
    def test_non_positive_default_ttl_rejected(self) -> None:
        with pytest.raises(ValueError):
            InMemoryContextStore(default_ttl_seconds=0)
