"""
Tests for the asyncio cache guard.
"""

import asyncio

import pytest

from recency_cache.cache import AsyncSynchronizedCache, CacheMissError


@pytest.mark.asyncio
async def test_concurrent_tasks_invoke_async_loader_once():
    """Test M tasks missing the same key await one loader call."""
    calls = []

    async def slow_loader(key):
        calls.append(key)
        await asyncio.sleep(0.05)
        return "fixed"

    cache = AsyncSynchronizedCache(4, slow_loader)

    results = await asyncio.gather(*(cache.get("k") for _ in range(10)))

    assert results == ["fixed"] * 10
    assert calls == ["k"]
    stats = await cache.snapshot_stats()
    assert stats.loads == 1
    assert stats.hits == 9


@pytest.mark.asyncio
async def test_sync_loader_supported():
    """Test a plain function works as the loader."""
    cache = AsyncSynchronizedCache(2, lambda key: key * 2)

    assert await cache.get(21) == 42
    assert await cache.contains(21)


@pytest.mark.asyncio
async def test_negative_async_result_not_cached():
    """Test an async loader returning None is asked again."""
    calls = []

    async def absent(key):
        calls.append(key)
        return None

    cache = AsyncSynchronizedCache(2, absent)

    assert await cache.get("k") is None
    assert await cache.get("k") is None
    assert calls == ["k", "k"]
    assert await cache.size() == 0


@pytest.mark.asyncio
async def test_async_loader_failure_releases_lock():
    """Test a failing loader propagates and leaves the cache usable."""

    async def failing(key):
        raise ConnectionError("unreachable")

    cache = AsyncSynchronizedCache(2, failing)

    with pytest.raises(ConnectionError, match="unreachable"):
        await cache.get("k")

    await asyncio.wait_for(cache.put("x", 1), timeout=1)
    assert await cache.get("x") == 1
    assert await cache.peek("k") is None
    assert (await cache.snapshot_stats()).load_failures == 1


@pytest.mark.asyncio
async def test_async_eviction_and_removal():
    """Test LRU eviction and remove through the async API."""
    evicted = []
    cache = AsyncSynchronizedCache(3, on_evict=lambda k, v: evicted.append(k))

    for key in "ABC":
        await cache.put(key, key.lower())
    assert await cache.get("A") == "a"
    await cache.put("D", "d")

    assert sorted(await cache.keys()) == ["A", "C", "D"]
    assert evicted == ["B"]

    await cache.remove("C")
    await cache.remove("C")
    assert await cache.size() == 2

    await cache.clear()
    assert await cache.size() == 0
    assert cache.capacity == 3


@pytest.mark.asyncio
async def test_async_require():
    """Test require raises CacheMissError without a value."""
    cache = AsyncSynchronizedCache(2)

    with pytest.raises(CacheMissError):
        await cache.require("missing")

    await cache.put("present", 0)
    assert await cache.require("present") == 0
    assert (await cache.lookup("present")).found
