"""
Tests for the memoize decorator.
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from recency_cache import CacheConfigurationError, LoaderCache, SynchronizedCache, memoize


def test_memoize_calls_once_per_arguments():
    """Test repeated calls with equal arguments reuse the result."""
    calls = []

    @memoize(capacity=4)
    def add(a, b=0):
        calls.append((a, b))
        return a + b

    assert add(1, b=2) == 3
    assert add(1, b=2) == 3
    assert add(1) == 1
    assert calls == [(1, 2), (1, 0)]
    assert add.cache.size() == 2


def test_memoize_keyword_order_insensitive():
    """Test keyword arguments hash the same regardless of order."""
    calls = []

    @memoize()
    def combine(**parts):
        calls.append(parts)
        return "-".join(f"{k}={v}" for k, v in sorted(parts.items()))

    assert combine(x=1, y=2) == combine(y=2, x=1)
    assert len(calls) == 1


def test_memoize_does_not_cache_none():
    """Test functions returning None run again next time."""
    calls = []

    @memoize()
    def find(name):
        calls.append(name)
        return None

    assert find("a") is None
    assert find("a") is None
    assert calls == ["a", "a"]


def test_memoize_evicts_least_recent():
    """Test the backing cache is bounded by capacity."""
    calls = []

    @memoize(capacity=2, synchronized=False)
    def ident(x):
        calls.append(x)
        return x

    ident(1)
    ident(2)
    ident(1)
    ident(3)
    ident(2)

    assert calls == [1, 2, 3, 2]
    assert isinstance(ident.cache, LoaderCache)


def test_memoize_cache_clear_and_metadata():
    """Test cache_clear empties the cache and wraps keeps metadata."""

    @memoize(capacity=2)
    def documented(x):
        """Return x."""
        return x

    documented(1)
    documented.cache_clear()

    assert documented.cache.size() == 0
    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Return x."
    assert isinstance(documented.cache, SynchronizedCache)


def test_memoize_threads_share_single_call():
    """Test concurrent callers of a synchronized memoized function."""
    calls = []
    barrier = threading.Barrier(6)

    @memoize(capacity=8)
    def slow(x):
        calls.append(x)
        time.sleep(0.05)
        return x * 10

    def call(_):
        barrier.wait()
        return slow(4)

    with ThreadPoolExecutor(max_workers=6) as pool:
        results = list(pool.map(call, range(6)))

    assert results == [40] * 6
    assert calls == [4]


def test_memoize_rejects_bad_capacity():
    """Test decorating with capacity 0 is a configuration error."""
    with pytest.raises(CacheConfigurationError):

        @memoize(capacity=0)
        def never(x):
            return x
