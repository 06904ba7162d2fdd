"""Serialized access to a cache from threads or asyncio tasks.

Both guards hold a single exclusive lock for the whole of every operation,
including the loader call on a miss. Concurrent lookups of the same missing
key therefore run the loader once: later callers wait for the lock and then
find the stored value. The price is that a slow loader stalls every other
operation on the same cache until it returns.
"""

from __future__ import annotations

import asyncio
import inspect
import threading
from collections.abc import Hashable
from typing import Any, Awaitable, Callable, Generic, List, Optional, TypeVar, Union

from .errors import CacheMissError
from .loader import LoaderCache
from .stats import CacheStats
from .store import EvictionListener, Lookup

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

AsyncLoader = Callable[[Any], Union[Optional[Any], Awaitable[Optional[Any]]]]


class SynchronizedCache(Generic[K, V]):
    """Thread-safe wrapper that serializes every operation on a LoaderCache.

    The default lock is a :class:`threading.RLock`, so a loader may read from
    the same cache on the calling thread without deadlocking.
    """

    def __init__(self, inner: LoaderCache[K, V], lock: Optional[Any] = None) -> None:
        """
        Wrap `inner` behind one exclusive lock.

        Parameters
        ----------
        inner : LoaderCache
            Cache to guard. Callers must not use it directly afterwards.
        lock : lock-like, optional
            Context manager used for exclusion. Defaults to a new RLock.
        """
        self._inner = inner
        self._lock = lock if lock is not None else threading.RLock()

    @property
    def capacity(self) -> int:
        return self._inner.capacity

    def snapshot_stats(self) -> CacheStats:
        """Copy of the usage counters, taken under the lock."""
        with self._lock:
            return self._inner.snapshot_stats()

    def lookup(self, key: K) -> Lookup[V]:
        with self._lock:
            return self._inner.lookup(key)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        with self._lock:
            return self._inner.get(key, default)

    def require(self, key: K) -> V:
        with self._lock:
            return self._inner.require(key)

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._inner.put(key, value)

    def remove(self, key: K) -> None:
        with self._lock:
            self._inner.remove(key)

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        with self._lock:
            return self._inner.peek(key, default)

    def contains(self, key: K) -> bool:
        with self._lock:
            return self._inner.contains(key)

    def size(self) -> int:
        with self._lock:
            return self._inner.size()

    def keys(self) -> List[K]:
        with self._lock:
            return self._inner.keys()

    def clear(self) -> None:
        with self._lock:
            self._inner.clear()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._inner

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class AsyncSynchronizedCache(Generic[K, V]):
    """
    Asyncio counterpart of :class:`SynchronizedCache`.

    All operations are coroutines serialized through one :class:`asyncio.Lock`.
    The loader may be a plain function or a coroutine function; either way it
    returns the value or ``None`` for "no value". The lock is not re-entrant:
    a loader must not await operations on the same cache.
    """

    def __init__(
        self,
        capacity: int,
        loader: Optional[AsyncLoader] = None,
        on_evict: Optional[EvictionListener] = None,
    ) -> None:
        """
        Initialize the guarded cache.

        Parameters
        ----------
        capacity : int
            Maximum number of entries to retain (at least 1)
        loader : callable, optional
            Sync or async ``loader(key)`` used on a miss
        on_evict : callable, optional
            Eviction listener forwarded to the entry store
        """
        self._inner: LoaderCache[K, V] = LoaderCache(capacity, on_evict=on_evict)
        self._loader = loader
        self._lock = asyncio.Lock()

    @property
    def capacity(self) -> int:
        return self._inner.capacity

    async def snapshot_stats(self) -> CacheStats:
        """Copy of the usage counters, taken under the lock."""
        async with self._lock:
            return self._inner.snapshot_stats()

    async def lookup(self, key: K) -> Lookup[V]:
        async with self._lock:
            found = self._inner.lookup(key)
            if found or self._loader is None:
                return found
            try:
                value = self._loader(key)
                if inspect.isawaitable(value):
                    value = await value
            except Exception as exc:
                self._inner.record_load_failure(key, exc)
                raise
            return self._inner.store_loaded(key, value)

    async def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return (await self.lookup(key)).value_or(default)

    async def require(self, key: K) -> V:
        found = await self.lookup(key)
        if not found:
            raise CacheMissError(key)
        return found.value  # type: ignore[return-value]

    async def put(self, key: K, value: V) -> None:
        async with self._lock:
            self._inner.put(key, value)

    async def remove(self, key: K) -> None:
        async with self._lock:
            self._inner.remove(key)

    async def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        async with self._lock:
            return self._inner.peek(key, default)

    async def contains(self, key: K) -> bool:
        async with self._lock:
            return self._inner.contains(key)

    async def size(self) -> int:
        async with self._lock:
            return self._inner.size()

    async def keys(self) -> List[K]:
        async with self._lock:
            return self._inner.keys()

    async def clear(self) -> None:
        async with self._lock:
            self._inner.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"
