"""Compute-on-miss cache built on the entry store.

A :class:`LoaderCache` answers lookups from its :class:`EntryStore` and, on a
miss, asks a caller-supplied loader for the value. Only values are stored:
a loader returning ``None`` means "no value" and leaves the store untouched,
so the next lookup for that key calls the loader again. A loader that raises
propagates to the caller and likewise leaves nothing behind.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Callable, Generic, List, Optional, TypeVar

from .errors import CacheMissError
from .stats import CacheStats
from .store import MISS, EntryStore, EvictionListener, Lookup

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Loader = Callable[[K], Optional[V]]


class LoaderCache(Generic[K, V]):
    """LRU cache with an optional miss handler.

    Parameters
    ----------
    capacity : int
        Maximum number of entries to retain (at least 1)
    loader : callable, optional
        ``loader(key)`` returning the value for `key`, or ``None`` when there
        is none. Must be a pure function of the key.
    on_evict : callable, optional
        Eviction listener forwarded to the entry store
    """

    def __init__(
        self,
        capacity: int,
        loader: Optional[Loader] = None,
        on_evict: Optional[EvictionListener] = None,
    ) -> None:
        self._store: EntryStore[K, V] = EntryStore(capacity, on_evict=on_evict)
        self._loader = loader

    @property
    def capacity(self) -> int:
        return self._store.capacity

    @property
    def loader(self) -> Optional[Loader]:
        return self._loader

    @property
    def stats(self) -> CacheStats:
        """Live usage counters, updated by every operation."""
        return self._store.stats

    def snapshot_stats(self) -> CacheStats:
        """Independent copy of the usage counters."""
        return self._store.snapshot_stats()

    def lookup(self, key: K) -> Lookup[V]:
        """
        Return the entry for `key`, loading it on a miss when a loader is set.

        Parameters
        ----------
        key : K
            Hashable cache key

        Returns
        -------
        Lookup
            A hit with the stored or freshly loaded value, or ``MISS``

        Raises
        ------
        Exception
            Any exception raised by the loader, unchanged
        """
        found = self._store.lookup(key)
        if found or self._loader is None:
            return found
        return self.store_loaded(key, self._call_loader(self._loader, key))

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return value for `key` (loading it if possible) or `default`."""
        return self.lookup(key).value_or(default)

    def require(self, key: K) -> V:
        """Return value for `key`, raising :class:`CacheMissError` if none."""
        found = self.lookup(key)
        if not found:
            raise CacheMissError(key)
        return found.value  # type: ignore[return-value]

    def put(self, key: K, value: V) -> None:
        self._store.put(key, value)

    def remove(self, key: K) -> None:
        self._store.remove(key)

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._store.peek(key, default)

    def contains(self, key: K) -> bool:
        return self._store.contains(key)

    def size(self) -> int:
        return self._store.size()

    def keys(self) -> List[K]:
        return self._store.keys()

    def clear(self) -> None:
        self._store.clear()

    def store_loaded(self, key: K, value: Optional[V]) -> Lookup[V]:
        """Record a loader result for `key` that missed the store.

        ``None`` is a negative result and is never stored.
        """
        if value is None:
            self.stats.negative_loads += 1
            logger.debug("cache.load_empty", extra={"key": repr(key)})
            return MISS
        self.stats.loads += 1
        self._store.put(key, value)
        return Lookup.hit(value)

    def record_load_failure(self, key: K, exc: BaseException) -> None:
        """Count and log a loader that raised for `key`."""
        self.stats.load_failures += 1
        logger.warning(
            "cache.load_failed",
            extra={"key": repr(key), "error": str(exc)},
        )

    def _call_loader(self, loader: Loader, key: K) -> Optional[V]:
        try:
            return loader(key)
        except Exception as exc:
            self.record_load_failure(key, exc)
            raise

    def __len__(self) -> int:
        return self._store.size()

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self.capacity}, "
            f"size={self.size()}, loader={self._loader!r})"
        )
