"""Bounded entry store with least-recently-used eviction.

This module provides a thin, typed wrapper over :class:`cachetools.LRUCache`.
The wrapper keeps the recency bookkeeping inside ``cachetools`` and adds the
pieces the rest of the package relies on: an explicit two-case lookup result,
pure observers that never touch recency, an eviction listener and usage
counters.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from cachetools import Cache as _BaseCache  # type: ignore[import-untyped]
from cachetools import LRUCache  # type: ignore[import-untyped]

from .errors import CacheConfigurationError
from .stats import CacheStats

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

EvictionListener = Callable[[Any, Any], None]


@dataclass(frozen=True)
class Lookup(Generic[V]):
    """Result of a cache lookup: either a found value or nothing.

    ``Lookup(found=True, value=None)`` is a stored ``None``; ``MISS`` is the
    absence of any entry. Truthiness follows ``found``.
    """

    found: bool
    value: Optional[V] = None

    @classmethod
    def hit(cls, value: V) -> "Lookup[V]":
        """Wrap a found value."""
        return cls(True, value)

    def value_or(self, default: Any = None) -> Any:
        """Return the found value, or `default` when nothing was found."""
        return self.value if self.found else default

    def __bool__(self) -> bool:
        return self.found


MISS: Lookup[Any] = Lookup(False)


class _RecencyMap(LRUCache):  # pylint: disable=too-many-ancestors
    """LRU mapping that queues every capacity eviction.

    ``cachetools`` calls ``popitem`` only when an insertion needs room, and
    always before the new key is stored, so the bound is never exceeded.
    Victims wait in ``evicted`` until the insertion has finished.
    """

    def __init__(self, maxsize: int) -> None:
        super().__init__(maxsize=maxsize)
        self.evicted: List[Tuple[Any, Any]] = []

    def popitem(self):
        item = super().popitem()
        self.evicted.append(item)
        return item


class EntryStore(Generic[K, V]):
    """Capacity-bounded key/value store with LRU eviction.

    Parameters
    ----------
    capacity: int
        Maximum number of entries to retain. Must be at least 1.
        When the store is full, the least-recently-used entry is discarded.
    on_evict: callable, optional
        Called as ``on_evict(key, value)`` for each entry dropped to respect
        the capacity, once the entry that displaced it is stored. Not called
        for ``remove`` or ``clear``. An exception from the listener
        propagates out of ``put`` with the store already updated.

    Notes
    -----
    Not safe for concurrent mutation; wrap it in a
    :class:`~recency_cache.cache.guard.SynchronizedCache` or confine it to
    one thread.
    """

    def __init__(
        self, capacity: int, on_evict: Optional[EvictionListener] = None
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise CacheConfigurationError(
                f"capacity must be an integer, got {type(capacity).__name__}"
            )
        if capacity < 1:
            raise CacheConfigurationError(
                f"capacity must be at least 1, got {capacity}"
            )
        self._listener = on_evict
        self.stats = CacheStats()
        self._map: _RecencyMap = _RecencyMap(maxsize=capacity)
        logger.debug("cache.created", extra={"capacity": capacity})

    @property
    def capacity(self) -> int:
        """Maximum number of live entries."""
        return int(self._map.maxsize)

    def snapshot_stats(self) -> CacheStats:
        """Independent copy of the usage counters."""
        return self.stats.snapshot()

    def lookup(self, key: K) -> Lookup[V]:
        """Return the entry for `key` and mark it most recently used.

        A miss has no side effects beyond the miss counter.
        """
        try:
            value = self._map[key]
        except KeyError:
            self.stats.misses += 1
            return MISS
        self.stats.hits += 1
        return Lookup.hit(value)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return value for `key` or `default` if missing."""
        return self.lookup(key).value_or(default)

    def put(self, key: K, value: V) -> None:
        """Insert or update `key` with `value`, evicting the LRU entry if full."""
        try:
            self._map[key] = value
        finally:
            evicted, self._map.evicted = self._map.evicted, []
            for victim_key, victim_value in evicted:
                self._evicted(victim_key, victim_value)

    def remove(self, key: K) -> None:
        """Delete `key` if present."""
        self._map.pop(key, None)

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return value for `key` without refreshing its recency."""
        try:
            return _BaseCache.__getitem__(self._map, key)
        except KeyError:
            return default

    def contains(self, key: K) -> bool:
        return key in self._map

    def size(self) -> int:
        return len(self._map)

    def keys(self) -> List[K]:
        """Snapshot of the keys currently stored."""
        return list(self._map.keys())

    def clear(self) -> None:
        """Drop every entry without notifying the eviction listener."""
        self._map = _RecencyMap(maxsize=self.capacity)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self.capacity}, size={self.size()})"
        )

    def _evicted(self, key: K, value: V) -> None:
        self.stats.evictions += 1
        logger.debug("cache.evicted", extra={"key": repr(key)})
        if self._listener is not None:
            self._listener(key, value)
