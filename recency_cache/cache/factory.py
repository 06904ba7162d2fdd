"""Constructors that pick the right cache variant for a configuration."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple, Union

from ..config.models import CacheConfig, EnvSettings
from .guard import SynchronizedCache
from .loader import Loader, LoaderCache
from .store import EvictionListener

logger = logging.getLogger(__name__)

AnyCache = Union[LoaderCache, SynchronizedCache]


def from_config(
    config: CacheConfig,
    loader: Optional[Loader] = None,
    on_evict: Optional[EvictionListener] = None,
) -> AnyCache:
    """Build a cache from a validated :class:`CacheConfig`."""
    inner: LoaderCache = LoaderCache(config.capacity, loader, on_evict=on_evict)
    logger.debug(
        "cache.configured",
        extra={
            "capacity": config.capacity,
            "synchronized": config.synchronized,
            "has_loader": loader is not None,
        },
    )
    if config.synchronized:
        return SynchronizedCache(inner)
    return inner


def new_cache(
    capacity: int,
    loader: Optional[Loader] = None,
    *,
    synchronized: bool = False,
    on_evict: Optional[EvictionListener] = None,
) -> AnyCache:
    """
    Create an LRU cache.

    Parameters
    ----------
    capacity : int
        Maximum number of entries to retain (at least 1)
    loader : callable, optional
        ``loader(key)`` returning a value or ``None`` on a miss
    synchronized : bool
        Return a thread-safe :class:`SynchronizedCache`
    on_evict : callable, optional
        Called as ``on_evict(key, value)`` for each capacity eviction

    Returns
    -------
    LoaderCache or SynchronizedCache

    Raises
    ------
    CacheConfigurationError
        If `capacity` is not an integer of at least 1
    """
    config = CacheConfig.build(capacity, synchronized)
    return from_config(config, loader, on_evict=on_evict)


def from_env(
    loader: Optional[Loader] = None,
    settings: Optional[EnvSettings] = None,
    on_evict: Optional[EvictionListener] = None,
) -> AnyCache:
    """Create a cache sized by ``RECENCY_CACHE_*`` environment defaults."""
    return from_config(CacheConfig.from_env(settings), loader, on_evict=on_evict)


def from_pairs(
    pairs: Iterable[Tuple[object, object]],
    capacity: int = 50,
    loader: Optional[Loader] = None,
    *,
    synchronized: bool = False,
) -> AnyCache:
    """Create a cache and insert `pairs` in order.

    With more pairs than `capacity`, only the last `capacity` distinct keys
    remain.
    """
    cache = new_cache(capacity, loader, synchronized=synchronized)
    for key, value in pairs:
        cache.put(key, value)
    return cache
