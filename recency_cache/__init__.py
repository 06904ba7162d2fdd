"""
Recency cache Python package.

This package hosts a capacity-bounded LRU cache with optional compute-on-miss
and thread-safe or asyncio-safe variants, plus its configuration and logging
helpers.
"""

from .__version__ import __version__
from .cache import (
    MISS,
    AsyncSynchronizedCache,
    CacheConfigurationError,
    CacheMissError,
    CacheStats,
    EntryStore,
    LoaderCache,
    Lookup,
    SynchronizedCache,
    from_config,
    from_env,
    from_pairs,
    memoize,
    new_cache,
)
from .config import CacheConfig, EnvSettings

__all__ = [
    "__version__",
    "MISS",
    "AsyncSynchronizedCache",
    "CacheConfig",
    "CacheConfigurationError",
    "CacheMissError",
    "CacheStats",
    "EntryStore",
    "EnvSettings",
    "LoaderCache",
    "Lookup",
    "SynchronizedCache",
    "from_config",
    "from_env",
    "from_pairs",
    "memoize",
    "new_cache",
]
