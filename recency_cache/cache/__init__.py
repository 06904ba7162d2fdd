"""LRU cache components.

- :class:`EntryStore`: bounded key/value map with least-recently-used eviction
- :class:`LoaderCache`: entry store plus compute-on-miss
- :class:`SynchronizedCache` / :class:`AsyncSynchronizedCache`: one lock
  around every operation, loader call included
"""

from .errors import CacheConfigurationError, CacheMissError
from .stats import CacheStats
from .store import MISS, EntryStore, Lookup
from .loader import LoaderCache
from .guard import AsyncSynchronizedCache, SynchronizedCache
from .factory import from_config, from_env, from_pairs, new_cache
from .memoize import memoize

__all__ = [
    "MISS",
    "AsyncSynchronizedCache",
    "CacheConfigurationError",
    "CacheMissError",
    "CacheStats",
    "EntryStore",
    "Lookup",
    "LoaderCache",
    "SynchronizedCache",
    "from_config",
    "from_env",
    "from_pairs",
    "memoize",
    "new_cache",
]
