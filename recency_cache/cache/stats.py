"""Counters describing how a cache has been used."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass
class CacheStats:
    """
    Running counters for a single cache instance.

    Attributes
    ----------
    hits : int
        Lookups answered from stored entries
    misses : int
        Lookups that found no stored entry (before any load)
    loads : int
        Loader invocations that produced a value
    negative_loads : int
        Loader invocations that reported no value
    load_failures : int
        Loader invocations that raised
    evictions : int
        Entries dropped to respect the capacity bound
    """

    hits: int = 0
    misses: int = 0
    loads: int = 0
    negative_loads: int = 0
    load_failures: int = 0
    evictions: int = 0

    @property
    def requests(self) -> int:
        """Total number of lookups (hits plus misses)."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate hit rate (0.0-1.0)."""
        if self.requests == 0:
            return 0.0
        return self.hits / self.requests

    def snapshot(self) -> "CacheStats":
        """Return an independent copy of the current counters."""
        return replace(self)

    def reset(self) -> None:
        """Zero every counter."""
        for f in fields(self):
            setattr(self, f.name, 0)
