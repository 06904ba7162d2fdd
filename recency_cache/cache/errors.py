"""Exceptions raised by the cache package."""

from __future__ import annotations


class CacheConfigurationError(ValueError):
    """Raised when a cache is constructed with an invalid configuration."""


class CacheMissError(KeyError):
    """Raised by ``require`` when no value is cached or produced for a key."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"no value for key {self.key!r}"
