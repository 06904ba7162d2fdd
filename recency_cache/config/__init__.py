"""Configuration models for caches and process-wide defaults."""

from .models import CacheConfig, EnvSettings

__all__ = ["CacheConfig", "EnvSettings"]
