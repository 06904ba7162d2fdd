"""Config models and loader.

This module defines Pydantic models for in-code and environment-based cache
configuration. `CacheConfig` validates the arguments a cache is built from;
`EnvSettings` supplies process-wide defaults from ``RECENCY_CACHE_*``
environment variables or a ``.env`` file.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..cache.errors import CacheConfigurationError


class EnvSettings(BaseSettings):
    """Environment-driven settings and .env support.

    Attributes
    ----------
    log_level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
    default_capacity: int
        Capacity used when a cache is built without an explicit one.
        Defaults to 50.
    synchronized: bool
        Whether caches built from defaults are wrapped in the thread-safe
        guard. Defaults to False.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RECENCY_CACHE_")

    log_level: str = Field("INFO")
    default_capacity: int = Field(
        50, ge=1, description="Capacity used when none is given explicitly"
    )
    synchronized: bool = Field(
        False, description="Wrap default-built caches in the thread-safe guard"
    )


class CacheConfig(BaseModel):
    """Validated construction parameters for one cache.

    Attributes
    ----------
    capacity: int
        Maximum number of live entries. Must be at least 1.
    synchronized: bool
        Serialize all operations through a single lock.
    """

    capacity: int = Field(50, ge=1, strict=True, description="Maximum live entries")
    synchronized: bool = Field(False, description="Use the thread-safe guard")

    @field_validator("capacity", mode="before")
    @classmethod
    def reject_bool(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("capacity must be an integer, not a boolean")
        return value

    @classmethod
    def build(cls, capacity: int, synchronized: bool = False) -> "CacheConfig":
        """Validate arguments, reporting failures as a configuration error."""
        try:
            return cls(capacity=capacity, synchronized=synchronized)
        except ValidationError as exc:
            raise _configuration_error(exc) from exc

    @classmethod
    def from_env(cls, settings: Optional[EnvSettings] = None) -> "CacheConfig":
        """Build a config from environment defaults."""
        if settings is None:
            try:
                settings = EnvSettings()
            except ValidationError as exc:
                raise _configuration_error(exc) from exc
        return cls.build(settings.default_capacity, settings.synchronized)


def _configuration_error(exc: ValidationError) -> CacheConfigurationError:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return CacheConfigurationError(
        f"invalid cache configuration: {field}: {first['msg']}"
    )
