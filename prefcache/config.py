"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PREFCACHE_CACHE_OBSERVER_FAILURE_POLICY=isolate
- PREFCACHE_CACHE_THREAD_SAFE=true
- PREFCACHE_PROVIDER_KIND=json_file
- PREFCACHE_PROVIDER_JSON_PATH=/etc/app/preferences.json
- PREFCACHE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheConfig(BaseSettings):
    """Cache behavior configuration.

    Environment variables prefixed with PREFCACHE_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="PREFCACHE_CACHE_")

    observer_failure_policy: Literal["propagate", "isolate"] = "propagate"
    thread_safe: bool = False


class ProviderConfig(BaseSettings):
    """Default provider selection for Container.create_default().

    Environment variables prefixed with PREFCACHE_PROVIDER_.
    """

    model_config = SettingsConfigDict(env_prefix="PREFCACHE_PROVIDER_")

    kind: Literal["null", "mapping", "json_file", "env", "http"] = "null"

    json_path: Optional[Path] = None
    json_missing_ok: bool = True

    env_prefix: str = "PREF_"

    http_base_url: Optional[str] = None
    http_timeout_seconds: float = Field(default=5.0, gt=0)
    http_bulk_supported: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PREFCACHE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PREFCACHE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.cache.observer_failure_policy)
        print(config.provider.kind)

    Environment variables prefixed with PREFCACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="PREFCACHE_")

    cache: CacheConfig = Field(default_factory=CacheConfig)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
