"""Dependency injection container.

Holds the one long-lived dependency (the preference provider) and
builds request-scoped caches on top of it.

Usage:
    container = Container.create_default()

    with request_scope(container) as prefs:
        decimals = prefs.get("price_dec", 2)

    # Testing
    container = Container(provider_factory=lambda: FakeProvider())
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from .config import AppConfig, ProviderConfig, get_config
from .domain.errors import ConfigurationError
from .ports.provider import PreferenceProviderPort
from .services.preference_cache import PreferenceCache

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], PreferenceProviderPort]


@dataclass
class Container:
    """Provider holder and cache factory.

    The provider is created lazily on first use and shared by every cache
    the container builds.

    Attributes:
        config: Application configuration
        provider_factory: Creates the provider (None until configured)
    """

    config: AppConfig = field(default_factory=get_config)
    provider_factory: Optional[ProviderFactory] = None

    _provider: Optional[PreferenceProviderPort] = field(default=None, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def provider(self) -> PreferenceProviderPort:
        """Return the shared provider, creating it on first call.

        Raises:
            ConfigurationError: If no provider factory is set.
        """
        with self._lock:
            if self._provider is None:
                if self.provider_factory is None:
                    raise ConfigurationError(
                        "No preference provider configured",
                        setting_name="provider_factory",
                    )
                self._provider = self.provider_factory()
            return self._provider

    def use_provider(self, factory: ProviderFactory) -> None:
        """Replace the provider factory and drop the current provider."""
        with self._lock:
            self.provider_factory = factory
            self._provider = None

    def reset_provider(self) -> None:
        """Drop the current provider; the next call rebuilds it."""
        with self._lock:
            self._provider = None

    def create_cache(self, name: str = "preferences") -> PreferenceCache:
        """Build a new PreferenceCache over the shared provider.

        Every call returns a fresh cache with an absent snapshot and no
        observers.
        """
        return PreferenceCache(self.provider(), config=self.config.cache, name=name)

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the provider selected by configuration.

        Raises:
            ConfigurationError: On first provider use, if the selected
                provider lacks required settings.
        """
        config = config or get_config()
        container = cls(
            config=config,
            provider_factory=lambda: build_provider(config.provider),
        )
        logger.debug("Container created", extra={"provider_kind": config.provider.kind})
        return container


def build_provider(settings: ProviderConfig) -> PreferenceProviderPort:
    """Instantiate the provider named by ``settings.kind``."""
    from .adapters.providers import (
        EnvironmentPreferenceProvider,
        HttpPreferenceProvider,
        JsonFilePreferenceProvider,
        MappingPreferenceProvider,
        NullPreferenceProvider,
    )

    kind = settings.kind
    if kind == "mapping":
        return MappingPreferenceProvider()
    elif kind == "json_file":
        if settings.json_path is None:
            raise ConfigurationError(
                "json_file provider needs a path",
                setting_name="PREFCACHE_PROVIDER_JSON_PATH",
                expected_type="path",
            )
        return JsonFilePreferenceProvider(
            path=settings.json_path,
            missing_ok=settings.json_missing_ok,
        )
    elif kind == "env":
        return EnvironmentPreferenceProvider(prefix=settings.env_prefix)
    elif kind == "http":
        if not settings.http_base_url:
            raise ConfigurationError(
                "http provider needs a base URL",
                setting_name="PREFCACHE_PROVIDER_HTTP_BASE_URL",
                expected_type="url",
            )
        return HttpPreferenceProvider(
            base_url=settings.http_base_url,
            timeout_seconds=settings.http_timeout_seconds,
            bulk_supported=settings.http_bulk_supported,
        )
    else:
        return NullPreferenceProvider()


@contextmanager
def request_scope(
    container: Container, name: str = "preferences"
) -> Iterator[PreferenceCache]:
    """Yield a fresh cache for one request.

    Observers registered during the request are dropped when the block
    exits, so nothing outlives the request through the cache.
    """
    cache = container.create_cache(name=name)
    try:
        yield cache
    finally:
        stats = cache.stats()
        cache.clear_observers()
        logger.debug("Request scope closed", extra={"cache": name, **stats.as_dict()})
