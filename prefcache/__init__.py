"""Request-scoped, provider-agnostic preference cache.

A PreferenceCache loads every preference from its provider on first
read, serves later reads from memory, and drops its snapshot when
invalidate() is called, notifying registered observers in order.
"""

from .adapters.providers import (
    EnvironmentPreferenceProvider,
    HttpPreferenceProvider,
    JsonFilePreferenceProvider,
    MappingPreferenceProvider,
    NullPreferenceProvider,
)
from .container import Container, request_scope
from .domain import (
    CacheStats,
    ConfigurationError,
    ObserverNotificationError,
    PreferenceCacheError,
    PreferenceValue,
    ProviderError,
    SnapshotState,
)
from .ports import InvalidationObserver, PreferenceProviderPort
from .services import PreferenceCache

__version__ = "0.1.0"

__all__ = [
    "PreferenceCache",
    "PreferenceProviderPort",
    "InvalidationObserver",
    "MappingPreferenceProvider",
    "NullPreferenceProvider",
    "JsonFilePreferenceProvider",
    "EnvironmentPreferenceProvider",
    "HttpPreferenceProvider",
    "Container",
    "request_scope",
    "CacheStats",
    "SnapshotState",
    "PreferenceValue",
    "PreferenceCacheError",
    "ProviderError",
    "ObserverNotificationError",
    "ConfigurationError",
]
