"""Domain layer - Core models and errors.

No external dependencies.
"""

from .errors import (
    ConfigurationError,
    ObserverNotificationError,
    PreferenceCacheError,
    ProviderError,
)
from .models import CacheStats, PreferenceMap, PreferenceValue, SnapshotState

__all__ = [
    # Models
    "PreferenceValue",
    "PreferenceMap",
    "SnapshotState",
    "CacheStats",
    # Errors
    "PreferenceCacheError",
    "ProviderError",
    "ObserverNotificationError",
    "ConfigurationError",
]
