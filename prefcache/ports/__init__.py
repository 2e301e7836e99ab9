"""Ports layer - Protocols between the cache and the outside world.

- PreferenceProviderPort: how the cache reads preference data
- InvalidationObserver: how the cache announces invalidation
"""

from .observer import InvalidationObserver
from .provider import PreferenceProviderPort

__all__ = [
    "PreferenceProviderPort",
    "InvalidationObserver",
]
