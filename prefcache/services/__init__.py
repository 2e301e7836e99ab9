"""Services layer.

Available services:
- PreferenceCache: Request-scoped, load-once preference cache
"""

from .preference_cache import PreferenceCache

__all__ = ["PreferenceCache"]
