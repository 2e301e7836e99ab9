"""Domain models for the preference cache.

These models have no external dependencies and describe the values
flowing between providers, the cache and application code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Mapping, Optional, Sequence, Union

PreferenceValue = Union[None, bool, int, float, str, Sequence[Any], Mapping[str, Any]]
"""A single preference value as stored by a provider."""

PreferenceMap = Mapping[str, PreferenceValue]


class SnapshotState(Enum):
    """Lifecycle state of a cache snapshot."""

    ABSENT = auto()
    PRESENT = auto()


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Point-in-time counters for a PreferenceCache.

    Attributes:
        loads: Number of bulk loads performed
        invalidations: Number of invalidate() calls
        hits: get/has lookups that found the key
        misses: get/has lookups that fell back to the default or False
        observers: Number of registered observers
        state: Current snapshot state
        partial: Whether the snapshot is populated key by key
    """

    loads: int = 0
    invalidations: int = 0
    hits: int = 0
    misses: int = 0
    observers: int = 0
    state: SnapshotState = SnapshotState.ABSENT
    partial: bool = False

    @property
    def hit_rate_percent(self) -> float:
        total = self.hits + self.misses
        return round(self.hits / total * 100, 1) if total > 0 else 0.0

    def as_dict(self) -> dict[str, Optional[Union[int, float, str, bool]]]:
        """Return the stats as a plain dictionary (for logging)."""
        return {
            "loads": self.loads,
            "invalidations": self.invalidations,
            "hits": self.hits,
            "misses": self.misses,
            "observers": self.observers,
            "state": self.state.name,
            "partial": self.partial,
            "hit_rate_percent": self.hit_rate_percent,
        }
