"""In-memory mapping provider.

Wraps any mutable mapping: a plain dict, a web framework's session
object, a test fixture. Writes go straight to the mapping; callers that
write should invalidate the caches reading from this provider.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, MutableMapping

from ...domain.models import PreferenceValue


@dataclass
class MappingPreferenceProvider:
    """Provider backed by a mutable mapping.

    Implements PreferenceProviderPort and tracks how often each
    operation was called, which tests use to assert load-once behavior.

    Attributes:
        data: Backing mapping (shared, not copied)
        name: Provider name for logging

    Example:
        session: dict[str, Any] = {"theme": "dark"}
        provider = MappingPreferenceProvider(session, name="session")
    """

    data: MutableMapping[str, Any] = field(default_factory=dict)
    name: str = "mapping"

    get_calls: int = field(default=0, init=False)
    get_all_calls: int = field(default=0, init=False)
    has_calls: int = field(default=0, init=False)

    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def get(self, key: str, default: PreferenceValue = None) -> PreferenceValue:
        with self._lock:
            self.get_calls += 1
            if key in self.data:
                return self.data[key]
            return default

    def get_all(self) -> Dict[str, PreferenceValue]:
        """Return a shallow copy of the backing mapping."""
        with self._lock:
            self.get_all_calls += 1
            self._logger.debug(
                "Bulk preference read",
                extra={"provider": self.name, "keys": len(self.data)},
            )
            return dict(self.data)

    def has(self, key: str) -> bool:
        with self._lock:
            self.has_calls += 1
            return key in self.data

    def set(self, key: str, value: PreferenceValue) -> None:
        """Store a value in the backing mapping."""
        with self._lock:
            self.data[key] = value
            self._logger.debug(
                "Preference set", extra={"provider": self.name, "key": key}
            )

    def delete(self, key: str) -> bool:
        """Remove a key.

        Returns:
            True if the key existed and was removed.
        """
        with self._lock:
            if key in self.data:
                del self.data[key]
                self._logger.debug(
                    "Preference deleted", extra={"provider": self.name, "key": key}
                )
                return True
            return False

    def reset_counters(self) -> None:
        with self._lock:
            self.get_calls = 0
            self.get_all_calls = 0
            self.has_calls = 0
