"""Request-scoped preference cache.

The cache pulls one bulk snapshot from its provider on first read and
serves every later read from that snapshot until invalidate() is called.
Invalidation drops the snapshot and notifies observers synchronously in
registration order.

Usage:
    provider = MappingPreferenceProvider({"price_dec": 2})
    cache = PreferenceCache(provider)

    cache.get("price_dec", 0)         # loads once, then served from memory
    cache.register_observer(lambda: logger.info("cleared"))
    cache.invalidate()                # next read reloads
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from typing import Any, ContextManager, Dict, List, Optional, Set

from ..config import CacheConfig, get_config
from ..domain.errors import ObserverNotificationError
from ..domain.models import CacheStats, PreferenceValue, SnapshotState
from ..ports.observer import InvalidationObserver
from ..ports.provider import PreferenceProviderPort


class PreferenceCache:
    """Lazy, load-once cache in front of a PreferenceProviderPort.

    The snapshot is either absent or a complete mapping produced by one
    ``provider.get_all()`` call since the last invalidation. An empty
    mapping is a complete snapshot and is never reloaded. A ``None``
    bulk result switches the snapshot to partial mode, where keys are
    resolved through ``provider.has``/``provider.get`` and memoized.

    Provider exceptions are never caught here; they reach the caller
    unchanged and leave the snapshot absent.

    Attributes:
        name: Cache name for logging
    """

    def __init__(
        self,
        provider: PreferenceProviderPort,
        config: Optional[CacheConfig] = None,
        name: str = "preferences",
    ) -> None:
        self._provider = provider
        self._config = config or get_config().cache
        self.name = name

        self._snapshot: Optional[Dict[str, Any]] = None
        self._partial = False
        self._missing: Set[str] = set()
        self._observers: List[InvalidationObserver] = []

        self._lock: ContextManager[Any] = (
            threading.RLock() if self._config.thread_safe else nullcontext()
        )
        self._logger = logging.getLogger(__name__)

        # Statistics
        self._loads = 0
        self._invalidations = 0
        self._hits = 0
        self._misses = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"provider={type(self._provider).__name__}, state={self.state.name})"
        )

    @property
    def provider(self) -> PreferenceProviderPort:
        """The provider this cache reads from (fixed at construction)."""
        return self._provider

    @property
    def state(self) -> SnapshotState:
        return SnapshotState.ABSENT if self._snapshot is None else SnapshotState.PRESENT

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def get(self, key: str, default: PreferenceValue = None) -> PreferenceValue:
        """Get a preference value, loading the snapshot on first access.

        Args:
            key: Preference key.
            default: Value returned when the key is not in the snapshot.

        Returns:
            The cached value, or default.
        """
        snapshot = self._ensure_snapshot()
        found = key in snapshot or self._resolve_key(snapshot, key)
        self._record_lookup(found)
        return snapshot[key] if found else default

    def has(self, key: str) -> bool:
        """Check key presence in the snapshot (not truthiness of its value)."""
        snapshot = self._ensure_snapshot()
        found = key in snapshot or self._resolve_key(snapshot, key)
        self._record_lookup(found)
        return found

    def get_all(self) -> Dict[str, PreferenceValue]:
        """Return a copy of the snapshot.

        Mutating the returned dictionary does not affect the cache. In
        partial mode only the keys resolved so far are included.
        """
        return dict(self._ensure_snapshot())

    def get_provider(self) -> PreferenceProviderPort:
        """Return the underlying provider, for inspection and tests."""
        return self._provider

    def invalidate(self) -> None:
        """Drop the snapshot and notify observers.

        Observers registered when notification starts are called in
        registration order with no arguments. Registrations or clears made
        by an observer only affect later invalidations.

        Raises:
            Exception: Whatever the first failing observer raised, when the
                observer failure policy is "propagate". Remaining observers
                are skipped.
            ObserverNotificationError: After all observers ran, when the
                policy is "isolate" and at least one failed.
        """
        with self._lock:
            self._snapshot = None
            self._partial = False
            self._missing = set()
            self._invalidations += 1
            observers = list(self._observers)

        self._logger.info(
            "Preference cache invalidated",
            extra={"cache": self.name, "observers": len(observers)},
        )

        if self._config.observer_failure_policy == "isolate":
            self._notify_isolated(observers)
        else:
            for observer in observers:
                observer()

    def register_observer(self, observer: InvalidationObserver) -> None:
        """Append an invalidation observer.

        The same callable may be registered more than once; it is then
        called once per registration.

        Raises:
            TypeError: If observer is not callable.
        """
        if not callable(observer):
            raise TypeError(
                f"Observer must be callable, got {type(observer).__name__}"
            )
        with self._lock:
            self._observers.append(observer)

    def clear_observers(self) -> None:
        """Remove all observers. The snapshot is left untouched."""
        with self._lock:
            self._observers.clear()

    def observer_count(self) -> int:
        with self._lock:
            return len(self._observers)

    def stats(self) -> CacheStats:
        """Return cache statistics."""
        with self._lock:
            return CacheStats(
                loads=self._loads,
                invalidations=self._invalidations,
                hits=self._hits,
                misses=self._misses,
                observers=len(self._observers),
                state=self.state,
                partial=self._partial,
            )

    def _ensure_snapshot(self) -> Dict[str, Any]:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        with self._lock:
            # Another thread may have loaded while we waited for the lock.
            if self._snapshot is None:
                self._load_snapshot()
            assert self._snapshot is not None
            return self._snapshot

    def _load_snapshot(self) -> None:
        """Call provider.get_all() once and store the result."""
        self._logger.debug(
            "Loading preference snapshot",
            extra={"cache": self.name, "provider": type(self._provider).__name__},
        )

        result = self._provider.get_all()

        self._missing = set()
        if result is None:
            self._partial = True
            self._snapshot = {}
        else:
            self._partial = False
            self._snapshot = dict(result)
        self._loads += 1

        self._logger.debug(
            "Preference snapshot loaded",
            extra={
                "cache": self.name,
                "keys": len(self._snapshot),
                "partial": self._partial,
                "loads": self._loads,
            },
        )

    def _record_lookup(self, found: bool) -> None:
        with self._lock:
            if found:
                self._hits += 1
            else:
                self._misses += 1

    def _resolve_key(self, snapshot: Dict[str, Any], key: str) -> bool:
        """Fill a single key in partial mode. Returns True if it now exists."""
        if not self._partial:
            return False

        with self._lock:
            if key in snapshot:
                return True
            if key in self._missing:
                return False

            if self._provider.has(key):
                snapshot[key] = self._provider.get(key)
                self._logger.debug(
                    "Preference resolved individually",
                    extra={"cache": self.name, "key": key},
                )
                return True

            self._missing.add(key)
            return False

    def _notify_isolated(self, observers: List[InvalidationObserver]) -> None:
        failures: List[BaseException] = []
        for observer in observers:
            try:
                observer()
            except Exception as e:
                failures.append(e)
                self._logger.warning(
                    "Invalidation observer failed",
                    exc_info=e,
                    extra={"cache": self.name, "observer": repr(observer)},
                )

        if failures:
            raise ObserverNotificationError(
                f"{len(failures)} of {len(observers)} invalidation observers failed",
                cause=failures[0],
                failures=failures,
            )
