"""Provider port - Contract for preference data sources.

Implementations can read from sessions, databases, config files,
environment variables or remote APIs. The cache only relies on the
three operations below.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.models import PreferenceMap, PreferenceValue


@runtime_checkable
class PreferenceProviderPort(Protocol):
    """Port for preference providers.

    Implementations:
    - adapters/providers/mapping_provider.py (MappingPreferenceProvider)
    - adapters/providers/null_provider.py (NullPreferenceProvider)
    - adapters/providers/json_file_provider.py (JsonFilePreferenceProvider)
    - adapters/providers/env_provider.py (EnvironmentPreferenceProvider)
    - adapters/providers/http_provider.py (HttpPreferenceProvider)
    """

    def get(self, key: str, default: PreferenceValue = None) -> PreferenceValue:
        """Get a preference value by key.

        Args:
            key: Preference key (e.g., "price_dec", "qty_dec").
            default: Value returned when the key is unknown.

        Returns:
            The stored value, or default. Unknown keys never raise.
        """
        ...

    def get_all(self) -> Optional[PreferenceMap]:
        """Get all preferences in one call.

        Returns:
            Every known key/value pair. An empty mapping means the source
            is empty. None means the provider cannot bulk load, in which
            case the cache resolves keys one at a time.
        """
        ...

    def has(self, key: str) -> bool:
        """Check whether a preference exists.

        Args:
            key: Preference key.

        Returns:
            True if the key is known, even when its value is falsy.
        """
        ...
