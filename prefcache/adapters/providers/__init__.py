"""Provider adapters - Implementations of PreferenceProviderPort.

Available implementations:
- MappingPreferenceProvider: In-memory / session-style mapping
- NullPreferenceProvider: Empty source
- JsonFilePreferenceProvider: JSON object file
- EnvironmentPreferenceProvider: Prefixed environment variables
- HttpPreferenceProvider: Remote preference API
"""

from .env_provider import EnvironmentPreferenceProvider
from .http_provider import HttpPreferenceProvider
from .json_file_provider import JsonFilePreferenceProvider
from .mapping_provider import MappingPreferenceProvider
from .null_provider import NullPreferenceProvider

__all__ = [
    "MappingPreferenceProvider",
    "NullPreferenceProvider",
    "JsonFilePreferenceProvider",
    "EnvironmentPreferenceProvider",
    "HttpPreferenceProvider",
]
