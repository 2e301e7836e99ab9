"""Typed errors for the preference cache.

All errors inherit from PreferenceCacheError and can optionally
wrap a root cause exception for debugging.

The cache itself never wraps provider exceptions: whatever a provider
raises reaches the caller unchanged. Adapters shipped with this package
translate their own I/O failures into ProviderError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PreferenceCacheError(Exception):
    """Base error for the preference cache package.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[BaseException] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ProviderError(PreferenceCacheError):
    """A provider could not read its underlying source.

    Attributes:
        provider: Name of the provider class that failed
        key: The key being looked up, if the failure was a point lookup
    """

    provider: str = ""
    key: Optional[str] = None


@dataclass
class ObserverNotificationError(PreferenceCacheError):
    """One or more invalidation observers failed.

    Only raised with the "isolate" observer failure policy, after every
    observer has been called.

    Attributes:
        failures: Exceptions raised by the failing observers, in call order
    """

    failures: List[BaseException] = field(default_factory=list)


@dataclass
class ConfigurationError(PreferenceCacheError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
