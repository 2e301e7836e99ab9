"""Null provider: a source with no preferences.

Every lookup misses and bulk loading returns an empty mapping, which
the cache treats as a complete (empty) snapshot. Useful as the default
provider and in tests that only exercise defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ...domain.models import PreferenceValue


@dataclass
class NullPreferenceProvider:
    """Provider that knows no keys."""

    name: str = "null"

    def get(self, key: str, default: PreferenceValue = None) -> PreferenceValue:
        """Always returns default."""
        return default

    def get_all(self) -> Dict[str, PreferenceValue]:
        """Always returns an empty dict."""
        return {}

    def has(self, key: str) -> bool:
        """Always returns False."""
        return False
