"""Environment variable provider.

``PREF_THEME=dark`` becomes the key ``theme``. Keys are always the
lower-cased variable name without the prefix, for get(), has() and
get_all() alike, so ``has("THEME")`` is False.

Values that parse as JSON (``true``, ``3``, ``[1, 2]``, ``{"a": 1}``)
are decoded; anything else is returned as the raw string.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from ...config import get_config
from ...domain.models import PreferenceValue


def _decode(raw: str) -> PreferenceValue:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


@dataclass
class EnvironmentPreferenceProvider:
    """Provider reading prefixed environment variables.

    Attributes:
        prefix: Variable prefix, matched case-insensitively and stripped
        environ: Mapping to read from (defaults to os.environ)
    """

    prefix: str = field(default_factory=lambda: get_config().provider.env_prefix)
    environ: Optional[Mapping[str, str]] = field(default=None, repr=False)

    def _variables(self) -> Dict[str, str]:
        """Map normalized keys to raw values."""
        source = os.environ if self.environ is None else self.environ
        prefix = self.prefix.upper()
        result: Dict[str, str] = {}
        for name, raw in source.items():
            if name.upper().startswith(prefix) and len(name) > len(prefix):
                result[name[len(prefix):].lower()] = raw
        return result

    def get(self, key: str, default: PreferenceValue = None) -> PreferenceValue:
        variables = self._variables()
        if key not in variables:
            return default
        return _decode(variables[key])

    def get_all(self) -> Dict[str, PreferenceValue]:
        return {key: _decode(raw) for key, raw in self._variables().items()}

    def has(self, key: str) -> bool:
        return key in self._variables()
