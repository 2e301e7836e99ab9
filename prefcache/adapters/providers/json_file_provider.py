"""JSON file provider.

Reads preferences from a JSON document whose root is an object. The
file is parsed on first use and kept in memory; reload() drops the
parsed copy so the next call reads the file again.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from ...config import get_config
from ...domain.errors import ConfigurationError, ProviderError
from ...domain.models import PreferenceValue


def _default_path() -> Path:
    path = get_config().provider.json_path
    if path is None:
        raise ConfigurationError(
            "No JSON preference file configured",
            setting_name="PREFCACHE_PROVIDER_JSON_PATH",
            expected_type="path",
        )
    return path


@dataclass
class JsonFilePreferenceProvider:
    """Provider backed by a JSON file.

    Attributes:
        path: Location of the JSON file
        missing_ok: Treat a missing file as an empty source instead of an error
    """

    path: Path = field(default_factory=_default_path)
    missing_ok: bool = field(
        default_factory=lambda: get_config().provider.json_missing_ok
    )

    _data: Optional[Dict[str, Any]] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def get(self, key: str, default: PreferenceValue = None) -> PreferenceValue:
        return self._load().get(key, default)

    def get_all(self) -> Dict[str, PreferenceValue]:
        return dict(self._load())

    def has(self, key: str) -> bool:
        return key in self._load()

    def reload(self) -> None:
        """Forget the parsed file; the next call re-reads it."""
        self._data = None

    def _load(self) -> Dict[str, Any]:
        if self._data is not None:
            return self._data

        self._logger.debug("Reading preference file", extra={"path": str(self.path)})

        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            if not self.missing_ok:
                raise ProviderError(
                    f"Preference file not found: {self.path}",
                    provider=type(self).__name__,
                    cause=e,
                )
            self._logger.info(
                "Preference file missing, using empty source",
                extra={"path": str(self.path)},
            )
            data = {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ProviderError(
                f"Failed to read preference file {self.path}",
                provider=type(self).__name__,
                cause=e,
            )

        if not isinstance(data, dict):
            raise ProviderError(
                f"Preference file {self.path} must contain a JSON object, "
                f"got {type(data).__name__}",
                provider=type(self).__name__,
            )

        self._data = data
        self._logger.info(
            "Preference file loaded",
            extra={"path": str(self.path), "keys": len(data)},
        )
        return data
