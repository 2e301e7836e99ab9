"""Remote API provider.

Expected endpoints under ``base_url``:
- ``GET /preferences``        -> JSON object of every preference
- ``GET /preferences/{key}``  -> ``{"value": ...}``, or 404 when unknown

APIs without the bulk endpoint can set ``bulk_supported=False``; get_all()
then returns None and the cache resolves keys one at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ...config import get_config
from ...domain.errors import ConfigurationError, ProviderError
from ...domain.models import PreferenceValue


def _default_base_url() -> str:
    url = get_config().provider.http_base_url
    if not url:
        raise ConfigurationError(
            "No preference API URL configured",
            setting_name="PREFCACHE_PROVIDER_HTTP_BASE_URL",
            expected_type="url",
        )
    return url


@dataclass
class HttpPreferenceProvider:
    """Provider fetching preferences from an HTTP API.

    Attributes:
        base_url: API root, without the trailing /preferences
        timeout_seconds: Per-request timeout
        bulk_supported: Whether GET /preferences exists
        session: requests session (injectable for tests)
    """

    base_url: str = field(default_factory=_default_base_url)
    timeout_seconds: float = field(
        default_factory=lambda: get_config().provider.http_timeout_seconds
    )
    bulk_supported: bool = field(
        default_factory=lambda: get_config().provider.http_bulk_supported
    )
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
        self._logger = logging.getLogger(__name__)

    def __enter__(self) -> HttpPreferenceProvider:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying requests session."""
        self.session.close()

    def get(self, key: str, default: PreferenceValue = None) -> PreferenceValue:
        response = self._request(self._key_url(key), key=key)
        if response is None:
            return default

        body = self._json(response, key=key)
        if not isinstance(body, dict) or "value" not in body:
            raise ProviderError(
                f"Malformed preference response for {key!r}",
                provider=type(self).__name__,
                key=key,
            )
        return body["value"]

    def get_all(self) -> Optional[Dict[str, PreferenceValue]]:
        if not self.bulk_supported:
            return None

        response = self._request(f"{self.base_url}/preferences")
        if response is None:
            raise ProviderError(
                "Preference bulk endpoint not found",
                provider=type(self).__name__,
            )

        body = self._json(response)
        if not isinstance(body, dict):
            raise ProviderError(
                f"Bulk preference response must be a JSON object, got {type(body).__name__}",
                provider=type(self).__name__,
            )
        self._logger.debug(
            "Bulk preferences fetched",
            extra={"url": self.base_url, "keys": len(body)},
        )
        return body

    def has(self, key: str) -> bool:
        return self._request(self._key_url(key), key=key) is not None

    def _key_url(self, key: str) -> str:
        return f"{self.base_url}/preferences/{quote(key, safe='')}"

    def _request(
        self, url: str, key: Optional[str] = None
    ) -> Optional[requests.Response]:
        """GET url. Returns None on 404 and raises ProviderError otherwise."""
        try:
            response = self.session.get(url, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            raise ProviderError(
                f"Preference API request failed: {url}",
                provider=type(self).__name__,
                key=key,
                cause=e,
            )

        if response.status_code == 404:
            return None

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise ProviderError(
                f"Preference API returned {response.status_code}",
                provider=type(self).__name__,
                key=key,
                cause=e,
            )
        return response

    def _json(self, response: requests.Response, key: Optional[str] = None) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                "Preference API returned invalid JSON",
                provider=type(self).__name__,
                key=key,
                cause=e,
            )
