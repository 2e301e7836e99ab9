"""Tests for EnvironmentPreferenceProvider."""

import pytest

from prefcache.adapters.providers import EnvironmentPreferenceProvider
from prefcache.config import CacheConfig
from prefcache.services import PreferenceCache


@pytest.fixture
def environ():
    return {
        "PREF_THEME": "dark",
        "PREF_PRICE_DEC": "2",
        "PREF_SHOW_TAX": "false",
        "PREF_TAGS": '["a", "b"]',
        "PREF_EMPTY": "",
        "OTHER": "ignored",
    }


def test_get_decodes_json_values(environ):
    provider = EnvironmentPreferenceProvider(prefix="PREF_", environ=environ)

    assert provider.get("theme") == "dark"
    assert provider.get("price_dec") == 2
    assert provider.get("show_tax") is False
    assert provider.get("tags") == ["a", "b"]
    assert provider.get("empty") == ""


def test_missing_key_returns_default(environ):
    provider = EnvironmentPreferenceProvider(prefix="PREF_", environ=environ)

    assert provider.get("other", "d") == "d"
    assert provider.has("other") is False


def test_has_is_presence(environ):
    provider = EnvironmentPreferenceProvider(prefix="PREF_", environ=environ)

    assert provider.has("empty") is True
    assert provider.has("show_tax") is True


def test_get_all_strips_prefix_and_lowercases(environ):
    provider = EnvironmentPreferenceProvider(prefix="PREF_", environ=environ)

    assert provider.get_all() == {
        "theme": "dark",
        "price_dec": 2,
        "show_tax": False,
        "tags": ["a", "b"],
        "empty": "",
    }


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("PREFTEST_COLOR", "blue")

    provider = EnvironmentPreferenceProvider(prefix="PREFTEST_")

    assert provider.get("color") == "blue"
    assert provider.get_all() == {"color": "blue"}


def test_prefix_defaults_to_config(monkeypatch):
    monkeypatch.setenv("PREFCACHE_PROVIDER_ENV_PREFIX", "APP_")

    assert EnvironmentPreferenceProvider().prefix == "APP_"


def test_keys_are_lower_case_everywhere(environ):
    provider = EnvironmentPreferenceProvider(prefix="PREF_", environ=environ)

    assert provider.has("THEME") is False
    assert provider.get("THEME", "d") == "d"
    assert "THEME" not in provider.get_all()
    assert provider.has("theme") is True


def test_provider_and_cache_agree_on_keys():
    provider = EnvironmentPreferenceProvider(
        prefix="PREF_", environ={"PREF_THEME": "dark"}
    )
    cache = PreferenceCache(provider, config=CacheConfig())

    for key in ("THEME", "Theme", "theme"):
        assert provider.has(key) == cache.has(key)
        assert provider.get(key) == cache.get(key)
