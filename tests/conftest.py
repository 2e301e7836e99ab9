"""Shared fixtures for the preference cache tests."""

from __future__ import annotations

import os

import pytest

from prefcache.adapters.providers import MappingPreferenceProvider
from prefcache.config import CacheConfig, reset_config
from prefcache.services import PreferenceCache


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from PREFCACHE_* variables and the cached config."""
    for name in list(os.environ):
        if name.startswith("PREFCACHE_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def provider():
    return MappingPreferenceProvider({"a": 1})


@pytest.fixture
def cache(provider):
    return PreferenceCache(provider, config=CacheConfig())
