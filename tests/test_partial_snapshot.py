"""Tests for providers that cannot bulk load (get_all() returns None)."""

from __future__ import annotations

import pytest

from prefcache.config import CacheConfig
from prefcache.services import PreferenceCache


class PointLookupProvider:
    """Provider without bulk support that counts every call."""

    def __init__(self, data):
        self.data = data
        self.get_all_calls = 0
        self.get_calls = 0
        self.has_calls = 0

    def get(self, key, default=None):
        self.get_calls += 1
        return self.data.get(key, default)

    def get_all(self):
        self.get_all_calls += 1
        return None

    def has(self, key):
        self.has_calls += 1
        return key in self.data


@pytest.fixture
def point_provider():
    return PointLookupProvider({"a": 1, "falsy": 0})


@pytest.fixture
def partial_cache(point_provider):
    return PreferenceCache(point_provider, config=CacheConfig())


def test_keys_are_resolved_individually_and_memoized(partial_cache, point_provider):
    assert partial_cache.get("a") == 1
    assert partial_cache.get("a") == 1
    assert partial_cache.has("a") is True

    assert point_provider.get_all_calls == 1
    assert point_provider.has_calls == 1
    assert point_provider.get_calls == 1


def test_absent_keys_are_memoized(partial_cache, point_provider):
    assert partial_cache.get("missing", "d") == "d"
    assert partial_cache.has("missing") is False

    assert point_provider.has_calls == 1
    assert point_provider.get_calls == 0


def test_falsy_values_are_present(partial_cache):
    assert partial_cache.has("falsy") is True
    assert partial_cache.get("falsy", "d") == 0


def test_get_all_returns_resolved_keys_only(partial_cache):
    assert partial_cache.get_all() == {}
    partial_cache.get("a")
    assert partial_cache.get_all() == {"a": 1}


def test_stats_report_partial_snapshot(partial_cache):
    partial_cache.get("a")
    assert partial_cache.stats().partial is True


def test_invalidate_forgets_resolved_and_missing_keys(partial_cache, point_provider):
    partial_cache.get("a")
    partial_cache.get("b")
    point_provider.data["b"] = 2

    partial_cache.invalidate()

    assert partial_cache.get("b") == 2
    assert point_provider.get_all_calls == 2


def test_empty_mapping_is_not_partial():
    provider = PointLookupProvider({"a": 1})
    provider.get_all = lambda: {}  # type: ignore[method-assign]
    cache = PreferenceCache(provider, config=CacheConfig())

    assert cache.has("a") is False
    assert provider.has_calls == 0
    assert cache.stats().partial is False
