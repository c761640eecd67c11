"""LRU cache tests."""

from unittest.mock import patch

from utils.cache_service import LRUCache


def test_get_set_and_stats():
    cache = LRUCache(max_size=2, ttl_seconds=60)
    assert cache.get("missing") is None
    cache.set("a", [1])
    assert cache.get("a") == [1]
    stats = cache.stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["size"] == 1


def test_evicts_least_recently_used():
    cache = LRUCache(max_size=2, ttl_seconds=60)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")
    cache.set("c", 3)
    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3


def test_entries_expire():
    cache = LRUCache(max_size=2, ttl_seconds=10)
    with patch("utils.cache_service.time.monotonic", return_value=100.0):
        cache.set("a", 1)
    with patch("utils.cache_service.time.monotonic", return_value=111.0):
        assert cache.get("a") is None
    assert cache.stats()["size"] == 0


def test_delete_and_clear():
    cache = LRUCache()
    cache.set("a", 1)
    assert cache.delete("a") is True
    assert cache.delete("a") is False
    cache.set("b", 2)
    cache.clear()
    assert cache.stats()["size"] == 0
