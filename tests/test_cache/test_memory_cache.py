"""Tests for the in-process cache tier."""

from __future__ import annotations

from raspcli.cache import MemoryCache


class TestMemoryCache:
    def test_miss_returns_none(self) -> None:
        assert MemoryCache().get("c172-c2-2024-05-01") is None

    def test_put_then_get(self) -> None:
        cache = MemoryCache()
        cache.put("c172-c2-2024-05-01", {"segments": []})
        assert cache.get("c172-c2-2024-05-01") == {"segments": []}
        assert "c172-c2-2024-05-01" in cache
        assert len(cache) == 1

    def test_put_replaces(self) -> None:
        cache = MemoryCache()
        cache.put("k", {"v": 1})
        cache.put("k", {"v": 2})
        assert cache.get("k") == {"v": 2}
        assert len(cache) == 1

    def test_instances_do_not_share_state(self) -> None:
        first = MemoryCache()
        first.put("k", {"v": 1})
        assert MemoryCache().get("k") is None
