"""Tests for the CacheStore facade."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from raspcli.cache import CacheStore, DiskCache, MemoryCache

KEY = "c172-c2-2024-05-01"


class TestMemoryTier:
    def test_memory_put_get(self) -> None:
        store = CacheStore()
        assert store.memory_get(KEY) is None
        store.memory_put(KEY, {"segments": []})
        assert store.memory_get(KEY) == {"segments": []}

    def test_memory_put_does_not_touch_disk(self) -> None:
        disk = MagicMock(spec=DiskCache)
        store = CacheStore(disk=disk)
        store.memory_put(KEY, {"segments": []})
        store.memory_get(KEY)
        assert disk.method_calls == []

    def test_explicit_memory_instance_is_used(self) -> None:
        memory = MemoryCache()
        store = CacheStore(memory=memory)
        store.memory_put(KEY, {"v": 1})
        assert memory.get(KEY) == {"v": 1}


class TestDiskTier:
    def test_round_trip(self, tmp_path: Path) -> None:
        store = CacheStore(disk=DiskCache(tmp_path))
        assert store.disk_put(KEY, {"v": 1}) is True
        assert store.disk_get(KEY) == {"v": 1}

    def test_disk_hit_does_not_warm_memory(self, tmp_path: Path) -> None:
        store = CacheStore(disk=DiskCache(tmp_path))
        store.disk_put(KEY, {"v": 1})
        assert store.disk_get(KEY) == {"v": 1}
        assert store.memory_get(KEY) is None

    def test_disk_put_does_not_warm_memory(self, tmp_path: Path) -> None:
        store = CacheStore(disk=DiskCache(tmp_path))
        store.disk_put(KEY, {"v": 1})
        assert store.memory_get(KEY) is None

    def test_disabled_disk_tier(self) -> None:
        store = CacheStore(disk=None)
        assert store.disk_put(KEY, {"v": 1}) is False
        assert store.disk_get(KEY) is None


class TestStats:
    def test_disabled(self) -> None:
        store = CacheStore()
        store.memory_put(KEY, {})
        assert store.stats() == {"enabled": False, "memory_entries": 1}

    def test_enabled(self, tmp_path: Path) -> None:
        store = CacheStore(disk=DiskCache(tmp_path))
        store.disk_put(KEY, {})
        stats = store.stats()
        assert stats["enabled"] is True
        assert stats["size"] == 1
        assert stats["memory_entries"] == 0
