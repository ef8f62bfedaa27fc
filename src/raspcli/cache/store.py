"""The cache facade used by the search orchestrator."""

from __future__ import annotations

from typing import Any, Optional

from raspcli.cache.disk import DiskCache
from raspcli.cache.memory import MemoryCache


class CacheStore:
    """Owns the memory tier and, optionally, the disk tier.

    Lookup precedence is the caller's responsibility. In particular a disk
    hit is not copied into the memory tier.

    Args:
        disk: The durable tier, or ``None`` when disk caching is disabled.
        memory: The in-process tier. A fresh :class:`MemoryCache` is created
            when omitted.
    """

    def __init__(
        self,
        disk: Optional[DiskCache] = None,
        memory: Optional[MemoryCache] = None,
    ) -> None:
        self._memory = memory if memory is not None else MemoryCache()
        self._disk = disk

    @property
    def disk(self) -> Optional[DiskCache]:
        return self._disk

    def memory_get(self, key: str) -> Optional[Any]:
        return self._memory.get(key)

    def memory_put(self, key: str, payload: Any) -> None:
        self._memory.put(key, payload)

    def disk_get(self, key: str) -> Optional[Any]:
        """Return a fresh disk record's payload, or ``None``."""
        if self._disk is None:
            return None
        return self._disk.get(key)

    def disk_put(self, key: str, payload: Any) -> bool:
        """Persist *payload*; returns ``False`` if disabled or the write failed."""
        if self._disk is None:
            return False
        return self._disk.put(key, payload)

    def stats(self) -> dict[str, Any]:
        """Disk tier statistics plus the number of in-memory entries."""
        stats = self._disk.stats() if self._disk is not None else {"enabled": False}
        stats["memory_entries"] = len(self._memory)
        return stats
