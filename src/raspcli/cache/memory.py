"""In-process cache tier."""

from __future__ import annotations

from typing import Any, Optional


class MemoryCache:
    """Key to payload mapping held for the lifetime of one process.

    Entries carry no timestamp and are treated as fresh for as long as the
    object exists.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the payload stored under *key*, or ``None``."""
        return self._entries.get(key)

    def put(self, key: str, payload: Any) -> None:
        """Store *payload* under *key*, replacing any previous entry."""
        self._entries[key] = payload

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
