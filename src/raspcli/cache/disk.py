"""Durable cache tier: one JSON file per cache key.

Each file is a serialised :class:`~raspcli.models.CacheRecord`::

    {
        "timestamp": 1714550400,
        "data": { ...raw provider response... }
    }

A record older than ``ttl_seconds`` is reported as stale and ignored, but
left on disk; the next successful fetch for the same key overwrites it.
Writes go through :func:`~raspcli.config.atomic_write`. There is no locking
between processes, so concurrent writers for one key race and the last one
wins.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import ValidationError

from raspcli.config import atomic_write
from raspcli.keys import cache_filename
from raspcli.models import DEFAULT_TTL_SECONDS, CacheRecord
from raspcli.output import get_output

logger = logging.getLogger(__name__)

_RECORD_GLOB = "cache_*.json"


class DiskCache:
    """File-backed cache of raw provider payloads with a freshness window.

    Args:
        directory: Directory holding the ``cache_<key>.json`` files. It is
            created on first write if missing.
        ttl_seconds: Maximum record age in seconds. A record is stale when
            ``now - timestamp`` exceeds this value.
        clock: Returns the current time in epoch seconds.

    Example::

        cache = DiskCache(Path("~/.cache/raspcli").expanduser())
        cache.put("c172-c2-2024-05-01", payload)
        cache.get("c172-c2-2024-05-01")
    """

    def __init__(
        self,
        directory: str | Path,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._directory = Path(directory)
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def path_for(self, key: str) -> Path:
        """Return the file path of the record for *key*."""
        return self._directory / cache_filename(key)

    def get(self, key: str) -> Optional[Any]:
        """Return the cached payload for *key* if a fresh record exists.

        Returns ``None`` when the file does not exist, when it cannot be read
        or decoded (with a warning), or when the record is stale (with an
        informational notice).
        """
        path = self.path_for(key)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No cache file at %s", path)
            return None
        except UnicodeDecodeError as exc:
            get_output().warning(f"Ignoring corrupt cache file {path}: {exc.reason}")
            return None
        except OSError as exc:
            get_output().warning(f"Cannot read cache file {path}: {exc}")
            return None

        try:
            record = CacheRecord.model_validate_json(text)
        except ValidationError as exc:
            get_output().warning(f"Ignoring corrupt cache file {path}: {exc.error_count()} error(s)")
            return None

        age = int(self._clock()) - record.timestamp
        if age > self._ttl_seconds:
            get_output().info(f"Cached data for {key} is stale, requesting fresh data.")
            logger.debug("Record %s is %ds old (ttl %ds)", path, age, self._ttl_seconds)
            return None
        return record.data

    def put(self, key: str, payload: Any) -> bool:
        """Write *payload* for *key*, overwriting any existing record.

        Failures are reported as warnings and never raised.

        Returns:
            ``True`` if the record was written, ``False`` otherwise.
        """
        path = self.path_for(key)
        record = CacheRecord(timestamp=int(self._clock()), data=payload)
        try:
            text = json.dumps(record.model_dump(), indent=4, ensure_ascii=False)
            atomic_write(path, text + "\n")
        except (OSError, TypeError, ValueError) as exc:
            get_output().warning(f"Could not write cache file {path}: {exc}")
            return False
        logger.debug("Wrote cache record %s", path)
        return True

    def invalidate(self, key: str) -> None:
        """Remove the record for *key*, if any."""
        self.path_for(key).unlink(missing_ok=True)

    def clear(self) -> int:
        """Remove every cache record in the directory.

        Only files matching ``cache_*.json`` are touched.

        Returns:
            The number of records removed.
        """
        removed = 0
        for path in self._record_paths():
            path.unlink(missing_ok=True)
            removed += 1
        return removed

    def stats(self) -> dict[str, Any]:
        """Return ``enabled``, ``size``, ``directory`` and ``ttl_seconds``."""
        return {
            "enabled": True,
            "size": len(self._record_paths()),
            "directory": str(self._directory),
            "ttl_seconds": self._ttl_seconds,
        }

    def _record_paths(self) -> list[Path]:
        if not self._directory.is_dir():
            return []
        return sorted(p for p in self._directory.glob(_RECORD_GLOB) if p.is_file())
