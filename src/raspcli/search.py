"""Lookup orchestration across the cache tiers and the schedule API.

:class:`TripSearch` enforces the lookup order:

1. memory tier,
2. disk tier (fresh records only),
3. a live request through :class:`~raspcli.client.ScheduleClient`.

A live result is written to both tiers; a disk hit is returned as-is and
not copied into memory. Transport and parse errors propagate to the caller
before anything is cached.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from raspcli.cache import CacheStore
from raspcli.client import ScheduleClient
from raspcli.keys import build_key
from raspcli.models import TripRecord
from raspcli.normalizer import normalize, segment_count
from raspcli.output import get_output


class ResultSource(str, Enum):
    """Where a search result came from."""

    MEMORY = "memory"
    DISK = "disk"
    NETWORK = "network"


@dataclass
class SearchResult:
    """A raw payload, where it was found, and the trips derived from it."""

    key: str
    source: ResultSource
    payload: Any
    trips: list[TripRecord] = field(default_factory=list)

    @property
    def listed(self) -> int:
        """Segments in the raw payload, including those the filter dropped."""
        return segment_count(self.payload)


class TripSearch:
    """Answers route queries from the cache tiers or the network.

    Args:
        store: The cache tiers. Owned by the caller so that several searches
            in one process share the memory tier.
        client_factory: Called only on a total cache miss; returns a
            :class:`ScheduleClient` that is used as a context manager for a
            single request.
    """

    def __init__(
        self,
        store: CacheStore,
        client_factory: Callable[[], AbstractContextManager[ScheduleClient]],
    ) -> None:
        self._store = store
        self._client_factory = client_factory

    @property
    def store(self) -> CacheStore:
        return self._store

    def run(
        self,
        origin: str,
        destination: str,
        date: str,
        refresh: bool = False,
    ) -> SearchResult:
        """Return the trips between *origin* and *destination* on *date*.

        Args:
            origin: Origin station code.
            destination: Destination station code.
            date: ``YYYY-MM-DD``.
            refresh: Skip both cache tiers for the lookup. The fetched
                payload is still written through to them.

        Raises:
            TransportError: The API answered with a non-2xx status.
            ConnectionError_: The API could not be reached.
            ResponseParseError: The API body was not JSON.
        """
        output = get_output()
        key = build_key(origin, destination, date)

        if not refresh:
            payload = self._store.memory_get(key)
            if payload is not None:
                output.debug(f"Memory cache hit: {key}")
                return self._result(key, ResultSource.MEMORY, payload)

            payload = self._store.disk_get(key)
            if payload is not None:
                output.debug(f"Disk cache hit: {key}")
                return self._result(key, ResultSource.DISK, payload)

            output.debug(f"Cache miss: {key}")

        with self._client_factory() as client:
            payload = client.search(origin, destination, date)

        self._store.memory_put(key, payload)
        self._store.disk_put(key, payload)
        return self._result(key, ResultSource.NETWORK, payload)

    @staticmethod
    def _result(key: str, source: ResultSource, payload: Any) -> SearchResult:
        return SearchResult(key=key, source=source, payload=payload, trips=normalize(payload))
