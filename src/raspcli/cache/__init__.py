"""Two-tier caching of raw schedule-search responses.

This package provides:

* :class:`MemoryCache` -- a plain key to payload mapping that lives for the
  lifetime of the process and never expires.
* :class:`DiskCache` -- one JSON file per key holding the payload and the
  time it was written, ignored once older than the freshness window.
* :class:`CacheStore` -- owns one of each and exposes ``memory_get``,
  ``memory_put``, ``disk_get`` and ``disk_put``.

The store does not decide the lookup order; :class:`~raspcli.search.TripSearch`
checks memory first, then disk, then the network.
"""

from raspcli.cache.disk import DiskCache
from raspcli.cache.memory import MemoryCache
from raspcli.cache.store import CacheStore

__all__ = ["CacheStore", "DiskCache", "MemoryCache"]
