"""Cache key construction.

A cache key addresses both cache tiers and names the durable record on disk,
so it must come out identical for identical inputs across process runs.
Station codes never contain ``-`` and dates are ``YYYY-MM-DD``, which keeps
the joined form unambiguous.
"""

from __future__ import annotations

KEY_SEPARATOR = "-"


def build_key(origin: str, destination: str, date: str) -> str:
    """Return the cache key for a route on a date.

    Example::

        >>> build_key("c172", "c2", "2024-05-01")
        'c172-c2-2024-05-01'
    """
    return KEY_SEPARATOR.join((origin, destination, date))


def cache_filename(key: str) -> str:
    """Return the file name of the durable record for *key*."""
    return f"cache_{key}.json"
