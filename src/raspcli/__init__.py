"""raspcli -- Look up transport options between Ufa and Saint Petersburg.

This package queries the Yandex Rasp schedule-search API for trips between
two fixed locations on a given date, and keeps the raw responses in a
two-tier cache (in-process and on-disk) so that repeated lookups for the same
route and date do not hit the network again within the freshness window.

Typical workflow::

    export RASP_API_KEY=...
    raspcli search --date 2024-05-01 --direction Уфа-Санкт-Петербург

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models for configuration, cache records and trips.
    config: XDG-aware configuration loading and credential resolution.
    keys: Cache key construction.
    jsonaccess: Tolerant typed accessors for loosely-typed JSON.
    normalizer: Raw provider payload to :class:`~raspcli.models.TripRecord`.
    cache: Memory and disk cache tiers.
    client: HTTP client for the schedule-search endpoint.
    search: Lookup orchestration across the cache tiers and the network.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
