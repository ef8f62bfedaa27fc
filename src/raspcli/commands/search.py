"""Search command -- look up trips for a date and direction.

``raspcli search`` validates its input, resolves the configuration, and
hands the query to :class:`~raspcli.search.TripSearch`, which answers from
the memory tier, the disk tier, or the schedule API, in that order. Missing
``--date`` or ``--direction`` values are prompted for unless ``--no-input``
is active.
"""

from __future__ import annotations

from typing import Optional

import typer

from raspcli.cache import CacheStore, DiskCache
from raspcli.client import ScheduleClient
from raspcli.config import resolve_cache_dir, resolve_config, resolve_credential
from raspcli.directions import DIRECTIONS, resolve_direction, validate_date
from raspcli.display import render_trips
from raspcli.exceptions import ConfigError, InvalidUsageError, RaspError
from raspcli.models import GlobalConfig
from raspcli.output import error, info, suggest
from raspcli.search import ResultSource, TripSearch

_SOURCE_MESSAGES = {
    ResultSource.MEMORY: "Data from memory cache.",
    ResultSource.DISK: "Data from disk cache.",
}


def build_search(config: GlobalConfig) -> TripSearch:
    """Wire a :class:`TripSearch` to the cache tiers and API described by *config*.

    The API key is resolved lazily, only when a request is actually sent.
    """
    disk = None
    if config.cache.enabled:
        disk = DiskCache(resolve_cache_dir(config), config.cache.ttl_seconds)

    def client_factory() -> ScheduleClient:
        return ScheduleClient(config.request, resolve_credential(config.api_key_source))

    return TripSearch(CacheStore(disk=disk), client_factory)


def _ask(value: Optional[str], prompt: str, option: str, no_input: bool) -> str:
    if value is not None:
        return value.strip()
    if no_input:
        raise InvalidUsageError(f"Missing {option} (prompting is disabled by --no-input)")
    return typer.prompt(prompt).strip()


def search_command(
    ctx: typer.Context,
    date: Optional[str] = typer.Option(
        None, "--date", "-d", help="Travel date as YYYY-MM-DD."
    ),
    direction: Optional[str] = typer.Option(
        None,
        "--direction",
        help=f"One of: {', '.join(DIRECTIONS)}.",
    ),
    refresh: bool = typer.Option(
        False, "--refresh", help="Ignore cached data and query the API."
    ),
) -> None:
    """Look up transport options between Ufa and Saint Petersburg.

    Example::

        raspcli search --date 2024-05-01 --direction Уфа-Санкт-Петербург
        raspcli --json search -d 2024-05-01 --direction Санкт-Петербург-Уфа
    """
    obj = ctx.obj or {}
    no_input = obj.get("no_input", False)

    try:
        date = validate_date(_ask(date, "Date (YYYY-MM-DD)", "--date", no_input))
        direction = _ask(
            direction, f"Direction ({' or '.join(DIRECTIONS)})", "--direction", no_input
        )
        origin, destination = resolve_direction(direction)

        config = resolve_config(
            cli_cache_dir=obj.get("cache_dir"),
            cli_base_url=obj.get("base_url"),
        )
        result = build_search(config).run(origin, destination, date, refresh=refresh)
    except RaspError as exc:
        error(str(exc))
        if isinstance(exc, ConfigError) and "RASP_API_KEY" in str(exc):
            suggest("Set RASP_API_KEY or run: raspcli config set api_key_source file:<path>")
        raise typer.Exit(code=exc.exit_code) from None

    message = _SOURCE_MESSAGES.get(result.source)
    if message:
        info(message)
    render_trips(result.trips, listed=result.listed)
