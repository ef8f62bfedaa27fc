"""Cache commands -- inspect and clear the disk cache tier.

The memory tier only lives inside a single ``raspcli search`` process, so
these commands deal with the on-disk records alone.
"""

from __future__ import annotations

from typing import Optional

import typer

from raspcli.cache import DiskCache
from raspcli.config import resolve_cache_dir, resolve_config
from raspcli.exceptions import RaspError
from raspcli.output import error, format_response, info, print_data, success


cache_app = typer.Typer(no_args_is_help=True)


def _disk_cache(ctx: typer.Context) -> Optional[DiskCache]:
    """Build the disk tier from the resolved config, or ``None`` if disabled."""
    obj = ctx.obj or {}
    try:
        config = resolve_config(cli_cache_dir=obj.get("cache_dir"))
    except RaspError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    if not config.cache.enabled:
        return None
    return DiskCache(resolve_cache_dir(config), config.cache.ttl_seconds)


@cache_app.command("show")
def cache_show(ctx: typer.Context) -> None:
    """Show the cache directory, number of records and freshness window."""
    cache = _disk_cache(ctx)
    format_response(cache.stats() if cache is not None else {"enabled": False})


@cache_app.command("path")
def cache_path(ctx: typer.Context) -> None:
    """Print the cache directory."""
    cache = _disk_cache(ctx)
    if cache is None:
        info("Disk cache is disabled.")
        raise typer.Exit()
    print_data(str(cache.directory))


@cache_app.command("clear")
def cache_clear(ctx: typer.Context) -> None:
    """Delete every cached schedule record."""
    cache = _disk_cache(ctx)
    if cache is None:
        info("Disk cache is disabled.")
        raise typer.Exit()
    removed = cache.clear()
    success(f"Removed {removed} cache file(s) from {cache.directory}")
