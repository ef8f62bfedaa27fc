"""Config commands -- inspect and edit raspcli settings.

``raspcli config`` manages the user config file. ``set`` and ``unset`` only
accept the settings raspcli actually reads (see :data:`SETTINGS`); each value
is parsed from its command-line text and the edited document is validated
against :class:`~raspcli.models.GlobalConfig` before it is written, so a
zero TTL or an unknown output format never reaches the disk.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import typer
from pydantic import ValidationError

from raspcli.config import (
    global_config_path,
    load_global_config,
    resolve_config,
    save_global_config,
)
from raspcli.exceptions import InvalidUsageError, RaspError
from raspcli.models import GlobalConfig
from raspcli.output import error, format_response, info, success

config_app = typer.Typer(no_args_is_help=True)

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}
_NONE = {"none", "null", "default"}
_CREDENTIAL_PREFIXES = ("env:", "file:")


def _flag(text: str) -> bool:
    lowered = text.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise InvalidUsageError(f"Expected true or false, got: {text}")


def _integer(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise InvalidUsageError(f"Expected integer, got: {text}") from None


def _url(text: str) -> str:
    if not text.startswith(("http://", "https://")):
        raise InvalidUsageError(f"Expected an http(s) URL, got: {text}")
    return text.rstrip("/")


def _credential_source(text: str) -> str:
    if text == "prompt":
        return text
    for prefix in _CREDENTIAL_PREFIXES:
        if text.startswith(prefix) and len(text) > len(prefix):
            return text
    raise InvalidUsageError(
        f"Expected env:VAR, file:/path or prompt, got: {text}"
    )


def _optional_path(text: str) -> Optional[str]:
    return None if text.lower() in _NONE else text


SETTINGS: dict[str, Callable[[str], Any]] = {
    "api_key_source": _credential_source,
    "request.base_url": _url,
    "request.timeout": _integer,
    "request.verify_ssl": _flag,
    "request.lang": str,
    "request.limit": _integer,
    "cache.enabled": _flag,
    "cache.ttl_seconds": _integer,
    "cache.directory": _optional_path,
    "output.format": str.lower,
}
"""Settable keys (dot notation) and the parser for each one's text value."""


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def _default_value(key: str) -> Any:
    value: Any = GlobalConfig().model_dump(mode="json")
    for part in key.split("."):
        value = value[part]
    return value


def _update(config: GlobalConfig, key: str, value: Any) -> GlobalConfig:
    """Return a validated copy of *config* with *key* set to *value*."""
    data = config.model_dump(mode="json")
    *parents, leaf = key.split(".")
    target = data
    for part in parents:
        target = target[part]
    target[leaf] = value
    try:
        return GlobalConfig.model_validate(data)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        raise InvalidUsageError(f"Invalid value for {key}: {reason}") from None


def _check_key(key: str) -> None:
    if key not in SETTINGS:
        raise InvalidUsageError(
            f"Unknown config key: {key} (expected one of: {', '.join(SETTINGS)})"
        )


def _fail(exc: RaspError) -> typer.Exit:
    error(str(exc))
    return typer.Exit(code=exc.exit_code)


@config_app.command("show")
def config_show(
    ctx: typer.Context,
    effective: bool = typer.Option(
        False,
        "--effective",
        help="Apply ./raspcli.json, RASPCLI_* variables and CLI flags.",
    ),
) -> None:
    """Show settings as ``key value`` pairs.

    Example::

        raspcli config show
        raspcli --cache-dir /tmp/rasp config show --effective
    """
    obj = ctx.obj or {}
    try:
        if effective:
            config = resolve_config(
                cli_cache_dir=obj.get("cache_dir"),
                cli_base_url=obj.get("base_url"),
            )
        else:
            config = load_global_config()
    except RaspError as exc:
        raise _fail(exc) from None

    info(f"Config file: {global_config_path()}")
    format_response(_flatten(config.model_dump(mode="json")))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Setting in dot notation, e.g. cache.ttl_seconds."),
    value: str = typer.Argument(help="New value; 'none' clears cache.directory."),
) -> None:
    """Change one setting in the user config file.

    Example::

        raspcli config set cache.ttl_seconds 3600
        raspcli config set cache.directory none
        raspcli config set api_key_source file:~/.rasp-key
    """
    try:
        _check_key(key)
        parsed = SETTINGS[key](value)
        config = _update(load_global_config(), key, parsed)
        save_global_config(config)
    except RaspError as exc:
        raise _fail(exc) from None
    success(f"Set {key} = {parsed}")


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(help="Setting in dot notation."),
) -> None:
    """Restore one setting to its default value.

    Example::

        raspcli config unset api_key_source
    """
    try:
        _check_key(key)
        default = _default_value(key)
        config = _update(load_global_config(), key, default)
        save_global_config(config)
    except RaspError as exc:
        raise _fail(exc) from None
    success(f"Restored {key} = {default}")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Restore every setting to its default. Asks first unless ``--force``."""
    force = (ctx.obj or {}).get("force", False)
    if not force and not typer.confirm("Reset all config to defaults?"):
        info("Cancelled.")
        raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
