"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for raspcli:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.raspcli/`` on macOS and Windows. See :func:`get_config_dir`,
  :func:`get_cache_dir`, :func:`get_data_dir`.
* **Global config** -- A single :class:`~raspcli.models.GlobalConfig`
  JSON file storing defaults (API endpoint, cache settings, output format).
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, project-local config, and global config into the
  final effective configuration.
* **Credential resolution** -- :func:`resolve_credential` reads the API key
  from an env var, a file, or an interactive prompt.

All file writes use an atomic temp-file-then-rename strategy
(:func:`atomic_write`), which the disk cache tier reuses for its records.
"""

from __future__ import annotations

import getpass
import json
import os
import platform
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional

from raspcli.exceptions import ConfigError
from raspcli.models import GlobalConfig

_APP_NAME = "raspcli"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "raspcli.json"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/raspcli/`` (default ``~/.config/raspcli/``).
    On macOS/Windows: ``~/.raspcli/``.
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_CONFIG_HOME", (".config",))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_cache_dir() -> Path:
    """Return the cache directory, creating it if necessary.

    Holds one ``cache_<key>.json`` file per route and date. Cached data can
    be safely deleted at any time.

    On Linux/BSD: ``$XDG_CACHE_HOME/raspcli/`` (default ``~/.cache/raspcli/``).
    On macOS/Windows: ``~/.raspcli/cache/``.
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_CACHE_HOME", (".cache",))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir() / "cache"
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/raspcli/`` (default ``~/.local/share/raspcli/``).
    On macOS/Windows: ``~/.raspcli/logs/``.
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_DATA_HOME", (".local", "share"))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is cleaned up and the original exception is re-raised.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Global config ---


def global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the XDG config directory.

    Returns:
        The deserialised :class:`~raspcli.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    atomic_write(global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Project-local config ---


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./raspcli.json``.

    The file holds a partial :class:`~raspcli.models.GlobalConfig` document;
    its keys override the user config.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return *base* with *override* merged in, recursing into nested dicts."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# --- Precedence resolution ---


def resolve_config(
    cli_format: Optional[str] = None,
    cli_cache_dir: Optional[str] = None,
    cli_base_url: Optional[str] = None,
) -> GlobalConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_format``, ``cli_cache_dir``, ``cli_base_url``)
        2. Environment variables (``RASPCLI_CACHE_DIR``, ``RASPCLI_BASE_URL``)
        3. Project config (``./raspcli.json``)
        4. User config (``~/.config/raspcli/config.json``)
        5. Defaults

    Raises:
        ConfigError: If any config layer is invalid.
    """
    # 5 + 4. Base global config (fills in defaults automatically)
    config = load_global_config()

    # 3. Project-local overrides
    project = load_project_config()
    if project:
        merged = _deep_merge(config.model_dump(mode="json"), project)
        try:
            config = GlobalConfig.model_validate(merged)
        except ValueError as exc:
            raise ConfigError(f"Invalid project config: {exc}") from exc

    # 2. Environment variables
    env_cache_dir = os.environ.get("RASPCLI_CACHE_DIR")
    if env_cache_dir:
        config.cache.directory = env_cache_dir
    env_base_url = os.environ.get("RASPCLI_BASE_URL")
    if env_base_url:
        config.request.base_url = env_base_url

    # 1. CLI flags
    if cli_cache_dir is not None:
        config.cache.directory = cli_cache_dir
    if cli_base_url is not None:
        config.request.base_url = cli_base_url
    if cli_format is not None:
        config.output.format = cli_format

    return config


def resolve_cache_dir(config: GlobalConfig) -> Path:
    """Return the disk cache directory for *config*, creating it if necessary."""
    if config.cache.directory:
        path = Path(config.cache.directory).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path
    return get_cache_dir()


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - ``"prompt"`` -- prompts user interactively (requires a TTY)

    Raises:
        ConfigError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if not value:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    if source == "prompt":
        if not sys.stdin.isatty():
            raise ConfigError(
                "Cannot prompt for credentials: stdin is not a TTY (source: prompt)"
            )
        return getpass.getpass("Enter API key: ")

    raise ConfigError(f"Unknown credential source format: {source}")
