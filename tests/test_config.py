"""Tests for raspcli.config -- XDG paths, atomic writes, precedence, credentials."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from raspcli.config import (
    atomic_write,
    get_cache_dir,
    get_config_dir,
    get_data_dir,
    load_global_config,
    load_project_config,
    resolve_cache_dir,
    resolve_config,
    resolve_credential,
    save_global_config,
)
from raspcli.exceptions import ConfigError
from raspcli.models import GlobalConfig


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# ---------------------------------------------------------------------------
# XDG path resolution
# ---------------------------------------------------------------------------


class TestXDGPaths:
    def test_dirs_follow_xdg_env(self, isolated_config: Path) -> None:
        assert get_config_dir() == isolated_config / "config" / "raspcli"
        assert get_cache_dir() == isolated_config / "cache" / "raspcli"
        assert get_data_dir() == isolated_config / "data" / "raspcli"
        assert get_cache_dir().is_dir()

    def test_xdg_default_under_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("raspcli.config._is_xdg_platform", lambda: True)
        monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert get_cache_dir() == tmp_path / ".cache" / "raspcli"

    def test_non_xdg_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("raspcli.config._is_xdg_platform", lambda: False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert get_config_dir() == tmp_path / ".raspcli"
        assert get_cache_dir() == tmp_path / ".raspcli" / "cache"


# ---------------------------------------------------------------------------
# Atomic writes
# ---------------------------------------------------------------------------


class TestAtomicWrite:
    def test_writes_content(self, tmp_path: Path) -> None:
        target = tmp_path / "sub" / "file.json"
        atomic_write(target, '{"a": 1}')
        assert target.read_text(encoding="utf-8") == '{"a": 1}'

    def test_failure_cleans_temp_file(self, tmp_path: Path) -> None:
        target = tmp_path / "file.json"
        with patch("raspcli.config.os.replace", side_effect=OSError("boom")):
            with pytest.raises(OSError, match="boom"):
                atomic_write(target, "data")
        assert list(tmp_path.iterdir()) == []


# ---------------------------------------------------------------------------
# Global config
# ---------------------------------------------------------------------------


class TestGlobalConfig:
    def test_defaults_when_missing(self, isolated_config: Path) -> None:
        config = load_global_config()
        assert config == GlobalConfig()
        assert config.cache.ttl_seconds == 86400
        assert config.request.lang == "ru_RU"
        assert config.request.limit == 100

    def test_save_and_load(self, isolated_config: Path) -> None:
        config = GlobalConfig()
        config.cache.ttl_seconds = 60
        save_global_config(config)
        assert load_global_config().cache.ttl_seconds == 60

    def test_invalid_json_raises(self, isolated_config: Path) -> None:
        (get_config_dir() / "config.json").write_text("{broken", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()


# ---------------------------------------------------------------------------
# Project config and precedence
# ---------------------------------------------------------------------------


class TestPrecedence:
    def test_no_project_config(self, isolated_config: Path) -> None:
        assert load_project_config() is None

    def test_project_config_not_object(self, isolated_config: Path) -> None:
        _write_json(isolated_config / "raspcli.json", [1, 2])
        with pytest.raises(ConfigError):
            load_project_config()

    def test_project_overrides_user(self, isolated_config: Path) -> None:
        user = GlobalConfig()
        user.cache.ttl_seconds = 60
        user.request.lang = "en_US"
        save_global_config(user)
        _write_json(isolated_config / "raspcli.json", {"cache": {"ttl_seconds": 120}})

        config = resolve_config()

        assert config.cache.ttl_seconds == 120
        assert config.request.lang == "en_US"

    def test_env_overrides_project(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_json(isolated_config / "raspcli.json", {"cache": {"directory": "/project"}})
        monkeypatch.setenv("RASPCLI_CACHE_DIR", "/env")
        monkeypatch.setenv("RASPCLI_BASE_URL", "https://env.example.com")

        config = resolve_config()

        assert config.cache.directory == "/env"
        assert config.request.base_url == "https://env.example.com"

    def test_cli_overrides_env(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RASPCLI_CACHE_DIR", "/env")
        config = resolve_config(cli_cache_dir="/cli", cli_base_url="https://cli", cli_format="json")
        assert config.cache.directory == "/cli"
        assert config.request.base_url == "https://cli"
        assert config.output.format == "json"

    def test_invalid_project_value(self, isolated_config: Path) -> None:
        _write_json(isolated_config / "raspcli.json", {"cache": {"ttl_seconds": "soon"}})
        with pytest.raises(ConfigError):
            resolve_config()

    @pytest.mark.parametrize(
        "override",
        [{"cache": {"ttl_seconds": 0}}, {"request": {"limit": -1}}, {"output": {"format": "xml"}}],
    )
    def test_out_of_range_project_value(self, isolated_config: Path, override: dict[str, Any]) -> None:
        _write_json(isolated_config / "raspcli.json", override)
        with pytest.raises(ConfigError):
            resolve_config()

    def test_resolve_cache_dir_default(self, isolated_config: Path) -> None:
        assert resolve_cache_dir(GlobalConfig()) == isolated_config / "cache" / "raspcli"

    def test_resolve_cache_dir_explicit(self, isolated_config: Path) -> None:
        config = GlobalConfig()
        config.cache.directory = str(isolated_config / "custom")
        path = resolve_cache_dir(config)
        assert path == isolated_config / "custom"
        assert path.is_dir()


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


class TestResolveCredential:
    def test_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RASP_API_KEY", "abc")
        assert resolve_credential("env:RASP_API_KEY") == "abc"

    def test_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RASP_API_KEY", raising=False)
        with pytest.raises(ConfigError, match="RASP_API_KEY"):
            resolve_credential("env:RASP_API_KEY")

    def test_file(self, tmp_path: Path) -> None:
        key_file = tmp_path / "key"
        key_file.write_text("  secret\n")
        assert resolve_credential(f"file:{key_file}") == "secret"

    def test_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            resolve_credential(f"file:{tmp_path / 'absent'}")

    def test_prompt_without_tty(self) -> None:
        with patch("raspcli.config.sys.stdin") as stdin:
            stdin.isatty.return_value = False
            with pytest.raises(ConfigError, match="not a TTY"):
                resolve_credential("prompt")

    def test_unknown_format(self) -> None:
        with pytest.raises(ConfigError, match="Unknown credential source"):
            resolve_credential("keyring:x")
