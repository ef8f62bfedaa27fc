"""Shared test fixtures for raspcli.

Provides isolated config environments, output state management, a CLI
runner, and builders for raw schedule-search payloads. These fixtures are
discovered by pytest and available to all test modules without imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from raspcli.output import OutputFormat, OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When CliRunner or capsys swaps those streams the cached
    references go stale, so a fresh manager is created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points the XDG directories at subdirectories of tmp_path, clears the
    RASPCLI_* and RASP_API_KEY variables, and changes the working
    directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("raspcli.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in ["RASPCLI_CACHE_DIR", "RASPCLI_BASE_URL", "RASP_API_KEY"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True, no_color=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a PLAIN-format, colourless OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------


@pytest.fixture
def make_segment() -> Callable[..., dict[str, Any]]:
    """Return a builder for one raw provider segment.

    Keyword arguments override top-level segment fields.
    """

    def _make(
        title: str = "Уфа - Санкт-Петербург",
        has_transfers: Optional[bool] = False,
        transfers: Optional[list[Any]] = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        segment: dict[str, Any] = {
            "thread": {
                "title": title,
                "transport_type": "plane",
                "vehicle": "Airbus A320",
            },
            "from": {"title": "Уфа"},
            "to": {"title": "Пулково"},
            "departure": "2024-05-01T06:10:00+05:00",
            "arrival": "2024-05-01T07:40:00+03:00",
            "departure_terminal": "A",
            "arrival_terminal": "1",
            "duration": 12600.0,
        }
        if has_transfers is not None:
            segment["has_transfers"] = has_transfers
        if transfers is not None:
            segment["transfers"] = transfers
        segment.update(overrides)
        return segment

    return _make


@pytest.fixture
def sample_payload(make_segment: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    """A raw search response with three segments, one of them multi-transfer."""
    return {
        "search": {"date": "2024-05-01"},
        "segments": [
            make_segment(title="SU 1235"),
            make_segment(
                title="Via Moscow",
                has_transfers=True,
                transfers=[{"title": "Москва"}, {"title": "Казань"}],
            ),
            make_segment(title="Train 014", transfers=[{"title": "Самара"}]),
        ],
        "pagination": {"total": 3, "limit": 100, "offset": 0},
    }


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
