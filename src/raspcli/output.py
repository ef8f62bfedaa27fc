"""Console output for raspcli with a strict stdout/stderr split.

* **stdout** -- data only: trip summaries, ``--json`` arrays, ``cache show``
  and ``config show`` listings. Safe to pipe.
* **stderr** -- diagnostics: cache notices, route counts, warnings, errors.
* **Format** -- ``--json`` and ``--plain`` force a format; otherwise the
  configured ``output.format`` applies, and ``auto`` picks Rich panels for
  an interactive terminal and plain text when piped.
* **Colour** -- off with ``--no-color``, ``NO_COLOR`` or ``TERM=dumb``.

:class:`OutputManager` holds these preferences. One instance is installed by
:func:`~raspcli.app.main_callback`; library code reaches it through
:func:`get_output` and commands use the module-level shortcuts.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console, RenderableType
from rich.syntax import Syntax
from rich.text import Text


class OutputFormat(str, Enum):
    """Supported output formats. ``AUTO`` is resolved once, at construction."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Routes data to stdout and diagnostics to stderr.

    Args:
        format: Requested format; ``AUTO`` becomes ``RICH`` on a colour TTY
            and ``PLAIN`` otherwise.
        no_color: Disable colour and styling.
        quiet: Drop info, success and suggestion lines. Warnings and errors
            are always shown.
        verbose: Show debug lines.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            format = OutputFormat.RICH if _is_tty() and not self._no_color else OutputFormat.PLAIN
        self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(self._format == OutputFormat.RICH),
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        """The resolved output format (never ``AUTO``)."""
        return self._format

    # ------------------------------------------------------------------ #
    # stdout
    # ------------------------------------------------------------------ #

    def format_response(self, data: Any) -> None:
        """Write a listing (a flat dict) or a JSON-able document to stdout."""
        if self._format == OutputFormat.JSON:
            self.print_data(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        elif self._format == OutputFormat.PLAIN:
            if isinstance(data, dict):
                for key, value in data.items():
                    self.print_data(f"{key}\t{value}")
            else:
                self.print_data(str(data))
        else:
            text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
            self._stdout.print(Syntax(text, "json", theme="monokai", word_wrap=True))

    def print_data(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    def print_renderable(self, renderable: RenderableType) -> None:
        self._stdout.print(renderable)

    # ------------------------------------------------------------------ #
    # stderr
    # ------------------------------------------------------------------ #

    def info(self, message: str) -> None:
        if not self._quiet:
            self._emit(message)

    def success(self, message: str) -> None:
        if not self._quiet:
            self._emit(message, style="green")

    def suggest(self, message: str) -> None:
        if not self._quiet:
            self._emit(message, prefix="→ ", style="dim")

    def warning(self, message: str) -> None:
        self._emit(message, prefix="Warning: ", style="yellow")

    def error(self, message: str) -> None:
        self._emit(message, prefix="Error: ", style="bold red")

    def debug(self, message: str) -> None:
        if self._verbose:
            self._emit(message, prefix="[debug] ", style="dim")

    def _emit(self, message: str, prefix: str = "", style: str = "") -> None:
        # Text() keeps paths and provider strings from being read as markup.
        line = f"{prefix}{message}"
        if self._no_color:
            print(line, file=sys.stderr, flush=True)
        else:
            self._stderr.print(Text(line, style=style))


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set (to anything) or ``TERM=dumb``."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Global instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Drop the installed manager; used between tests."""
    global _output
    _output = None


def format_response(data: Any) -> None:
    get_output().format_response(data)


def print_data(text: str) -> None:
    get_output().print_data(text)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def error(message: str) -> None:
    get_output().error(message)
