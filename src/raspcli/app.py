"""Typer application and CLI entry point for raspcli.

This module wires together the top-level Typer application and registers
the built-in sub-commands (``search``, ``cache``, ``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app.
Unhandled exceptions are written to a crash log under the data directory.

See Also:
    :mod:`raspcli.config`: Configuration resolution.
    :mod:`raspcli.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from raspcli import __version__
from raspcli.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="raspcli",
    help="Look up transport options between Ufa and Saint Petersburg.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# ------------------------------------------------------------------ #
# Commands
# ------------------------------------------------------------------ #

from raspcli.commands.cache import cache_app  # noqa: E402
from raspcli.commands.config import config_app  # noqa: E402
from raspcli.commands.search import search_command  # noqa: E402

app.command("search")(search_command)
app.add_typer(cache_app, name="cache", help="Disk cache management.")
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"raspcli {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route ``raspcli`` log records to stderr through Rich when verbose."""
    logger = logging.getLogger("raspcli")
    logger.handlers.clear()
    if verbose:
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
        logger.setLevel(logging.DEBUG)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)


def _configured_format() -> str:
    """Output format from the resolved config, ``auto`` if it cannot be read.

    A broken config file is reported by the sub-command that loads it.
    """
    from raspcli.config import resolve_config
    from raspcli.exceptions import ConfigError

    try:
        return resolve_config().output.format
    except ConfigError:
        return "auto"


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Skip confirmations."
    ),
    no_input: bool = typer.Option(
        False, "--no-input", help="Disable interactive prompts."
    ),
    cache_dir: Optional[str] = typer.Option(
        None, "--cache-dir", help="Directory for cached schedule data."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Override the schedule API root URL."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~raspcli.output.OutputManager` from
    CLI flags, configures logging, and stores shared options in the Typer
    context so that sub-commands can read them via ``ctx.obj``.
    """
    from raspcli.output import OutputFormat, OutputManager, set_output

    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        fmt = OutputFormat(_configured_format())

    set_output(
        OutputManager(
            format=fmt,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
        )
    )
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["force"] = force
    ctx.obj["no_input"] = no_input
    ctx.obj["verbose"] = verbose
    ctx.obj["cache_dir"] = cache_dir
    ctx.obj["base_url"] = base_url


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from raspcli.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``raspcli`` console script.

    Unhandled :class:`~raspcli.exceptions.RaspError` instances cause a
    clean exit with the error's ``exit_code``. All other exceptions produce
    a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from raspcli.exceptions import RaspError
        from raspcli.output import error

        if isinstance(exc, RaspError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
