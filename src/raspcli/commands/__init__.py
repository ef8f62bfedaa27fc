"""Built-in CLI commands for raspcli.

Each module defines one command or Typer sub-application that is
registered on the root app by :mod:`raspcli.app`:

* :mod:`~raspcli.commands.search` -- ``raspcli search`` (look up trips).
* :mod:`~raspcli.commands.cache` -- ``raspcli cache`` (inspect / clear the disk tier).
* :mod:`~raspcli.commands.config` -- ``raspcli config`` (view / edit settings).
"""
