"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~raspcli.exceptions.RaspError` subclass.
Shell wrappers can inspect the exit code to tell a bad date apart from an
unreachable API without parsing stderr.

Example::

    $ raspcli search --date 2024-13 --direction Уфа-Санкт-Петербург
    $ echo $?
    2   # EXIT_INVALID_USAGE -- the date did not match YYYY-MM-DD
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with a malformed date or an unknown direction."""

EXIT_TRANSPORT_ERROR = 5
"""The schedule API answered with a non-success HTTP status."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_PARSE_ERROR = 7
"""The schedule API answered with a body that is not well-formed JSON."""
