"""Exception hierarchy for raspcli.

All exceptions inherit from :class:`RaspError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`raspcli.exit_codes`.
The top-level error handler in :func:`raspcli.app.main` catches
``RaspError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    RaspError (exit 1)
    +-- InvalidUsageError    (exit 2)
    +-- TransportError       (exit 5)
    +-- ConnectionError_     (exit 6)
    +-- ResponseParseError   (exit 7)
    +-- ConfigError          (exit 1)

Stale or unwritable cache files are deliberately absent from this list: the
cache layer reports them as diagnostics and carries on.
"""

from raspcli.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_PARSE_ERROR,
    EXIT_TRANSPORT_ERROR,
)


class RaspError(Exception):
    """Base exception for all raspcli errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`raspcli.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(RaspError):
    """Raised for a malformed date or a direction outside the two supported routes."""

    exit_code = EXIT_INVALID_USAGE


class TransportError(RaspError):
    """Raised when the schedule API returns a non-success HTTP status.

    Args:
        message: Human-readable error description.
        status_code: The HTTP status code that was returned.
    """

    exit_code = EXIT_TRANSPORT_ERROR

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class ConnectionError_(RaspError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class ResponseParseError(RaspError):
    """Raised when the schedule API body cannot be decoded as JSON."""

    exit_code = EXIT_PARSE_ERROR


class ConfigError(RaspError):
    """Raised for configuration problems (invalid JSON, bad credential sources)."""

    exit_code = EXIT_GENERIC_FAILURE
