"""Supported routes and validation of interactive input.

Only two directions exist, each bound to a fixed pair of Yandex Rasp
settlement codes (``c172`` is Ufa, ``c2`` is Saint Petersburg).
"""

from __future__ import annotations

import re

from raspcli.exceptions import InvalidUsageError

UFA = "c172"
SAINT_PETERSBURG = "c2"

DIRECTIONS: dict[str, tuple[str, str]] = {
    "Уфа-Санкт-Петербург": (UFA, SAINT_PETERSBURG),
    "Санкт-Петербург-Уфа": (SAINT_PETERSBURG, UFA),
}
"""Direction literal to ``(origin, destination)`` station codes."""

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def validate_date(text: str) -> str:
    """Return *text* unchanged if it has the ``YYYY-MM-DD`` shape.

    Only the shape is checked; the API itself rejects impossible dates.

    Raises:
        InvalidUsageError: If *text* does not match the pattern.
    """
    if not _DATE_PATTERN.fullmatch(text):
        raise InvalidUsageError(f"Invalid date '{text}': expected YYYY-MM-DD")
    return text


def resolve_direction(text: str) -> tuple[str, str]:
    """Map a direction literal to its ``(origin, destination)`` codes.

    Raises:
        InvalidUsageError: If *text* is not one of :data:`DIRECTIONS`.
    """
    try:
        return DIRECTIONS[text]
    except KeyError:
        choices = "' or '".join(DIRECTIONS)
        raise InvalidUsageError(
            f"Invalid direction '{text}': expected '{choices}'"
        ) from None
