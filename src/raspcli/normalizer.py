"""Turn a raw schedule-search payload into :class:`~raspcli.models.TripRecord` objects.

The provider document is read defensively: every scalar goes through
:mod:`raspcli.jsonaccess`, so a missing or mistyped field becomes a default
value instead of an error. Itineraries that are clearly multi-transfer are
filtered out; see :func:`should_keep`.

Provider order is preserved.
"""

from __future__ import annotations

from typing import Any

from raspcli.jsonaccess import get_bool, get_float, get_list, get_object, get_string
from raspcli.models import UNKNOWN, TripRecord


def transfer_count(segment: Any) -> int:
    """Number of entries in the segment's ``transfers`` array (0 if absent)."""
    transfers = get_list(segment, "transfers")
    return len(transfers) if transfers is not None else 0


def should_keep(segment: Any) -> bool:
    """Apply the transfer filter to one raw segment.

    A segment is dropped only when it is flagged ``has_transfers`` *and*
    lists more than one transfer. A segment flagged without transfers, or
    unflagged with any number of them, is kept.
    """
    has_transfers = get_bool(segment, "has_transfers", False)
    return not (has_transfers and transfer_count(segment) > 1)


def to_trip(segment: Any) -> TripRecord:
    """Build a :class:`TripRecord` from one raw segment."""
    thread = get_object(segment, "thread")
    origin = get_object(segment, "from")
    destination = get_object(segment, "to")

    return TripRecord(
        route_title=get_string(thread, "title", UNKNOWN),
        transport_type=get_string(thread, "transport_type", UNKNOWN),
        vehicle=get_string(thread, "vehicle", UNKNOWN),
        departure=get_string(segment, "departure", UNKNOWN),
        arrival=get_string(segment, "arrival", UNKNOWN),
        departure_station=get_string(origin, "title", UNKNOWN),
        arrival_station=get_string(destination, "title", UNKNOWN),
        departure_terminal=get_string(segment, "departure_terminal", UNKNOWN),
        arrival_terminal=get_string(segment, "arrival_terminal", UNKNOWN),
        duration=get_float(segment, "duration", 0.0),
        transfer_count=transfer_count(segment),
    )


def normalize(payload: Any) -> list[TripRecord]:
    """Return the trips in *payload* that pass the transfer filter.

    A payload without a ``segments`` array, or with an empty one, yields an
    empty list.
    """
    segments = get_list(payload, "segments")
    if not segments:
        return []
    return [to_trip(segment) for segment in segments if should_keep(segment)]


def segment_count(payload: Any) -> int:
    """Number of raw segments the provider listed, before filtering."""
    segments = get_list(payload, "segments")
    return len(segments) if segments is not None else 0
