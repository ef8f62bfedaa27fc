"""Render trip summaries in the active output format.

* **JSON** -- an array of trip objects (``duration_minutes`` included).
* **Plain** -- one ``Label: value`` block per trip, separated by a rule.
* **Rich** -- one panel per trip.

A count (shown and, when the transfer filter dropped any, listed) or
"No routes found." goes to stderr in every mode.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from raspcli.models import TripRecord
from raspcli.output import OutputFormat, OutputManager, get_output

SEPARATOR = "-" * 32


def _number(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.1f}"


def trip_fields(trip: TripRecord) -> list[tuple[str, str]]:
    """Return the labelled lines shown for *trip*, in display order."""
    return [
        ("Route", trip.route_title),
        ("Transport type", trip.transport_type),
        ("Vehicle", trip.vehicle),
        ("Departure", f"{trip.departure_station} at {trip.departure}"),
        ("Departure terminal", trip.departure_terminal),
        ("Arrival", f"{trip.arrival_station} at {trip.arrival}"),
        ("Arrival terminal", trip.arrival_terminal),
        (
            "Duration",
            f"{_number(trip.duration)} s ({_number(trip.duration_minutes)} min)",
        ),
        ("Transfers", str(trip.transfer_count)),
    ]


def _summary(shown: int, listed: Optional[int]) -> str:
    skipped = (listed or 0) - shown
    if not shown:
        if skipped > 0:
            return f"No routes found ({skipped} listed with more than one transfer)."
        return "No routes found."
    if skipped > 0:
        return f"Routes found: {shown} of {listed} listed ({skipped} with more than one transfer skipped)"
    return f"Routes found: {shown}"


def render_trips(
    trips: Sequence[TripRecord],
    output: Optional[OutputManager] = None,
    listed: Optional[int] = None,
) -> None:
    """Print *trips* to stdout using *output* (the global manager by default).

    *listed* is the number of segments the provider returned before
    filtering; the stderr summary reports both counts when they differ.
    """
    output = output or get_output()

    if output.format == OutputFormat.JSON:
        output.format_response(
            [dict(trip.model_dump(), duration_minutes=trip.duration_minutes) for trip in trips]
        )

    output.info(_summary(len(trips), listed))
    if not trips or output.format == OutputFormat.JSON:
        return

    for trip in trips:
        fields = trip_fields(trip)
        if output.format == OutputFormat.RICH:
            grid = Table.grid(padding=(0, 2))
            grid.add_column(style="bold cyan")
            grid.add_column()
            for label, value in fields[1:]:
                grid.add_row(label, Text(value))
            output.print_renderable(Panel(grid, title=Text(fields[0][1]), title_align="left"))
        else:
            for label, value in fields:
                output.print_data(f"{label}: {value}")
            output.print_data(SEPARATOR)
