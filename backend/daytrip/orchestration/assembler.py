"""Itinerary assembler - merges destinations and route legs into a timeline.

Pure function of its inputs: no I/O, no failure modes. Leg i is paired
with destinations[i + 1]; a leg with no such destination leads back
("Return").
"""

import math
from collections.abc import Sequence

from backend.daytrip.models.common import DEFAULT_DWELL_TIME, RETURN_LABEL, UNKNOWN
from backend.daytrip.models.itinerary import EnrichedDestination, Itinerary, TimelineEntry
from backend.daytrip.models.tool_results import Route, RouteLeg


def format_transit_time(leg: RouteLeg | None) -> str:
    """Leg duration as whole minutes, halves rounded up ("10 minutes")."""
    if leg is None:
        return UNKNOWN
    minutes = math.floor(leg.duration_seconds / 60 + 0.5)
    return f"{minutes} minutes"


def format_distance_km(route: Route) -> str:
    """Total distance in km with two decimals, or "0" without a route."""
    if route.is_degenerate:
        return "0"
    return f"{route.total_distance_meters / 1000:.2f}"


def build_timeline(
    destinations: Sequence[EnrichedDestination], route: Route
) -> list[TimelineEntry]:
    timeline: list[TimelineEntry] = []
    for i, leg in enumerate(route.legs):
        arrival = destinations[i + 1] if i + 1 < len(destinations) else None
        timeline.append(
            TimelineEntry(
                destination=arrival.name if arrival is not None else RETURN_LABEL,
                transit_time=format_transit_time(leg),
                dwell_time=DEFAULT_DWELL_TIME,
                weather=arrival.weather if arrival is not None else UNKNOWN,
            )
        )
    return timeline


def assemble_itinerary(
    city: str,
    destinations: Sequence[EnrichedDestination],
    route: Route,
    end_time: str,
) -> Itinerary:
    """Build the final, immutable itinerary."""
    return Itinerary(
        city=city,
        destinations=tuple(destinations),
        timeline=tuple(build_timeline(destinations, route)),
        total_distance_km=format_distance_km(route),
        end_time=end_time,
    )
