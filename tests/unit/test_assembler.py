"""Tests for the itinerary assembler."""

import pytest
from pydantic import ValidationError

from backend.daytrip.models.common import Geo
from backend.daytrip.models.itinerary import EnrichedDestination
from backend.daytrip.models.tool_results import Route, RouteLeg
from backend.daytrip.orchestration.assembler import (
    assemble_itinerary,
    format_distance_km,
    format_transit_time,
)


@pytest.fixture
def castle() -> EnrichedDestination:
    return EnrichedDestination(
        name="Castle",
        address="Rua de Santa Cruz do Castelo",
        coordinates=Geo(lat=38.7139, lon=-9.1334),
        weather="1",
    )


@pytest.fixture
def aquarium() -> EnrichedDestination:
    return EnrichedDestination(
        name="Aquarium", coordinates=Geo(lat=38.7635, lon=-9.0937), weather="3"
    )


def test_two_leg_route_produces_return_entry(
    castle: EnrichedDestination, aquarium: EnrichedDestination
) -> None:
    """Leg 0 arrives at the second destination; leg 1 has no destination."""
    route = Route(
        legs=(RouteLeg(duration_seconds=600), RouteLeg(duration_seconds=900)),
        total_distance_meters=5000,
    )

    itinerary = assemble_itinerary("Lisbon", [castle, aquarium], route, "18:00")

    timeline = [entry.model_dump(by_alias=True) for entry in itinerary.timeline]
    assert timeline == [
        {
            "destination": "Aquarium",
            "transitTime": "10 minutes",
            "dwellTime": "1 hour",
            "weather": "3",
        },
        {
            "destination": "Return",
            "transitTime": "15 minutes",
            "dwellTime": "1 hour",
            "weather": "Unknown",
        },
    ]
    assert itinerary.total_distance_km == "5.00"
    assert itinerary.city == "Lisbon"
    assert itinerary.end_time == "18:00"
    assert itinerary.destinations == (castle, aquarium)


def test_degenerate_route_gives_empty_timeline_and_zero_distance(
    castle: EnrichedDestination,
) -> None:
    itinerary = assemble_itinerary("Lisbon", [castle], Route.degenerate(), "18:00")

    assert itinerary.timeline == ()
    assert itinerary.total_distance_km == "0"
    assert len(itinerary.destinations) == 1


def test_more_legs_than_destinations_never_index_out_of_range(
    castle: EnrichedDestination,
) -> None:
    route = Route(
        legs=tuple(RouteLeg(duration_seconds=60) for _ in range(3)),
        total_distance_meters=1234,
    )

    itinerary = assemble_itinerary("Lisbon", [castle], route, "18:00")

    assert [e.destination for e in itinerary.timeline] == ["Return", "Return", "Return"]
    assert itinerary.total_distance_km == "1.23"


def test_fewer_legs_than_destinations_excludes_trailing_destinations(
    castle: EnrichedDestination, aquarium: EnrichedDestination
) -> None:
    third = EnrichedDestination.fallback("Tram 28")
    route = Route(legs=(RouteLeg(duration_seconds=300),), total_distance_meters=800)

    itinerary = assemble_itinerary("Lisbon", [castle, aquarium, third], route, "18:00")

    assert [e.destination for e in itinerary.timeline] == ["Aquarium"]
    assert len(itinerary.destinations) == 3


def test_timeline_uses_degraded_destination_fields(castle: EnrichedDestination) -> None:
    route = Route(legs=(RouteLeg(duration_seconds=120),), total_distance_meters=900)

    itinerary = assemble_itinerary(
        "Lisbon", [castle, EnrichedDestination.fallback("Aquarium")], route, "18:00"
    )

    entry = itinerary.timeline[0]
    assert entry.destination == "Aquarium"
    assert entry.weather == "Unknown"
    assert entry.transit_time == "2 minutes"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0 minutes"), (29, "0 minutes"), (30, "1 minutes"), (150, "3 minutes"), (600, "10 minutes")],
)
def test_transit_time_rounds_half_up(seconds: float, expected: str) -> None:
    assert format_transit_time(RouteLeg(duration_seconds=seconds)) == expected


def test_transit_time_without_leg_is_unknown() -> None:
    assert format_transit_time(None) == "Unknown"


def test_distance_formats_two_decimals() -> None:
    route = Route(legs=(RouteLeg(duration_seconds=1),), total_distance_meters=12345.6)
    assert format_distance_km(route) == "12.35"


def test_itinerary_is_immutable(castle: EnrichedDestination) -> None:
    itinerary = assemble_itinerary("Lisbon", [castle], Route.degenerate(), "18:00")

    with pytest.raises(ValidationError):
        itinerary.city = "Porto"  # type: ignore[misc]
