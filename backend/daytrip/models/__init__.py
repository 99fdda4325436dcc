"""Models package - re-exports for convenience."""

from backend.daytrip.models.common import DEFAULT_DWELL_TIME, RETURN_LABEL, UNKNOWN, Geo
from backend.daytrip.models.intent import ParsedIntent, TravelRequest
from backend.daytrip.models.itinerary import EnrichedDestination, Itinerary, TimelineEntry
from backend.daytrip.models.records import LookupFailure, LookupStage, ToolCallLog
from backend.daytrip.models.tool_results import (
    PointOfInterest,
    Route,
    RouteLeg,
    WeatherObservation,
)

__all__ = [
    # Common
    "Geo",
    "UNKNOWN",
    "RETURN_LABEL",
    "DEFAULT_DWELL_TIME",
    # Intent
    "TravelRequest",
    "ParsedIntent",
    # Tool results
    "PointOfInterest",
    "WeatherObservation",
    "RouteLeg",
    "Route",
    # Itinerary
    "EnrichedDestination",
    "TimelineEntry",
    "Itinerary",
    # Records
    "LookupStage",
    "LookupFailure",
    "ToolCallLog",
]
