"""Itinerary models - final output handed to the transport layer."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from backend.daytrip.models.common import UNKNOWN, Geo

_OUTPUT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class EnrichedDestination(BaseModel):
    """Destination resolved to a POI, a coordinate and current weather."""

    model_config = _OUTPUT_CONFIG

    name: str
    address: str = UNKNOWN
    coordinates: Geo | None = None
    weather: str = UNKNOWN

    @classmethod
    def fallback(cls, name: str) -> "EnrichedDestination":
        """Most degraded valid destination: raw name, nothing resolved."""
        return cls(name=name)


class TimelineEntry(BaseModel):
    """Single stop on the timeline, reached by one route leg."""

    model_config = _OUTPUT_CONFIG

    destination: str
    transit_time: str
    dwell_time: str
    weather: str


class Itinerary(BaseModel):
    """Complete itinerary output."""

    model_config = _OUTPUT_CONFIG

    city: str
    destinations: tuple[EnrichedDestination, ...]
    timeline: tuple[TimelineEntry, ...]
    total_distance_km: str
    end_time: str
