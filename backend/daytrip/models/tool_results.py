"""Tool result models - data resolved from external providers."""

from pydantic import BaseModel, ConfigDict, Field

from backend.daytrip.models.common import UNKNOWN


class PointOfInterest(BaseModel):
    """Point of interest matched for a destination name."""

    model_config = ConfigDict(frozen=True)

    name: str
    address: str | None = None

    @classmethod
    def placeholder(cls, name: str) -> "PointOfInterest":
        """Stand-in POI when the provider has nothing for `name`."""
        return cls(name=name)


class WeatherObservation(BaseModel):
    """Current weather at a coordinate, as a WMO weather code."""

    model_config = ConfigDict(frozen=True)

    code: str = UNKNOWN

    @property
    def is_known(self) -> bool:
        return self.code != UNKNOWN


class RouteLeg(BaseModel):
    """One routing segment between two consecutive coordinates."""

    model_config = ConfigDict(frozen=True)

    duration_seconds: float = Field(..., ge=0)
    distance_meters: float = Field(0.0, ge=0)


class Route(BaseModel):
    """Route through the ordered coordinates.

    A degenerate route (no legs, zero distance) stands in when routing
    fails or fewer than two coordinates are available.
    """

    model_config = ConfigDict(frozen=True)

    legs: tuple[RouteLeg, ...] = ()
    total_distance_meters: float = Field(0.0, ge=0)

    @classmethod
    def degenerate(cls) -> "Route":
        return cls()

    @property
    def is_degenerate(self) -> bool:
        return not self.legs and self.total_distance_meters == 0
