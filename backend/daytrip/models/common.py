"""Common types and fallback values shared across all models."""

from pydantic import BaseModel, ConfigDict, Field

# Fallback literals used wherever a lookup yields no usable data
UNKNOWN = "Unknown"
RETURN_LABEL = "Return"
DEFAULT_DWELL_TIME = "1 hour"


class Geo(BaseModel):
    """Geographic coordinates (WGS84)."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    def as_lonlat(self) -> str:
        """Format as "lon,lat", the coordinate order routing services expect."""
        return f"{self.lon},{self.lat}"
