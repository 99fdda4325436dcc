"""Observability records - external calls and the failures absorbed from them."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# JSON-serializable value type for call summaries
JsonValue = str | int | float | bool | None | dict[str, Any] | list[Any]


class LookupStage(str, Enum):
    """External lookup that produced no usable data."""

    POI = "poi"
    GEOCODE = "geocode"
    WEATHER = "weather"
    ROUTING = "routing"
    # Unexpected error outside a single lookup; the whole destination fell back
    ENRICHMENT = "enrichment"


class LookupFailure(BaseModel):
    """A lookup failure absorbed into a fallback value.

    Recorded for observability only; it never changes control flow.
    Routing failures carry no destination.
    """

    stage: LookupStage
    destination: str | None = None
    cause: str = Field(..., description="Exception summary or 'no results'")


class ToolCallLog(BaseModel):
    """Log entry for a single outbound call.

    Captures timing and outcome plus small input/output summaries
    without storing full provider payloads.
    """

    name: str = Field(..., description="Call name (e.g. 'provider.poi', 'llm.intent')")
    destination: str | None = Field(None, description="Destination the call was made for")
    started_at: datetime = Field(..., description="UTC timestamp when call started")
    finished_at: datetime = Field(..., description="UTC timestamp when call finished")
    duration_ms: int = Field(..., description="Duration in milliseconds")
    success: bool
    error: str | None = None
    input_summary: dict[str, JsonValue] = Field(default_factory=dict)
    output_summary: dict[str, JsonValue] = Field(default_factory=dict)
