"""Intent models - raw user input and the structured intent extracted from it."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Keys the language service must return, in wire (camelCase) form
REQUIRED_INTENT_FIELDS = ("city", "destinations", "endTime")


class TravelRequest(BaseModel):
    """Free-text travel request as typed by the user."""

    model_config = ConfigDict(frozen=True)

    raw_text: str


class ParsedIntent(BaseModel):
    """Structured intent: city, ordered destination names and end time."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    city: Annotated[str, Field(min_length=1)]
    destinations: Annotated[tuple[str, ...], Field(min_length=1)]
    end_time: Annotated[str, Field(min_length=1)]

    @field_validator("destinations", mode="before")
    @classmethod
    def drop_blank_destinations(cls, v: object) -> object:
        """Discard empty destination names before the length check."""
        if isinstance(v, list | tuple):
            return [d for d in v if not (isinstance(d, str) and not d.strip())]
        return v
