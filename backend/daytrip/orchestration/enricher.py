"""Destination enricher - concurrent, failure-isolated lookups per destination.

For each destination name three lookups run in sequence (POI, then
geocode on the POI name, then weather at the coordinate). Destinations
are processed concurrently and never affect each other: a failed lookup
falls back to its default value, and any unexpected error degrades only
that destination to EnrichedDestination.fallback().
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

import httpx

from backend.daytrip.adapters.nominatim import geocode
from backend.daytrip.adapters.overpass import fetch_poi
from backend.daytrip.adapters.weather import fetch_current_weather
from backend.daytrip.errors import ProviderError
from backend.daytrip.models.common import UNKNOWN
from backend.daytrip.models.itinerary import EnrichedDestination
from backend.daytrip.models.records import JsonValue, LookupStage
from backend.daytrip.models.tool_results import PointOfInterest
from backend.daytrip.orchestration.state import CallRecorder
from backend.daytrip.orchestration.tools import run_tool

logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_RESULTS = "no results"


def describe_error(exc: BaseException) -> str:
    """Short "Type: message" summary for failure records."""
    message = str(exc)
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__


async def _lookup(
    stage: LookupStage,
    destination: str,
    recorder: CallRecorder,
    call: Callable[[], Awaitable[T | None]],
    input_summary: dict[str, JsonValue],
) -> T | None:
    """Run one provider lookup; record and swallow provider failures."""
    try:
        result = await run_tool(
            name=f"provider.{stage.value}",
            recorder=recorder,
            destination=destination,
            call=call,
            input_summary=input_summary,
        )
    except (httpx.HTTPError, ProviderError) as e:
        recorder.record_failure(stage, destination, describe_error(e))
        return None

    if result is None:
        recorder.record_failure(stage, destination, NO_RESULTS)
    return result


async def _resolve_destination(
    name: str, city: str, http: httpx.AsyncClient, recorder: CallRecorder
) -> EnrichedDestination:
    poi = await _lookup(
        LookupStage.POI,
        name,
        recorder,
        lambda: fetch_poi(name, city, client=http),
        {"city": city},
    )
    poi = poi or PointOfInterest.placeholder(name)

    query = f"{poi.name}, {city}"
    coordinates = await _lookup(
        LookupStage.GEOCODE,
        name,
        recorder,
        lambda: geocode(query, client=http),
        {"query": query},
    )

    weather = None
    if coordinates is None:
        recorder.record_failure(LookupStage.WEATHER, name, "skipped: no coordinates")
    else:
        weather = await _lookup(
            LookupStage.WEATHER,
            name,
            recorder,
            lambda: fetch_current_weather(coordinates, client=http),
            {"lat": coordinates.lat, "lon": coordinates.lon},
        )

    return EnrichedDestination(
        name=poi.name,
        address=poi.address or UNKNOWN,
        coordinates=coordinates,
        weather=weather.code if weather is not None else UNKNOWN,
    )


async def enrich_destination(
    name: str, city: str, *, http: httpx.AsyncClient, recorder: CallRecorder
) -> EnrichedDestination:
    """Enrich a single destination. Never raises for ordinary errors."""
    try:
        return await _resolve_destination(name, city, http, recorder)
    except Exception as e:
        logger.exception(f"Enrichment of {name!r} failed, using fallback")
        recorder.record_failure(LookupStage.ENRICHMENT, name, describe_error(e))
        return EnrichedDestination.fallback(name)


async def enrich_destinations(
    names: Sequence[str],
    city: str,
    *,
    http: httpx.AsyncClient,
    recorder: CallRecorder,
) -> list[EnrichedDestination]:
    """Enrich all destinations concurrently.

    Returns exactly one EnrichedDestination per name, in input order,
    regardless of completion order or how many lookups failed.
    """
    results: list[EnrichedDestination | None] = [None] * len(names)
    units = [recorder.child() for _ in names]

    async def run_unit(index: int) -> None:
        results[index] = await enrich_destination(
            names[index], city, http=http, recorder=units[index]
        )

    async with asyncio.TaskGroup() as tg:
        for index in range(len(names)):
            tg.create_task(run_unit(index))

    # Fan-in in destination order so records are deterministic
    for unit in units:
        recorder.merge(unit)

    return [
        result if result is not None else EnrichedDestination.fallback(name)
        for result, name in zip(results, names, strict=True)
    ]
