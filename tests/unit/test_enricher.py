"""Tests for the destination enricher."""

import httpx
import pytest

from backend.daytrip.models.common import Geo
from backend.daytrip.models.itinerary import EnrichedDestination
from backend.daytrip.models.records import LookupStage
from backend.daytrip.orchestration import enricher
from backend.daytrip.orchestration.enricher import enrich_destination, enrich_destinations
from backend.daytrip.orchestration.state import CallRecorder
from tests.fakes import FAIL, FakeProviders


@pytest.mark.asyncio
async def test_fully_resolved_destinations(
    lisbon_providers: FakeProviders, http_client: httpx.AsyncClient, recorder: CallRecorder
) -> None:
    results = await enrich_destinations(
        ["Castle", "Aquarium"], "Lisbon", http=http_client, recorder=recorder
    )

    assert results == [
        EnrichedDestination(
            name="Castelo de S. Jorge",
            address="Rua de Santa Cruz do Castelo, Lisboa",
            coordinates=Geo(lat=38.7139, lon=-9.1334),
            weather="1",
        ),
        EnrichedDestination(
            name="Oceanário de Lisboa",
            address="Unknown",
            coordinates=Geo(lat=38.7635, lon=-9.0937),
            weather="3",
        ),
    ]
    assert recorder.failures == []
    assert len(recorder.tool_calls) == 6


@pytest.mark.asyncio
async def test_geocode_uses_poi_name_and_city(
    lisbon_providers: FakeProviders, http_client: httpx.AsyncClient, recorder: CallRecorder
) -> None:
    await enrich_destination("Castle", "Lisbon", http=http_client, recorder=recorder)

    geocode_requests = lisbon_providers.requests_to("nominatim")
    assert [r.url.params["q"] for r in geocode_requests] == ["Castelo de S. Jorge, Lisbon"]


@pytest.mark.asyncio
async def test_every_lookup_failing_yields_documented_fallback(
    providers: FakeProviders, http_client: httpx.AsyncClient, recorder: CallRecorder
) -> None:
    providers.pois["Castle"] = FAIL
    providers.places["Castle, Lisbon"] = FAIL

    result = await enrich_destination("Castle", "Lisbon", http=http_client, recorder=recorder)

    assert result == EnrichedDestination.fallback("Castle")
    assert result.address == "Unknown"
    assert result.coordinates is None
    assert result.weather == "Unknown"
    assert [f.stage for f in recorder.failures] == [
        LookupStage.POI,
        LookupStage.GEOCODE,
        LookupStage.WEATHER,
    ]
    assert "HTTPStatusError" in recorder.failures[0].cause
    # Weather is never requested without a coordinate
    assert providers.requests_to("open-meteo") == []


@pytest.mark.asyncio
async def test_empty_results_yield_fallback(
    providers: FakeProviders, http_client: httpx.AsyncClient, recorder: CallRecorder
) -> None:
    result = await enrich_destination("Castle", "Lisbon", http=http_client, recorder=recorder)

    assert result == EnrichedDestination.fallback("Castle")
    assert recorder.failures[0].cause == "no results"
    assert recorder.failures[1].cause == "no results"


@pytest.mark.asyncio
async def test_missing_poi_still_geocodes_raw_name(
    providers: FakeProviders, http_client: httpx.AsyncClient, recorder: CallRecorder
) -> None:
    providers.places["Castle, Lisbon"] = (38.7, -9.1)
    providers.weather[38.7] = 45

    result = await enrich_destination("Castle", "Lisbon", http=http_client, recorder=recorder)

    assert result.name == "Castle"
    assert result.address == "Unknown"
    assert result.coordinates == Geo(lat=38.7, lon=-9.1)
    assert result.weather == "45"
    assert [f.stage for f in recorder.failures] == [LookupStage.POI]


@pytest.mark.asyncio
async def test_weather_failure_keeps_coordinates(
    lisbon_providers: FakeProviders, http_client: httpx.AsyncClient, recorder: CallRecorder
) -> None:
    lisbon_providers.weather[38.7139] = FAIL

    result = await enrich_destination("Castle", "Lisbon", http=http_client, recorder=recorder)

    assert result.coordinates == Geo(lat=38.7139, lon=-9.1334)
    assert result.weather == "Unknown"
    assert [f.stage for f in recorder.failures] == [LookupStage.WEATHER]


@pytest.mark.asyncio
async def test_transport_error_is_absorbed(recorder: CallRecorder) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    result = await enrich_destination("Castle", "Lisbon", http=client, recorder=recorder)

    assert result == EnrichedDestination.fallback("Castle")
    assert recorder.failures[0].cause.startswith("ConnectTimeout")

    await client.aclose()


@pytest.mark.asyncio
async def test_unexpected_error_degrades_only_that_destination(
    lisbon_providers: FakeProviders,
    http_client: httpx.AsyncClient,
    recorder: CallRecorder,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    real_fetch_poi = enricher.fetch_poi

    async def flaky_fetch_poi(name: str, city: str, **kwargs: object) -> object:
        if name == "Castle":
            raise RuntimeError("bug in POI handling")
        return await real_fetch_poi(name, city, **kwargs)

    monkeypatch.setattr(enricher, "fetch_poi", flaky_fetch_poi)

    results = await enrich_destinations(
        ["Castle", "Aquarium"], "Lisbon", http=http_client, recorder=recorder
    )

    assert results[0] == EnrichedDestination.fallback("Castle")
    assert results[1].name == "Oceanário de Lisboa"
    assert results[1].weather == "3"
    assert [(f.stage, f.destination) for f in recorder.failures] == [
        (LookupStage.ENRICHMENT, "Castle")
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("failing", [set(), {"A"}, {"A", "C"}, {"A", "B", "C", "D"}])
async def test_output_length_and_order_match_input(
    providers: FakeProviders,
    http_client: httpx.AsyncClient,
    recorder: CallRecorder,
    failing: set[str],
) -> None:
    names = ["A", "B", "C", "D"]
    for i, name in enumerate(names):
        providers.pois[name] = FAIL if name in failing else {"name": f"POI {name}"}
        providers.places[f"POI {name}, Rome"] = (41.0 + i, 12.0)
        providers.places[f"{name}, Rome"] = FAIL

    results = await enrich_destinations(names, "Rome", http=http_client, recorder=recorder)

    assert len(results) == len(names)
    for name, result in zip(names, results):
        assert result.name == (name if name in failing else f"POI {name}")


@pytest.mark.asyncio
async def test_results_keep_input_order_when_completion_order_differs(
    providers: FakeProviders, http_client: httpx.AsyncClient, recorder: CallRecorder
) -> None:
    # First destination answers last
    providers.pois["Slow"] = {"name": "Slow Museum"}
    providers.pois["Fast"] = {"name": "Fast Museum"}
    providers.delays["Slow"] = 0.05

    results = await enrich_destinations(
        ["Slow", "Fast"], "Lisbon", http=http_client, recorder=recorder
    )

    assert [r.name for r in results] == ["Slow Museum", "Fast Museum"]
    # Records are merged in destination order, not completion order
    destinations = [c.destination for c in recorder.tool_calls]
    assert destinations == ["Slow", "Slow", "Fast", "Fast"]
