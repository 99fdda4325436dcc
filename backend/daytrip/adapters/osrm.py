"""Routing adapter using the OSRM route service."""

from collections.abc import Sequence

import httpx
from pydantic import BaseModel, TypeAdapter

from backend.daytrip.adapters.http import parse_payload, provider_client
from backend.daytrip.config import get_settings
from backend.daytrip.models.common import Geo
from backend.daytrip.models.tool_results import Route, RouteLeg

PROVIDER = "osrm"


class _OsrmLeg(BaseModel):
    duration: float
    distance: float = 0.0


class _OsrmRoute(BaseModel):
    distance: float
    legs: list[_OsrmLeg] = []


class _OsrmResponse(BaseModel):
    code: str
    routes: list[_OsrmRoute] = []


_RESPONSE = TypeAdapter(_OsrmResponse)


async def fetch_route(
    waypoints: Sequence[Geo],
    base_url: str | None = None,
    profile: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> Route | None:
    """Route through `waypoints` in order.

    Args:
        waypoints: Ordered coordinates (at least two)
        base_url: OSRM server root (defaults to settings)
        profile: Routing profile, e.g. "driving" (defaults to settings)
        client: Optional httpx client (for testing with mocks)

    Returns:
        First route alternative, or None when OSRM finds no route

    Raises:
        httpx.HTTPError: On network or HTTP errors
        ProviderResponseError: On an unexpected response body
    """
    settings = get_settings()
    base_url = (base_url or settings.osrm_url).rstrip("/")
    profile = profile or settings.osrm_profile

    coordinates = ";".join(geo.as_lonlat() for geo in waypoints)
    url = f"{base_url}/route/v1/{profile}/{coordinates}"

    async with provider_client(client) as http:
        response = await http.get(url, params={"overview": "full", "steps": "true"})
        response.raise_for_status()
        payload = parse_payload(PROVIDER, _RESPONSE, response)

    if payload.code != "Ok" or not payload.routes:
        return None

    best = payload.routes[0]
    return Route(
        legs=tuple(
            RouteLeg(duration_seconds=leg.duration, distance_meters=leg.distance)
            for leg in best.legs
        ),
        total_distance_meters=best.distance,
    )
