"""Geocoding adapter using Nominatim (OpenStreetMap)."""

import httpx
from pydantic import BaseModel, Field, TypeAdapter

from backend.daytrip.adapters.http import parse_payload, provider_client
from backend.daytrip.config import get_settings
from backend.daytrip.models.common import Geo

PROVIDER = "nominatim"


class _NominatimPlace(BaseModel):
    # Nominatim returns coordinates as decimal strings
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


_RESPONSE = TypeAdapter(list[_NominatimPlace])


async def geocode(
    query: str,
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> Geo | None:
    """Resolve a free-text query such as "Castelo de S. Jorge, Lisbon".

    Args:
        query: Free-text place query
        base_url: Nominatim search URL (defaults to settings)
        client: Optional httpx client (for testing with mocks)

    Returns:
        Coordinate of the best match, or None when nothing matches

    Raises:
        httpx.HTTPError: On network or HTTP errors
        ProviderResponseError: On an unexpected response body
    """
    settings = get_settings()
    base_url = base_url or settings.nominatim_url

    params = {"q": query, "format": "json", "limit": 1}

    async with provider_client(client) as http:
        response = await http.get(
            base_url, params=params, headers={"User-Agent": settings.http_user_agent}
        )
        response.raise_for_status()
        places = parse_payload(PROVIDER, _RESPONSE, response)

    if not places:
        return None

    return Geo(lat=places[0].lat, lon=places[0].lon)
