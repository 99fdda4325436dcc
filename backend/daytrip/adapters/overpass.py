"""POI adapter using the Overpass API (OpenStreetMap)."""

import re

import httpx
from pydantic import BaseModel, TypeAdapter

from backend.daytrip.adapters.http import parse_payload, provider_client
from backend.daytrip.config import get_settings
from backend.daytrip.models.tool_results import PointOfInterest

PROVIDER = "overpass"

# Tourism categories searched for destinations
TOURISM_CATEGORIES = "attraction|museum"


class _OverpassElement(BaseModel):
    tags: dict[str, str] = {}


class _OverpassResponse(BaseModel):
    elements: list[_OverpassElement] = []


_RESPONSE = TypeAdapter(_OverpassResponse)

# POSIX extended regex metacharacters (Overpass "~" filters)
_ERE_SPECIAL = re.compile(r"([.^$*+?()\[\]{}|\\])")


def _ql_string(value: str) -> str:
    """Escape a value for use inside a double-quoted Overpass QL string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_poi_query(destination: str, city: str, radius_m: int) -> str:
    """Build the Overpass QL query for one destination.

    The city's place node (matched on its local or English name) anchors
    the radius; the destination name is matched case-insensitively as a
    literal substring of the POI name.
    """
    city_name = _ql_string(city)
    name_pattern = _ql_string(_ERE_SPECIAL.sub(r"\\\1", destination))
    return (
        "[out:json][timeout:25];"
        f'(node["place"~"city|town|village"]["name"="{city_name}"];'
        f'node["place"~"city|town|village"]["name:en"="{city_name}"];)->.c;'
        f'node["tourism"~"{TOURISM_CATEGORIES}"]["name"~"{name_pattern}",i]'
        f"(around.c:{radius_m});"
        "out 1;"
    )


def format_address(tags: dict[str, str]) -> str | None:
    """Compose a postal address from OSM addr:* tags."""
    if tags.get("addr:full"):
        return tags["addr:full"]

    street = " ".join(
        part for part in (tags.get("addr:street"), tags.get("addr:housenumber")) if part
    )
    locality = " ".join(
        part for part in (tags.get("addr:postcode"), tags.get("addr:city")) if part
    )
    address = ", ".join(part for part in (street, locality) if part)
    return address or None


async def fetch_poi(
    destination: str,
    city: str,
    base_url: str | None = None,
    radius_m: int | None = None,
    client: httpx.AsyncClient | None = None,
) -> PointOfInterest | None:
    """Find the first tourism POI named like `destination` near `city`.

    Args:
        destination: Destination name as extracted from the prompt
        city: City the search is scoped to
        base_url: Overpass interpreter URL (defaults to settings)
        radius_m: Search radius around the city in meters (defaults to settings)
        client: Optional httpx client (for testing with mocks)

    Returns:
        First matching POI, or None when nothing matches

    Raises:
        httpx.HTTPError: On network or HTTP errors
        ProviderResponseError: On an unexpected response body
    """
    settings = get_settings()
    base_url = base_url or settings.overpass_url
    radius_m = radius_m or settings.poi_radius_m

    query = build_poi_query(destination, city, radius_m)

    async with provider_client(client) as http:
        response = await http.get(base_url, params={"data": query})
        response.raise_for_status()
        payload = parse_payload(PROVIDER, _RESPONSE, response)

    if not payload.elements:
        return None

    tags = payload.elements[0].tags
    return PointOfInterest(
        name=tags.get("name") or destination,
        address=format_address(tags),
    )
