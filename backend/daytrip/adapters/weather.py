"""Weather adapter using Open-Meteo API (keyless, free tier)."""

import httpx
from pydantic import BaseModel, TypeAdapter

from backend.daytrip.adapters.http import parse_payload, provider_client
from backend.daytrip.config import get_settings
from backend.daytrip.models.common import Geo
from backend.daytrip.models.tool_results import WeatherObservation

PROVIDER = "open_meteo"


class _CurrentWeather(BaseModel):
    weathercode: int | None = None


class _ForecastResponse(BaseModel):
    current_weather: _CurrentWeather | None = None


_RESPONSE = TypeAdapter(_ForecastResponse)


async def fetch_current_weather(
    location: Geo,
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> WeatherObservation | None:
    """Fetch current conditions from Open-Meteo.

    Args:
        location: Geographic coordinates
        base_url: Open-Meteo forecast URL (defaults to settings)
        client: Optional httpx client (for testing with mocks)

    Returns:
        Observation carrying the WMO weather code, or None when the
        response has no current weather

    Raises:
        httpx.HTTPError: On network or HTTP errors
        ProviderResponseError: On an unexpected response body
    """
    base_url = base_url or get_settings().open_meteo_url

    # Docs: https://open-meteo.com/en/docs
    params: dict[str, str | float] = {
        "latitude": location.lat,
        "longitude": location.lon,
        "current_weather": "true",
    }

    async with provider_client(client) as http:
        response = await http.get(base_url, params=params)
        response.raise_for_status()
        payload = parse_payload(PROVIDER, _RESPONSE, response)

    current = payload.current_weather
    # Code 0 is "clear sky", so test for None rather than falsiness
    if current is None or current.weathercode is None:
        return None

    return WeatherObservation(code=str(current.weathercode))
