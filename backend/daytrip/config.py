"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Language-understanding service (xAI exposes an OpenAI-compatible API)
    xai_api_key: SecretStr | None = None
    llm_base_url: str = "https://api.x.ai/v1"
    llm_model: str = "grok-3"
    llm_temperature: float = 0.0

    # External data providers
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    open_meteo_url: str = "https://api.open-meteo.com/v1/forecast"
    osrm_url: str = "https://router.project-osrm.org"
    osrm_profile: str = "driving"

    # Nominatim's usage policy requires an identifying User-Agent
    http_user_agent: str = "DayTripApp/1.0"

    # POI search radius around the city (meters)
    poi_radius_m: int = 10000

    # Per-call timeout (milliseconds), applied by the HTTP client
    tool_hard_timeout_ms: int = 4000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
