"""Health check endpoint."""

from fastapi import APIRouter

from backend.daytrip.config import get_settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running), plus whether the
        language service is configured
    """
    api_key = get_settings().xai_api_key
    configured = bool(api_key and api_key.get_secret_value())
    return {"status": "ok", "llm": "configured" if configured else "not_configured"}
