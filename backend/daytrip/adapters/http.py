"""Shared HTTP plumbing for provider adapters."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from backend.daytrip.config import Settings, get_settings
from backend.daytrip.errors import ProviderResponseError

T = TypeVar("T")


def build_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Create the client used for all provider calls of one request.

    The timeout bounds every outbound call; expiry surfaces as
    httpx.TimeoutException and is handled like any other call failure.
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=settings.tool_hard_timeout_ms / 1000,
        headers={"User-Agent": settings.http_user_agent},
    )


@asynccontextmanager
async def provider_client(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield `client` as is, or a fresh one that is closed on exit."""
    if client is not None:
        yield client
        return

    async with build_http_client() as owned:
        yield owned


def parse_payload(provider: str, adapter: TypeAdapter[T], response: httpx.Response) -> T:
    """Decode and validate a provider response body.

    Raises:
        ProviderResponseError: Body is not JSON or does not match the schema
    """
    try:
        return adapter.validate_json(response.content)
    except ValidationError as e:
        raise ProviderResponseError(
            provider, f"unexpected response shape ({e.error_count()} errors)"
        ) from e
