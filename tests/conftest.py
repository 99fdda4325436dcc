"""Shared pytest fixtures for all test suites."""

from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from backend.daytrip.orchestration.state import CallRecorder
from tests.fakes import FakeProviders


@pytest.fixture
def providers() -> FakeProviders:
    """Fresh fake provider world per test."""
    return FakeProviders()


@pytest_asyncio.fixture
async def http_client(providers: FakeProviders) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async client wired to the fake providers."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(providers.handler))
    yield client
    await client.aclose()


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder(request_id="test-request")


@pytest.fixture
def lisbon_providers(providers: FakeProviders) -> FakeProviders:
    """Castle and Aquarium in Lisbon, both resolvable, with a 2-leg route."""
    providers.pois["Castle"] = {
        "name": "Castelo de S. Jorge",
        "addr:street": "Rua de Santa Cruz do Castelo",
        "addr:city": "Lisboa",
    }
    providers.pois["Aquarium"] = {"name": "Oceanário de Lisboa"}
    providers.places["Castelo de S. Jorge, Lisbon"] = (38.7139, -9.1334)
    providers.places["Oceanário de Lisboa, Lisbon"] = (38.7635, -9.0937)
    providers.weather[38.7139] = 1
    providers.weather[38.7635] = 3
    providers.route = {
        "code": "Ok",
        "routes": [
            {
                "distance": 5000.0,
                "duration": 1500.0,
                "legs": [
                    {"duration": 600.0, "distance": 2000.0},
                    {"duration": 900.0, "distance": 3000.0},
                ],
            }
        ],
    }
    return providers
