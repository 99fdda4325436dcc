"""Itinerary pipeline: interpret -> enrich (fan-out) -> route -> assemble.

Only request-fatal errors (empty prompt, failed or unusable language
service reply) escape; every provider failure is absorbed into fallback
values and recorded on the PlanState.
"""

import logging
import uuid
from datetime import UTC, datetime

import httpx

from backend.daytrip.adapters.http import provider_client
from backend.daytrip.errors import FatalPlanningError
from backend.daytrip.llm.client import LLMClient, get_llm_client
from backend.daytrip.models.intent import TravelRequest
from backend.daytrip.models.itinerary import Itinerary
from backend.daytrip.orchestration.assembler import assemble_itinerary
from backend.daytrip.orchestration.enricher import enrich_destinations
from backend.daytrip.orchestration.interpreter import interpret_request
from backend.daytrip.orchestration.router import plan_route
from backend.daytrip.orchestration.state import PlanState

logger = logging.getLogger(__name__)


async def run_pipeline(
    raw_prompt: str,
    *,
    llm_client: LLMClient | None = None,
    http_client: httpx.AsyncClient | None = None,
    request_id: str | None = None,
) -> PlanState:
    """Run the full pipeline for one prompt and return the final state.

    Args:
        raw_prompt: Free-text travel request
        llm_client: Language service client (defaults to configured client)
        http_client: Client for provider calls; when omitted one is created
            for this request and closed afterwards
        request_id: Correlation id for logs (generated when omitted)

    Returns:
        PlanState with itinerary, call logs and degraded-lookup records

    Raises:
        FatalPlanningError: Request cannot be planned (no itinerary produced)
    """
    state = PlanState(
        request_id=request_id or uuid.uuid4().hex,
        request=TravelRequest(raw_text=raw_prompt),
    )
    state.status = "running"

    logger.info(f"[plan] request_id={state.request_id} started")

    try:
        llm = llm_client or await get_llm_client()
        intent = await interpret_request(state.request.raw_text, llm, state.recorder)
    except FatalPlanningError as e:
        state.status = "failed"
        state.finished_at = datetime.now(UTC)
        logger.warning(
            f"[plan] request_id={state.request_id} failed: {type(e).__name__}: {e.message}"
        )
        raise

    state.intent = intent

    async with provider_client(http_client) as http:
        state.destinations = await enrich_destinations(
            intent.destinations, intent.city, http=http, recorder=state.recorder
        )
        state.route = await plan_route(state.destinations, http=http, recorder=state.recorder)

    state.itinerary = assemble_itinerary(
        intent.city, state.destinations, state.route, intent.end_time
    )
    state.status = "succeeded"
    state.finished_at = datetime.now(UTC)

    logger.info(
        f"[plan] request_id={state.request_id} succeeded, "
        f"{len(state.itinerary.timeline)} timeline entries, "
        f"{len(state.failures)} degraded lookups"
    )
    return state


async def plan_itinerary(
    raw_prompt: str,
    *,
    llm_client: LLMClient | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> Itinerary:
    """Plan an itinerary for a free-text request.

    Raises:
        FatalPlanningError: Request cannot be planned
    """
    state = await run_pipeline(raw_prompt, llm_client=llm_client, http_client=http_client)
    assert state.itinerary is not None
    return state.itinerary
