"""Itinerary endpoint - POST /api/chat."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from backend.daytrip.errors import (
    FatalPlanningError,
    IncompleteIntent,
    InvalidInput,
)
from backend.daytrip.models.itinerary import Itinerary
from backend.daytrip.orchestration.pipeline import plan_itinerary

router = APIRouter(prefix="/api", tags=["itinerary"])
logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    """Request body for POST /api/chat."""

    prompt: str = ""


def status_for(error: FatalPlanningError) -> int:
    """HTTP status for a request-fatal planning error."""
    if isinstance(error, InvalidInput):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, IncompleteIntent):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    # Language service unreachable or replied with garbage
    return status.HTTP_502_BAD_GATEWAY


@router.post("/chat", response_model=Itinerary, status_code=status.HTTP_200_OK)
async def chat(body: ChatRequest) -> Itinerary:
    """Plan a day itinerary from a free-text prompt.

    Raises:
        HTTPException: 400 empty prompt, 422 incomplete intent,
            502 language service failure or unparseable reply
    """
    try:
        return await plan_itinerary(body.prompt)
    except FatalPlanningError as e:
        logger.info(f"[POST /api/chat] rejected: {type(e).__name__}")
        raise HTTPException(status_code=status_for(e), detail=e.message) from e
