"""Request interpreter - turns a free-text prompt into a ParsedIntent."""

import json
import logging
from typing import Any

from pydantic import ValidationError

from backend.daytrip.errors import IncompleteIntent, InvalidInput, UpstreamParseError
from backend.daytrip.llm.client import LLMClient
from backend.daytrip.models.intent import REQUIRED_INTENT_FIELDS, ParsedIntent
from backend.daytrip.orchestration.state import CallRecorder
from backend.daytrip.orchestration.tools import run_tool

logger = logging.getLogger(__name__)

INTENT_SYSTEM_PROMPT = (
    "You are a travel planner. Parse the user input to extract: city, "
    "destinations/activities, and time constraints. Return a JSON object with "
    "city, destinations (array), and endTime."
)

# Validation error types that mean "present but empty"
_EMPTY_ERROR_TYPES = {"string_too_short", "too_short"}


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence, if any."""
    if not text.startswith("```"):
        return text
    body = text.lstrip("`")
    if body.lower().startswith("json"):
        body = body[4:]
    body = body.strip()
    if body.endswith("```"):
        body = body[:-3]
    return body.strip()


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list):
        return not value
    return False


def decode_intent_reply(reply: str) -> ParsedIntent:
    """Decode the language service reply into a ParsedIntent.

    Raises:
        UpstreamParseError: Reply is not a JSON object of the expected shape
        IncompleteIntent: city, destinations or endTime missing or empty
    """
    body = _strip_code_fence(reply.strip())

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise UpstreamParseError(f"Intent reply is not valid JSON: {e.msg}") from e

    if not isinstance(data, dict):
        raise UpstreamParseError(f"Intent reply is a JSON {type(data).__name__}, not an object")

    missing = [key for key in REQUIRED_INTENT_FIELDS if _is_blank(data.get(key))]
    if missing:
        raise IncompleteIntent(missing)

    try:
        return ParsedIntent.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        if all(err["type"] in _EMPTY_ERROR_TYPES for err in errors):
            raise IncompleteIntent(sorted({str(err["loc"][0]) for err in errors})) from e
        raise UpstreamParseError(
            f"Intent reply has unexpected field types: "
            f"{', '.join(sorted({str(err['loc'][0]) for err in errors}))}"
        ) from e


async def interpret_request(
    prompt: str, llm: LLMClient, recorder: CallRecorder
) -> ParsedIntent:
    """Extract the travel intent from a raw prompt (single attempt, no retry).

    Raises:
        InvalidInput: Prompt is empty
        LanguageServiceError: Language service call failed
        UpstreamParseError: Reply could not be decoded
        IncompleteIntent: Reply lacks a required field
    """
    if not prompt or not prompt.strip():
        raise InvalidInput("Prompt must not be empty")

    reply = await run_tool(
        name="llm.intent",
        recorder=recorder,
        call=lambda: llm.complete(system=INTENT_SYSTEM_PROMPT, prompt=prompt),
        input_summary={"prompt_chars": len(prompt)},
        output_counter=lambda text: {"reply_chars": len(text)},
    )

    intent = decode_intent_reply(reply)
    logger.info(
        f"Parsed intent: city={intent.city}, {len(intent.destinations)} destination(s)",
    )
    return intent
