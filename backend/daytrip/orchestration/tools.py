"""Tool runner - wraps every outbound call with timing, logging and metrics."""

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import TypeVar

from backend.daytrip.models.records import JsonValue, ToolCallLog
from backend.daytrip.orchestration.state import CallRecorder

T = TypeVar("T")


async def run_tool(
    *,
    name: str,
    recorder: CallRecorder,
    call: Callable[[], Awaitable[T]],
    destination: str | None = None,
    input_summary: dict[str, JsonValue] | None = None,
    output_counter: Callable[[T], dict[str, JsonValue]] | None = None,
) -> T:
    """Execute an outbound call and record a ToolCallLog for it.

    Args:
        name: Call name (e.g. "provider.poi", "llm.intent")
        recorder: Recorder receiving the log entry
        call: Async callable that performs the call
        destination: Destination the call is made for, if any
        input_summary: Optional dict of key input parameters (non-PII scalars only)
        output_counter: Optional function to extract summary from result

    Returns:
        Result from the call (may be None for empty provider answers)

    Raises:
        Exception: Re-raises any exception from the call after recording it
    """
    started_at = datetime.now(UTC)
    success = False
    error: str | None = None
    error_reason: str | None = None
    result: T | None = None

    try:
        result = await call()
        success = True
        return result
    except Exception as e:
        error = str(e) or type(e).__name__
        error_reason = type(e).__name__
        raise
    finally:
        finished_at = datetime.now(UTC)
        duration_ms = int((finished_at - started_at).total_seconds() * 1000)

        output_summary: dict[str, JsonValue] = {}
        if success and output_counter is not None and result is not None:
            output_summary = output_counter(result)

        recorder.record_call(
            ToolCallLog(
                name=name,
                destination=destination,
                started_at=started_at,
                finished_at=finished_at,
                duration_ms=duration_ms,
                success=success,
                error=error,
                input_summary=input_summary if input_summary is not None else {},
                output_summary=output_summary,
            ),
            error_reason=error_reason,
        )
