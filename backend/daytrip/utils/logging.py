"""Structured logging for outbound calls and degraded lookups."""

import logging
from typing import Any

from backend.daytrip.models.records import LookupFailure, ToolCallLog

logger = logging.getLogger(__name__)


class StructuredCallLogger:
    """Structured logger for pipeline calls."""

    def log_call(self, request_id: str, call: ToolCallLog) -> None:
        """Log one finished outbound call with structured data."""
        log_data: dict[str, Any] = {
            "request_id": request_id,
            "tool": call.name,
            "destination": call.destination,
            "outcome": "success" if call.success else "error",
            "latency_ms": call.duration_ms,
        }

        if call.error:
            log_data["error_reason"] = call.error

        log_msg = f"Tool call: {call.name} - {log_data['outcome']}"

        if call.success:
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})

    def log_failure(self, request_id: str, failure: LookupFailure) -> None:
        """Log a lookup that fell back to a default value."""
        log_data = {
            "request_id": request_id,
            "stage": failure.stage.value,
            "destination": failure.destination,
            "cause": failure.cause,
        }
        logger.warning(
            f"Degraded lookup: {failure.stage.value} for {failure.destination or 'route'}",
            extra={"structured": log_data},
        )
