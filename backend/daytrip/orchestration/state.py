"""Per-request pipeline state and the failure/call recorder."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

from backend.daytrip.models.intent import ParsedIntent, TravelRequest
from backend.daytrip.models.itinerary import EnrichedDestination, Itinerary
from backend.daytrip.models.records import LookupFailure, LookupStage, ToolCallLog
from backend.daytrip.models.tool_results import Route
from backend.daytrip.utils.logging import StructuredCallLogger
from backend.daytrip.utils.metrics import PrometheusCallMetrics

RunStatus = Literal["pending", "running", "succeeded", "failed"]

_call_logger = StructuredCallLogger()
_metrics = PrometheusCallMetrics()


@dataclass
class CallRecorder:
    """Collects call logs and degradable failures for one unit of work.

    Each concurrent destination lookup gets its own child recorder; the
    children are merged back in destination order once all have finished.
    """

    request_id: str
    tool_calls: list[ToolCallLog] = field(default_factory=list)
    failures: list[LookupFailure] = field(default_factory=list)

    def record_call(self, call: ToolCallLog, error_reason: str | None = None) -> None:
        """Record a finished outbound call (log + metrics)."""
        self.tool_calls.append(call)
        _call_logger.log_call(self.request_id, call)
        outcome = "success" if call.success else "error"
        _metrics.record_latency(call.name, outcome, call.duration_ms)
        if not call.success:
            _metrics.inc_error(call.name, error_reason or "error")

    def record_failure(self, stage: LookupStage, destination: str | None, cause: str) -> None:
        """Record a lookup that was replaced by its fallback value."""
        failure = LookupFailure(stage=stage, destination=destination, cause=cause)
        self.failures.append(failure)
        _call_logger.log_failure(self.request_id, failure)
        _metrics.inc_degraded(stage.value)

    def child(self) -> "CallRecorder":
        return CallRecorder(request_id=self.request_id)

    def merge(self, other: "CallRecorder") -> None:
        """Append another recorder's entries (already logged)."""
        self.tool_calls.extend(other.tool_calls)
        self.failures.extend(other.failures)


@dataclass
class PlanState:
    """State for one itinerary request."""

    request_id: str
    request: TravelRequest
    status: RunStatus = "pending"
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    finished_at: datetime | None = None

    # Stage outputs (filled in as the pipeline advances)
    intent: ParsedIntent | None = None
    destinations: list[EnrichedDestination] = field(default_factory=list)
    route: Route | None = None
    itinerary: Itinerary | None = None

    recorder: CallRecorder = field(init=False)

    def __post_init__(self) -> None:
        self.recorder = CallRecorder(request_id=self.request_id)

    @property
    def failures(self) -> list[LookupFailure]:
        return self.recorder.failures

    @property
    def tool_calls(self) -> list[ToolCallLog]:
        return self.recorder.tool_calls
