"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint.

    Exposes:
    - provider_latency_ms{provider, outcome}
    - provider_errors_total{provider, reason}
    - degraded_lookups_total{stage}
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
