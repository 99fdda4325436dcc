"""Route planner - routes through every destination that has coordinates."""

import logging
from collections.abc import Sequence

import httpx

from backend.daytrip.adapters.osrm import fetch_route
from backend.daytrip.models.itinerary import EnrichedDestination
from backend.daytrip.models.records import LookupStage
from backend.daytrip.models.tool_results import Route
from backend.daytrip.orchestration.enricher import NO_RESULTS, describe_error
from backend.daytrip.orchestration.state import CallRecorder
from backend.daytrip.orchestration.tools import run_tool

logger = logging.getLogger(__name__)


async def plan_route(
    destinations: Sequence[EnrichedDestination],
    *,
    http: httpx.AsyncClient,
    recorder: CallRecorder,
) -> Route:
    """Compute the route through the geocoded destinations, in order.

    Never raises for ordinary errors: fewer than two coordinates, a
    failed call or an empty answer all yield Route.degenerate().
    """
    waypoints = [d.coordinates for d in destinations if d.coordinates is not None]

    if len(waypoints) < 2:
        recorder.record_failure(
            LookupStage.ROUTING, None, f"{len(waypoints)} routable destination(s), need 2"
        )
        return Route.degenerate()

    try:
        route = await run_tool(
            name="provider.routing",
            recorder=recorder,
            call=lambda: fetch_route(waypoints, client=http),
            input_summary={"waypoints": len(waypoints)},
            output_counter=lambda r: {
                "legs": len(r.legs),
                "distance_m": r.total_distance_meters,
            },
        )
    except Exception as e:
        recorder.record_failure(LookupStage.ROUTING, None, describe_error(e))
        return Route.degenerate()

    if route is None:
        recorder.record_failure(LookupStage.ROUTING, None, NO_RESULTS)
        return Route.degenerate()

    if len(route.legs) != len(waypoints) - 1:
        # Legs are still matched to destinations by index
        logger.warning(
            f"Route has {len(route.legs)} legs for {len(waypoints)} waypoints",
        )

    return route
