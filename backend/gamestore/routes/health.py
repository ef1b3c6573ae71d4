"""
GameStore Backend - Health Check Route
========================================

What:  Health check endpoint for container probes and monitoring.
How:   Pings the configured store (SELECT 1 for SQL) and reports status.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from gamestore import __version__
from gamestore.dependencies import get_game_store
from gamestore.schemas.game import HealthResponse
from gamestore.stores.base import GameStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module load time, for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: GameStore = Depends(get_game_store),
) -> HealthResponse:
    """
    Check that the store can serve requests.

    The ping is the cheapest round-trip the backend offers; the in-memory
    store always answers.
    """
    store_status = "connected"
    overall = "healthy"

    try:
        await store.ping()
    except Exception as e:
        store_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: store unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        store=f"{store.name}: {store_status}",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
