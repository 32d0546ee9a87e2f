"""
Haste Store — Health Check Route
==================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the configured backing store and reports aggregate status.

Status levels:
    - healthy:   backing store reachable (HTTP 200)
    - unhealthy: backing store unreachable (HTTP 503, stop routing traffic)

Registered before the catch-all dispatch endpoint so /health is never
treated as a static path.
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from haste import __version__
from haste.schemas.document import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> JSONResponse:
    """Probe the backing store and return aggregate status."""
    store = request.app.state.document_store.kv
    store_status = "connected"
    overall = "healthy"

    try:
        reachable = await store.ping()
    except Exception as e:
        logger.warning("Health check: backing store ping raised: %s", str(e))
        reachable = False

    if not reachable:
        store_status = "disconnected"
        overall = "unhealthy"

    body = HealthResponse(
        status=overall,
        version=__version__,
        store_backend=type(store).__name__,
        store=store_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=body.model_dump(),
    )
