"""
Workboard Backend: Health Check Route
=======================================

What:  GET /health for container health checks and monitoring.
How:   Runs SELECT 1 on the app's storage engine and reports the result
       together with version and uptime.

Status levels:
    - healthy:   database answered (HTTP 200)
    - unhealthy: database unreachable (HTTP 200 with status "unhealthy")
"""

import logging
import time

from fastapi import APIRouter, Request

from workboard import __version__
from workboard.database import ping_storage
from workboard.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module import time stands in for process start
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await ping_storage(request.app.state.storage)
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
