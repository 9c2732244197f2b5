"""
QuickNote Backend: Health Check Route
========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs `SELECT 1` against the database and reports the result.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - ok:       Database reachable
    - degraded: Database unreachable (still HTTP 200 so the process is not
                restarted while the database recovers)
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from quicknote import __version__
from quicknote.database import engine
from quicknote.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "ok"
    message = "QuickNote API is running"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "degraded"
        message = "QuickNote API is running without a database connection"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        message=message,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
