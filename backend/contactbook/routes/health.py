"""
Contact Book Backend — Health Check Routes
============================================

What:  GET / (service banner) and GET /health (dependency probe).
Why:   Load balancers and uptime monitors need a cheap liveness signal; the
       banner doubles as a "is the API up at all?" check from a browser.

Status levels:
    - healthy:   Database reachable
    - unhealthy: Database unreachable (still HTTP 200 so the body is readable)
"""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from sqlalchemy import text

from contactbook import __version__
from contactbook.database import engine
from contactbook.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Service banner")
async def root() -> str:
    return "Contact Management System api!"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    """
    Probe the database with SELECT 1 and report aggregate status.

    Never raises: a failed probe is reported in the body, not as a 500.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
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
