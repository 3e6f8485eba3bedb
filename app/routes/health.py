"""
Health check endpoints.
Used for monitoring, deployment readiness checks, and basic connectivity tests.
"""

from datetime import datetime, timezone
import time

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.core.settings import settings
from app.models.base import ok, fail
from app.storage.registry import get_storage

router = APIRouter(prefix="/health", tags=["Health"])

STARTED_AT = time.monotonic()


@router.get("")
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    return ok({
        "status": "OK",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    })


@router.get("/db")
async def database_health():
    """
    Storage connectivity check.
    Performs a lightweight read against the configured backend.
    """
    try:
        storage = get_storage()
        storage.users.find_by_email("healthcheck@example.com")
        return ok({
            "status": "healthy",
            "backend": storage.backend,
            "connected": True,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })
    except Exception as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=fail(f"Storage connection failed: {type(e).__name__}"),
        )
