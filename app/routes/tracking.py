"""
Tracker endpoints - GPS points posted by field devices.

Paths are kept short because tracker firmware posts to them directly.
"""

from fastapi import APIRouter, Depends
import logging

from app.core.errors import AppError, InternalError
from app.models.base import ok
from app.models.tracking import TrackingPoint
from app.services.tracking_service import TrackingService, get_tracking_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tracking"])


@router.post("/gps")
async def receive_gps(point: TrackingPoint, service: TrackingService = Depends(get_tracking_service)):
    try:
        logs = service.record(point)
        return ok({"status": "ok", "logs": logs})
    except AppError:
        raise
    except Exception as e:
        logger.error(f"GPS ingest error: {e}", exc_info=True)
        raise InternalError("Internal server error while storing GPS point")


@router.get("/data")
async def get_gps_data(service: TrackingService = Depends(get_tracking_service)):
    try:
        return ok(service.list_points())
    except AppError:
        raise
    except Exception as e:
        logger.error(f"GPS feed error: {e}", exc_info=True)
        raise InternalError("Internal server error while fetching GPS data")
