"""
Alert endpoints - create, list and acknowledge the caller's safety alerts.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
import logging

from app.core.errors import AppError, InternalError
from app.models.alert import AlertCreate
from app.models.base import ok
from app.models.user import TokenClaims
from app.routes.deps import get_current_user
from app.services.alert_service import AlertService, get_alert_service, parse_positive_int, parse_severity, DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/alerts", tags=["Alerts"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_alert(
    body: AlertCreate,
    user: TokenClaims = Depends(get_current_user),
    service: AlertService = Depends(get_alert_service)
):
    """
    Raise a new alert (panic button, geofence violation, AI monitoring).

    HIGH severity alerts also trigger the simulated emergency dispatch.
    """
    try:
        alert = service.create(
            user_id=user.user_id,
            type=body.type,
            severity=body.severity,
            message=body.message,
            location=body.location,
            metadata=body.metadata,
        )
        return ok({"alert": alert, "message": "Alert created and emergency services notified"})
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Alert creation error: {e}", exc_info=True)
        raise InternalError("Internal server error while creating alert")


@router.get("")
async def list_alerts(
    page: Optional[str] = Query(None, description="Page number, starting at 1 (invalid values mean 1)"),
    limit: Optional[str] = Query(None, description="Alerts per page (invalid values mean 20)"),
    severity: Optional[str] = Query(None, description="LOW | MEDIUM | HIGH (other values are ignored)"),
    user: TokenClaims = Depends(get_current_user),
    service: AlertService = Depends(get_alert_service)
):
    """
    Get the caller's alerts, newest first, with pagination.
    """
    try:
        result = service.list(
            user.user_id,
            severity=parse_severity(severity),
            page=parse_positive_int(page, 1),
            page_size=parse_positive_int(limit, DEFAULT_PAGE_SIZE),
        )
        return ok(result)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Get alerts error: {e}", exc_info=True)
        raise InternalError("Internal server error while fetching alerts")


@router.put("/{alert_id}/acknowledge")
async def acknowledge_alert(
    alert_id: str,
    user: TokenClaims = Depends(get_current_user),
    service: AlertService = Depends(get_alert_service)
):
    """
    Acknowledge one of the caller's alerts. Safe to repeat.
    """
    try:
        alert = service.acknowledge(alert_id, user.user_id)
        return ok({"alert": alert})
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Alert acknowledge error: {e}", exc_info=True)
        raise InternalError("Internal server error while acknowledging alert")
