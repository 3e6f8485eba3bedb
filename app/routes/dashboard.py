"""
Dashboard endpoints.

Only the alert counts reflect stored data; the remaining figures come
from the configured metrics provider.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
import logging

from app.core.errors import AppError, InternalError
from app.models.base import ok
from app.models.user import TokenClaims
from app.routes.deps import get_current_user
from app.services.analytics_service import AnalyticsService, get_analytics_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("")
async def get_dashboard(
    user: TokenClaims = Depends(get_current_user),
    service: AnalyticsService = Depends(get_analytics_service)
):
    try:
        return ok(service.summary(user.user_id))
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Dashboard error: {e}", exc_info=True)
        raise InternalError("Internal server error while fetching dashboard data")


@router.get("/analytics")
async def get_analytics(
    period: Optional[str] = Query(None, description="Reporting window label, e.g. 7d"),
    user: TokenClaims = Depends(get_current_user),
    service: AnalyticsService = Depends(get_analytics_service)
):
    try:
        return ok(service.analytics(user.user_id, period=period))
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Analytics error: {e}", exc_info=True)
        raise InternalError("Internal server error while fetching analytics data")
