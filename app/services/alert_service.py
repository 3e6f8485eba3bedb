"""
Alert Service - create, list and acknowledge safety alerts.

DESIGN NOTE:
- Validation reports the first violated rule only
- The emergency dispatch for HIGH alerts is fire-and-forget and never
  changes the stored alert or the returned result
- Ownership failures look exactly like missing alerts
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
import math
import uuid
import logging

from app.core.errors import NotFoundError, ValidationError
from app.core.settings import settings
from app.models.alert import (
    Alert,
    AlertPage,
    AlertSeverity,
    AlertStatus,
    AlertType,
    Location,
    Pagination,
)
from app.services.dispatch import schedule_emergency_dispatch
from app.services.status_workflow import AlertWorkflow
from app.storage.base import AlertStore
from app.storage.registry import get_storage

logger = logging.getLogger(__name__)

MESSAGE_MAX_LENGTH = 500
DEFAULT_PAGE_SIZE = 20


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_severity(value: Optional[str]) -> Optional[AlertSeverity]:
    """Map a severity string to the enum; unknown values give None."""
    try:
        return AlertSeverity(value) if value else None
    except ValueError:
        return None


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Query-string paging value; anything that is not a positive integer gives the default."""
    try:
        number = int((value or "").strip())
    except ValueError:
        return default
    return number if number >= 1 else default


class AlertService:
    """
    Owns the alert lifecycle. Storage is injected.
    """

    def __init__(
        self,
        store: AlertStore,
        dispatcher: Callable[[Alert, float], Any] = schedule_emergency_dispatch,
        dispatch_delay_seconds: float = 1.0,
        clock: Callable[[], datetime] = utc_now
    ):
        self.store = store
        self.dispatcher = dispatcher
        self.dispatch_delay_seconds = dispatch_delay_seconds
        self.clock = clock

    def create(
        self,
        user_id: str,
        type: str,
        severity: str,
        message: str,
        location: Optional[Location] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> Alert:
        """
        Validate and store a new ACTIVE alert.

        Raises:
            ValidationError: first violated rule; nothing is stored
        """
        try:
            alert_type = AlertType(type)
        except ValueError:
            raise ValidationError("Invalid alert type")

        try:
            alert_severity = AlertSeverity(severity)
        except ValueError:
            raise ValidationError("Invalid severity level")

        message = (message or "").strip()
        if not 1 <= len(message) <= MESSAGE_MAX_LENGTH:
            raise ValidationError(f"Message must be between 1 and {MESSAGE_MAX_LENGTH} characters")

        if location is not None:
            if location.latitude is not None and not -90 <= location.latitude <= 90:
                raise ValidationError("Invalid latitude")
            if location.longitude is not None and not -180 <= location.longitude <= 180:
                raise ValidationError("Invalid longitude")

        alert = self.store.insert(Alert(
            id=str(uuid.uuid4()),
            user_id=user_id,
            type=alert_type,
            severity=alert_severity,
            message=message,
            location=location,
            metadata=metadata or {},
            status=AlertStatus.ACTIVE,
            created_at=self.clock(),
        ))

        logger.info(
            f"🚨 New {alert.severity.value} Alert [{alert.type.value}]: "
            f"user={user_id} id={alert.id} location={alert.location}"
        )

        if alert.severity == AlertSeverity.HIGH:
            try:
                self.dispatcher(alert, self.dispatch_delay_seconds)
            except Exception as e:
                # Dispatch is best-effort; the alert is already stored
                logger.error(f"Emergency dispatch simulation failed for alert {alert.id}: {e}", exc_info=True)

        return alert

    def list(
        self,
        user_id: str,
        severity: Optional[AlertSeverity] = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE
    ) -> AlertPage:
        """
        One page of the user's alerts, newest first.

        Raises:
            ValidationError: page or page_size below 1
        """
        if page < 1:
            raise ValidationError("Page must be a positive integer")
        if page_size < 1:
            raise ValidationError("Limit must be a positive integer")

        alerts, total = self.store.query_by_user(user_id, severity=severity, page=page, page_size=page_size)

        return AlertPage(
            alerts=alerts,
            pagination=Pagination(
                page=page,
                limit=page_size,
                total=total,
                total_pages=math.ceil(total / page_size),
            ),
        )

    def acknowledge(self, alert_id: str, user_id: str) -> Alert:
        """
        Mark an alert ACKNOWLEDGED and stamp acknowledged_at.

        Idempotent: acknowledging again just re-stamps the time.

        Raises:
            NotFoundError: alert missing or owned by someone else
            ConflictError: alert already moved past ACKNOWLEDGED
        """
        try:
            alert = self.store.get(alert_id)
        except NotFoundError:
            raise NotFoundError("Alert not found")

        if alert.user_id != user_id:
            raise NotFoundError("Alert not found")

        AlertWorkflow.validate_transition(alert.status, AlertStatus.ACKNOWLEDGED)

        now = self.clock()
        if alert.acknowledged_at is not None and now < alert.acknowledged_at:
            now = alert.acknowledged_at

        updated = self.store.update(alert.model_copy(update={
            "status": AlertStatus.ACKNOWLEDGED,
            "acknowledged_at": now,
        }))

        logger.info(f"Alert acknowledged: {alert_id} by {user_id}")
        return updated


# Global service instance (singleton pattern)
_alert_service = None


def get_alert_service() -> AlertService:
    """
    Get or create AlertService singleton instance.

    Returns:
        AlertService: The global alert service instance
    """
    global _alert_service
    if _alert_service is None:
        _alert_service = AlertService(
            store=get_storage().alerts,
            dispatch_delay_seconds=settings.DISPATCH_DELAY_SECONDS,
        )
    return _alert_service
