"""
Analytics Service - dashboard summary and alert analytics.

Only the alert counts are computed from stored data. Everything else
comes from the MetricsProvider and is illustrative.
"""

from collections import Counter
from datetime import datetime
from typing import Callable, Optional
import logging

from app.models.alert import AlertSeverity, AlertType
from app.models.dashboard import (
    DashboardAnalytics,
    DashboardSummary,
    IncidentArea,
    ResponseTimeStats,
)
from app.services.providers import MetricsProvider, get_metrics_provider
from app.storage.base import AlertStore
from app.storage.registry import get_storage

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = "7d"


def start_of_local_day(now: Optional[datetime] = None) -> datetime:
    """Midnight of the current day in the server's local timezone (aware)."""
    now = now or datetime.now().astimezone()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


class AnalyticsService:
    """Service for dashboard figures."""

    def __init__(
        self,
        store: AlertStore,
        metrics: MetricsProvider,
        day_start: Callable[[], datetime] = start_of_local_day
    ):
        self.store = store
        self.metrics = metrics
        self.day_start = day_start

    def summary(self, user_id: str) -> DashboardSummary:
        """
        Today's alert counts for the user, each added to the provider baseline,
        plus the provider's live filler metrics.
        """
        todays_alerts = self.store.list_by_user(user_id, since=self.day_start())
        by_severity = Counter(alert.severity for alert in todays_alerts)
        baseline = self.metrics.alert_baseline()
        live = self.metrics.live_metrics()

        return DashboardSummary(
            alerts_today=len(todays_alerts) + baseline.get("total", 0),
            high_alerts=by_severity[AlertSeverity.HIGH] + baseline.get("HIGH", 0),
            medium_alerts=by_severity[AlertSeverity.MEDIUM] + baseline.get("MEDIUM", 0),
            low_alerts=by_severity[AlertSeverity.LOW] + baseline.get("LOW", 0),
            **live,
        )

    def analytics(self, user_id: str, period: Optional[str] = None) -> DashboardAnalytics:
        """Counts over the user's whole alert history plus static statistics."""
        alerts = self.store.list_by_user(user_id)
        by_type = Counter(alert.type for alert in alerts)
        by_severity = Counter(alert.severity for alert in alerts)

        return DashboardAnalytics(
            period=period or DEFAULT_PERIOD,
            total_alerts=len(alerts),
            alerts_by_type={t.value: by_type[t] for t in AlertType},
            alerts_by_severity={s.value: by_severity[s] for s in reversed(list(AlertSeverity))},
            response_time_stats=ResponseTimeStats(**self.metrics.response_time_stats()),
            top_incident_areas=[IncidentArea(**area) for area in self.metrics.top_incident_areas()],
        )


# Global service instance (singleton pattern)
_analytics_service = None


def get_analytics_service() -> AnalyticsService:
    global _analytics_service
    if _analytics_service is None:
        _analytics_service = AnalyticsService(store=get_storage().alerts, metrics=get_metrics_provider())
    return _analytics_service
