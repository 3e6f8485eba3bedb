"""
Dashboard and analytics response models.
"""

from pydantic import Field
from typing import Dict, List

from app.models.base import CamelModel


class DashboardSummary(CamelModel):
    active_tourists: int
    alerts_today: int
    high_alerts: int
    medium_alerts: int
    low_alerts: int
    pending_incidents: int
    resolved_incidents: int
    safety_score: int
    avg_safety_score: int
    avg_response_time: int
    most_visited_region: str
    active_tourists_chart: List[int] = Field(default_factory=list)


class ResponseTimeStats(CamelModel):
    average: float
    median: float
    fastest: float
    slowest: float


class IncidentArea(CamelModel):
    name: str
    incidents: int
    risk_level: str


class DashboardAnalytics(CamelModel):
    period: str
    total_alerts: int
    alerts_by_type: Dict[str, int]
    alerts_by_severity: Dict[str, int]
    response_time_stats: ResponseTimeStats
    top_incident_areas: List[IncidentArea]
