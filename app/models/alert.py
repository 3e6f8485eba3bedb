"""
Pydantic models for safety alerts.
"""

from pydantic import Field
from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum

from app.models.base import CamelModel


class AlertType(str, Enum):
    """Where the alert came from."""
    PANIC_BUTTON = "PANIC_BUTTON"
    GEOFENCE_VIOLATION = "GEOFENCE_VIOLATION"
    AI_MONITORING = "AI_MONITORING"


class AlertSeverity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class AlertStatus(str, Enum):
    """
    Alert lifecycle. Transitions only move forward:
    ACTIVE → ACKNOWLEDGED → RESOLVED
    """
    ACTIVE = "ACTIVE"
    ACKNOWLEDGED = "ACKNOWLEDGED"
    RESOLVED = "RESOLVED"


class Location(CamelModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class AlertCreate(CamelModel):
    """
    Incoming POST /api/alerts body.
    Presence, enum and range rules are checked by AlertService so the caller
    gets the first violated rule as the error message.
    """
    type: str = Field("", description="PANIC_BUTTON | GEOFENCE_VIOLATION | AI_MONITORING")
    severity: str = Field("", description="LOW | MEDIUM | HIGH")
    message: str = Field("", description="What happened (1-500 characters)")
    location: Optional[Location] = Field(None, description="Where it happened")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Free-form context from the client")

    class Config:
        json_schema_extra = {
            "example": {
                "type": "PANIC_BUTTON",
                "severity": "HIGH",
                "message": "Need help near the old fort gate",
                "location": {"latitude": 26.9124, "longitude": 75.7873},
                "metadata": {"battery": 42},
            }
        }
        extra = "ignore"


class Alert(CamelModel):
    """Stored alert record."""
    id: str = Field(..., description="Alert UUID")
    user_id: str = Field(..., description="Owning user")
    type: AlertType
    severity: AlertSeverity
    message: str
    location: Optional[Location] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    status: AlertStatus = AlertStatus.ACTIVE
    created_at: datetime = Field(..., description="When the alert was recorded (UTC)")
    acknowledged_at: Optional[datetime] = Field(None, description="Last acknowledgement (UTC)")


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class AlertPage(CamelModel):
    alerts: List[Alert]
    pagination: Pagination
