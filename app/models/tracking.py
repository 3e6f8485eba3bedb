"""
GPS tracking point posted by field trackers.
"""

from pydantic import BaseModel, Field
from typing import Optional


class TrackingPoint(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    tag: str = Field("normal", max_length=50, description="normal | sos | ...")
    timestamp: Optional[str] = Field(None, description="Device clock, as sent")

    class Config:
        json_schema_extra = {
            "example": {"lat": 28.7041, "lon": 77.1025, "tag": "sos", "timestamp": "2025-09-08 21:00"}
        }
        extra = "ignore"
