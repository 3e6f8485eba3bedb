"""
Tracking Service - GPS breadcrumbs posted by tracker devices.
"""

from typing import List
import logging

from app.models.tracking import TrackingPoint
from app.storage.base import TrackingStore
from app.storage.registry import get_storage

logger = logging.getLogger(__name__)


class TrackingService:

    def __init__(self, store: TrackingStore):
        self.store = store

    def record(self, point: TrackingPoint) -> List[TrackingPoint]:
        """Append a point and return the whole feed."""
        self.store.append(point)
        if point.tag.lower() == "sos":
            logger.warning(f"SOS point received at ({point.lat}, {point.lon}) ts={point.timestamp}")
        else:
            logger.info(f"GPS point received: ({point.lat}, {point.lon}) tag={point.tag}")
        return self.store.list()

    def list_points(self) -> List[TrackingPoint]:
        return self.store.list()


_tracking_service = None


def get_tracking_service() -> TrackingService:
    global _tracking_service
    if _tracking_service is None:
        _tracking_service = TrackingService(store=get_storage().tracking)
    return _tracking_service
