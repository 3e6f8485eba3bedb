"""
In-memory storage backend.

Process-local maps guarded by one lock per store. Used for local
development, demos and tests. Records are copied on the way in and
out so callers can never mutate stored state behind the store's back.
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple
import threading
import logging

from app.core.errors import ConflictError, DuplicateIdError, NotFoundError
from app.models.alert import Alert, AlertSeverity
from app.models.blockchain import Issuance
from app.models.tracking import TrackingPoint
from app.models.user import UserRecord
from app.storage.base import AlertStore, IssuanceStore, Storage, TrackingStore, UserStore

logger = logging.getLogger(__name__)


class MemoryAlertStore(AlertStore):

    def __init__(self):
        self._lock = threading.Lock()
        self._alerts: Dict[str, Alert] = {}
        self._sequence: Dict[str, int] = {}  # insertion order, breaks created_at ties

    def insert(self, alert: Alert) -> Alert:
        with self._lock:
            if alert.id in self._alerts:
                raise DuplicateIdError(f"Alert id already exists: {alert.id}")
            self._alerts[alert.id] = alert.model_copy(deep=True)
            self._sequence[alert.id] = len(self._sequence)
        return alert.model_copy(deep=True)

    def get(self, alert_id: str) -> Alert:
        alert = self._alerts.get(alert_id)
        if alert is None:
            raise NotFoundError("Alert not found")
        return alert.model_copy(deep=True)

    def update(self, alert: Alert) -> Alert:
        with self._lock:
            if alert.id not in self._alerts:
                raise NotFoundError("Alert not found")
            self._alerts[alert.id] = alert.model_copy(deep=True)
        return alert.model_copy(deep=True)

    def _newest_first(self, alerts: List[Alert]) -> List[Alert]:
        return sorted(
            alerts,
            key=lambda a: (a.created_at, self._sequence.get(a.id, 0)),
            reverse=True
        )

    def query_by_user(
        self,
        user_id: str,
        severity: Optional[AlertSeverity] = None,
        page: int = 1,
        page_size: int = 20
    ) -> Tuple[List[Alert], int]:
        matching = [
            a for a in list(self._alerts.values())
            if a.user_id == user_id and (severity is None or a.severity == severity)
        ]
        matching = self._newest_first(matching)
        start = (page - 1) * page_size
        page_items = matching[start:start + page_size]
        return [a.model_copy(deep=True) for a in page_items], len(matching)

    def list_by_user(self, user_id: str, since: Optional[datetime] = None) -> List[Alert]:
        alerts = [
            a for a in list(self._alerts.values())
            if a.user_id == user_id and (since is None or a.created_at >= since)
        ]
        return [a.model_copy(deep=True) for a in self._newest_first(alerts)]


class MemoryIssuanceStore(IssuanceStore):

    def __init__(self):
        self._lock = threading.Lock()
        self._by_key: Dict[str, Issuance] = {}

    def insert(self, issuance: Issuance) -> Issuance:
        with self._lock:
            if issuance.blockchain_id in self._by_key:
                raise ConflictError("This blockchain ID has already been issued")
            stored = issuance.model_copy(update={"token_id": len(self._by_key) + 1}, deep=True)
            self._by_key[stored.blockchain_id] = stored
        return stored.model_copy(deep=True)

    def get_by_key(self, blockchain_id: str) -> Optional[Issuance]:
        issuance = self._by_key.get(blockchain_id)
        return issuance.model_copy(deep=True) if issuance else None

    def list_by_user(self, user_id: str) -> List[Issuance]:
        owned = [i for i in list(self._by_key.values()) if i.user_id == user_id]
        owned.sort(key=lambda i: (i.created_at, i.token_id), reverse=True)
        return [i.model_copy(deep=True) for i in owned]


class MemoryUserStore(UserStore):

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[str, UserRecord] = {}

    def create(self, user: UserRecord) -> UserRecord:
        with self._lock:
            if self.find_by_email(user.email) is not None:
                raise ConflictError("User with this email already exists")
            self._users[user.id] = user.model_copy(deep=True)
        return user.model_copy(deep=True)

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        email = email.lower()
        for user in list(self._users.values()):
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    def get(self, user_id: str) -> Optional[UserRecord]:
        user = self._users.get(user_id)
        return user.model_copy(deep=True) if user else None


class MemoryTrackingStore(TrackingStore):

    def __init__(self):
        self._lock = threading.Lock()
        self._points: List[TrackingPoint] = []

    def append(self, point: TrackingPoint) -> None:
        with self._lock:
            self._points.append(point.model_copy())

    def list(self) -> List[TrackingPoint]:
        return [p.model_copy() for p in list(self._points)]


def create_memory_storage() -> Storage:
    logger.info("Using in-memory storage backend")
    return Storage(
        backend="memory",
        users=MemoryUserStore(),
        alerts=MemoryAlertStore(),
        issuances=MemoryIssuanceStore(),
        tracking=MemoryTrackingStore(),
    )
