"""
Firestore storage backend.

Collections:
- users: document id = user id
- alerts: document id = alert id
- blockchain_issuances: document id = issuance id
- tracking_points: auto ids, ordered by received_at

Sorting is done in Python after a single-field query so no composite
indexes are needed. Writes go through one lock per store; this only
serializes writers inside one process, which is what the deployment
(single API instance) needs.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple
import threading
import logging

from firebase_admin import firestore

from app.config.firebase import get_db
from app.core.errors import ConflictError, DuplicateIdError, NotFoundError
from app.models.alert import Alert, AlertSeverity
from app.models.blockchain import Issuance
from app.models.tracking import TrackingPoint
from app.models.user import UserRecord
from app.storage.base import AlertStore, IssuanceStore, Storage, TrackingStore, UserStore
from app.utils.firestore_helpers import where_filter, to_document, to_datetime

logger = logging.getLogger(__name__)

USERS = "users"
ALERTS = "alerts"
ISSUANCES = "blockchain_issuances"
TRACKING = "tracking_points"


def _alert_from_doc(doc) -> Alert:
    data = doc.to_dict()
    data["created_at"] = to_datetime(data["created_at"])
    if data.get("acknowledged_at") is not None:
        data["acknowledged_at"] = to_datetime(data["acknowledged_at"])
    return Alert(**data)


def _issuance_from_doc(doc) -> Issuance:
    data = doc.to_dict()
    data["created_at"] = to_datetime(data["created_at"])
    return Issuance(**data)


def _user_from_doc(doc) -> UserRecord:
    data = doc.to_dict()
    data["created_at"] = to_datetime(data["created_at"])
    return UserRecord(**data)


class FirestoreAlertStore(AlertStore):

    def __init__(self, db):
        self.db = db
        self._lock = threading.Lock()

    def insert(self, alert: Alert) -> Alert:
        doc_ref = self.db.collection(ALERTS).document(alert.id)
        with self._lock:
            if doc_ref.get().exists:
                raise DuplicateIdError(f"Alert id already exists: {alert.id}")
            doc_ref.set(to_document(alert))
        logger.info(f"Alert saved to Firestore: {alert.id}")
        return alert

    def get(self, alert_id: str) -> Alert:
        doc = self.db.collection(ALERTS).document(alert_id).get()
        if not doc.exists:
            raise NotFoundError("Alert not found")
        return _alert_from_doc(doc)

    def update(self, alert: Alert) -> Alert:
        doc_ref = self.db.collection(ALERTS).document(alert.id)
        with self._lock:
            if not doc_ref.get().exists:
                raise NotFoundError("Alert not found")
            doc_ref.set(to_document(alert))
        return alert

    def _user_alerts(self, user_id: str) -> List[Alert]:
        query = where_filter(self.db.collection(ALERTS), "user_id", "==", user_id)
        alerts = [_alert_from_doc(doc) for doc in query.stream()]
        alerts.sort(key=lambda a: a.created_at, reverse=True)
        return alerts

    def query_by_user(
        self,
        user_id: str,
        severity: Optional[AlertSeverity] = None,
        page: int = 1,
        page_size: int = 20
    ) -> Tuple[List[Alert], int]:
        alerts = self._user_alerts(user_id)
        if severity is not None:
            alerts = [a for a in alerts if a.severity == severity]
        start = (page - 1) * page_size
        return alerts[start:start + page_size], len(alerts)

    def list_by_user(self, user_id: str, since: Optional[datetime] = None) -> List[Alert]:
        alerts = self._user_alerts(user_id)
        if since is not None:
            alerts = [a for a in alerts if a.created_at >= since]
        return alerts


class FirestoreIssuanceStore(IssuanceStore):

    def __init__(self, db):
        self.db = db
        self._lock = threading.Lock()

    def insert(self, issuance: Issuance) -> Issuance:
        collection = self.db.collection(ISSUANCES)
        with self._lock:
            if self.get_by_key(issuance.blockchain_id) is not None:
                raise ConflictError("This blockchain ID has already been issued")
            token_id = len(list(collection.select([]).stream())) + 1
            stored = issuance.model_copy(update={"token_id": token_id})
            collection.document(stored.id).set(to_document(stored))
        logger.info(f"Issuance saved to Firestore: {stored.id} (token {token_id})")
        return stored

    def get_by_key(self, blockchain_id: str) -> Optional[Issuance]:
        query = where_filter(self.db.collection(ISSUANCES), "blockchain_id", "==", blockchain_id).limit(1)
        docs = list(query.stream())
        return _issuance_from_doc(docs[0]) if docs else None

    def list_by_user(self, user_id: str) -> List[Issuance]:
        query = where_filter(self.db.collection(ISSUANCES), "user_id", "==", user_id)
        issuances = [_issuance_from_doc(doc) for doc in query.stream()]
        issuances.sort(key=lambda i: (i.created_at, i.token_id), reverse=True)
        return issuances


class FirestoreUserStore(UserStore):

    def __init__(self, db):
        self.db = db
        self._lock = threading.Lock()

    def create(self, user: UserRecord) -> UserRecord:
        with self._lock:
            if self.find_by_email(user.email) is not None:
                raise ConflictError("User with this email already exists")
            self.db.collection(USERS).document(user.id).set(to_document(user))
        logger.info(f"User created: {user.id}")
        return user

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        query = where_filter(self.db.collection(USERS), "email", "==", email.lower()).limit(1)
        docs = list(query.stream())
        return _user_from_doc(docs[0]) if docs else None

    def get(self, user_id: str) -> Optional[UserRecord]:
        doc = self.db.collection(USERS).document(user_id).get()
        return _user_from_doc(doc) if doc.exists else None


class FirestoreTrackingStore(TrackingStore):

    def __init__(self, db):
        self.db = db

    def append(self, point: TrackingPoint) -> None:
        data = point.model_dump()
        data["received_at"] = datetime.now(timezone.utc)
        self.db.collection(TRACKING).document().set(data)

    def list(self) -> List[TrackingPoint]:
        query = self.db.collection(TRACKING).order_by("received_at", direction=firestore.Query.ASCENDING)
        return [TrackingPoint(**doc.to_dict()) for doc in query.stream()]


def create_firestore_storage() -> Storage:
    db = get_db()
    logger.info("Using Firestore storage backend")
    return Storage(
        backend="firestore",
        users=FirestoreUserStore(db),
        alerts=FirestoreAlertStore(db),
        issuances=FirestoreIssuanceStore(db),
        tracking=FirestoreTrackingStore(db),
    )
