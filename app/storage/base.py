"""
Storage Interfaces.

Defines the contract every persistence backend implements.
Services only talk to these interfaces; the concrete backend
(memory or Firestore) is chosen in app.storage.registry.

Every implementation must serialize its mutating operations
(one writer at a time per store) so uniqueness checks and the
issuance sequence counter cannot race.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple

from app.models.alert import Alert, AlertSeverity
from app.models.blockchain import Issuance
from app.models.tracking import TrackingPoint
from app.models.user import UserRecord


class AlertStore(ABC):

    @abstractmethod
    def insert(self, alert: Alert) -> Alert:
        """
        Store a new alert under its id.

        Raises:
            DuplicateIdError: if an alert with that id already exists
        """

    @abstractmethod
    def get(self, alert_id: str) -> Alert:
        """
        Raises:
            NotFoundError: if no alert has this id
        """

    @abstractmethod
    def update(self, alert: Alert) -> Alert:
        """Replace a stored alert. Raises NotFoundError if it does not exist."""

    @abstractmethod
    def query_by_user(
        self,
        user_id: str,
        severity: Optional[AlertSeverity] = None,
        page: int = 1,
        page_size: int = 20
    ) -> Tuple[List[Alert], int]:
        """
        Alerts of one user, newest first, sliced to the requested page.

        Returns:
            (alerts on this page, total matching alerts)
        """

    @abstractmethod
    def list_by_user(self, user_id: str, since: Optional[datetime] = None) -> List[Alert]:
        """All alerts of one user, optionally only those created at or after `since`."""


class IssuanceStore(ABC):

    @abstractmethod
    def insert(self, issuance: Issuance) -> Issuance:
        """
        Store a new issuance and assign its token_id (1 + number of issuances).

        Raises:
            ConflictError: if the blockchain_id was already issued
        """

    @abstractmethod
    def get_by_key(self, blockchain_id: str) -> Optional[Issuance]:
        pass

    @abstractmethod
    def list_by_user(self, user_id: str) -> List[Issuance]:
        """Issuances owned by the user, newest first."""


class UserStore(ABC):

    @abstractmethod
    def create(self, user: UserRecord) -> UserRecord:
        """
        Raises:
            ConflictError: if the (lowercased) email is taken
        """

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[UserRecord]:
        pass

    @abstractmethod
    def get(self, user_id: str) -> Optional[UserRecord]:
        pass


class TrackingStore(ABC):

    @abstractmethod
    def append(self, point: TrackingPoint) -> None:
        pass

    @abstractmethod
    def list(self) -> List[TrackingPoint]:
        """All points in arrival order."""


class Storage:
    """One bundle of stores from the same backend."""

    def __init__(
        self,
        backend: str,
        users: UserStore,
        alerts: AlertStore,
        issuances: IssuanceStore,
        tracking: TrackingStore
    ):
        self.backend = backend
        self.users = users
        self.alerts = alerts
        self.issuances = issuances
        self.tracking = tracking
