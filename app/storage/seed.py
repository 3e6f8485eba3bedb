"""
Demo seed data: one user, two alerts, one issuance and three GPS points.

Login: demo@example.com / password
"""

from datetime import datetime, timedelta, timezone
import logging

from app.core.errors import ConflictError
from app.models.alert import Alert, AlertSeverity, AlertStatus, AlertType, Location
from app.models.blockchain import Issuance, IssuanceStatus, UserInfo
from app.models.tracking import TrackingPoint
from app.models.user import UserRecord
from app.storage.base import Storage
from app.utils.security import hash_password

logger = logging.getLogger(__name__)

DEMO_USER_ID = "demo-user-123"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "password"
DEMO_BLOCKCHAIN_ID = "TSM-A1B2C3D4E5F6G7H8I9J0K1L2M3N4O5P6"

DEMO_TRACKING_POINTS = [
    TrackingPoint(lat=29.752810, lon=78.498960, tag="normal", timestamp="2025-09-08 21:48"),
    TrackingPoint(lat=26.752810, lon=75.498960, tag="sos", timestamp="2025-09-08 21:00"),
    TrackingPoint(lat=28.7041, lon=77.1025, tag="normal", timestamp="2025-09-08 21:00"),
]


def seed_demo_data(storage: Storage, bcrypt_rounds: int = 12) -> bool:
    """
    Write the demo records unless the demo user already exists.

    Returns:
        True if anything was written
    """
    if storage.users.find_by_email(DEMO_EMAIL) is not None:
        logger.info(f"[SEED] Demo user already present in {storage.backend} storage, skipping")
        return False

    now = datetime.now(timezone.utc)

    storage.users.create(UserRecord(
        id=DEMO_USER_ID,
        name="Demo User",
        email=DEMO_EMAIL,
        phone="+1234567890",
        password_hash=hash_password(DEMO_PASSWORD, rounds=bcrypt_rounds),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    ))

    storage.alerts.insert(Alert(
        id="alert-demo-1",
        user_id=DEMO_USER_ID,
        type=AlertType.AI_MONITORING,
        severity=AlertSeverity.MEDIUM,
        message="Inactivity detected for 15 minutes in downtown area",
        location=Location(latitude=40.7128, longitude=-74.0060),
        metadata={"alertType": "INACTIVITY", "duration": 900000},
        status=AlertStatus.ACTIVE,
        created_at=now - timedelta(hours=1),
    ))
    storage.alerts.insert(Alert(
        id="alert-demo-2",
        user_id=DEMO_USER_ID,
        type=AlertType.GEOFENCE_VIOLATION,
        severity=AlertSeverity.HIGH,
        message="Entered restricted area: Construction Zone Alpha",
        location=Location(latitude=40.7589, longitude=-73.9851),
        metadata={"geofenceId": "geo-123", "geofenceName": "Construction Zone Alpha", "distance": 50},
        status=AlertStatus.ACKNOWLEDGED,
        created_at=now - timedelta(minutes=30),
        acknowledged_at=now - timedelta(minutes=25),
    ))

    try:
        storage.issuances.insert(Issuance(
            id="blockchain-demo-1",
            user_id=DEMO_USER_ID,
            blockchain_id=DEMO_BLOCKCHAIN_ID,
            user_info=UserInfo(name="Demo User", email=DEMO_EMAIL, phone="+1234567890"),
            metadata={"issuedAt": "2024-01-15T10:30:00.000Z", "version": "1.0"},
            transaction_hash="0x1234567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef",
            block_number=18567890,
            network_id=137,
            contract_address="0x1234567890123456789012345678901234567890",
            status=IssuanceStatus.CONFIRMED,
            created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        ))
    except ConflictError:
        logger.info("[SEED] Demo issuance already present, skipping")

    for point in DEMO_TRACKING_POINTS:
        storage.tracking.append(point)

    logger.info(f"[SEED] Demo data written to {storage.backend} storage")
    return True
