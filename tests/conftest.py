"""
Pytest fixtures for Tourist Safety Hub tests.

Every test gets fresh in-memory stores, a deterministic chain provider,
static dashboard metrics and a recording dispatcher. The API client
injects them through FastAPI dependency overrides.
"""

from __future__ import annotations

import pytest

from app.services.providers import ChainProvider, StaticMetricsProvider

USER_ID = "user-1"
OTHER_USER_ID = "user-2"
ZERO_BASELINE = {"total": 0, "HIGH": 0, "MEDIUM": 0, "LOW": 0}


class FixedChainProvider(ChainProvider):
    """Sequential, predictable ledger attributes."""

    def __init__(self):
        self.calls = 0

    def transaction_hash(self) -> str:
        self.calls += 1
        return "0x" + f"{self.calls:064x}"

    def block_number(self) -> int:
        return 18_500_000 + self.calls

    def network_id(self) -> int:
        return 137

    def contract_address(self) -> str:
        return "0x1234567890123456789012345678901234567890"

    def explorer_url(self, transaction_hash: str) -> str:
        return f"https://polygonscan.com/tx/{transaction_hash}"


@pytest.fixture
def storage():
    from app.storage.memory import create_memory_storage

    return create_memory_storage()


@pytest.fixture
def dispatched():
    """Alerts handed to the emergency dispatcher, in order."""
    return []


@pytest.fixture
def alert_service(storage, dispatched):
    from app.services.alert_service import AlertService

    return AlertService(
        store=storage.alerts,
        dispatcher=lambda alert, delay: dispatched.append(alert),
    )


@pytest.fixture
def chain():
    return FixedChainProvider()


@pytest.fixture
def issuance_service(storage, chain):
    from app.services.issuance_service import IssuanceService

    return IssuanceService(store=storage.issuances, chain=chain)


@pytest.fixture
def analytics_service(storage):
    from app.services.analytics_service import AnalyticsService

    return AnalyticsService(store=storage.alerts, metrics=StaticMetricsProvider(alert_baseline=ZERO_BASELINE))


@pytest.fixture
def token_service():
    from app.services.token_service import TokenService

    return TokenService(secret="test-secret", expiry_days=30)


@pytest.fixture
def user_service(storage, token_service):
    from app.services.user_service import UserService

    # Lowest bcrypt cost keeps the suite fast
    return UserService(users=storage.users, tokens=token_service, bcrypt_rounds=4)


@pytest.fixture
def tracking_service(storage):
    from app.services.tracking_service import TrackingService

    return TrackingService(store=storage.tracking)


@pytest.fixture
def client(storage, alert_service, issuance_service, analytics_service, token_service, user_service, tracking_service):
    """FastAPI TestClient wired to the per-test services."""
    from fastapi.testclient import TestClient

    from app.main import app
    from app.services.alert_service import get_alert_service
    from app.services.analytics_service import get_analytics_service
    from app.services.issuance_service import get_issuance_service
    from app.services.token_service import get_token_service
    from app.services.tracking_service import get_tracking_service
    from app.services.user_service import get_user_service
    from app.storage.registry import reset_storage_for_test

    reset_storage_for_test(storage)

    app.dependency_overrides[get_alert_service] = lambda: alert_service
    app.dependency_overrides[get_issuance_service] = lambda: issuance_service
    app.dependency_overrides[get_analytics_service] = lambda: analytics_service
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_tracking_service] = lambda: tracking_service

    yield TestClient(app)

    app.dependency_overrides.clear()
    reset_storage_for_test()


@pytest.fixture
def auth_headers(token_service):
    return {"Authorization": f"Bearer {token_service.issue(USER_ID, 'user1@example.com')}"}


@pytest.fixture
def other_auth_headers(token_service):
    return {"Authorization": f"Bearer {token_service.issue(OTHER_USER_ID, 'user2@example.com')}"}
