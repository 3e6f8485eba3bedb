"""
Tests for the in-memory storage backend: id uniqueness, copy isolation
and writer serialization under concurrent requests.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone

import pytest

from app.core.errors import ConflictError, DuplicateIdError, NotFoundError
from app.models.alert import Alert, AlertSeverity, AlertType
from app.models.blockchain import Issuance, UserInfo
from app.models.tracking import TrackingPoint
from app.models.user import UserRecord


def make_alert(alert_id="a-1", user_id="user-1", severity=AlertSeverity.LOW):
    return Alert(
        id=alert_id,
        user_id=user_id,
        type=AlertType.AI_MONITORING,
        severity=severity,
        message="inactive",
        created_at=datetime.now(timezone.utc),
    )


def make_issuance(blockchain_id, user_id="user-1"):
    return Issuance(
        id=str(uuid.uuid4()),
        user_id=user_id,
        blockchain_id=blockchain_id,
        user_info=UserInfo(name="Asha", email="asha@example.com", phone="+919876543210"),
        transaction_hash="0xabc",
        block_number=18_500_001,
        network_id=137,
        contract_address="0x0",
        created_at=datetime.now(timezone.utc),
    )


def make_user(email, user_id=None):
    return UserRecord(
        id=user_id or str(uuid.uuid4()),
        name="Asha",
        email=email,
        phone="+919876543210",
        password_hash="hash",
        created_at=datetime.now(timezone.utc),
    )


def run_concurrently(target, count):
    """Start `count` threads on target(i) behind a barrier; return their results/errors."""
    barrier = threading.Barrier(count)
    results, errors = [], []
    lock = threading.Lock()

    def worker(i):
        barrier.wait()
        try:
            value = target(i)
            with lock:
                results.append(value)
        except Exception as e:
            with lock:
                errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return results, errors


def test_insert_rejects_duplicate_alert_id(storage):
    storage.alerts.insert(make_alert("dup"))
    with pytest.raises(DuplicateIdError):
        storage.alerts.insert(make_alert("dup"))


def test_get_missing_alert_raises_not_found(storage):
    with pytest.raises(NotFoundError):
        storage.alerts.get("missing")


def test_returned_alerts_are_copies(storage):
    stored = storage.alerts.insert(make_alert("a-1"))
    stored.metadata["tampered"] = True

    assert storage.alerts.get("a-1").metadata == {}


def test_update_missing_alert_raises_not_found(storage):
    with pytest.raises(NotFoundError):
        storage.alerts.update(make_alert("never-inserted"))


def test_list_by_user_since_filters_older_alerts(storage):
    old = make_alert("old").model_copy(update={"created_at": datetime(2020, 1, 1, tzinfo=timezone.utc)})
    storage.alerts.insert(old)
    storage.alerts.insert(make_alert("new"))

    recent = storage.alerts.list_by_user("user-1", since=datetime(2024, 1, 1, tzinfo=timezone.utc))

    assert [a.id for a in recent] == ["new"]
    assert len(storage.alerts.list_by_user("user-1")) == 2


def test_same_timestamp_alerts_are_newest_inserted_first(storage):
    ts = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for alert_id in ("first", "second", "third"):
        storage.alerts.insert(make_alert(alert_id).model_copy(update={"created_at": ts}))

    alerts, total = storage.alerts.query_by_user("user-1")

    assert total == 3
    assert [a.id for a in alerts] == ["third", "second", "first"]


def test_issuance_token_ids_are_sequential(storage):
    first = storage.issuances.insert(make_issuance("KEY-0000000001"))
    second = storage.issuances.insert(make_issuance("KEY-0000000002"))

    assert (first.token_id, second.token_id) == (1, 2)


def test_concurrent_issuances_get_unique_increasing_token_ids(storage):
    results, errors = run_concurrently(
        lambda i: storage.issuances.insert(make_issuance(f"KEY-{i:010d}")).token_id,
        count=25,
    )

    assert errors == []
    assert sorted(results) == list(range(1, 26))


def test_concurrent_duplicate_issuance_key_stores_exactly_one(storage):
    results, errors = run_concurrently(
        lambda i: storage.issuances.insert(make_issuance("SAME-KEY-123")),
        count=10,
    )

    assert len(results) == 1
    assert len(errors) == 9
    assert all(isinstance(e, ConflictError) for e in errors)
    assert storage.issuances.get_by_key("SAME-KEY-123").token_id == 1


def test_concurrent_signups_with_same_email_store_exactly_one(storage):
    results, errors = run_concurrently(
        lambda i: storage.users.create(make_user("race@example.com")),
        count=10,
    )

    assert len(results) == 1
    assert all(isinstance(e, ConflictError) for e in errors)


def test_find_by_email_is_case_insensitive(storage):
    user = storage.users.create(make_user("asha@example.com", user_id="u-1"))

    assert storage.users.find_by_email("ASHA@Example.com").id == user.id
    assert storage.users.get("u-1").email == "asha@example.com"
    assert storage.users.get("missing") is None


def test_tracking_points_keep_arrival_order(storage):
    storage.tracking.append(TrackingPoint(lat=29.75, lon=78.49, tag="normal"))
    storage.tracking.append(TrackingPoint(lat=26.75, lon=75.49, tag="sos"))

    assert [p.tag for p in storage.tracking.list()] == ["normal", "sos"]
