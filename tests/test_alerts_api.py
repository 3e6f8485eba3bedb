"""
HTTP tests for /api/alerts.
"""

from __future__ import annotations

import pytest

from app.models.alert import AlertStatus

PANIC = {
    "type": "PANIC_BUTTON",
    "severity": "HIGH",
    "message": "help",
    "location": {"latitude": 26.9124, "longitude": 75.7873},
}


def test_create_alert_returns_201_envelope(client, auth_headers, dispatched):
    response = client.post("/api/alerts", json=PANIC, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["message"] == "Alert created and emergency services notified"

    alert = body["data"]["alert"]
    assert alert["status"] == "ACTIVE"
    assert alert["userId"] == "user-1"
    assert alert["location"] == {"latitude": 26.9124, "longitude": 75.7873}
    assert alert["acknowledgedAt"] is None
    assert "createdAt" in alert
    assert [a.id for a in dispatched] == [alert["id"]]


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"type": "FIRE"}, "Invalid alert type"),
        ({"severity": "SEVERE"}, "Invalid severity level"),
        ({"message": ""}, "Message must be between 1 and 500 characters"),
        ({"location": {"latitude": 91, "longitude": 0}}, "Invalid latitude"),
    ],
)
def test_create_alert_rejects_invalid_fields(client, auth_headers, overrides, expected):
    response = client.post("/api/alerts", json={**PANIC, **overrides}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": expected}


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"type": "PANIC_BUTTON", "severity": "HIGH"}, "Message must be between 1 and 500 characters"),
        ({"message": "help"}, "Invalid alert type"),
        ({}, "Invalid alert type"),
    ],
)
def test_create_alert_missing_fields_report_first_rule(client, auth_headers, body, expected):
    response = client.post("/api/alerts", json=body, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": expected}


def test_create_alert_without_token_is_401(client):
    response = client.post("/api/alerts", json=PANIC)

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Access token required"}


def test_create_alert_with_bad_token_is_403(client):
    response = client.post("/api/alerts", json=PANIC, headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 403
    assert response.json()["error"] == "Invalid or expired token"


def test_list_alerts_paginates_newest_first(client, auth_headers):
    ids = []
    for i in range(3):
        response = client.post("/api/alerts", json={**PANIC, "severity": "LOW", "message": f"m{i}"}, headers=auth_headers)
        ids.append(response.json()["data"]["alert"]["id"])

    response = client.get("/api/alerts", params={"page": 1, "limit": 2}, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["pagination"] == {"page": 1, "limit": 2, "total": 3, "totalPages": 2}
    assert [a["id"] for a in data["alerts"]] == [ids[2], ids[1]]

    second = client.get("/api/alerts", params={"page": 2, "limit": 2}, headers=auth_headers).json()["data"]
    assert [a["id"] for a in second["alerts"]] == [ids[0]]


def test_list_alerts_filters_severity_and_ignores_unknown(client, auth_headers):
    client.post("/api/alerts", json=PANIC, headers=auth_headers)
    client.post("/api/alerts", json={**PANIC, "severity": "LOW"}, headers=auth_headers)

    high = client.get("/api/alerts", params={"severity": "HIGH"}, headers=auth_headers).json()["data"]
    unknown = client.get("/api/alerts", params={"severity": "urgent"}, headers=auth_headers).json()["data"]

    assert [a["severity"] for a in high["alerts"]] == ["HIGH"]
    assert unknown["pagination"]["total"] == 2


@pytest.mark.parametrize(
    "params",
    [{"limit": 0}, {"page": "abc"}, {"page": 0, "limit": "abc"}, {"page": -3, "limit": -1}],
)
def test_list_alerts_falls_back_to_default_paging(client, auth_headers, params):
    client.post("/api/alerts", json=PANIC, headers=auth_headers)

    response = client.get("/api/alerts", params=params, headers=auth_headers)

    assert response.status_code == 200
    pagination = response.json()["data"]["pagination"]
    assert pagination["page"] == 1
    assert pagination["limit"] == 20
    assert pagination["total"] == 1


def test_acknowledge_resolved_alert_is_409(client, auth_headers, storage):
    alert_id = client.post("/api/alerts", json=PANIC, headers=auth_headers).json()["data"]["alert"]["id"]
    resolved = storage.alerts.get(alert_id).model_copy(update={"status": AlertStatus.RESOLVED})
    storage.alerts.update(resolved)

    response = client.put(f"/api/alerts/{alert_id}/acknowledge", headers=auth_headers)

    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "Alert is already resolved"}


def test_list_alerts_only_shows_callers_alerts(client, auth_headers, other_auth_headers):
    client.post("/api/alerts", json=PANIC, headers=auth_headers)

    data = client.get("/api/alerts", headers=other_auth_headers).json()["data"]

    assert data["alerts"] == []
    assert data["pagination"]["totalPages"] == 0


def test_acknowledge_twice_succeeds(client, auth_headers):
    alert_id = client.post("/api/alerts", json=PANIC, headers=auth_headers).json()["data"]["alert"]["id"]

    first = client.put(f"/api/alerts/{alert_id}/acknowledge", headers=auth_headers)
    second = client.put(f"/api/alerts/{alert_id}/acknowledge", headers=auth_headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["data"]["alert"]["status"] == "ACKNOWLEDGED"
    assert second.json()["data"]["alert"]["acknowledgedAt"] >= first.json()["data"]["alert"]["acknowledgedAt"]


def test_acknowledge_other_users_alert_is_404(client, auth_headers, other_auth_headers):
    alert_id = client.post("/api/alerts", json=PANIC, headers=auth_headers).json()["data"]["alert"]["id"]

    response = client.put(f"/api/alerts/{alert_id}/acknowledge", headers=other_auth_headers)

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Alert not found"}


def test_panic_scenario_end_to_end(client, auth_headers, dispatched):
    created = client.post("/api/alerts", json={**PANIC, "location": None}, headers=auth_headers)
    alert_id = created.json()["data"]["alert"]["id"]
    assert created.status_code == 201
    assert len(dispatched) == 1

    acked = client.put(f"/api/alerts/{alert_id}/acknowledge", headers=auth_headers).json()["data"]["alert"]
    assert acked["status"] == "ACKNOWLEDGED"

    listed = client.get("/api/alerts", params={"severity": "HIGH"}, headers=auth_headers).json()["data"]
    assert [(a["id"], a["status"]) for a in listed["alerts"]] == [(alert_id, "ACKNOWLEDGED")]
