"""
HTTP tests for the dashboard, tracker feed, health checks and the error envelope.
"""

from __future__ import annotations

from app.storage.seed import DEMO_BLOCKCHAIN_ID, DEMO_EMAIL, seed_demo_data


def test_dashboard_counts_todays_alerts(client, auth_headers):
    client.post("/api/alerts", json={"type": "PANIC_BUTTON", "severity": "HIGH", "message": "help"}, headers=auth_headers)
    client.post("/api/alerts", json={"type": "AI_MONITORING", "severity": "LOW", "message": "idle"}, headers=auth_headers)

    response = client.get("/api/dashboard", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["alertsToday"] == 2
    assert data["highAlerts"] == 1
    assert data["mediumAlerts"] == 0
    assert data["lowAlerts"] == 1
    assert data["mostVisitedRegion"] == "City Center"


def test_dashboard_requires_token(client):
    assert client.get("/api/dashboard").status_code == 401


def test_analytics_echoes_period(client, auth_headers):
    response = client.get("/api/dashboard/analytics", params={"period": "30d"}, headers=auth_headers)

    data = response.json()["data"]
    assert data["period"] == "30d"
    assert data["totalAlerts"] == 0
    assert data["alertsBySeverity"] == {"HIGH": 0, "MEDIUM": 0, "LOW": 0}


def test_gps_feed_keeps_every_point(client):
    first = client.post("/gps", json={"lat": 29.75, "lon": 78.49, "tag": "normal", "timestamp": "2025-09-08 21:00"})
    second = client.post("/gps", json={"lat": 26.75, "lon": 75.49, "tag": "sos"})

    assert first.status_code == 200
    assert second.json()["data"]["status"] == "ok"
    assert [p["tag"] for p in second.json()["data"]["logs"]] == ["normal", "sos"]
    assert len(client.get("/data").json()["data"]) == 2


def test_gps_rejects_out_of_range_latitude(client):
    response = client.post("/gps", json={"lat": 120, "lon": 0})

    assert response.status_code == 400
    assert response.json()["error"].startswith("lat")


def test_health(client):
    data = client.get("/health").json()["data"]

    assert data["status"] == "OK"
    assert data["uptime"] >= 0


def test_db_health_reports_backend(client):
    response = client.get("/health/db")

    assert response.status_code == 200
    assert response.json()["data"]["backend"] == "memory"


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Route not found"}


def test_root_describes_service(client):
    body = client.get("/").json()
    assert body["success"] is True
    assert body["data"]["status"] == "running"


def test_seeded_demo_identity_verifies(client, storage):
    assert seed_demo_data(storage, bcrypt_rounds=4) is True
    assert seed_demo_data(storage, bcrypt_rounds=4) is False

    verified = client.get(f"/api/blockchain/verify/{DEMO_BLOCKCHAIN_ID}").json()["data"]
    login = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": "password"})

    assert verified["issuedAt"] == "2024-01-15T10:30:00.000Z"
    assert login.status_code == 200


def test_seed_adds_demo_gps_points_once(client, storage):
    seed_demo_data(storage, bcrypt_rounds=4)
    seed_demo_data(storage, bcrypt_rounds=4)

    points = client.get("/data").json()["data"]

    assert [p["tag"] for p in points] == ["normal", "sos", "normal"]
    assert points[1] == {"lat": 26.75281, "lon": 75.49896, "tag": "sos", "timestamp": "2025-09-08 21:00"}
