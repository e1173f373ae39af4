from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.api import health


def test_health_returns_ok(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    # In tests, no database is configured
    assert data["checks"]["database"] == "not_configured"


def test_health_stays_ok_when_database_is_down(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def failing_ping() -> str:
        return "error"

    monkeypatch.setattr(health, "ping_database", failing_ping)

    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "checks": {"database": "error"}}
