"""Assert that passwords and password hashes never appear in log output."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from app.api import dependencies

TEST_EMAIL = "secrets-test@example.com"
TEST_PASSWORD = "super-s3cret-p@ssw0rd!"


def _payload() -> dict[str, str]:
    return {"name": "Secret Tester", "email": TEST_EMAIL, "password": TEST_PASSWORD}


def test_create_does_not_log_password_or_hash(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG):
        resp = client.post("/users/create", json=_payload())
    assert resp.status_code == 201

    stored = dependencies.user_repo._by_id[resp.json()["id"]]
    all_log_text = " ".join(caplog.messages)
    assert TEST_PASSWORD not in all_log_text, "Password found in log output!"
    assert stored.password_hash not in all_log_text, "Hash found in log output!"


def test_duplicate_create_does_not_log_password(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    client.post("/users/create", json=_payload())

    with caplog.at_level(logging.DEBUG):
        resp = client.post("/users/create", json=_payload())
    assert resp.status_code == 409

    all_log_text = " ".join(caplog.messages)
    assert TEST_PASSWORD not in all_log_text, "Password found in log output!"


def test_reads_do_not_log_hash(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    user_id = client.post("/users/create", json=_payload()).json()["id"]
    stored = dependencies.user_repo._by_id[user_id]

    with caplog.at_level(logging.DEBUG):
        client.get("/users")
        client.get(f"/users/{user_id}")

    all_log_text = " ".join(caplog.messages)
    assert stored.password_hash not in all_log_text, "Hash found in log output!"
