"""Demo: create, list and fetch users using FastAPI TestClient.

Run with:
    python scripts/demo_users_flow.py
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import app


def main() -> None:
    client = TestClient(app)

    # ── Empty directory ─────────────────────────────────────────────
    resp = client.get("/users")
    print(f"GET /users                -> {resp.status_code} {resp.json()}")

    # ── Create ──────────────────────────────────────────────────────
    payload = {"name": "Alice", "email": "alice@example.com", "password": "secret123"}
    resp = client.post("/users/create", json=payload)
    print(f"POST /users/create        -> {resp.status_code} {resp.json()}")
    user_id = resp.json()["id"]

    resp = client.post("/users/create", json=payload)
    print(f"POST /users/create (dupe) -> {resp.status_code} {resp.json()}")

    # ── Read ────────────────────────────────────────────────────────
    resp = client.get("/users")
    print(f"GET /users                -> {resp.status_code} {resp.json()}")

    resp = client.get(f"/users/{user_id}")
    print(f"GET /users/{{id}}           -> {resp.status_code} {resp.json()}")

    resp = client.get("/users/not-an-id")
    print(f"GET /users/not-an-id      -> {resp.status_code} {resp.json()}")


if __name__ == "__main__":
    main()
