from __future__ import annotations

import os
import sys
from pathlib import Path

# Settings are read at import time: pin them before `app` is imported.
os.environ["APP_ENV"] = "test"
os.environ.pop("DATABASE_URL", None)

# Ensure repo root is on sys.path so `import app` works under pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.api.dependencies import user_repo  # noqa: E402
from app.main import app  # noqa: E402
from app.repos.user_repo import InMemoryUserRepo  # noqa: E402
from app.services.users_service import UsersService  # noqa: E402


def fake_hash(plain: str) -> str:
    """Cheap stand-in for argon2 in service unit tests."""
    return f"hashed::{plain[::-1]}"


@pytest.fixture(autouse=True)
def reset_users_state() -> None:
    """Clear the app's in-memory user repo between tests."""
    user_repo.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def repo() -> InMemoryUserRepo:
    return InMemoryUserRepo()


@pytest.fixture
def service(repo: InMemoryUserRepo) -> UsersService:
    return UsersService(repo, hash_password=fake_hash)


def create_payload(
    name: str = "Alice",
    email: str = "alice@example.com",
    password: str = "secret123",
) -> dict[str, str]:
    return {"name": name, "email": email, "password": password}
