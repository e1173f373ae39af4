from __future__ import annotations

import uuid

import pytest

from app.services import id_service


def test_new_id_is_canonical_uuid4() -> None:
    value = id_service.new_id()
    assert value == str(uuid.UUID(value))
    assert uuid.UUID(value).version == 4


def test_new_id_passes_validator() -> None:
    assert id_service.is_valid_id(id_service.new_id())


def test_new_ids_are_unique() -> None:
    ids = {id_service.new_id() for _ in range(1000)}
    assert len(ids) == 1000


def test_validator_accepts_uppercase_hex() -> None:
    assert id_service.is_valid_id("3F1C2A9E-5B7D-4E2F-9C61-0A8B7D6E5F43")


@pytest.mark.parametrize(
    "value",
    [
        "",
        "abc",
        "3f1c2a9e5b7d4e2f9c610a8b7d6e5f43",
        "{3f1c2a9e-5b7d-4e2f-9c61-0a8b7d6e5f43}",
        "urn:uuid:3f1c2a9e-5b7d-4e2f-9c61-0a8b7d6e5f43",
        "3f1c2a9e-5b7d-4e2f-9c61-0a8b7d6e5f4g",
        " 3f1c2a9e-5b7d-4e2f-9c61-0a8b7d6e5f43",
        "3f1c2a9e-5b7d-4e2f-9c61-0a8b7d6e5f43\n",
    ],
)
def test_validator_rejects_malformed_values(value: str) -> None:
    assert id_service.is_valid_id(value) is False
