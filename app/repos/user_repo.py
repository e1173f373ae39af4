from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from app.models.user import User, UserPublic
from app.services import id_service


class DuplicateEmailError(Exception):
    """The store's uniqueness constraint rejected an insert."""


class UserRepo(Protocol):
    async def get_by_id(self, user_id: str) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...
    async def add(self, *, name: str, email: str, password_hash: str) -> User: ...
    async def list_public(self) -> list[UserPublic]: ...


class InMemoryUserRepo:
    def __init__(self, id_factory: Callable[[], str] = id_service.new_id) -> None:
        self._new_id = id_factory
        self._by_email: dict[str, User] = {}
        self._by_id: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return self._by_email.get(email)

    async def add(self, *, name: str, email: str, password_hash: str) -> User:
        # Mirrors the UNIQUE constraint on users.email
        if email in self._by_email:
            raise DuplicateEmailError(email)
        user = User(
            id=self._new_id(),
            name=name,
            email=email,
            password_hash=password_hash,
        )
        self._by_email[user.email] = user
        self._by_id[user.id] = user
        return user

    async def list_public(self) -> list[UserPublic]:
        return [u.to_public() for u in self._by_id.values()]

    def clear(self) -> None:
        self._by_email.clear()
        self._by_id.clear()
