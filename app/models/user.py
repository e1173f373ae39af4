from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    id: str
    name: str
    email: str
    password_hash: str

    def to_public(self) -> UserPublic:
        return UserPublic(id=self.id, name=self.name, email=self.email)

    def __repr__(self) -> str:
        # password_hash stays out of reprs, tracebacks and log lines
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"


@dataclass(frozen=True, slots=True)
class UserPublic:
    """Read-facing projection of a User. Carries no password material."""

    id: str
    name: str
    email: str
