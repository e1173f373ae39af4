"""PostgreSQL implementation of UserRepo."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.tables import UserRow
from app.models.user import User, UserPublic
from app.repos.user_repo import DuplicateEmailError


class PgUserRepo:
    """Satisfies the UserRepo Protocol using PostgreSQL via SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: str) -> User | None:
        stmt = select(UserRow).where(UserRow.id == UUID(user_id))
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        if row is None:
            return None
        return _row_to_user(row)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserRow).where(UserRow.email == email)
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        if row is None:
            return None
        return _row_to_user(row)

    async def add(self, *, name: str, email: str, password_hash: str) -> User:
        # id is left unset; the column default assigns it on flush
        row = UserRow(name=name, email=email, password_hash=password_hash)
        self._session.add(row)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            raise DuplicateEmailError(email) from None
        return _row_to_user(row)

    async def list_public(self) -> list[UserPublic]:
        stmt = select(UserRow.id, UserRow.name, UserRow.email)
        rows = (await self._session.execute(stmt)).all()
        return [UserPublic(id=str(r.id), name=r.name, email=r.email) for r in rows]


def _row_to_user(row: UserRow) -> User:
    return User(
        id=str(row.id),
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
    )
