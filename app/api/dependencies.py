from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from app.db import engine as db
from app.repos.pg_user_repo import PgUserRepo
from app.repos.user_repo import InMemoryUserRepo
from app.services.users_service import UsersService

logger = logging.getLogger(__name__)

# Used when DATABASE_URL is not configured (dev, tests)
user_repo = InMemoryUserRepo()


async def get_users_service() -> AsyncGenerator[UsersService, None]:
    """Build a UsersService per request.

    With a database, the service gets a PgUserRepo bound to a request-scoped
    session (commit on success, rollback on error).  Without one, it shares
    the process-wide in-memory repo.
    """
    if db.async_session_factory is None:
        yield UsersService(user_repo)
        return

    async with db.session_scope() as session:
        yield UsersService(PgUserRepo(session))
