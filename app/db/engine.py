"""Record store wiring: async engine, per-request sessions, health ping.

Without DATABASE_URL, `engine` and `async_session_factory` stay None and
the API serves users from the in-memory repository instead.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import SETTINGS

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for the users table."""


def _build_engine(url: str | None) -> AsyncEngine | None:
    if not url:
        return None
    # SQL logging goes through the "sqlalchemy.engine" logger, not echo=,
    # so it keeps our formatters and request ids.
    # hide_parameters keeps INSERT values (password hashes) out of errors.
    return create_async_engine(url, hide_parameters=True, pool_pre_ping=True)


engine = _build_engine(SETTINGS.database_url)
async_session_factory = (
    async_sessionmaker(engine, expire_on_commit=False) if engine is not None else None
)


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """One session per request: commit if the handler succeeds, else roll back."""
    if async_session_factory is None:
        raise RuntimeError("DATABASE_URL is not configured")
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def ping_database() -> str:
    """Return "ok", "error", or "not_configured" for the health endpoint."""
    if engine is None:
        return "not_configured"
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.warning("Database ping failed", exc_info=True)
        return "error"
    return "ok"


@asynccontextmanager
async def lifespan_db():
    if engine is None:
        logger.info("No DATABASE_URL configured, serving users from memory")
        yield
        return

    # render_as_string hides the password by default
    logger.info("User store connected: %s", engine.url.render_as_string())
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("User store disconnected")
