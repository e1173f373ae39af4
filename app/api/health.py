"""Liveness endpoint.

/health answers "is this process alive?" and reports whether the record
store is reachable.  A failing database does not fail the liveness
check; it is reported under checks.database.
"""

from __future__ import annotations

from fastapi import APIRouter

from app.db.engine import ping_database

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "checks": {"database": await ping_database()}}
