"""User directory: create, list and fetch users.

Every operation returns UserPublic projections and fails with one of the
UserServiceError categories below.  The HTTP layer maps each category to
a status code; nothing store-specific leaks past this module.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from app.core.metrics import USER_CREATE_CONFLICTS, USERS_CREATED
from app.models.user import UserPublic
from app.repos.user_repo import DuplicateEmailError, UserRepo
from app.services import id_service, password_service

logger = logging.getLogger(__name__)

_DUPLICATE_EMAIL = "A user with this email already exists"
_INTERNAL = "Internal server error"


class UserServiceError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(UserServiceError):
    pass


class ConflictError(UserServiceError):
    pass


class NotFoundError(UserServiceError):
    pass


class InternalError(UserServiceError):
    pass


def _require(value: str | None, field: str) -> str:
    value = (value or "").strip()
    if not value:
        logger.warning("Rejected blank %s", field)
        raise BadRequestError(f"{field} is required")
    return value


class UsersService:
    """Owns the user lifecycle. Holds no state between calls."""

    def __init__(
        self,
        repo: UserRepo,
        *,
        hash_password: Callable[[str], str] = password_service.hash_password,
        is_valid_id: Callable[[str], bool] = id_service.is_valid_id,
    ) -> None:
        self._repo = repo
        self._hash_password = hash_password
        self._is_valid_id = is_valid_id

    async def create(self, name: str, email: str, password: str) -> UserPublic:
        name = _require(name, "name")
        email = _require(email, "email").lower()
        if not password:
            logger.warning("Rejected blank password")
            raise BadRequestError("password is required")

        try:
            if await self._repo.get_by_email(email) is not None:
                logger.warning("Rejected duplicate email=%s", email)
                USER_CREATE_CONFLICTS.labels(detected_by="precheck").inc()
                raise ConflictError(_DUPLICATE_EMAIL)

            # argon2 is CPU-bound; keep it off the event loop
            password_hash = await asyncio.to_thread(self._hash_password, password)
            user = await self._repo.add(
                name=name, email=email, password_hash=password_hash
            )
        except UserServiceError:
            raise
        except DuplicateEmailError:
            # Another request inserted the same email after our pre-check
            logger.warning("Rejected duplicate email=%s (constraint)", email)
            USER_CREATE_CONFLICTS.labels(detected_by="constraint").inc()
            raise ConflictError(_DUPLICATE_EMAIL) from None
        except Exception as e:
            # No traceback: driver errors can echo the INSERT parameters
            logger.error(
                "Failed to create user email=%s error=%s", email, type(e).__name__
            )
            raise InternalError(_INTERNAL) from None

        USERS_CREATED.inc()
        logger.info("Created user id=%s email=%s", user.id, user.email)
        return user.to_public()

    async def find_all(self) -> list[UserPublic]:
        try:
            users = await self._repo.list_public()
            if not users:
                raise NotFoundError("No users found")
        except UserServiceError:
            raise
        except Exception:
            logger.exception("Failed to list users")
            raise InternalError(_INTERNAL) from None

        logger.debug("Listed %d users", len(users))
        return users

    async def find_one(self, user_id: str) -> UserPublic:
        if not self._is_valid_id(user_id):
            logger.warning("Rejected malformed user id=%r", user_id)
            raise BadRequestError("Invalid user ID format")
        user_id = user_id.lower()

        try:
            user = await self._repo.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found")
        except UserServiceError:
            raise
        except Exception:
            logger.exception("Failed to fetch user id=%s", user_id)
            raise InternalError(_INTERNAL) from None

        return user.to_public()
