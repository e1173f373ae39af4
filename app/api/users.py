from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from app.api.dependencies import get_users_service
from app.models.user import UserPublic
from app.services.users_service import (
    BadRequestError,
    ConflictError,
    InternalError,
    NotFoundError,
    UserServiceError,
    UsersService,
)

logger = logging.getLogger(__name__)

# Endpoint logic - GET /users, GET /users/{user_id}, POST /users/create
# Delegates to UsersService; maps its error categories to status codes.

router = APIRouter(prefix="/users", tags=["users"])

_STATUS_BY_ERROR: dict[type[UserServiceError], int] = {
    BadRequestError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_ERROR_RESPONSES = {
    400: {"description": "Invalid input or malformed user ID"},
    404: {"description": "User(s) not found"},
    409: {"description": "A user with this email already exists"},
    500: {"description": "Unexpected store failure"},
}


# --- Request / Response schemas -------------------------------------------


class UserOut(BaseModel):
    id: str = Field(examples=["3f1c2a9e-5b7d-4e2f-9c61-0a8b7d6e5f43"])
    name: str = Field(examples=["Alice"])
    email: str = Field(examples=["alice@example.com"])

    @classmethod
    def from_public(cls, user: UserPublic) -> UserOut:
        return cls(id=user.id, name=user.name, email=user.email)


class UserCreateIn(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"name": "Alice", "email": "alice@example.com", "password": "secret123"}
            ]
        }
    )

    name: str
    email: str
    password: str = Field(repr=False)


def _to_http(exc: UserServiceError) -> HTTPException:
    return HTTPException(status_code=_STATUS_BY_ERROR[type(exc)], detail=exc.message)


# --- Routes ---------------------------------------------------------------


@router.get(
    "",
    response_model=list[UserOut],
    responses={k: _ERROR_RESPONSES[k] for k in (404, 500)},
)
async def get_users(
    service: Annotated[UsersService, Depends(get_users_service)],
) -> list[UserOut]:
    try:
        users = await service.find_all()
    except UserServiceError as e:
        raise _to_http(e) from None
    return [UserOut.from_public(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserOut,
    responses={k: _ERROR_RESPONSES[k] for k in (400, 404, 500)},
)
async def get_user(
    user_id: str,
    service: Annotated[UsersService, Depends(get_users_service)],
) -> UserOut:
    try:
        user = await service.find_one(user_id)
    except UserServiceError as e:
        raise _to_http(e) from None
    return UserOut.from_public(user)


@router.post(
    "/create",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    responses={k: _ERROR_RESPONSES[k] for k in (400, 409, 500)},
)
async def create_user(
    payload: UserCreateIn,
    service: Annotated[UsersService, Depends(get_users_service)],
) -> UserOut:
    try:
        user = await service.create(
            name=payload.name, email=payload.email, password=payload.password
        )
    except UserServiceError as e:
        raise _to_http(e) from None
    return UserOut.from_public(user)
