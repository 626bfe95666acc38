"""
notes_api.api.routers.users

User management endpoints.

Responsibilities:
- Admin-only listing, lookup, provisioning and deletion; every user view embeds its notes.
- Profile updates: self for any authenticated caller, anyone for admins.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from notes_api.api.routers.auth import user_service
from notes_api.contracts import (
    CreateUserInput,
    DeletedResponse,
    UpdateUserInput,
    UserView,
)
from notes_api.services.users import UserService

router = APIRouter(prefix="/v1/users", tags=["users"])


@router.get("", response_model=list[UserView])
async def list_users(svc: UserService = Depends(user_service)) -> list[UserView]:
    return await svc.list_users()


@router.post("", response_model=UserView, status_code=HTTP_201_CREATED)
async def create_user(
    body: CreateUserInput,
    svc: UserService = Depends(user_service),
) -> UserView:
    return await svc.create_user(body)


@router.get("/{user_id}", response_model=UserView)
async def get_user(
    user_id: str,
    svc: UserService = Depends(user_service),
) -> UserView:
    return await svc.get_user(user_id)


@router.patch("/{user_id}", response_model=UserView)
async def update_user(
    user_id: str,
    body: UpdateUserInput,
    svc: UserService = Depends(user_service),
) -> UserView:
    return await svc.update_user(user_id, body)


@router.delete("/{user_id}", response_model=DeletedResponse)
async def delete_user(
    user_id: str,
    svc: UserService = Depends(user_service),
) -> DeletedResponse:
    await svc.delete_user(user_id)
    return DeletedResponse()
