"""
notes_api.api.routers.auth

Public account endpoints.

Responsibilities:
- Register and log in (both return a bearer token plus the user and their notes).
- Report the caller's own identity (`null` when anonymous).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from notes_api.api.deps import settings_dep
from notes_api.auth.context import RequestContext
from notes_api.auth.deps import jwt_config, request_context
from notes_api.auth.jwt import JwtConfig
from notes_api.contracts import AuthPayload, LoginInput, RegisterInput, UserView
from notes_api.services.users import UserService
from notes_api.settings import Settings

router = APIRouter(prefix="/v1/auth", tags=["auth"])


def user_service(
    ctx: RequestContext = Depends(request_context),
    cfg: JwtConfig = Depends(jwt_config),
    settings: Settings = Depends(settings_dep),
) -> UserService:
    return UserService(ctx=ctx, jwt_cfg=cfg, password_rounds=settings.password_hash_rounds)


@router.post("/register", response_model=AuthPayload, status_code=HTTP_201_CREATED)
async def register(
    body: RegisterInput,
    svc: UserService = Depends(user_service),
) -> AuthPayload:
    return await svc.register(body)


@router.post("/login", response_model=AuthPayload)
async def login(
    body: LoginInput,
    svc: UserService = Depends(user_service),
) -> AuthPayload:
    return await svc.login(body)


@router.get("/me", response_model=UserView | None)
async def me(svc: UserService = Depends(user_service)) -> UserView | None:
    return await svc.me()
