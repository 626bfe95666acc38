"""
notes_api.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Read the optional bearer token from the Authorization header.
- Build the per-request `RequestContext` (session + optional caller).
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.api.deps import db_session, settings_dep
from notes_api.auth.context import RequestContext, resolve_identity
from notes_api.auth.jwt import JwtConfig
from notes_api.settings import Settings

# auto_error=False: a missing header means "anonymous", not a 403.
_bearer = HTTPBearer(auto_error=False)


def jwt_config(settings: Settings = Depends(settings_dep)) -> JwtConfig:
    return JwtConfig.from_settings(settings)


async def request_context(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    session: AsyncSession = Depends(db_session),
    cfg: JwtConfig = Depends(jwt_config),
) -> RequestContext:
    token = creds.credentials if creds is not None else None
    user = await resolve_identity(session=session, cfg=cfg, token=token)
    return RequestContext(session=session, user=user)


# --- Module Notes -----------------------------------------------------------
# Authorization is not decided here; services call `auth.policy` against
# `RequestContext.user` so the same checks apply outside HTTP.
