"""
notes_api.auth.context

Per-request authentication context.

Responsibilities:
- Turn an optional bearer token into an optional `User`.
- Carry the request's DB session and resolved caller to the service layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.auth.jwt import InvalidToken, JwtConfig, verify_token
from notes_api.db.models import User
from notes_api.db.repositories.users import UserRepo
from notes_api.observability.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RequestContext:
    """
    Built once per request; `user` is None for anonymous callers.
    """

    session: AsyncSession
    user: User | None = None


async def resolve_identity(
    *,
    session: AsyncSession,
    cfg: JwtConfig,
    token: str | None,
) -> User | None:
    # Every failure downgrades to anonymous; policy checks raise later if needed.
    if not token:
        return None

    try:
        user_id = verify_token(cfg=cfg, token=token)
    except InvalidToken as e:
        log.debug("token_rejected", reason=str(e))
        return None

    user = await UserRepo(session).get(user_id)
    if user is None:
        log.debug("token_subject_missing", user_id=str(user_id))
    return user
