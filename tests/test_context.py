"""
tests.test_context

Identity resolution straight against the DB session, without HTTP.
"""

from __future__ import annotations

import uuid

import pytest

from notes_api.auth.context import resolve_identity
from notes_api.auth.jwt import JwtConfig, issue_token
from notes_api.db.repositories.users import UserRepo


@pytest.mark.asyncio
async def test_resolution_outcomes(app, settings) -> None:
    cfg = JwtConfig.from_settings(settings)

    async with app.state.sessionmaker() as session:
        user = await UserRepo(session).create(name="Alice", email="a@x.com", password_hash="x")
        await session.commit()

        assert await resolve_identity(session=session, cfg=cfg, token=None) is None
        assert await resolve_identity(session=session, cfg=cfg, token="") is None
        assert await resolve_identity(session=session, cfg=cfg, token="garbage") is None

        orphan = issue_token(cfg=cfg, subject=uuid.uuid4())
        assert await resolve_identity(session=session, cfg=cfg, token=orphan) is None

        token = issue_token(cfg=cfg, subject=user.id)
        resolved = await resolve_identity(session=session, cfg=cfg, token=token)
        assert resolved is not None
        assert resolved.id == user.id
