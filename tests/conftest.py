"""
tests.conftest

Shared fixtures: an app bound to a throwaway SQLite file, an in-process HTTP
client, and helpers for registering users and obtaining an admin token.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from notes_api.api.app import create_app
from notes_api.db.seed import seed_admin
from notes_api.settings import Settings

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}",
        jwt_secret="test-secret",
        password_hash_rounds=4,
    )


@pytest_asyncio.fixture()
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx's ASGITransport does not run lifespan events; enter it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture()
def register(client: httpx.AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def _register(name: str, email: str, password: str = "pw1") -> dict[str, Any]:
        r = await client.post(
            "/v1/auth/register", json={"name": name, "email": email, "password": password}
        )
        assert r.status_code == 201, r.text
        return r.json()

    return _register


@pytest_asyncio.fixture()
async def admin_token(app: FastAPI, client: httpx.AsyncClient) -> str:
    async with app.state.sessionmaker() as session:
        await seed_admin(
            session, name="Admin User", email=ADMIN_EMAIL, password=ADMIN_PASSWORD, rounds=4
        )
    r = await client.post(
        "/v1/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert r.status_code == 200, r.text
    return r.json()["token"]
