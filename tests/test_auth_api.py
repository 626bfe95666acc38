"""
tests.test_auth_api

Registration, login and token resolution through the HTTP surface.
"""

from __future__ import annotations

import dataclasses
import uuid
from datetime import UTC, datetime, timedelta

import pytest

import notes_api.services.users as users_service
from notes_api.auth.jwt import JwtConfig, issue_token, verify_token
from notes_api.auth.password import verify_password_async
from tests.conftest import bearer


@pytest.mark.asyncio
async def test_register_forces_regular_role(register) -> None:
    body = await register("Alice", "a@x.com", "pw1")

    assert body["token"]
    assert body["token_type"] == "bearer"
    assert body["user"]["name"] == "Alice"
    assert body["user"]["email"] == "a@x.com"
    assert body["user"]["role"] == "REGULAR"
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]


@pytest.mark.asyncio
async def test_register_ignores_role_in_body(client) -> None:
    r = await client.post(
        "/v1/auth/register",
        json={"name": "Mallory", "email": "m@x.com", "password": "pw", "role": "ADMIN"},
    )
    assert r.status_code == 201
    assert r.json()["user"]["role"] == "REGULAR"


@pytest.mark.asyncio
async def test_register_duplicate_email(client, register) -> None:
    await register("Alice", "a@x.com", "pw1")

    r = await client.post(
        "/v1/auth/register", json={"name": "Alice 2", "email": "a@x.com", "password": "pw2"}
    )
    assert r.status_code == 409
    assert r.json()["error"]["code"] == "ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_email_lookup_is_case_sensitive(client, register) -> None:
    await register("Alice", "a@x.com", "pw1")

    r = await client.post("/v1/auth/login", json={"email": "A@X.COM", "password": "pw1"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_register_requires_fields(client) -> None:
    r = await client.post("/v1/auth/register", json={"name": "", "email": "a@x.com"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "BAD_USER_INPUT"


@pytest.mark.asyncio
async def test_login_token_resolves_to_user(client, register, settings) -> None:
    registered = await register("Alice", "a@x.com", "pw1")

    r = await client.post("/v1/auth/login", json={"email": "a@x.com", "password": "pw1"})
    assert r.status_code == 200
    body = r.json()
    assert body["user"]["id"] == registered["user"]["id"]

    cfg = JwtConfig.from_settings(settings)
    assert verify_token(cfg=cfg, token=body["token"]) == uuid.UUID(registered["user"]["id"])

    r = await client.get("/v1/auth/me", headers=bearer(body["token"]))
    assert r.status_code == 200
    assert r.json()["email"] == "a@x.com"


@pytest.mark.asyncio
async def test_login_failures_are_indistinguishable(client, register) -> None:
    await register("Alice", "a@x.com", "pw1")

    wrong_password = await client.post(
        "/v1/auth/login", json={"email": "a@x.com", "password": "nope"}
    )
    unknown_email = await client.post(
        "/v1/auth/login", json={"email": "ghost@x.com", "password": "pw1"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_me_is_null_when_anonymous(client) -> None:
    r = await client.get("/v1/auth/me")
    assert r.status_code == 200
    assert r.json() is None

    r = await client.get("/v1/auth/me", headers=bearer("garbage"))
    assert r.status_code == 200
    assert r.json() is None


@pytest.mark.asyncio
async def test_expired_token_downgrades_to_anonymous(client, register, settings) -> None:
    registered = await register("Alice", "a@x.com", "pw1")

    cfg = dataclasses.replace(JwtConfig.from_settings(settings), ttl=timedelta(seconds=1))
    token = issue_token(
        cfg=cfg,
        subject=uuid.UUID(registered["user"]["id"]),
        now=datetime.now(tz=UTC) - timedelta(seconds=2),
    )

    r = await client.get("/v1/auth/me", headers=bearer(token))
    assert r.json() is None

    r = await client.get("/v1/notes", headers=bearer(token))
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "UNAUTHENTICATED"
    assert r.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_protected_operation_without_token(client) -> None:
    r = await client.post("/v1/notes", json={"title": "t", "description": "d"})
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_unknown_email_still_runs_a_password_check(client, register, monkeypatch) -> None:
    await register("Alice", "a@x.com", "pw1")
    checked: list[str] = []

    async def recording_verify(password: str, password_hash: str) -> bool:
        checked.append(password_hash)
        return await verify_password_async(password, password_hash)

    monkeypatch.setattr(users_service, "verify_password_async", recording_verify)

    r = await client.post("/v1/auth/login", json={"email": "ghost@x.com", "password": "pw1"})
    assert r.status_code == 401
    assert len(checked) == 1
    assert checked[0].startswith("$2b$04$")

    r = await client.post("/v1/auth/login", json={"email": "a@x.com", "password": "nope"})
    assert r.status_code == 401
    assert len(checked) == 2
