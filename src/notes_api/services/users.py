"""
notes_api.services.users

Account use-cases: registration, login and user management.

Responsibilities:
- Apply the authorization policy before any write.
- Hash passwords in a worker thread and issue tokens.
- Own transaction boundaries (commit/rollback) for user writes.
- Translate email uniqueness violations into `AlreadyExists`.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError

from notes_api.auth.context import RequestContext
from notes_api.auth.jwt import JwtConfig, issue_token
from notes_api.auth.password import (
    dummy_hash_async,
    hash_password_async,
    verify_password_async,
)
from notes_api.auth.policy import require_admin, require_authenticated
from notes_api.contracts import (
    AuthPayload,
    CreateUserInput,
    LoginInput,
    RegisterInput,
    UpdateUserInput,
    UserView,
)
from notes_api.db.models import Role, User
from notes_api.db.repositories.notes import NoteRepo
from notes_api.db.repositories.users import UserRepo
from notes_api.errors import AlreadyExists, InvalidCredentials, NotFound
from notes_api.observability.logging import get_logger
from notes_api.services.common import parse_id, user_view, user_views

log = get_logger(__name__)

_EMAIL_TAKEN = "User already exists with this email"
_USER_NOT_FOUND = "User not found"


class UserService:
    def __init__(
        self,
        *,
        ctx: RequestContext,
        jwt_cfg: JwtConfig,
        password_rounds: int = 12,
    ) -> None:
        self._ctx = ctx
        self._session = ctx.session
        self._jwt_cfg = jwt_cfg
        self._password_rounds = password_rounds

        self._users = UserRepo(ctx.session)
        self._notes = NoteRepo(ctx.session)

    # --- Public --------------------------------------------------------------

    async def register(self, body: RegisterInput) -> AuthPayload:
        await self._ensure_email_free(body.email)
        password_hash = await self._hash(body.password)
        async with self._email_write():
            # Self-service accounts are always REGULAR.
            user = await self._users.create(
                name=body.name,
                email=body.email,
                password_hash=password_hash,
                role=Role.regular,
            )
        log.info("user_registered", user_id=str(user.id))
        return await self._auth_payload(user)

    async def login(self, body: LoginInput) -> AuthPayload:
        user = await self._users.get_by_email(body.email)
        # Unknown emails still pay for one bcrypt check.
        if user is None:
            stored = await dummy_hash_async(self._password_rounds)
        else:
            stored = user.password_hash
        ok = await verify_password_async(body.password, stored)
        # Same error for unknown email and wrong password.
        if user is None or not ok:
            log.info("login_failed")
            raise InvalidCredentials()
        log.info("user_logged_in", user_id=str(user.id))
        return await self._auth_payload(user)

    async def me(self) -> UserView | None:
        if self._ctx.user is None:
            return None
        return await user_view(self._notes, self._ctx.user)

    async def list_users(self) -> list[UserView]:
        require_admin(self._ctx.user)
        return await user_views(self._notes, await self._users.list_all())

    async def get_user(self, raw_id: str) -> UserView:
        require_admin(self._ctx.user)
        user = await self._get_or_404(parse_id(raw_id, message=_USER_NOT_FOUND))
        return await user_view(self._notes, user)

    async def create_user(self, body: CreateUserInput) -> UserView:
        admin = require_admin(self._ctx.user)
        await self._ensure_email_free(body.email)
        password_hash = await self._hash(body.password)
        async with self._email_write():
            user = await self._users.create(
                name=body.name,
                email=body.email,
                password_hash=password_hash,
                role=body.role,
            )
        log.info("user_provisioned", user_id=str(user.id), role=user.role.value, by=str(admin.id))
        return await user_view(self._notes, user)

    async def update_user(self, raw_id: str, body: UpdateUserInput) -> UserView:
        caller = self._ctx.user
        if caller is not None and str(caller.id) == self._normalize(raw_id):
            caller = require_authenticated(caller)
        else:
            caller = require_admin(caller)

        user = await self._get_or_404(parse_id(raw_id, message=_USER_NOT_FOUND))

        role = body.role
        if role is not None and not caller.is_admin:
            # Non-admin role changes are dropped, not rejected.
            log.info("role_change_dropped", user_id=str(user.id))
            role = None

        if body.email is not None and body.email != user.email:
            await self._ensure_email_free(body.email)

        password_hash = await self._hash(body.password) if body.password is not None else None
        async with self._email_write():
            await self._users.patch(
                user,
                name=body.name,
                email=body.email,
                password_hash=password_hash,
                role=role,
            )
        log.info("user_updated", user_id=str(user.id), by=str(caller.id))
        return await user_view(self._notes, user)

    async def delete_user(self, raw_id: str) -> None:
        admin = require_admin(self._ctx.user)
        user = await self._get_or_404(parse_id(raw_id, message=_USER_NOT_FOUND))
        user_id = user.id
        # Notes first, then the user, in one transaction.
        removed = await self._notes.delete_for_author(user_id)
        await self._users.delete(user)
        await self._session.commit()
        log.info("user_deleted", user_id=str(user_id), notes_removed=removed, by=str(admin.id))

    # --- Internal ------------------------------------------------------------

    async def _hash(self, password: str) -> str:
        return await hash_password_async(password, rounds=self._password_rounds)

    async def _auth_payload(self, user: User) -> AuthPayload:
        token = issue_token(cfg=self._jwt_cfg, subject=user.id)
        return AuthPayload(token=token, user=await user_view(self._notes, user))

    @staticmethod
    def _normalize(raw_id: str) -> str | None:
        try:
            return str(uuid.UUID(raw_id))
        except ValueError:
            return None

    async def _get_or_404(self, user_id: uuid.UUID) -> User:
        user = await self._users.get(user_id)
        if user is None:
            raise NotFound(_USER_NOT_FOUND)
        return user

    async def _ensure_email_free(self, email: str) -> None:
        if await self._users.get_by_email(email) is not None:
            raise AlreadyExists(_EMAIL_TAKEN)

    @asynccontextmanager
    async def _email_write(self) -> AsyncIterator[None]:
        # Concurrent writers can still race past `_ensure_email_free`; the unique
        # index is the final arbiter.
        try:
            yield
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise AlreadyExists(_EMAIL_TAKEN) from e
