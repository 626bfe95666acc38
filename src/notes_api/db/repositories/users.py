"""
notes_api.db.repositories.users

Repository for `User` entities.

Responsibilities:
- Create, fetch, patch and delete users.
- Look users up by their (case-sensitive) email.
"""

from __future__ import annotations

import uuid

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.db.models import Role, User


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.regular,
    ) -> User:
        user = User(name=name, email=email, password_hash=password_hash, role=role)
        self._session.add(user)
        await self._session.flush()
        return user

    async def get(self, user_id: uuid.UUID) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def get_many(self, user_ids: list[uuid.UUID]) -> list[User]:
        if not user_ids:
            return []
        stmt = select(User).where(User.id.in_(user_ids))
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_all(self) -> list[User]:
        stmt = select(User).order_by(desc(User.created_at))
        return list((await self._session.execute(stmt)).scalars().all())

    async def patch(
        self,
        user: User,
        *,
        name: str | None = None,
        email: str | None = None,
        password_hash: str | None = None,
        role: Role | None = None,
    ) -> User:
        if name is not None:
            user.name = name
        if email is not None:
            user.email = email
        if password_hash is not None:
            user.password_hash = password_hash
        if role is not None:
            user.role = role
        await self._session.flush()
        return user

    async def delete(self, user: User) -> None:
        await self._session.delete(user)
        await self._session.flush()
