"""
notes_api.db.seed

Admin bootstrap, run as `python -m notes_api.db.seed`.

Responsibilities:
- Create the configured admin account if its email is not bound yet.
- Leave an existing account untouched (idempotent).
"""

from __future__ import annotations

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.auth.password import hash_password_async
from notes_api.db.init_db import init_db
from notes_api.db.models import Role, User
from notes_api.db.repositories.users import UserRepo
from notes_api.db.session import create_engine, create_sessionmaker
from notes_api.observability.logging import configure_logging, get_logger
from notes_api.settings import Settings, get_settings

log = get_logger(__name__)


async def seed_admin(
    session: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    rounds: int = 12,
) -> User:
    users = UserRepo(session)
    existing = await users.get_by_email(email)
    if existing is not None:
        log.info("seed_admin_exists", user_id=str(existing.id), role=existing.role.value)
        return existing

    admin = await users.create(
        name=name,
        email=email,
        password_hash=await hash_password_async(password, rounds=rounds),
        role=Role.admin,
    )
    await session.commit()
    log.info("seed_admin_created", user_id=str(admin.id))
    return admin


async def run(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        if settings.env in ("dev", "test"):
            await init_db(engine)
        async with create_sessionmaker(engine)() as session:
            await seed_admin(
                session,
                name=settings.seed_admin_name,
                email=settings.seed_admin_email,
                password=settings.seed_admin_password,
                rounds=settings.password_hash_rounds,
            )
    finally:
        await engine.dispose()


def main() -> None:
    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
