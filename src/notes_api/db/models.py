"""
notes_api.db.models

Persistence schema for the notes service.

Responsibilities:
- Define ORM models:
  - User: account identity with a unique email and a role
  - Note: a titled text record owned by exactly one user
"""

from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, ForeignKey, Index, String, Text, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from notes_api.db.base import Base


def _utcnow() -> datetime:
    # Naive UTC; SQLite drops tzinfo anyway.
    return datetime.now(tz=UTC).replace(tzinfo=None)


class Role(enum.StrEnum):
    # Stored in DB; treat values as a stable API contract.
    regular = "REGULAR"
    admin = "ADMIN"


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=Role.regular,
    )

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin


class Note(Base):
    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("ix_notes_author_created", "author_id", "created_at"),)


# --- Module Notes -----------------------------------------------------------
# No ORM relationships: notes for a user are always loaded through `NoteRepo`
# so every query under the async session is explicit and awaited.
