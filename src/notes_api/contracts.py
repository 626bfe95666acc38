"""
notes_api.contracts

Request/response models for every operation of the service.

Responsibilities:
- Define inputs with presence checks only (non-empty strings).
- Define outward views; `UserView` never carries the password hash.

These models do not depend on FastAPI and are shared by services and routers.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from notes_api.db.models import Role

# --- Inputs ------------------------------------------------------------------


class RegisterInput(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1)


class LoginInput(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class CreateUserInput(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1)
    role: Role = Role.regular


class UpdateUserInput(BaseModel):
    # Omitted or null fields are left unchanged.
    name: str | None = Field(default=None, min_length=1, max_length=256)
    email: str | None = Field(default=None, min_length=1, max_length=320)
    password: str | None = Field(default=None, min_length=1)
    role: Role | None = None


class CreateNoteInput(BaseModel):
    title: str = Field(min_length=1, max_length=512)
    description: str = Field(min_length=1)


class UpdateNoteInput(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=512)
    description: str | None = Field(default=None, min_length=1)


# --- Views -------------------------------------------------------------------
# One level of nesting: a user embeds flat notes, a note embeds its flat author.


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime


class NoteSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    description: str
    author_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class UserView(UserSummary):
    # Newest first.
    notes: list[NoteSummary] = Field(default_factory=list)


class NoteView(NoteSummary):
    author: UserSummary


class AuthPayload(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserView


class DeletedResponse(BaseModel):
    deleted: bool = True
