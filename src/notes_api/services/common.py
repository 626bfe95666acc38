"""
notes_api.services.common

Helpers shared by the user and note services.

Responsibilities:
- Parse raw path ids; an id that does not parse is reported as `NotFound`.
- Assemble nested views with one batched query per level.
"""

from __future__ import annotations

import uuid
from collections import defaultdict

from notes_api.contracts import NoteSummary, NoteView, UserSummary, UserView
from notes_api.db.models import Note, User
from notes_api.db.repositories.notes import NoteRepo
from notes_api.db.repositories.users import UserRepo
from notes_api.errors import NotFound


def parse_id(raw: str, *, message: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError as e:
        raise NotFound(message) from e


async def user_views(notes: NoteRepo, users: list[User]) -> list[UserView]:
    by_author: dict[uuid.UUID, list[NoteSummary]] = defaultdict(list)
    # Query order is newest first, so each bucket stays newest first.
    for n in await notes.list_for_authors([u.id for u in users]):
        by_author[n.author_id].append(NoteSummary.model_validate(n))
    return [
        UserView(**UserSummary.model_validate(u).model_dump(), notes=by_author[u.id])
        for u in users
    ]


async def user_view(notes: NoteRepo, user: User) -> UserView:
    return (await user_views(notes, [user]))[0]


async def note_views(users: UserRepo, notes: list[Note]) -> list[NoteView]:
    author_ids = list({n.author_id for n in notes})
    authors = {u.id: UserSummary.model_validate(u) for u in await users.get_many(author_ids)}
    return [
        NoteView(**NoteSummary.model_validate(n).model_dump(), author=authors[n.author_id])
        for n in notes
    ]


async def note_view(users: UserRepo, note: Note) -> NoteView:
    return (await note_views(users, [note]))[0]
