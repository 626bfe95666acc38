"""
notes_api.services.notes

Note use-cases.

Responsibilities:
- Create notes owned by the caller.
- Read/update/delete with `NotFound` checked before ownership.
- List the caller's notes, or every note for admins, newest first.
- Embed each note's author in the returned views.
"""

from __future__ import annotations

from notes_api.auth.context import RequestContext
from notes_api.auth.policy import require_admin, require_authenticated, require_owner_or_admin
from notes_api.contracts import CreateNoteInput, NoteView, UpdateNoteInput
from notes_api.db.models import Note
from notes_api.db.repositories.notes import NoteRepo
from notes_api.db.repositories.users import UserRepo
from notes_api.errors import NotFound
from notes_api.observability.logging import get_logger
from notes_api.services.common import note_view, note_views, parse_id

log = get_logger(__name__)

_NOTE_NOT_FOUND = "Note not found"


class NoteService:
    def __init__(self, *, ctx: RequestContext) -> None:
        self._ctx = ctx
        self._session = ctx.session
        self._notes = NoteRepo(ctx.session)
        self._users = UserRepo(ctx.session)

    async def my_notes(self) -> list[NoteView]:
        caller = require_authenticated(self._ctx.user)
        return await note_views(self._users, await self._notes.list_for_author(caller.id))

    async def all_notes(self) -> list[NoteView]:
        require_admin(self._ctx.user)
        return await note_views(self._users, await self._notes.list_all())

    async def get_note(self, raw_id: str) -> NoteView:
        note = await self._load_for_caller(raw_id)
        return await note_view(self._users, note)

    async def create_note(self, body: CreateNoteInput) -> NoteView:
        caller = require_authenticated(self._ctx.user)
        # Ownership always comes from the caller, never from input.
        note = await self._notes.create(
            author_id=caller.id, title=body.title, description=body.description
        )
        await self._session.commit()
        log.info("note_created", note_id=str(note.id), author_id=str(caller.id))
        return await note_view(self._users, note)

    async def update_note(self, raw_id: str, body: UpdateNoteInput) -> NoteView:
        note = await self._load_for_caller(raw_id)
        await self._notes.patch(note, title=body.title, description=body.description)
        await self._session.commit()
        log.info("note_updated", note_id=str(note.id))
        return await note_view(self._users, note)

    async def delete_note(self, raw_id: str) -> None:
        note = await self._load_for_caller(raw_id)
        note_id = note.id
        await self._notes.delete(note)
        await self._session.commit()
        log.info("note_deleted", note_id=str(note_id))

    async def _load_for_caller(self, raw_id: str) -> Note:
        caller = require_authenticated(self._ctx.user)
        note = await self._notes.get(parse_id(raw_id, message=_NOTE_NOT_FOUND))
        if note is None:
            raise NotFound(_NOTE_NOT_FOUND)
        require_owner_or_admin(caller, note.author_id)
        return note


# --- Module Notes -----------------------------------------------------------
# A missing or unparseable note id is reported as NOT_FOUND to every
# authenticated caller; only an existing note owned by someone else yields
# FORBIDDEN.
