"""
notes_api.db.repositories.notes

Repository for `Note` entities.

Responsibilities:
- Create, fetch, patch and delete notes.
- List notes newest first, for one author, a batch of authors or everyone.
- Bulk-delete an author's notes when the account goes away.
"""

from __future__ import annotations

import uuid

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.db.models import Note


class NoteRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, author_id: uuid.UUID, title: str, description: str) -> Note:
        note = Note(author_id=author_id, title=title, description=description)
        self._session.add(note)
        await self._session.flush()
        return note

    async def get(self, note_id: uuid.UUID) -> Note | None:
        return await self._session.get(Note, note_id)

    async def list_for_author(self, author_id: uuid.UUID) -> list[Note]:
        # Newest-first, matching every list surface of the API.
        stmt = (
            select(Note)
            .where(Note.author_id == author_id)
            .order_by(desc(Note.created_at))
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_for_authors(self, author_ids: list[uuid.UUID]) -> list[Note]:
        if not author_ids:
            return []
        stmt = (
            select(Note)
            .where(Note.author_id.in_(author_ids))
            .order_by(desc(Note.created_at))
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_all(self) -> list[Note]:
        stmt = select(Note).order_by(desc(Note.created_at))
        return list((await self._session.execute(stmt)).scalars().all())

    async def patch(
        self,
        note: Note,
        *,
        title: str | None = None,
        description: str | None = None,
    ) -> Note:
        if title is not None:
            note.title = title
        if description is not None:
            note.description = description
        await self._session.flush()
        return note

    async def delete(self, note: Note) -> None:
        await self._session.delete(note)
        await self._session.flush()

    async def delete_for_author(self, author_id: uuid.UUID) -> int:
        result = await self._session.execute(delete(Note).where(Note.author_id == author_id))
        return result.rowcount or 0
