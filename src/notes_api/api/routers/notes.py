"""
notes_api.api.routers.notes

Note endpoints.

Responsibilities:
- CRUD on the caller's notes; admins may act on any note.
- Every returned note embeds its author.

Path ids are plain strings; the service reports one that does not parse as
`NOT_FOUND`, after authentication.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from notes_api.auth.context import RequestContext
from notes_api.auth.deps import request_context
from notes_api.contracts import CreateNoteInput, DeletedResponse, NoteView, UpdateNoteInput
from notes_api.services.notes import NoteService

router = APIRouter(prefix="/v1/notes", tags=["notes"])


def note_service(ctx: RequestContext = Depends(request_context)) -> NoteService:
    return NoteService(ctx=ctx)


@router.get("", response_model=list[NoteView])
async def my_notes(svc: NoteService = Depends(note_service)) -> list[NoteView]:
    return await svc.my_notes()


# Declared before `/{note_id}` so "all" is not parsed as an id.
@router.get("/all", response_model=list[NoteView])
async def all_notes(svc: NoteService = Depends(note_service)) -> list[NoteView]:
    return await svc.all_notes()


@router.post("", response_model=NoteView, status_code=HTTP_201_CREATED)
async def create_note(
    body: CreateNoteInput,
    svc: NoteService = Depends(note_service),
) -> NoteView:
    return await svc.create_note(body)


@router.get("/{note_id}", response_model=NoteView)
async def get_note(
    note_id: str,
    svc: NoteService = Depends(note_service),
) -> NoteView:
    return await svc.get_note(note_id)


@router.patch("/{note_id}", response_model=NoteView)
async def update_note(
    note_id: str,
    body: UpdateNoteInput,
    svc: NoteService = Depends(note_service),
) -> NoteView:
    return await svc.update_note(note_id, body)


@router.delete("/{note_id}", response_model=DeletedResponse)
async def delete_note(
    note_id: str,
    svc: NoteService = Depends(note_service),
) -> DeletedResponse:
    await svc.delete_note(note_id)
    return DeletedResponse()
