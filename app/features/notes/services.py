from fastapi import HTTPException, status

from app.db.errors import NotFoundError
from app.db.repositories.notes import NoteRepository
from app.features.notes.schemas import (
    NoteCreate,
    NoteUpdate,
    NoteOut,
    NoteCreatedOut,
    NoteUpdatedOut,
    NoteListOut,
)

class NoteService:
    def __init__(self, repo: NoteRepository):
        self.repo = repo

    def list(self) -> NoteListOut:
        return NoteListOut(notes=[NoteOut.model_validate(n) for n in self.repo.get_notes()])

    def create(self, payload: NoteCreate) -> NoteCreatedOut:
        note_id = self.repo.add_note(payload.title, payload.note)
        return NoteCreatedOut(id=note_id, title=payload.title, note=payload.note)

    def update(self, payload: NoteUpdate) -> NoteUpdatedOut:
        try:
            note = self.repo.update_note(payload.id, payload.note)
        except NotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
        return NoteUpdatedOut(id=note.id, note=note.note, updated_at=note.updated_at)

    def delete(self, note_id: str) -> None:
        self.repo.delete_note(note_id)
