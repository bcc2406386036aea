from typing import Sequence

from app.db.errors import NotFoundError
from app.db.models.base import as_utc, utc_now
from app.db.models.notes import Note
from app.db.repositories.base import BaseRepository

class NoteRepository(BaseRepository[Note]):
    model = Note
    label = "note"

    def add_note(self, title: str, note: str) -> str:
        return self.create(title=title, note=note).id

    def get_notes(self) -> Sequence[Note]:
        return self.list_recent()

    def update_note(self, id_: str, note: str) -> Note:
        """Remplace le corps, rafraîchit updatedAt et renvoie la ligne à jour."""
        entity = self.get(id_)
        if entity is None:
            raise NotFoundError("note", id_)
        # updatedAt ne recule jamais, même si l'horloge système recule
        updated_at = max(utc_now(), as_utc(entity.updated_at))
        return self.update(entity, note=note, updated_at=updated_at)

    def delete_note(self, id_: str) -> None:
        self.delete_by_id(id_)
