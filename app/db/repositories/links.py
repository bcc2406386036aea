# app/db/repositories/links.py
from typing import Optional, Sequence

from app.db.models.links import Link
from app.db.repositories.base import BaseRepository

class LinkRepository(BaseRepository[Link]):
    model = Link
    label = "link"

    def add_link(self, link: str, img_path: Optional[str] = None) -> str:
        return self.create(link=link, img_path=img_path).id

    def get_links(self) -> Sequence[Link]:
        return self.list_recent()

    def delete_link(self, id_: str) -> None:
        self.delete_by_id(id_)
