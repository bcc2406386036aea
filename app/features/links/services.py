from app.db.repositories.links import LinkRepository
from app.features.links.schemas import LinkCreate, LinkOut, LinkCreatedOut, LinkListOut

class LinkService:
    """Liens : pas de mise à jour, seulement création, lecture et suppression."""

    def __init__(self, repo: LinkRepository):
        self.repo = repo

    def list(self) -> LinkListOut:
        return LinkListOut(links=[LinkOut.model_validate(l) for l in self.repo.get_links()])

    def create(self, payload: LinkCreate) -> LinkCreatedOut:
        link_id = self.repo.add_link(payload.link, payload.img_path)
        return LinkCreatedOut(id=link_id, link=payload.link, img_path=payload.img_path)

    def delete(self, link_id: str) -> None:
        self.repo.delete_link(link_id)
