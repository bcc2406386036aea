from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB

class Link(BaseModelDB, table=True):
    __tablename__ = "Link"

    link: str = Field(nullable=False)
    img_path: Optional[str] = Field(default=None, description="Chemin local d'une image, non vérifié")
