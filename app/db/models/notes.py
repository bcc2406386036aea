from sqlmodel import Field

from .base import BaseModelDB

class Note(BaseModelDB, table=True):
    __tablename__ = "Note"

    title: str = Field(default="", nullable=False)
    note: str = Field(nullable=False)
