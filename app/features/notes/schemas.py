"""
➡️ But : Définir les formats d'entrée/sortie de l'API (couche validation).

NoteCreate → corps de requête POST /note

NoteUpdate → corps PUT /note

NoteOut / NoteCreatedOut / NoteUpdatedOut → réponses de l'API
"""

from typing import List
from pydantic import BaseModel, Field

from app.db.models.base import UTCDatetime

class NoteCreate(BaseModel):
    title: str = Field("", examples=["Courses"])
    note: str = Field(..., min_length=1, examples=["Acheter du lait"])

class NoteUpdate(BaseModel):
    id: str = Field(..., min_length=1)
    note: str = Field(..., min_length=1, examples=["Acheter du pain"])

class NoteOut(BaseModel):
    id: str
    title: str
    note: str
    created_at: UTCDatetime
    updated_at: UTCDatetime

    model_config = {"from_attributes": True}

class NoteCreatedOut(BaseModel):
    id: str
    title: str
    note: str

class NoteUpdatedOut(BaseModel):
    id: str
    note: str
    updated_at: UTCDatetime

class NoteListOut(BaseModel):
    notes: List[NoteOut]
