from typing import List, Optional
from pydantic import BaseModel, Field

from app.db.models.base import UTCDatetime

class LinkCreate(BaseModel):
    link: str = Field(..., min_length=1, examples=["https://example.com/article"])
    img_path: Optional[str] = Field(None, examples=["images/article.png"])

class LinkOut(BaseModel):
    id: str
    link: str
    img_path: Optional[str]
    created_at: UTCDatetime
    updated_at: UTCDatetime

    model_config = {"from_attributes": True}

class LinkCreatedOut(BaseModel):
    id: str
    link: str
    img_path: Optional[str]

class LinkListOut(BaseModel):
    links: List[LinkOut]
