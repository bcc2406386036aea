from sqlmodel import Field

from .base import BaseModelDB

class SessionToken(BaseModelDB, table=True):
    """Une ligne par token émis ; la supprimer révoque le token."""
    __tablename__ = "Session"

    # empreinte SHA-256 du token signé, jamais le token brut
    token_hash: str = Field(index=True, nullable=False)
