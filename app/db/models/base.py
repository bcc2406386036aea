"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel (ou Base de SQLAlchemy).

Représente les objets persistés. Ici on représente les propriétés communes de toutes les tables :
un identifiant UUID aléatoire (pas d'auto-incrément, pour ne pas exposer le nombre de lignes)
et deux horodatages createdAt / updatedAt.

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Les identifiants peuvent être générés sans aller-retour avec la base.
"""

from datetime import datetime, timezone
from typing import Annotated
from uuid import uuid4

from pydantic import AfterValidator
from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    """Heure UTC avec tzinfo."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Selon la version de SQLModel, SQLite rend des datetimes naïfs (UTC implicite)
    ou déjà munis d'un tzinfo : on ramène tout en UTC explicite.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def new_id() -> str:
    return str(uuid4())


class BaseModelDB(SQLModel, table=False):
    id: str = Field(default_factory=new_id, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"name": "createdAt"})
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"name": "updatedAt"})


# Pour les schémas de sortie : les heures partent toujours en UTC explicite ("...Z")
UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]
