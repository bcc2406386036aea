from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlalchemy import literal_column
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, select

from app.db.errors import StorageError

# Type générique pour le modèle (SessionToken, Note, Link)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, list.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel` et `label` (préfixe des erreurs).
    👉 Toute erreur du driver remonte en StorageError("<opération>: <cause>").
    """

    model: Type[ModelT]
    label: str = "record"

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def list_recent(self) -> Sequence[ModelT]:
        """
        Retourne tous les enregistrements, du plus récent au plus ancien.
        À createdAt égal, l'ordre d'insertion (rowid) départage.
        """
        statement = select(self.model).order_by(
            self.model.created_at.desc(),
            literal_column("rowid").desc(),
        )
        try:
            return self.session.exec(statement).all()
        except SQLAlchemyError as e:
            raise StorageError(f"query {self.label}s: {e}") from e

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        try:
            return self.session.get(self.model, id_)
        except SQLAlchemyError as e:
            raise StorageError(f"query {self.label}: {e}") from e

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement (commit immédiat)."""
        entity = self.model(**fields)
        self.session.add(entity)
        self._commit(f"insert {self.label}", entity)
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, **changes) -> ModelT:
        """Met à jour un enregistrement existant (commit immédiat)."""
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        self._commit(f"update {self.label}", entity)
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT) -> None:
        """Supprime un enregistrement (commit immédiat)."""
        self.session.delete(entity)
        self._commit(f"delete {self.label}")

    def delete_by_id(self, id_: Any) -> None:
        """Supprime par identifiant ; un identifiant absent n'est pas une erreur."""
        entity = self.get(id_)
        if entity is None:
            return
        self.delete(entity)

    # ---------- Internals ----------

    def _commit(self, op: str, entity: Optional[ModelT] = None) -> None:
        try:
            self.session.commit()
            if entity is not None:
                self.session.refresh(entity)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError(f"{op}: {e}") from e
