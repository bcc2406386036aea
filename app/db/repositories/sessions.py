from sqlmodel import select
from sqlalchemy.exc import SQLAlchemyError

from app.db.errors import NotFoundError, StorageError
from app.db.models.sessions import SessionToken
from app.db.repositories.base import BaseRepository
from app.security.tokens import hash_token

class SessionRepository(BaseRepository[SessionToken]):
    """Lignes Session : une par token émis. Le token brut n'est jamais stocké."""
    model = SessionToken
    label = "token"

    def add_token(self, token: str) -> str:
        return self.create(token_hash=hash_token(token)).id

    def get_token(self, token: str) -> SessionToken:
        try:
            record = self.session.exec(
                select(self.model).where(self.model.token_hash == hash_token(token))
            ).first()
        except SQLAlchemyError as e:
            raise StorageError(f"query token: {e}") from e
        if record is None:
            raise NotFoundError("token", "<redacted>")
        return record

    def delete_token(self, id_: str) -> None:
        self.delete_by_id(id_)
