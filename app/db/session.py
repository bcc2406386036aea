"""
➡️ But : Configurer la base SQLite et gérer les sessions de base de données.

Database : poignée unique du process (un Engine SQLAlchemy).

open() : crée l'engine, active WAL + foreign keys + busy_timeout, crée les tables.

session() : fournit une Session SQLModel, refuse si la base n'est pas ouverte.

close() : libère l'engine.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Pas de verrou applicatif : WAL permet des lecteurs concurrents, SQLite sérialise les écrivains
et le busy_timeout borne l'attente d'un verrou.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

# Import all models for creating all tables
from app.db.models.sessions import SessionToken
from app.db.models.notes import Note
from app.db.models.links import Link

from app.db.errors import NotInitializedError, StorageError

logger = logging.getLogger(__name__)

MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Database:
    def __init__(self, url: str, *, busy_timeout_ms: int = 5000, echo: bool = False):
        self.url = url
        self.busy_timeout_ms = busy_timeout_ms
        self.echo = echo
        self._engine: Optional[Engine] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise NotInitializedError()
        return self._engine

    def _build_engine(self) -> Engine:
        connect_args: Dict[str, Any] = {
            # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
            "check_same_thread": False,
            "timeout": self.busy_timeout_ms / 1000,
        }
        kwargs: Dict[str, Any] = {}
        if self.url in MEMORY_URLS:
            # une base mémoire n'existe que dans sa connexion : on partage la même
            kwargs["poolclass"] = StaticPool

        engine = create_engine(self.url, echo=self.echo, connect_args=connect_args, **kwargs)

        busy_timeout_ms = self.busy_timeout_ms

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")
            finally:
                cursor.close()

        return engine

    def open(self) -> "Database":
        """
        Ouvre la base et crée les tables si elles n'existent pas.
        Un second appel sur une base déjà ouverte ne fait rien.
        """
        if self._engine is not None:
            return self

        engine = self._build_engine()
        try:
            SQLModel.metadata.create_all(
                engine,
                tables=[SessionToken.__table__, Note.__table__, Link.__table__],
            )
        except (SQLAlchemyError, sqlite3.Error) as e:
            engine.dispose()
            raise StorageError(f"open database: {e}") from e

        self._engine = engine
        logger.info("database initialized successfully (%s)", self.url)
        return self

    def close(self) -> None:
        """Libère l'engine ; sans effet si la base n'a jamais été ouverte."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("database closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session


def get_session(request: Request):
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    database: Database = request.app.state.context.database
    with database.session() as session:
        yield session
