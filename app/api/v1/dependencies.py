"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_note_service() : crée un NoteService à partir d'une session DB.

require_auth() : la garde unique que toutes les routes (sauf POST /login) traversent.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Une seule forme de réponse 401 pour tout le backend.
"""

from typing import Optional

from fastapi import Depends, Header, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.config import AppContext
from app.db.session import get_session

from app.db.repositories.sessions import SessionRepository
from app.features.authentication.services import AuthService, AuthContext, unauthorized

from app.db.repositories.notes import NoteRepository
from app.features.notes.services import NoteService

from app.db.repositories.links import LinkRepository
from app.features.links.services import LinkService


def get_context(request: Request) -> AppContext:
    return request.app.state.context


# -----------------------------
# Repositories
# -----------------------------
def get_session_repository(session: Session = Depends(get_session)) -> SessionRepository:
    return SessionRepository(session)

def get_note_repository(session: Session = Depends(get_session)) -> NoteRepository:
    return NoteRepository(session)

def get_link_repository(session: Session = Depends(get_session)) -> LinkRepository:
    return LinkRepository(session)


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(
    ctx: AppContext = Depends(get_context),
    session_repo: SessionRepository = Depends(get_session_repository),
) -> AuthService:
    return AuthService(
        session_repo=session_repo,
        jwt_settings=ctx.jwt,
        user_key=ctx.settings.USER_KEY,
    )


# -----------------------------
# Services
# -----------------------------
def get_note_service(note_repo: NoteRepository = Depends(get_note_repository)) -> NoteService:
    return NoteService(note_repo)

def get_link_service(link_repo: LinkRepository = Depends(get_link_repository)) -> LinkService:
    return LinkService(link_repo)


# -----------------------------
# Authentication data
# -----------------------------
# auto_error=False : on produit nous-mêmes la 401, avec le même corps partout
bearer_scheme = HTTPBearer(auto_error=False)

def get_access_token_from_bearer(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> Optional[str]:
    if not credentials or credentials.scheme.lower() != "bearer":
        return None
    return credentials.credentials


def require_auth(
    access_token: Optional[str] = Depends(get_access_token_from_bearer),
    svc: AuthService = Depends(get_auth_service),
) -> AuthContext:
    """
    Garde d'authentification : header absent, schéma autre que Bearer,
    token invalide/expiré/révoqué -> 401 {"error": "Unauthorized"}.
    """
    if access_token is None:
        raise unauthorized()
    return svc.authenticate(access_token)


def get_client_identifier(
    user_agent: Optional[str] = Header(default=None, alias="User-Agent"),
) -> Optional[str]:
    """Identité déclarée du client (User-Agent), sujet du token de session."""
    return user_agent
