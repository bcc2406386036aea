import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import HTTPException, status

from app.db.errors import NotFoundError, StorageError
from app.db.repositories.sessions import SessionRepository
from app.security.tokens import (
    DecodedToken,
    JWTError,
    JWTSettings,
    create_session_token,
    decode_token,
    to_datetime,
)
from app.features.authentication.schemas import LoginIn, TokenOut, ClaimsOut

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


def unauthorized() -> HTTPException:
    # Même réponse pour toutes les causes : on ne révèle pas quel contrôle a échoué
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


@dataclass
class AuthContext:
    """Ce que la garde d'authentification rend à l'endpoint protégé."""
    token: str
    claims: DecodedToken


class AuthService:
    """
    Service d'authentification : clé partagée -> token signé persisté en Session.
    Ne contient pas d'accès SQL direct et lève des HTTPException propres.
    """

    def __init__(
        self,
        *,
        session_repo: SessionRepository,
        jwt_settings: JWTSettings,
        user_key: str,
        now_fn: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.session_repo = session_repo
        self.jwt = jwt_settings
        self.user_key = user_key
        self.now_fn = now_fn

    # ---------- Login ----------
    def issue(self, payload: LoginIn, *, client_identifier: Optional[str] = None) -> TokenOut:
        if not hmac.compare_digest(payload.key.encode("utf-8"), self.user_key.encode("utf-8")):
            logger.warning("login refused: invalid key")
            raise unauthorized()

        subject = client_identifier or UNKNOWN_CLIENT
        try:
            token = create_session_token(subject=subject, settings=self.jwt, now=self.now_fn())
        except JWTError as e:
            logger.error("token signing failed: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to generate token",
            )

        # Persist : un token qu'on ne pourra pas retrouver en base ne doit jamais sortir
        try:
            session_id = self.session_repo.add_token(token)
        except StorageError as e:
            logger.error("token persistence failed: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to persist token",
            )

        logger.info("session %s opened for %s", session_id, subject)
        return TokenOut(token=token)

    # ---------- Validation ----------
    def validate(self, token: Optional[str]) -> DecodedToken:
        if not token:
            raise unauthorized()

        try:
            claims = decode_token(token, self.jwt)
        except JWTError as e:
            logger.debug("token rejected: %s", e)
            raise unauthorized()

        # Révocation : le token doit encore avoir sa ligne Session
        try:
            self.session_repo.get_token(token)
        except NotFoundError:
            logger.debug("token rejected: no session row")
            raise unauthorized()
        except StorageError as e:
            logger.error("session lookup failed: %s", e)
            raise unauthorized()

        return claims

    def authenticate(self, token: Optional[str]) -> AuthContext:
        claims = self.validate(token)
        return AuthContext(token=token or "", claims=claims)

    # ---------- Logout ----------
    def revoke(self, token: str) -> None:
        """Supprime la ligne Session du token ; idempotent."""
        try:
            record = self.session_repo.get_token(token)
        except NotFoundError:
            return
        self.session_repo.delete_token(record.id)
        logger.info("session %s revoked", record.id)

    # ---------- Claims ----------
    @staticmethod
    def describe(claims: DecodedToken) -> ClaimsOut:
        return ClaimsOut(
            subject=claims.get("sub", ""),
            issued_at=to_datetime(claims["iat"]),
            expires_at=to_datetime(claims["exp"]),
        )
